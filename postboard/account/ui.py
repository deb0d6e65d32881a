"""
Notificações e navegação da página de conta.

Ambos registram o que aconteceu para que a camada de UI (ou um teste)
possa exibir ou inspecionar depois.
"""

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional

logger = logging.getLogger(__name__)

# Durações em milissegundos
LIKE_TOAST_DURATION = 2000
INFO_TOAST_DURATION = 3000
ERROR_TOAST_DURATION = 5000


@dataclass(frozen=True)
class Notification:
    title: str
    status: Literal["success", "error", "info"]
    duration: int
    description: Optional[str] = None
    is_closable: bool = True


class Notifier:
    def __init__(self):
        self.history: List[Notification] = []

    def notify(self, title: str, status: str, duration: int, description: Optional[str] = None) -> Notification:
        notification = Notification(title=title, status=status, duration=duration, description=description)
        self.history.append(notification)
        level = logging.WARNING if status == "error" else logging.INFO
        logger.log(level, "Notification [%s] %s: %s", status, title, description or "")
        return notification

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None


class Navigator:
    def __init__(self, path: str = "/"):
        self.path = path
        self.history: List[str] = [path]

    def navigate(self, path: str) -> None:
        self.path = path
        self.history.append(path)

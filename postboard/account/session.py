from typing import Optional

from ..schemas import UserOut

# A página de conta só enxerga o usuário público.
CurrentUser = UserOut


class SessionContext:
    """Quem está logado. Passado explicitamente ao controlador da conta."""

    def __init__(self, user: Optional[CurrentUser] = None):
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, user: CurrentUser) -> None:
        self.user = user

    def clear(self) -> None:
        self.user = None

from .controller import AccountController, CommandResult
from .session import CurrentUser, SessionContext
from .ui import Navigator, Notification, Notifier

__all__ = [
    "AccountController",
    "CommandResult",
    "CurrentUser",
    "SessionContext",
    "Navigator",
    "Notification",
    "Notifier",
]

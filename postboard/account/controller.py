"""
Controlador da página de conta.

Mostra os posts do usuário logado e permite curtir/descurtir ou apagar.
O estado de curtida exibido é sempre a resposta do servidor: nada muda
antes da resposta chegar. Uma flag por post ignora cliques repetidos
enquanto a requisição de curtida daquele post está pendente.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

from ..client import ClientError, PostsClient
from ..core.config import get_settings
from ..schemas import PostOut
from .session import SessionContext
from .ui import (
    ERROR_TOAST_DURATION,
    INFO_TOAST_DURATION,
    LIKE_TOAST_DURATION,
    Navigator,
    Notifier,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    status: Literal["ok", "ignored", "failed", "redirected"]
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class AccountController:
    def __init__(self, client: PostsClient, session: SessionContext,
                 notifier: Notifier, navigator: Navigator, login_path: Optional[str] = None):
        self.client = client
        self.session = session
        self.notifier = notifier
        self.navigator = navigator
        self.login_path = login_path or get_settings().LOGIN_PATH

        self.posts: List[PostOut] = []
        self.is_loading = True
        self.liking_in_progress: Dict[str, bool] = {}
        self.post_to_delete: Optional[PostOut] = None
        self.is_delete_dialog_open = False

    @property
    def current_user_id(self) -> Optional[str]:
        return self.session.user.id if self.session.user else None

    async def load_posts(self) -> CommandResult:
        if not self.session.is_authenticated:
            self.navigator.navigate(self.login_path)
            return CommandResult("redirected")

        user_id = self.current_user_id
        self.posts = []
        self.is_loading = True
        try:
            result = await self.client.list_posts()
            if not result.success:
                logger.warning("Post list rejected: %s", result.message)
                return CommandResult("failed", result.message)
            own = [post for post in result.data if post.user_id == user_id]
            self.posts = sorted(own, key=lambda post: post.created_at, reverse=True)
            return CommandResult("ok")
        except ClientError as e:
            logger.exception("Error fetching user posts")
            return CommandResult("failed", str(e))
        finally:
            self.is_loading = False

    def is_liking(self, post_id: str) -> bool:
        return self.liking_in_progress.get(post_id, False)

    def is_post_liked(self, post: PostOut) -> bool:
        user_id = self.current_user_id
        return user_id is not None and user_id in post.likes

    async def toggle_like(self, post_id: str) -> CommandResult:
        if self.is_liking(post_id):
            return CommandResult("ignored")

        user_id = self.current_user_id
        self.liking_in_progress[post_id] = True
        try:
            result = await self.client.toggle_like(post_id, user_id)
            if not result.success:
                message = result.message or "Failed to update like"
                self.notifier.notify("Error", "error", ERROR_TOAST_DURATION, message)
                return CommandResult("failed", message)

            updated = result.data
            for index, post in enumerate(self.posts):
                if post.id == post_id:
                    self.posts[index] = updated
                    liked = user_id in updated.likes
                    self.notifier.notify("Post liked" if liked else "Post unliked",
                                         "success", LIKE_TOAST_DURATION)
                    break
            return CommandResult("ok")
        except ClientError as e:
            logger.exception("Error liking post %s", post_id)
            message = "Failed to update like. Please try again."
            self.notifier.notify("Error", "error", ERROR_TOAST_DURATION, message)
            return CommandResult("failed", str(e))
        finally:
            self.liking_in_progress[post_id] = False

    def request_delete(self, post: PostOut) -> CommandResult:
        self.post_to_delete = post
        self.is_delete_dialog_open = True
        return CommandResult("ok")

    def cancel_delete(self) -> CommandResult:
        self.is_delete_dialog_open = False
        return CommandResult("ok")

    async def confirm_delete(self) -> CommandResult:
        post = self.post_to_delete
        if post is None:
            return CommandResult("ignored")

        try:
            result = await self.client.delete_post(post.id, self.current_user_id)
            if not result.success:
                message = result.message or "Failed to delete post"
                self.notifier.notify("Delete failed", "error", ERROR_TOAST_DURATION, message)
                return CommandResult("failed", message)

            self.posts = [p for p in self.posts if p.id != post.id]
            self.notifier.notify("Post deleted", "success", INFO_TOAST_DURATION,
                                 "Your post has been successfully deleted")
            return CommandResult("ok")
        except ClientError as e:
            logger.exception("Error deleting post %s", post.id)
            self.notifier.notify("Error", "error", ERROR_TOAST_DURATION,
                                 "An error occurred while deleting the post. Please try again.")
            return CommandResult("failed", str(e))
        finally:
            self.post_to_delete = None
            self.is_delete_dialog_open = False

    def logout(self) -> CommandResult:
        self.session.clear()
        self.posts = []
        self.liking_in_progress = {}
        self.post_to_delete = None
        self.is_delete_dialog_open = False
        self.notifier.notify("Logged out", "info", INFO_TOAST_DURATION,
                             "You have been successfully logged out")
        self.navigator.navigate(self.login_path)
        return CommandResult("ok")

    def account_summary(self) -> Optional[dict]:
        user = self.session.user
        if user is None:
            return None
        return {
            "username": user.username,
            "email": user.email,
            "member_since": user.created_at.date().isoformat() if user.created_at else None,
        }

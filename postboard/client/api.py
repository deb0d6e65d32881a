import logging
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..core.config import get_settings
from ..schemas import MessageEnvelope, PostEnvelope, PostListEnvelope, UserEnvelope
from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class PostsClient:
    """Cliente assíncrono da API do Postboard.

    O corpo é decodificado qualquer que seja o status HTTP: a API reporta
    falhas de aplicação como ``{"success": false, "message": ...}`` com
    status 4xx, e quem chama precisa dessa mensagem.
    """

    def __init__(self, http: httpx.AsyncClient, api_prefix: str = "/api"):
        self.http = http
        self.api_prefix = api_prefix.rstrip("/")

    @classmethod
    def from_settings(cls) -> "PostsClient":
        settings = get_settings()
        http = httpx.AsyncClient(base_url=settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT)
        return cls(http, api_prefix=settings.API_PREFIX)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "PostsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, envelope: Type[E], **kwargs) -> E:
        url = f"{self.api_prefix}{path}"
        try:
            response = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug("%s %s -> %s", method, url, response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeError(f"{method} {url} returned a non-JSON body", response.text) from e

        try:
            return envelope.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"{method} {url} returned an unexpected body: {e}", response.text) from e

    async def list_posts(self) -> PostListEnvelope:
        result = await self._request("GET", "/posts", PostListEnvelope)
        if result.success and result.data is None:
            raise DecodeError("GET /posts succeeded without data")
        return result

    async def get_post(self, post_id: str) -> PostEnvelope:
        return await self._request("GET", f"/posts/{post_id}", PostEnvelope)

    async def create_post(self, user_id: str, title: str, image: str, caption: str = "") -> PostEnvelope:
        body = {"userId": user_id, "title": title, "caption": caption, "image": image}
        return await self._request("POST", "/posts", PostEnvelope, json=body)

    async def toggle_like(self, post_id: str, user_id: str) -> PostEnvelope:
        result = await self._request("PUT", f"/posts/{post_id}/like", PostEnvelope, json={"userId": user_id})
        if result.success and result.data is None:
            raise DecodeError(f"PUT /posts/{post_id}/like succeeded without data")
        return result

    async def delete_post(self, post_id: str, user_id: str) -> MessageEnvelope:
        return await self._request("DELETE", f"/posts/{post_id}", MessageEnvelope, params={"userId": user_id})

    async def register(self, username: str, email: str, password: str,
                       bio: str = "", profile_image: str = "") -> UserEnvelope:
        body = {
            "username": username,
            "email": email,
            "password": password,
            "bio": bio,
            "profileImage": profile_image,
        }
        return await self._request("POST", "/users/register", UserEnvelope, json=body)

    async def login(self, username: str, password: str) -> UserEnvelope:
        body = {"username": username, "password": password}
        return await self._request("POST", "/users/login", UserEnvelope, json=body)

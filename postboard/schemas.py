"""
Schemas de transporte da API do Postboard.

Toda resposta vem num envelope ``{success, data?, message?}``.
Os campos no JSON usam camelCase (``_id``, ``userId``, ``likesCount``,
``createdAt``); os atributos Python usam snake_case. Os mesmos modelos
servem às rotas FastAPI para serializar e ao cliente para decodificar.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


def parse_timestamp(value):
    """Aceita strings ISO-8601 (só a data, ou com ``Z`` no final) e retorna
    datetimes com fuso, para que formatos misturados ainda ordenem."""
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        value = datetime.fromisoformat(text)
    if isinstance(value, datetime) and value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


class PostOut(BaseModel):
    id: str = Field(alias="_id")
    user_id: str = Field(alias="userId")
    title: str = ""
    caption: Optional[str] = ""
    image: str = ""
    likes: List[str] = Field(default_factory=list)
    likes_count: int = Field(0, alias="likesCount")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_validator("likes", mode="before")
    @classmethod
    def _missing_likes(cls, value):
        return value or []

    # Nunca calculado a partir de len(likes): se o servidor omitir, vale 0.
    @field_validator("likes_count", mode="before")
    @classmethod
    def _missing_likes_count(cls, value):
        return value or 0

    @field_validator("created_at", mode="before")
    @classmethod
    def _timestamp(cls, value):
        return parse_timestamp(value)


class UserOut(BaseModel):
    id: str = Field(alias="_id")
    username: str
    email: str
    bio: Optional[str] = ""
    profile_image: Optional[str] = Field("", alias="profileImage")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _timestamp(cls, value):
        return parse_timestamp(value)


# Envelopes

class MessageEnvelope(BaseModel):
    success: bool
    message: Optional[str] = None


class PostListEnvelope(MessageEnvelope):
    data: Optional[List[PostOut]] = None


class PostEnvelope(MessageEnvelope):
    data: Optional[PostOut] = None


class UserEnvelope(MessageEnvelope):
    data: Optional[UserOut] = None


# Requisições

class PostCreate(BaseModel):
    user_id: str = Field(alias="userId")
    title: str = Field(..., min_length=1, max_length=200)
    caption: str = ""
    image: str = Field(..., min_length=1)

    class Config:
        populate_by_name = True


class LikeRequest(BaseModel):
    user_id: str = Field(alias="userId")

    class Config:
        populate_by_name = True


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)
    bio: str = ""
    profile_image: str = Field("", alias="profileImage")

    class Config:
        populate_by_name = True

    @field_validator("username", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class UserLogin(BaseModel):
    username: str
    password: str

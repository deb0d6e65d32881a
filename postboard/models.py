import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, func
from sqlalchemy.ext.declarative import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    bio = Column(Text, default="")
    profile_image = Column(String(500), default="")
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(32), primary_key=True, default=new_id)
    # Sem chave estrangeira: posts sobrevivem ao dono, nada em cascata.
    user_id = Column(String(32), index=True, nullable=False)
    title = Column(String(200), nullable=False)
    caption = Column(Text, default="")
    image = Column(String(500), nullable=False)
    likes = Column(JSON, default=list)
    likes_count = Column(Integer, default=0)
    created_at = Column(DateTime, default=utcnow, index=True)

    def toggle_like(self, user_id: str) -> bool:
        """Adiciona ou remove user_id das curtidas; retorna True se ficou curtido."""
        likes = list(self.likes or [])
        if user_id in likes:
            likes = [like for like in likes if like != user_id]
            liked = False
        else:
            likes.append(user_id)
            liked = True
        # Reatribuir para a coluna JSON ser marcada como alterada.
        self.likes = likes
        self.likes_count = len(likes)
        return liked

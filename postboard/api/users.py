import logging

import bcrypt
from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import database, models
from ..core.config import get_settings
from ..schemas import UserCreate, UserEnvelope, UserLogin, UserOut

logger = logging.getLogger(__name__)

router = APIRouter()


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


@router.post("/register", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(database.get_db)):
    """
    Cria um novo usuário
    """
    db_user = models.User(
        username=user.username,
        email=user.email.strip(),
        password_hash=hash_password(user.password),
        bio=user.bio,
        profile_image=user.profile_image,
    )
    db.add(db_user)
    try:
        db.commit()
        db.refresh(db_user)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Username or email already exists")
    logger.info("User %s registered", db_user.username)
    return UserEnvelope(success=True, data=UserOut.model_validate(db_user), message="User registered")


@router.post("/login", response_model=UserEnvelope)
def login(credentials: UserLogin, db: Session = Depends(database.get_db)):
    """
    Confere as credenciais e retorna o usuário público
    """
    user = db.query(models.User).filter(models.User.username == credentials.username.strip()).first()
    if not user or not check_password(credentials.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return UserEnvelope(success=True, data=UserOut.model_validate(user))


@router.get("/{user_id}", response_model=UserEnvelope)
def get_user(user_id: str, db: Session = Depends(database.get_db)):
    """
    Retorna um usuário específico pelo ID
    """
    user = db.query(models.User).filter(models.User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return UserEnvelope(success=True, data=UserOut.model_validate(user))

import logging
import sys

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .core.config import get_settings
from . import models

logger = logging.getLogger(__name__)

settings = get_settings()


def build_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Verifica a conexão e cria as tabelas.

    Banco inacessível na inicialização é fatal: o erro vai para o log e o
    processo termina com status 1.
    """
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
        models.Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        logger.error("Error connecting to database: %s", e)
        sys.exit(1)
    logger.info("Database connected: %s", bind.url.render_as_string(hide_password=True))

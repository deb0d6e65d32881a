from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List

class Settings(BaseSettings):
    # Configurações básicas
    PROJECT_NAME: str = "Postboard"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Configurações do banco de dados
    DATABASE_URL: str = "sqlite:///./postboard.db"

    # Broker do Celery usado nas tarefas de geração de dados
    CELERY_BROKER_URL: str = "pyamqp://guest@localhost//"

    # Configurações do cliente (página de conta)
    API_BASE_URL: str = "http://localhost:8000"
    LOGIN_PATH: str = "/login"
    HTTP_TIMEOUT: float = 10.0

    # Configurações de segurança
    BCRYPT_ROUNDS: int = 12

    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        case_sensitive = True
        env_file = ".env"

@lru_cache()
def get_settings() -> Settings:
    return Settings()

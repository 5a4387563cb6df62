"""Application configuration loaded from the environment"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _build_database_url() -> str:
    """Use DATABASE_URL when set, otherwise assemble a PostgreSQL URL from DB_* variables"""
    url = os.getenv("DATABASE_URL")
    if url:
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url
    return (
        f"postgresql+asyncpg://{os.getenv('DB_USER', 'postgres')}:{os.getenv('DB_PASSWORD', 'postgres')}"
        f"@{os.getenv('DB_HOST', 'localhost')}:{os.getenv('DB_PORT', '5432')}/{os.getenv('DB_NAME', 'feedback')}"
    )


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings.

    All defaults are for local development only.
    """
    database_url: str
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 1800
    db_echo: bool = False
    db_connect_retry_delay: float = 5.0
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 12
    admin_email: str = "admin@feedback.local"
    admin_password: str = "admin123"
    admin_name: str = "Administrator"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    port: int = 5000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            database_url=_build_database_url(),
            db_pool_size=int(os.getenv("DB_POOL_SIZE", "5")),
            db_max_overflow=int(os.getenv("DB_MAX_OVERFLOW", "10")),
            db_pool_timeout=int(os.getenv("DB_POOL_TIMEOUT", "30")),
            db_pool_recycle=int(os.getenv("DB_POOL_RECYCLE", "1800")),
            db_echo=_as_bool(os.getenv("DB_ECHO", "false")),
            db_connect_retry_delay=float(os.getenv("DB_CONNECT_RETRY_DELAY", "5")),
            jwt_secret=os.getenv("JWT_SECRET", "dev-secret-change-me"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
            admin_email=os.getenv("ADMIN_EMAIL", "admin@feedback.local"),
            admin_password=os.getenv("ADMIN_PASSWORD", "admin123"),
            admin_name=os.getenv("ADMIN_NAME", "Administrator"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            port=int(os.getenv("PORT", "5000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process"""
    return Settings.from_env()

import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./data/presence.db"
    LOG_LEVEL: str = "INFO"
    # Loginy anonymizovaných / testovacích účtů začínají tímto prefixem
    ANONYMIZED_LOGIN_PREFIX: str = "3b3"
    # True = close/destroy nesmaže novější otevřenou session uživatele
    STRICT_UNLINK: bool = False

    class Config:
        env_file = ".env"


settings = Settings()

if settings.DATABASE_URL.startswith("sqlite") and settings.APP_ENV == "production":
    logger.warning("⚠️  DATABASE_URL míří na SQLite, v produkci použijte PostgreSQL!")

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis.asyncio as redis
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # PostgreSQL
    db_host: str = os.getenv("DB_HOST", "localhost")
    db_port: int = int(os.getenv("DB_PORT", "5432"))
    db_user: str = os.getenv("DB_USER", "postgres")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_name: str = os.getenv("DB_NAME", "postgres")

    # Redis
    redis_host: str = os.getenv("REDIS_HOST", "localhost")
    redis_port: int = int(os.getenv("REDIS_PORT", "6379"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "3000"))
    api_reload: bool = _env_bool("API_RELOAD", "false")

    # Logging and error reporting
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    expose_error_details: bool = _env_bool("EXPOSE_ERROR_DETAILS", "false")

    @property
    def redis_url(self) -> str:
        """Redis connection URL built from host and port."""
        return f"redis://{self.redis_host}:{self.redis_port}"

    @property
    def database_target(self) -> str:
        """Database location for log output (never includes the password)."""
        return f"{self.db_user}@{self.db_host}:{self.db_port}/{self.db_name}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        for name in ("db_port", "redis_port", "api_port"):
            port = getattr(self, name)
            if not 0 < port < 65536:
                raise ValueError(f"{name.upper()} must be between 1 and 65535, got {port}")

        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level or settings.log_level, format=LOG_FORMAT)


def get_redis_client(config: Settings | None = None) -> redis.Redis:
    """Create an asyncio Redis client instance."""
    config = config or settings
    return redis.from_url(config.redis_url, decode_responses=True)

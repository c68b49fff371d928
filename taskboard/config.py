from pydantic import field_validator
from pydantic_settings import BaseSettings


def parse_optional_seed(value):
    """Map an empty or ``none`` seed to None (fresh data on every run)."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "" or value.lower() == "none":
            return None
    return int(value)


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./taskboard.db"
    REDIS_URL: str = ""  # Empty disables rate limiting

    # Startup
    AUTO_MIGRATE: bool = True
    SEED_ON_STARTUP: bool = True
    SEED_USER_COUNT: int = 40
    SEED_TASKS_PER_USER_MIN: int = 1
    SEED_TASKS_PER_USER_MAX: int = 6
    SEED_COMMENT_COUNT: int = 400
    SEED_FRIENDSHIP_PAIRS: int = 150
    SEED_RANDOM_SEED: int | None = 42  # Empty or "none" means non-deterministic

    # Observability
    SENTRY_DSN: str = ""
    LOG_LEVEL: str = "INFO"

    ENVIRONMENT: str = "development"
    RATE_LIMIT_PER_MINUTE: int = 100
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("SEED_RANDOM_SEED", mode="before")
    @classmethod
    def _optional_seed(cls, value):
        return parse_optional_seed(value)


settings = Settings()

"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings

VERSION = "3.0.0"

# Fixed human baseline every species curve is anchored to
HUMAN_MAX_LIFESPAN = 80.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    SUGGESTION_LIMIT: int = 3
    SUGGESTION_MAX_DISTANCE: int = 2
    BAR_WIDTH: int = 50
    OVERAGE_RATIO: float = 1.5
    DEBUG: bool = False

    model_config = {"env_prefix": "ANIMAL_AGE_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

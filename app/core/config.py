from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have defaults, so the API starts without a .env file.

    Optional env vars (.env):
      - API_PREFIX (e.g. "/api/v1", empty by default)
      - LOG_LEVEL
      - SEED_SAMPLE_DATA (load the sample cart items at startup)
      - CORS_ORIGINS (JSON list)
    """

    PROJECT_NAME: str = "Cart Items API"
    API_PREFIX: str = ""

    LOG_LEVEL: str = "INFO"

    # In-memory store
    SEED_SAMPLE_DATA: bool = True

    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://0.0.0.0:3000",
        "http://[::1]:3000",
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()

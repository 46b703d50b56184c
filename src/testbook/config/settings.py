from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import normalize_case

class Settings(BaseSettings):
    """
    Runtime settings loaded from the environment (and an optional .env file).
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("logs")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # User API used by the user-name lookup example
    USER_API_BASE_URL: str = "https://api.example.com"
    USER_API_TIMEOUT: float = 5.0

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before the Literal check runs,
        so `LOG_LEVEL=debug` in the environment is accepted.
        """
        return normalize_case(v, upper=True)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        return normalize_case(v, upper=False)

    @field_validator("USER_API_BASE_URL")
    def strip_trailing_slash(cls, v: str) -> str:
        # paths are joined as f"/users/{id}"
        return v.rstrip("/")

    @field_validator("USER_API_TIMEOUT")
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("USER_API_TIMEOUT must be greater than 0")
        return v

    # --- ConfigDict settings ---
    model_config = ConfigDict(
        # The .env file sits next to the package root (src/testbook/.env).
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

# Settings are read once per process; tests call get_settings.cache_clear() after patching the env.
@lru_cache()
def get_settings() -> Settings:
    return Settings()

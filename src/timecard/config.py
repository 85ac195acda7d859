"""Application settings loaded from the environment (and ``.env``)."""
from __future__ import annotations
from pathlib import Path
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_MODEL_VISION: str = "gpt-4o-mini"
    OPENAI_TIMEOUT_SECONDS: float = 60.0
    OPENAI_MAX_RETRIES: int = 2

    # Comma-separated list of user ids allowed to call extraction
    ALLOWED_USER_IDS: str = ""
    REQUEST_LOG_FILE: Path | None = None

    PAYROLL_PERIOD_THRESHOLD: float = 9.5
    DEFAULT_PAY_RATE: float = 45.74

    API_BASE_URL: str = "http://127.0.0.1:8000"
    LOG_LEVEL: str = "INFO"

    @property
    def allowed_user_ids(self) -> frozenset[str]:
        return frozenset(u.strip() for u in self.ALLOWED_USER_IDS.split(",") if u.strip())


settings = Settings()

from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Form Submission API"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # --- Environment & Debug ---
    ENVIRONMENT: str = "local"
    DEBUG: bool = False  # Default to False for security
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE: Optional[str] = "form_api.log"

    # --- Dev server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # --- Submissions ---
    SUBMISSION_DELAY_MS: int = Field(
        default=2500,
        description="Simulated backend latency applied to every submission.",
    )

    # --- CORS ---
    ALLOWED_ORIGINS: List[str] = Field(
        default_factory=list,
        validate_default=True,
        description="List of allowed CORS origins. Configure in .env",
    )
    ALLOWED_METHODS: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "OPTIONS"],
    )
    ALLOWED_HEADERS: List[str] = Field(
        default_factory=lambda: ["Content-Type", "X-Request-ID", "Accept"],
    )

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=True, extra="ignore"
    )

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def default_allowed_origins(
        cls, v: Optional[List[str]], info: ValidationInfo
    ) -> Optional[List[str]]:
        env = info.data.get("ENVIRONMENT") or "local"
        if env != "production":
            # Astro dev server and the usual SPA ports
            if v is None:
                return ["http://localhost:4321", "http://localhost:3000"]
            if isinstance(v, str) and v.strip() in ("", "[]"):
                return ["http://localhost:4321", "http://localhost:3000"]
            if isinstance(v, list) and len(v) == 0:
                return ["http://localhost:4321", "http://localhost:3000"]
        return v

    @field_validator("SUBMISSION_DELAY_MS")
    @classmethod
    def validate_submission_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("SUBMISSION_DELAY_MS must be zero or positive")
        return v

    @field_validator("LOG_FILE", mode="before")
    @classmethod
    def empty_log_file_disables(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def submission_delay_seconds(self) -> float:
        return self.SUBMISSION_DELAY_MS / 1000


settings = Settings()

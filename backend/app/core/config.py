from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import field_validator
from decimal import Decimal
from typing import Annotated, Any, ClassVar
import json
from pathlib import Path
import os

from ..utils.money import is_valid_rate


class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"

    # JWT verification for tokens minted by the identity provider
    SECRET_KEY: str = "fallback_secret_for_dev_only"
    ALGORITHM: str = "HS256"

    # Use an absolute path so running the app from different directories
    # (e.g., repo root or backend/) always resolves the same DB file.
    BASE_DIR: ClassVar[Path] = Path(__file__).resolve().parents[2]
    SQLALCHEMY_DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'detailing.db'}"

    # NoDecode keeps the comma-separated form working from the environment
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"

    # Estimate pricing knobs (fractions, e.g. 0.0825 == 8.25%)
    TAX_RATE: Decimal = Decimal("0.0825")
    DISCOUNT_PERCENTAGE: Decimal = Decimal("0")

    # Principal allowed to read every tenant's assessments. Empty disables
    # the admin endpoints (they report a misconfiguration instead).
    ADMIN_USER_ID: str = ""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("CORS_ORIGINS", mode="before")
    def split_origins(cls, v: Any) -> list[str]:
        """Parse comma-separated or JSON list of origins from environment."""
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("TAX_RATE", "DISCOUNT_PERCENTAGE")
    def rate_is_fraction(cls, v: Decimal) -> Decimal:
        if not is_valid_rate(v):
            raise ValueError("rate must be a fraction in [0, 1)")
        return v

    @field_validator("ADMIN_USER_ID", "SECRET_KEY", mode="before")
    def strip_whitespace(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v


def load_settings() -> "Settings":
    return Settings(_env_file=os.getenv("ENV_FILE", str(Path(__file__).resolve().parents[3] / ".env")))


settings = load_settings()

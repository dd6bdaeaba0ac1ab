from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# libsearch/core/config.py -> BASE_DIR == repository root
BASE_DIR = Path(__file__).resolve().parents[2]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0 Safari/537.36"
)


def _parse_list(v: Any, *, field: str) -> list[str]:
    """
    Supported env formats:
      - JSON list: '["lapl", "nypl"]'
      - Bracket list (no quotes): '[lapl, nypl]'
      - Comma-separated: 'lapl, nypl'
    """
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(x).strip() for x in v if str(x).strip()]
    if not isinstance(v, str):
        raise TypeError(f"{field} must be a string or list of strings")

    s = v.strip()
    if not s:
        return []

    # Try JSON first for strings that look like JSON arrays
    if s.startswith("[") and s.endswith("]"):
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return [str(x).strip() for x in parsed if str(x).strip()]
        except json.JSONDecodeError:
            # Not JSON, treat as a simple bracket list without quotes
            inner = s[1:-1].strip()
            if not inner:
                return []
            parts = [p.strip().strip('"').strip("'") for p in inner.split(",")]
            return [p for p in parts if p]

    parts = [p.strip() for p in s.split(",")]
    return [p for p in parts if p]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        extra="ignore",
        env_prefix="",
        case_sensitive=False,
    )

    # Environment
    env: str = Field(default="dev", validation_alias="ENV")

    # Application
    api_name: str = Field(default="libsearch", validation_alias="API_NAME")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")

    # Outbound catalog requests
    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="USER_AGENT")
    fetch_timeout_secs: float = Field(default=10.0, validation_alias="FETCH_TIMEOUT_SECS")

    # Empty means the built-in OverDrive domain list
    overdrive_domains: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        validation_alias="OVERDRIVE_DOMAINS",
    )

    @field_validator("overdrive_domains", mode="before")
    @classmethod
    def parse_overdrive_domains(cls, v: Any) -> list[str]:
        return [d.lower() for d in _parse_list(v, field="overdrive_domains")]

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ORIGINS",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        if isinstance(v, str) and v.strip() == "*":
            return ["*"]
        return _parse_list(v, field="cors_origins")

    # OpenTelemetry
    otel_enabled: bool = Field(default=False, validation_alias="OTEL_ENABLED")
    otel_otlp_endpoint: str = Field(
        default="http://localhost:4318/v1/traces",
        validation_alias="OTEL_OTLP_ENDPOINT",
    )


settings = Settings()

"""Application configuration."""

import json
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

SERVICE_ACCOUNT_FIELDS = (
    "type",
    "project_id",
    "private_key_id",
    "private_key",
    "client_email",
    "client_id",
    "auth_uri",
    "token_uri",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_jwt_secret: str
    admin_token: str
    allowed_origins: str = "*"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "low"
    openai_store: bool = False
    fdc_api_key: str | None = None
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    google_application_credentials_json: str | None = None
    gcs_analytics_bucket: str = "cht-analytics-data-lake"
    bigquery_dataset_id: str = "cht_analytics"
    gcp_location: str = "US"
    analytics_salt: str = "health-tracker"
    points_per_entry: int = 10
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_allowed_origins(raw: str | None) -> list[str]:
    """Parse comma-separated CORS origins from env."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value:
            origins.append(value)
    return origins or ["*"]


def parse_service_account_info(raw: str | None) -> dict[str, str]:
    """Parse and validate service account JSON credentials."""
    if not raw or not raw.strip():
        raise ValueError("GOOGLE_APPLICATION_CREDENTIALS_JSON is required")
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(
            "Invalid JSON in GOOGLE_APPLICATION_CREDENTIALS_JSON"
        ) from exc
    if not isinstance(info, dict):
        raise ValueError("Service account credentials must be a JSON object")
    missing = [name for name in SERVICE_ACCOUNT_FIELDS if not info.get(name)]
    if missing:
        raise ValueError(
            "Service account credentials missing fields: " + ", ".join(missing)
        )
    return info


class SetupSettings(BaseSettings):
    """Settings for the one-off Google Cloud setup command."""

    google_application_credentials_json: str | None = None
    gcs_analytics_bucket: str = "cht-analytics-data-lake"
    bigquery_dataset_id: str = "cht_analytics"
    gcp_location: str = "US"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

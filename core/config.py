"""
Core configuration using Pydantic Settings.
Loads from environment variables.
"""

from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = Field(default="job-board", alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development", alias="APP_ENV"
    )
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", alias="LOG_LEVEL"
    )

    # API
    api_v1_prefix: str = "/api/v1"
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        alias="ALLOWED_ORIGINS",
    )

    # Database
    database_url: str = Field(..., alias="DATABASE_URL")
    database_pool_size: int = Field(default=20, alias="DATABASE_POOL_SIZE")
    database_max_overflow: int = Field(default=10, alias="DATABASE_MAX_OVERFLOW")

    # S3 (candidate files bucket)
    aws_access_key_id: str | None = Field(default=None, alias="AWS_ACCESS_KEY_ID")
    aws_secret_access_key: str | None = Field(
        default=None, alias="AWS_SECRET_ACCESS_KEY"
    )
    aws_region: str = Field(default="us-east-1", alias="AWS_REGION")
    aws_s3_bucket: str = Field(default="candidate-files", alias="AWS_S3_BUCKET")

    # Document extraction (Gemini)
    google_api_key: str | None = Field(default=None, alias="GOOGLE_API_KEY")
    extraction_model: str = Field(default="gemini-2.0-flash", alias="EXTRACTION_MODEL")
    max_resume_size_bytes: int = Field(
        default=10 * 1024 * 1024, alias="MAX_RESUME_SIZE_BYTES"
    )

    # Email
    resend_api_key: str | None = Field(default=None, alias="RESEND_API_KEY")
    email_api_url: str = Field(
        default="https://api.resend.com/emails", alias="EMAIL_API_URL"
    )
    email_from: str = Field(
        default="Search Market <notifications@search.market>", alias="EMAIL_FROM"
    )
    email_timeout_seconds: float = Field(default=10.0, alias="EMAIL_TIMEOUT_SECONDS")

    # Intake policy
    exclusivity_window_minutes: int = Field(
        default=90, alias="EXCLUSIVITY_WINDOW_MINUTES"
    )
    candidate_source: str = Field(
        default="Job Board Application", alias="CANDIDATE_SOURCE"
    )
    duplicate_application_policy: Literal["allow", "reject"] = Field(
        default="allow", alias="DUPLICATE_APPLICATION_POLICY"
    )
    compensate_failed_intake: bool = Field(
        default=False, alias="COMPENSATE_FAILED_INTAKE"
    )

    # Logging
    log_request_body: bool = Field(default=False, alias="LOG_REQUEST_BODY")
    log_response_body: bool = Field(default=False, alias="LOG_RESPONSE_BODY")
    log_max_body_size: int = Field(default=1024, alias="LOG_MAX_BODY_SIZE")
    json_logs: bool = Field(default=True, alias="JSON_LOGS")


# Global settings instance
settings = Settings()

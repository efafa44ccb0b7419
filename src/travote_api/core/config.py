"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # AWS / DynamoDB
    aws_region: str = Field(
        default="ap-southeast-1",
        description="AWS region hosting the DynamoDB tables and secrets",
    )
    dynamodb_endpoint_url: str | None = Field(
        default=None,
        description="Override DynamoDB endpoint (e.g. http://localhost:8000 for DynamoDB Local)",
    )
    places_table: str = Field(
        default="Places",
        description="DynamoDB table holding place records (partition key: abbr, sort key: id)",
    )
    countries_table: str = Field(
        default="Countries",
        description="DynamoDB table holding country records (partition key: abbr)",
    )

    # Query limits
    places_default_limit: int = Field(
        default=50,
        description="Number of places returned when the request has no limit",
        gt=0,
    )
    countries_default_limit: int = Field(
        default=10,
        description="Number of countries returned when the request has no limit",
        gt=0,
    )
    max_result_limit: int = Field(
        default=1000,
        description="Largest result limit a caller may request",
        gt=0,
    )

    # Facebook login
    facebook_secret_name: str = Field(
        default="TravoteFacebookAppInfo",
        description="Secrets Manager secret holding travote_fb_app_id and travote_fb_app_secret",
    )
    facebook_graph_url: str = Field(
        default="https://graph.facebook.com",
        description="Facebook Graph API base URL",
    )
    facebook_timeout: float = Field(
        default=10.0,
        description="Facebook Graph API request timeout in seconds",
        gt=0,
    )

    @field_validator("facebook_graph_url")
    @classmethod
    def validate_facebook_graph_url(cls, v: str) -> str:
        if not v.startswith("https://"):
            msg = "facebook_graph_url must use HTTPS"
            raise ValueError(msg)
        return v.rstrip("/")

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON records on stdout (for CloudWatch) instead of the text format",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()

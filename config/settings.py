"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///jobnet.db",
        description="SQLAlchemy database URL",
    )

    # Auth
    jwt_secret: str = Field(
        default="your-secret-key",
        description="HMAC secret used to sign access tokens",
    )
    jwt_expiry_days: int = Field(
        default=7,
        description="Access token lifetime (days)",
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt work factor for password hashes",
    )
    auth_rate_limit: int = Field(
        default=10,
        description="Login/register attempts allowed per client per window",
    )
    auth_rate_window_seconds: int = Field(
        default=60,
        description="Rate limit window (seconds)",
    )

    # API server
    api_host: str = Field(
        default="0.0.0.0",
        description="Interface the API server binds to",
    )
    api_port: int = Field(
        default=5000,
        description="API server port",
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )

    # Platform fee (paid client-side through the browser wallet)
    require_platform_fee: bool = Field(
        default=False,
        description="Reject job postings that carry no payment transaction hash",
    )
    platform_fee_sol: float = Field(
        default=0.01,
        description="Platform fee the client charges before posting a job",
    )

    # Recommendations
    recommendation_pool_size: int = Field(
        default=20,
        description="How many of the newest active jobs are considered",
    )
    recommendation_min_score: int = Field(
        default=30,
        description="Jobs scoring at or below this are dropped",
    )
    recommendation_limit: int = Field(
        default=5,
        description="Maximum recommendations returned",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list ("*" stays a single wildcard)."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Global settings instance
settings = Settings()

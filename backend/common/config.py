"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read once at process start. See .env.example for the
    Cognito settings the gateway needs to talk to its user pool.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Cognito Gateway"
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = ["*"]

    # AWS Configuration
    aws_region: str = ""  # AWS region for all services

    # AWS Cognito
    cognito_user_pool_id: str = ""
    cognito_client_id: str = ""
    cognito_region: str = ""  # Falls back to aws_region if not set
    cognito_issuer: str = ""  # Falls back to the URL derived from region and pool id
    cognito_delivery_medium: str = "EMAIL"  # Welcome message medium for admin-created users

    # JWKS key cache
    jwks_cache_ttl_seconds: int = 0  # 0 = keep keys for the process lifetime
    jwks_fetch_timeout_seconds: float = 5.0

    @property
    def resolved_cognito_region(self) -> str:
        """Get Cognito region, falling back to aws_region if not set."""
        return self.cognito_region or self.aws_region

    @property
    def resolved_cognito_issuer(self) -> str:
        """Get the token issuer URL for the user pool.

        Raises:
            ValueError: If neither COGNITO_ISSUER nor region and pool id are set.
        """
        if self.cognito_issuer:
            return self.cognito_issuer.rstrip("/")
        region = self.resolved_cognito_region
        if not region or not self.cognito_user_pool_id:
            raise ValueError("COGNITO_ISSUER or COGNITO_REGION and COGNITO_USER_POOL_ID must be set")
        return f"https://cognito-idp.{region}.amazonaws.com/{self.cognito_user_pool_id}"

    @property
    def jwks_url(self) -> str:
        """Get the JWKS discovery URL for the configured issuer."""
        return f"{self.resolved_cognito_issuer}/.well-known/jwks.json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()

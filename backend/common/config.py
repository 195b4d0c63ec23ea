"""Application configuration using Pydantic Settings."""

import logging
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def get_secret_from_aws(secret_arn: str, region: str = "") -> str:
    """Fetch a secret value from AWS Secrets Manager.

    Args:
        secret_arn: The ARN or name of the secret.
        region: AWS region of the secret. Uses the default chain when empty.

    Returns:
        The secret value, or empty string if not found.
    """
    if not secret_arn:
        return ""

    try:
        client = boto3.client("secretsmanager", region_name=region or None)
        response = client.get_secret_value(SecretId=secret_arn)
        return response.get("SecretString", "")
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to fetch secret {secret_arn}: {e}")
        return ""


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Variable names follow the Twilio video app deployment (ACCOUNT_SID,
    TWILIO_API_KEY_SID, API_PASSCODE, ...). Matching is case-insensitive.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Video Token Server"
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = ["*"]

    # Twilio account and API key used to sign tokens and create rooms
    account_sid: str = ""
    twilio_api_key_sid: str = ""
    twilio_api_key_secret: str = ""
    twilio_api_key_secret_arn: str = ""  # AWS Secrets Manager ARN

    # Passcode shared with the client app
    api_passcode: str = ""
    api_passcode_expiry: int | None = None  # epoch milliseconds

    # Deployment domain, e.g. video-app-1234-5678-dev.twil.io
    domain_name: str = ""

    # Rooms
    room_type: str = "group"
    room_creation_timeout_seconds: float = 10.0

    # AWS Configuration
    aws_region: str = ""

    @property
    def resolved_twilio_api_key_secret(self) -> str:
        """Get the API key secret, fetching from Secrets Manager if needed."""
        if self.twilio_api_key_secret:
            return self.twilio_api_key_secret
        if self.twilio_api_key_secret_arn:
            return get_secret_from_aws(self.twilio_api_key_secret_arn, self.aws_region)
        return ""


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()

"""Immutable configuration passed into the token handler."""

from dataclasses import dataclass, field

from issuer.errors import ConfigurationError
from issuer.identity import DomainIdentity, parse_domain_identity

# Longest session Twilio allows for a video access token (4 hours)
MAX_ALLOWED_SESSION_DURATION = 14400

DEFAULT_ROOM_TYPE = "group"

# Config field -> environment variable it is read from
REQUIRED_SETTINGS = {
    "account_sid": "ACCOUNT_SID",
    "api_key_sid": "TWILIO_API_KEY_SID",
    "api_key_secret": "TWILIO_API_KEY_SECRET",
    "api_passcode": "API_PASSCODE",
    "domain_name": "DOMAIN_NAME",
}


@dataclass(frozen=True)
class IssuerConfig:
    """Read-only deployment configuration for one handler invocation.

    The domain identity is parsed on construction so a malformed
    deployment fails before any request is served.
    """

    account_sid: str
    api_key_sid: str
    api_key_secret: str
    api_passcode: str
    api_passcode_expiry: int  # epoch milliseconds
    domain_name: str
    room_type: str = DEFAULT_ROOM_TYPE
    room_creation_timeout_seconds: float = 10.0
    identity: DomainIdentity = field(init=False, repr=False)

    def __post_init__(self) -> None:
        missing = [env for name, env in REQUIRED_SETTINGS.items() if not getattr(self, name)]
        if self.api_passcode_expiry is None:
            missing.append("API_PASSCODE_EXPIRY")
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")
        if self.room_creation_timeout_seconds <= 0:
            raise ConfigurationError("ROOM_CREATION_TIMEOUT_SECONDS must be positive")

        # frozen dataclass: bypass __setattr__ for the derived field
        object.__setattr__(self, "identity", parse_domain_identity(self.domain_name))

    @property
    def expected_passcode(self) -> str:
        return self.identity.expected_passcode(self.api_passcode)

    @classmethod
    def from_settings(cls, settings) -> "IssuerConfig":
        """Build from application Settings.

        Args:
            settings: common.config.Settings instance.

        Raises:
            ConfigurationError: If required values are missing or malformed.
        """
        return cls(
            account_sid=settings.account_sid,
            api_key_sid=settings.twilio_api_key_sid,
            api_key_secret=settings.resolved_twilio_api_key_secret,
            api_passcode=settings.api_passcode,
            api_passcode_expiry=settings.api_passcode_expiry,
            domain_name=settings.domain_name,
            room_type=settings.room_type or DEFAULT_ROOM_TYPE,
            room_creation_timeout_seconds=settings.room_creation_timeout_seconds,
        )

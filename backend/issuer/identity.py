"""Deployment identifiers derived from the Twilio Serverless domain name."""

import re
from dataclasses import dataclass

from issuer.errors import ConfigurationError

# e.g. video-app-1234-5678-dev.twil.io -> app 1234, serverless 5678
DOMAIN_PATTERN = re.compile(r"-?(\d*)-(\d+)(?:-\w+)?.twil.io$", re.ASCII)


@dataclass(frozen=True)
class DomainIdentity:
    """Numeric identifiers embedded in the deployment domain."""

    app_id: str
    serverless_id: str

    def expected_passcode(self, api_passcode: str) -> str:
        """Full passcode the client app must present."""
        return f"{api_passcode}{self.app_id}{self.serverless_id}"


def parse_domain_identity(domain_name: str) -> DomainIdentity:
    """Extract the app and serverless IDs from a deployment domain name.

    Args:
        domain_name: Domain the function is served from.

    Returns:
        DomainIdentity with the captured IDs. The app ID may be empty.

    Raises:
        ConfigurationError: If the domain does not have the expected shape.
    """
    match = DOMAIN_PATTERN.search(domain_name or "")
    if match is None:
        raise ConfigurationError(
            f"DOMAIN_NAME {domain_name!r} does not match the expected "
            "<name>-<app id>-<serverless id>[-<env>].twil.io shape"
        )
    app_id, serverless_id = match.groups()
    return DomainIdentity(app_id=app_id, serverless_id=serverless_id)

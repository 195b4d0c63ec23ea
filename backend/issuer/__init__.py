"""Video access token issuer.

This module validates token requests from the video client app with:
- A deployment passcode with an expiry
- Optional Twilio Video room creation (existing rooms are accepted)
- Signed access tokens scoped to one identity and room
"""

from issuer.config import MAX_ALLOWED_SESSION_DURATION, IssuerConfig
from issuer.errors import ConfigurationError, IssuerError
from issuer.handler import handle
from issuer.identity import DomainIdentity, parse_domain_identity
from issuer.models import IssuerResponse, TokenRequest
from issuer.rooms import RoomCreationResult, RoomStatus, TwilioRoomProvisioner

__all__ = [
    "handle",
    "IssuerConfig",
    "IssuerResponse",
    "TokenRequest",
    "IssuerError",
    "ConfigurationError",
    "DomainIdentity",
    "parse_domain_identity",
    "RoomCreationResult",
    "RoomStatus",
    "TwilioRoomProvisioner",
    "MAX_ALLOWED_SESSION_DURATION",
]

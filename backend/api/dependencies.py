"""FastAPI dependencies for the token issuer."""

from functools import lru_cache

from fastapi import Depends

from common.config import settings
from issuer.config import IssuerConfig
from issuer.rooms import RoomProvisioner, build_room_provisioner


@lru_cache
def get_issuer_config() -> IssuerConfig:
    """Get cached issuer configuration built from settings.

    Raises:
        ConfigurationError: If the deployment configuration is malformed.
    """
    return IssuerConfig.from_settings(settings)


@lru_cache
def _cached_room_provisioner(config: IssuerConfig) -> RoomProvisioner:
    return build_room_provisioner(config)


def get_room_provisioner(
    config: IssuerConfig = Depends(get_issuer_config),
) -> RoomProvisioner:
    """Twilio room provisioner for the current deployment.

    One Twilio client (and HTTP session) is reused across warm invocations.
    """
    return _cached_room_provisioner(config)

"""Token issuance entry point: validate, optionally create the room, sign."""

import logging
import time
from collections.abc import Callable

from issuer.config import IssuerConfig
from issuer.errors import IssuerError, RoomCreationError
from issuer.models import IssuerResponse, TokenRequest
from issuer.rooms import RoomProvisioner, RoomStatus, build_room_provisioner
from issuer.tokens import mint_access_token
from issuer.validation import validate_request

logger = logging.getLogger(__name__)


def current_time_ms() -> int:
    return int(time.time() * 1000)


def handle(
    config: IssuerConfig,
    request: TokenRequest,
    provisioner: RoomProvisioner | None = None,
    now_ms: Callable[[], int] | None = None,
) -> IssuerResponse:
    """Issue a video access token for one request.

    Checks run in a fixed order and stop at the first failure. When
    create_room is set, the room is created before signing; an existing
    room counts as success.

    Args:
        config: Deployment configuration.
        request: Parameters from the client.
        provisioner: Room provisioner. Built from config when needed.
        now_ms: Clock returning epoch milliseconds. Defaults to wall-clock time.

    Returns:
        IssuerResponse with either {token, room_type} or an error body.
    """
    try:
        clock = now_ms or current_time_ms
        validate_request(config, request, clock())

        if request.create_room:
            if provisioner is None:
                provisioner = build_room_provisioner(config)
            result = provisioner.create_room(request.room_name, config.room_type)
            if not result.ok:
                if result.status == RoomStatus.TIMED_OUT:
                    raise RoomCreationError("Timed out while creating a room.")
                raise RoomCreationError()
    except IssuerError as e:
        logger.warning(f"Token request rejected: {e.kind} ({e.status_code})")
        return IssuerResponse.from_error(e)

    token = mint_access_token(config, str(request.user_identity), request.room_name)
    logger.info(f"Issued token for room {request.room_name}")
    return IssuerResponse.success(
        token=token,
        room_type=config.room_type if request.create_room else None,
    )

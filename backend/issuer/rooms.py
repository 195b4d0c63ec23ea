"""Twilio Video room provisioning.

Room creation failures are returned as values so the handler can tell an
already existing room (Twilio error 53113) apart from a real failure
without inspecting SDK exceptions itself.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import requests
from twilio.base.exceptions import TwilioRestException
from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from common.tracing import add_span_metadata, video_span
from issuer.config import IssuerConfig

logger = logging.getLogger(__name__)

# https://www.twilio.com/docs/api/errors/53113
ROOM_EXISTS_ERROR_CODE = 53113


class RoomStatus(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class RoomCreationResult:
    """Outcome of a room creation request."""

    status: RoomStatus
    room_sid: str | None = None
    error_code: int | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        """True when a room with the requested name is available."""
        return self.status in (RoomStatus.CREATED, RoomStatus.ALREADY_EXISTS)


class RoomProvisioner(Protocol):
    def create_room(self, room_name: str, room_type: str) -> RoomCreationResult: ...


class TwilioRoomProvisioner:
    """Create rooms through the Twilio Video REST API."""

    def __init__(self, client: Client):
        self.client = client

    def create_room(self, room_name: str, room_type: str) -> RoomCreationResult:
        """Create a room by unique name.

        Args:
            room_name: Unique room name.
            room_type: Twilio room type (group, group-small, peer-to-peer, go).

        Returns:
            RoomCreationResult; never raises.
        """
        with video_span("create_room", room_type=room_type) as span:
            result = self._create(room_name, room_type)
            add_span_metadata(span, status=result.status.value, error_code=result.error_code)
            return result

    def _create(self, room_name: str, room_type: str) -> RoomCreationResult:
        try:
            room = self.client.video.v1.rooms.create(unique_name=room_name, type=room_type)
        except TwilioRestException as e:
            if e.code == ROOM_EXISTS_ERROR_CODE:
                logger.info(f"Room {room_name} already exists")
                return RoomCreationResult(
                    status=RoomStatus.ALREADY_EXISTS, error_code=e.code, detail=e.msg
                )
            logger.error(f"Failed to create room {room_name}: {e.code} {e.msg}")
            return RoomCreationResult(status=RoomStatus.FAILED, error_code=e.code, detail=e.msg)
        except requests.Timeout as e:
            logger.error(f"Timed out creating room {room_name}: {e}")
            return RoomCreationResult(status=RoomStatus.TIMED_OUT, detail=str(e))
        except requests.RequestException as e:
            logger.error(f"Transport error creating room {room_name}: {e}")
            return RoomCreationResult(status=RoomStatus.FAILED, detail=str(e))
        except Exception as e:
            logger.exception(f"Unexpected error creating room {room_name}")
            return RoomCreationResult(status=RoomStatus.FAILED, detail=f"{type(e).__name__}: {e}")

        logger.info(f"Created room {room_name} ({room.sid})")
        return RoomCreationResult(status=RoomStatus.CREATED, room_sid=room.sid)


def build_twilio_client(config: IssuerConfig) -> Client:
    """Twilio REST client authenticated with the deployment API key."""
    http_client = TwilioHttpClient(timeout=config.room_creation_timeout_seconds)
    return Client(
        config.api_key_sid,
        config.api_key_secret,
        config.account_sid,
        http_client=http_client,
    )


def build_room_provisioner(config: IssuerConfig) -> TwilioRoomProvisioner:
    return TwilioRoomProvisioner(build_twilio_client(config))

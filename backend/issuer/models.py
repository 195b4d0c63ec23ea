"""Request and response values for token issuance."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class TokenRequest:
    """Parameters sent by the video client app.

    Values are kept as received; type checks happen in validation.
    """

    user_identity: Any = None
    room_name: Any = None
    passcode: Any = None
    create_room: Any = True

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "TokenRequest":
        """Build from a parameter mapping.

        create_room defaults to True only when the key is absent, so an
        explicit null still fails the boolean check.
        """
        return cls(
            user_identity=params.get("user_identity"),
            room_name=params.get("room_name"),
            passcode=params.get("passcode"),
            create_room=params.get("create_room", True),
        )


@dataclass
class IssuerResponse:
    """Status code, JSON body and headers for one invocation."""

    status_code: int
    body: dict
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def success(cls, token: str, room_type: str | None) -> "IssuerResponse":
        return cls(status_code=200, body={"token": token, "room_type": room_type})

    @classmethod
    def from_error(cls, error) -> "IssuerResponse":
        """Build from an IssuerError."""
        return cls(status_code=error.status_code, body=error.to_body())

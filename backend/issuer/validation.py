"""Ordered request checks run before any room or token is created."""

import hmac

from issuer.config import IssuerConfig
from issuer.errors import (
    InvalidParameterError,
    MissingUserIdentityError,
    PasscodeExpiredError,
    PasscodeIncorrectError,
)
from issuer.models import TokenRequest


def passcode_matches(expected: str, supplied) -> bool:
    """Exact, constant-time comparison. Non-string values never match.

    JSON strings may carry lone surrogates, so encode with surrogatepass.
    """
    if not isinstance(supplied, str):
        return False
    return hmac.compare_digest(
        expected.encode("utf-8", "surrogatepass"), supplied.encode("utf-8", "surrogatepass")
    )


def validate_request(config: IssuerConfig, request: TokenRequest, now_ms: int) -> None:
    """Run every check in order, raising on the first failure.

    Args:
        config: Deployment configuration.
        request: Parameters from the client.
        now_ms: Current time in epoch milliseconds.

    Raises:
        InvalidParameterError: create_room is not a boolean.
        PasscodeExpiredError: now_ms is past the configured expiry.
        PasscodeIncorrectError: passcode does not match the deployment passcode.
        MissingUserIdentityError: user_identity is missing or empty.
    """
    if not isinstance(request.create_room, bool):
        raise InvalidParameterError()

    if now_ms > config.api_passcode_expiry:
        raise PasscodeExpiredError()

    if not passcode_matches(config.expected_passcode, request.passcode):
        raise PasscodeIncorrectError()

    if not request.user_identity:
        raise MissingUserIdentityError()

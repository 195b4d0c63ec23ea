"""Errors raised while issuing video tokens."""


class ConfigurationError(Exception):
    """The deployment configuration is missing values or malformed."""

    pass


class IssuerError(Exception):
    """Base exception for request failures returned to the caller.

    Each subclass carries the HTTP status and the wire message/explanation
    the client app matches on.
    """

    status_code: int = 500
    kind: str = "issuer_error"
    message: str = "error"
    explanation: str = "Something went wrong."

    def __init__(self, explanation: str | None = None):
        if explanation is not None:
            self.explanation = explanation
        super().__init__(self.explanation)

    def to_body(self) -> dict:
        """Serialize to the JSON error body."""
        return {"error": {"message": self.message, "explanation": self.explanation}}


class InvalidParameterError(IssuerError):
    status_code = 400
    kind = "invalid_parameter"
    message = "invalid parameter"
    explanation = "A boolean value must be provided for the create_room parameter"


class PasscodeExpiredError(IssuerError):
    status_code = 401
    kind = "passcode_expired"
    message = "passcode expired"
    explanation = (
        "The passcode used to validate application users has expired. "
        "Re-deploy the application to refresh the passcode."
    )


class PasscodeIncorrectError(IssuerError):
    status_code = 401
    kind = "passcode_incorrect"
    message = "passcode incorrect"
    explanation = "The passcode used to validate application users is incorrect."


class MissingUserIdentityError(IssuerError):
    status_code = 400
    kind = "missing_user_identity"
    message = "missing user_identity"
    explanation = "The user_identity parameter is missing."


class RoomCreationError(IssuerError):
    status_code = 500
    kind = "room_creation_failed"
    message = "error creating room"
    explanation = "Something went wrong when creating a room."

"""Pydantic schemas for token issuance."""

from pydantic import BaseModel, Field


class TokenParams(BaseModel):
    """Parameters accepted by POST /token (documentation only).

    The endpoint reads raw parameters so that a non-boolean create_room
    gets the app's own 400 body instead of a 422.
    """

    user_identity: str = Field(..., description="Participant identity")
    room_name: str = Field(..., description="Room the token grants access to")
    passcode: str = Field(..., description="Deployment passcode")
    create_room: bool = Field(default=True, description="Create the room before signing")


class TokenResponse(BaseModel):
    """Signed access token."""

    token: str = Field(..., description="Signed Twilio Video access token")
    room_type: str | None = Field(
        default=None, description="Room type when the room was created, else null"
    )


class ErrorDetail(BaseModel):
    message: str
    explanation: str


class ErrorResponse(BaseModel):
    """Error body returned for every non-200 response."""

    error: ErrorDetail

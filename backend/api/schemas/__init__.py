"""API schemas package."""

from api.schemas.token import ErrorDetail, ErrorResponse, TokenParams, TokenResponse

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "TokenParams",
    "TokenResponse",
]

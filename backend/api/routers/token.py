"""Video token endpoint."""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from api.dependencies import get_issuer_config, get_room_provisioner
from api.schemas.token import ErrorResponse, TokenParams, TokenResponse
from issuer import IssuerConfig, TokenRequest, handle
from issuer.rooms import RoomProvisioner

logger = logging.getLogger(__name__)

router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_params(request: Request) -> dict[str, Any]:
    """Collect request parameters.

    Body parameters (JSON object or form) override query parameters.
    A body that is not a JSON object contributes nothing.
    """
    params: dict[str, Any] = dict(request.query_params)

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        params.update(form)
        return params

    body = await request.body()
    if not body:
        return params
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Ignoring token request body that is not valid JSON")
        return params
    if isinstance(data, dict):
        params.update(data)
    return params


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": TokenParams.model_json_schema()}},
        }
    },
)
async def issue_token(
    request: Request,
    config: IssuerConfig = Depends(get_issuer_config),
    provisioner: RoomProvisioner = Depends(get_room_provisioner),
) -> JSONResponse:
    """Issue a Twilio Video access token.

    Validates the deployment passcode and its expiry, optionally creates
    the room, then signs a token for user_identity scoped to room_name.

    Returns:
        200 with {token, room_type}, or 400/401/500 with {error: {message, explanation}}.
    """
    params = await read_params(request)

    # Twilio SDK calls block; keep them off the event loop
    result = await run_in_threadpool(handle, config, TokenRequest.from_params(params), provisioner)

    return JSONResponse(status_code=result.status_code, content=result.body, headers=result.headers)

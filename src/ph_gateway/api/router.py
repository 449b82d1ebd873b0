"""bcrypt API router: hash, validate.

All endpoints return ApiResponse. request_id is read from request.state
(injected by RequestLogMiddleware).

bcrypt is CPU-bound and cannot be interrupted, so the work is pushed to the
thread pool; a client disconnect does not stop a computation in flight.
"""

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from src.ph_common.response import ApiResponse, success_response
from src.ph_crypt.application.service import Bcrypt
from src.ph_gateway.api.schemas import (
    HashRequest,
    HashResponse,
    ValidateRequest,
    ValidateResponse,
)
from src.ph_gateway.plugin import get_bcrypt

router = APIRouter(prefix="/bcrypt", tags=["bcrypt"])


def _get_request_id(request: Request) -> str:
    """Read request_id injected by RequestLogMiddleware, fallback if absent."""
    return getattr(request.state, "request_id", "req_unknown")


@router.post("/hash", response_model=ApiResponse, summary="Hash a password")
async def hash_password(
    request: Request,
    body: HashRequest,
    crypt: Bcrypt = Depends(get_bcrypt),
) -> ApiResponse:
    hashed = await run_in_threadpool(crypt.hash, body.password, body.settings)
    data = HashResponse(hash=hashed)
    return success_response(data.model_dump(), request_id=_get_request_id(request))


@router.post("/validate", response_model=ApiResponse, summary="Check a password against a hash")
async def validate_password(
    request: Request,
    body: ValidateRequest,
    crypt: Bcrypt = Depends(get_bcrypt),
) -> ApiResponse:
    # InvalidSettingsError propagates to the app error handler; a broken
    # stored hash is never answered with valid=false.
    valid = await run_in_threadpool(crypt.validate, body.password, body.hashed)
    data = ValidateResponse(valid=valid)
    return success_response(data.model_dump(), request_id=_get_request_id(request))

"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.ph_common.errors import AppError
from src.ph_common.response import error_response
from src.ph_gateway.api.router import router as bcrypt_router
from src.ph_gateway.middleware.request_log import RequestLogMiddleware
from src.ph_gateway.plugin import register_bcrypt

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
)

register_bcrypt(app, settings=settings)

app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(
        exc.code,
        exc.message,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(bcrypt_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}

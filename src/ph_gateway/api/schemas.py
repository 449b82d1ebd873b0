"""Pydantic request/response schemas for ph_gateway.

All responses are wrapped in ApiResponse at the router layer.
"""

from pydantic import BaseModel, Field


class HashRequest(BaseModel):
    password: str
    # Any value not starting with $2a$NN$ is ignored and fresh settings are used
    settings: str | None = Field(default=None, max_length=128)


class HashResponse(BaseModel):
    hash: str


class ValidateRequest(BaseModel):
    password: str
    hashed: str = Field(..., min_length=1, max_length=128)


class ValidateResponse(BaseModel):
    valid: bool

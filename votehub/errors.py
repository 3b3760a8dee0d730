"""Centralized API error helpers, standard error schema and seeding exceptions.

Provides:
- api_error(...) -> HTTPException with JSON detail: {"error": {"code": str, "message": str, "details": ...}}
- make_error_payload(...) -> the same payload as a plain dict, for JSONResponse bodies
- make_validation_error_response(...) -> dict payload used by exception handler
- SeedError / SeedConfigurationError
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder


class SeedError(Exception):
    """Raised when seeding cannot proceed on the current database."""


class SeedConfigurationError(SeedError):
    """The seed step graph is invalid (cycle or unknown dependency)."""


def make_error_payload(code: str, message: str, details: Optional[Any] = None) -> dict:
    payload: dict = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    return payload


def api_error(status_code: int, code: str, message: str, details: Optional[Any] = None, headers: Optional[dict] = None) -> HTTPException:
    return HTTPException(status_code=status_code, detail=make_error_payload(code, message, details), headers=headers)


def make_validation_error_response(errors: Any) -> dict:
    # Use FastAPI's jsonable_encoder to safely convert potential exception objects
    return jsonable_encoder(make_error_payload("validation_error", "Validation error", errors))


__all__ = [
    "SeedError",
    "SeedConfigurationError",
    "make_error_payload",
    "api_error",
    "make_validation_error_response",
]

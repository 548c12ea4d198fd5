"""Unified error handling — ActivityError + RequestValidationError → JSON."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ghactivity.exceptions import (
    ActivityError,
    ConfigError,
    InvalidDateFormat,
    InvalidLogin,
    UserRequiredError,
)

_STATUS_MAP: dict[type[ActivityError], int] = {
    InvalidDateFormat: 422,
    InvalidLogin: 422,
    UserRequiredError: 422,
    ConfigError: 500,
}


async def _activity_error_handler(_request: Request, exc: ActivityError) -> JSONResponse:
    status = 500
    for cls in type(exc).__mro__:
        if cls in _STATUS_MAP:
            status = _STATUS_MAP[cls]
            break
    return JSONResponse(status_code=status, content={"detail": str(exc)})


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return JSONResponse(
        status_code=422,
        content={"detail": "; ".join(messages)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(ActivityError, _activity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]

"""Translate marketplace errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ProteanException, ValidationError

from marketplace.shared.errors import (
    AlreadyRegistered,
    IndexOverflow,
    ListingNotFound,
    NotBuyer,
    NotRegistered,
    NotSeller,
    OrderNotFound,
    OutOfStock,
)

# Most specific first; the first matching class wins.
_STATUS_CODES = [
    (NotRegistered, 404),
    (ListingNotFound, 404),
    (OrderNotFound, 404),
    (AlreadyRegistered, 409),
    (OutOfStock, 409),
    (NotSeller, 403),
    (NotBuyer, 403),
    (IndexOverflow, 507),
    (ObjectNotFoundError, 404),
    (ValidationError, 400),
]


def status_code_for(exc: ProteanException) -> int:
    for error_class, status_code in _STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return 500


async def marketplace_error_handler(request: Request, exc: ProteanException) -> JSONResponse:
    # Plain ObjectNotFoundError / InvalidOperationError keep no `messages`
    messages = getattr(exc, "messages", None)
    if not isinstance(messages, dict):
        messages = {"_error": [str(messages if messages is not None else exc)]}
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": type(exc).__name__, "messages": messages},
    )


def register_error_handlers(app: FastAPI) -> None:
    for error_class in (ObjectNotFoundError, ValidationError, IndexOverflow):
        app.add_exception_handler(error_class, marketplace_error_handler)

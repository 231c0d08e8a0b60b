"""Request-scoped logging context."""

from fastapi import Request

from marketplace.utils.logging import add_context, clear_context


async def bind_caller_context(request: Request, call_next):
    """Tag every log line emitted while serving a request with the caller's party id."""
    caller_id = request.headers.get("x-caller-id")
    if caller_id:
        add_context(party_id=caller_id)
    try:
        return await call_next(request)
    finally:
        clear_context()

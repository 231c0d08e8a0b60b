"""Marketplace API package."""

from marketplace.api.errors import register_error_handlers
from marketplace.api.middleware import bind_caller_context
from marketplace.api.routes import listing_router, order_router, user_router

__all__ = ["user_router", "listing_router", "order_router", "register_error_handlers", "bind_caller_context"]

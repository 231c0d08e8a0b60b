"""Pydantic request/response schemas for the Marketplace API.

These are the external contracts; the Protean commands behind them stay
internal.
"""

from pydantic import BaseModel, Field

from marketplace.catalog.listing import Category
from marketplace.shared.sequence import U64_MAX
from marketplace.user.profile import Role


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"username": "alice", "role": "Both"}]}}

    username: str = Field(..., min_length=1, max_length=100)
    role: Role


class PublishListingRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Shirt",
                    "description": "Cotton, size M",
                    "price": 12000,
                    "category": "Apparel",
                    "stock": 20,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    price: int = Field(..., ge=0, le=U64_MAX)
    category: Category
    stock: int = Field(..., ge=0, le=U64_MAX)


class PlaceOrderRequest(BaseModel):
    listing_id: int = Field(..., ge=0, le=U64_MAX)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserProfileResponse(BaseModel):
    party_id: str
    username: str
    role: str


class ListingResponse(BaseModel):
    listing_id: int
    seller_id: str
    name: str
    description: str | None = None
    price: int
    category: str
    stock: int


class ListingListResponse(BaseModel):
    listings: list[ListingResponse]
    total: int


class OrderResponse(BaseModel):
    order_id: int
    status: str
    buyer_id: str
    cancel_requested: bool
    listing: ListingResponse


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
    total: int


class ErrorResponse(BaseModel):
    error: str
    messages: dict

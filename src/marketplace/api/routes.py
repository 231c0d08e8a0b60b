"""FastAPI endpoints for the Marketplace domain.

Thin adapters: the caller's party id comes from the ``X-Caller-Id`` header,
mutations go through ``current_domain.process`` and reads through the
query modules.
"""

from fastapi import APIRouter, Header
from protean.utils.globals import current_domain

from marketplace.api.schemas import (
    ErrorResponse,
    ListingListResponse,
    ListingResponse,
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    PublishListingRequest,
    RegisterUserRequest,
    UserProfileResponse,
)
from marketplace.catalog import queries as catalog_queries
from marketplace.catalog.publishing import PublishListing
from marketplace.ordering import queries as order_queries
from marketplace.ordering.placement import PlaceOrder
from marketplace.user.queries import get_profile
from marketplace.user.registration import RegisterUser

# Error bodies are rendered by api/errors.py
_ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 403, 404, 409, 507)
}

user_router = APIRouter(prefix="/users", tags=["users"], responses=_ERROR_RESPONSES)
listing_router = APIRouter(prefix="/listings", tags=["listings"], responses=_ERROR_RESPONSES)
order_router = APIRouter(prefix="/orders", tags=["orders"], responses=_ERROR_RESPONSES)


def _profile_response(profile) -> UserProfileResponse:
    return UserProfileResponse(
        party_id=str(profile.party_id),
        username=profile.username,
        role=profile.role,
    )


def _listing_response(listing) -> ListingResponse:
    return ListingResponse(
        listing_id=listing.listing_id,
        seller_id=str(listing.seller_id),
        name=listing.name,
        description=listing.description,
        price=listing.price,
        category=listing.category,
        stock=listing.stock,
    )


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        order_id=order.order_id,
        status=order.status,
        buyer_id=str(order.buyer_id),
        cancel_requested=bool(order.cancel_requested),
        listing=_listing_response(order.listing),
    )


# --- User endpoints ---


@user_router.post("", status_code=201, response_model=UserProfileResponse)
async def register_user(body: RegisterUserRequest, x_caller_id: str = Header()) -> UserProfileResponse:
    command = RegisterUser(
        caller_id=x_caller_id,
        username=body.username,
        role=body.role.value,
    )
    profile = current_domain.process(command, asynchronous=False)
    return _profile_response(profile)


@user_router.get("/me", response_model=UserProfileResponse)
async def read_own_profile(x_caller_id: str = Header()) -> UserProfileResponse:
    return _profile_response(get_profile(x_caller_id))


# --- Listing endpoints ---


@listing_router.post("", status_code=201, response_model=ListingResponse)
async def publish_listing(body: PublishListingRequest, x_caller_id: str = Header()) -> ListingResponse:
    command = PublishListing(
        caller_id=x_caller_id,
        name=body.name,
        description=body.description,
        price=body.price,
        category=body.category.value,
        stock=body.stock,
    )
    listing = current_domain.process(command, asynchronous=False)
    return _listing_response(listing)


@listing_router.get("", response_model=ListingListResponse)
async def list_listings(x_caller_id: str = Header()) -> ListingListResponse:
    listings = [_listing_response(listing) for listing in catalog_queries.list_all(x_caller_id)]
    return ListingListResponse(listings=listings, total=len(listings))


@listing_router.get("/mine", response_model=ListingListResponse)
async def list_own_listings(x_caller_id: str = Header()) -> ListingListResponse:
    listings = [_listing_response(listing) for listing in catalog_queries.list_by_seller(x_caller_id)]
    return ListingListResponse(listings=listings, total=len(listings))


@listing_router.get("/{listing_id}", response_model=ListingResponse)
async def read_listing(listing_id: int, x_caller_id: str = Header()) -> ListingResponse:
    return _listing_response(catalog_queries.get_listing(x_caller_id, listing_id))


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, x_caller_id: str = Header()) -> OrderResponse:
    command = PlaceOrder(caller_id=x_caller_id, listing_id=body.listing_id)
    order = current_domain.process(command, asynchronous=False)
    return _order_response(order)


@order_router.get("", response_model=OrderListResponse)
async def list_orders(x_caller_id: str = Header()) -> OrderListResponse:
    orders = [_order_response(order) for order in order_queries.list_all_orders(x_caller_id)]
    return OrderListResponse(orders=orders, total=len(orders))


@order_router.get("/mine", response_model=OrderListResponse)
async def list_own_orders(x_caller_id: str = Header()) -> OrderListResponse:
    orders = [_order_response(order) for order in order_queries.list_by_buyer(x_caller_id)]
    return OrderListResponse(orders=orders, total=len(orders))


@order_router.get("/{order_id}", response_model=OrderResponse)
async def read_order(order_id: int, x_caller_id: str = Header()) -> OrderResponse:
    return _order_response(order_queries.get_order(x_caller_id, order_id))

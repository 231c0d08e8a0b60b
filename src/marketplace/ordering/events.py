"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    """A buyer bought one unit of a listing."""

    __version__ = 1

    order_id: Integer(required=True)
    buyer_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    listing_id: Integer(required=True)
    price: Integer(required=True)
    placed_at: DateTime(required=True)

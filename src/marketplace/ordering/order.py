"""Order aggregate: a buyer's purchase of one unit of a listing.

Orders carry a by-value snapshot of the listing taken right after its stock
was decremented, so later changes to the listing never show through.

Only ``Pending`` orders are ever produced. ``Shipped``, ``Received``,
``Cancelled`` and the ``cancel_requested`` flag are declared for the
fulfilment and cancellation flows that will build on this ledger; nothing
transitions an order out of ``Pending`` yet.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, Identifier, Integer, String, Text, ValueObject

from marketplace.catalog.listing import Category
from marketplace.domain import marketplace
from marketplace.shared.sequence import U64_MAX, slot_key


class OrderStatus(Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    RECEIVED = "Received"
    CANCELLED = "Cancelled"


@marketplace.value_object(part_of="Order")
class ListingSnapshot:
    """The listing as it stood when the order was placed."""

    listing_id: Integer(required=True, min_value=0, max_value=U64_MAX)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Integer(required=True, min_value=0, max_value=U64_MAX)
    category: String(required=True, choices=Category)
    stock: Integer(required=True, min_value=0, max_value=U64_MAX)


@marketplace.aggregate
class Order:
    slot: String(identifier=True, required=True, max_length=20)
    order_id: Integer(required=True, min_value=0, max_value=U64_MAX)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    listing: ValueObject(ListingSnapshot, required=True)
    buyer_id: Identifier(required=True)
    cancel_requested: Boolean(default=False)

    @classmethod
    def place(cls, order_id, buyer_id, listing):
        from marketplace.ordering.events import OrderPlaced

        snapshot = ListingSnapshot(
            listing_id=listing.listing_id,
            seller_id=listing.seller_id,
            name=listing.name,
            description=listing.description,
            price=listing.price,
            category=listing.category,
            stock=listing.stock,
        )
        order = cls(
            slot=slot_key(order_id),
            order_id=order_id,
            status=OrderStatus.PENDING.value,
            listing=snapshot,
            buyer_id=buyer_id,
            cancel_requested=False,
        )
        order.raise_(
            OrderPlaced(
                order_id=order_id,
                buyer_id=buyer_id,
                seller_id=listing.seller_id,
                listing_id=listing.listing_id,
                price=listing.price,
                placed_at=datetime.now(UTC),
            )
        )
        return order

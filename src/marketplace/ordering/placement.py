"""Order placement — command and handler.

Placing an order takes one unit of stock from the listing and appends an
order carrying a snapshot of the decremented listing. Every check that can
fail runs before the first repository write, and the handler runs inside a
single unit of work, so a rejected order leaves the stock untouched.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalog.listing import Listing
from marketplace.catalog.queries import load_listing
from marketplace.domain import marketplace
from marketplace.ordering.buyer_index import BuyerIndex, buyer_index_for
from marketplace.ordering.order import Order
from marketplace.shared.authorization import authorize_buyer
from marketplace.shared.errors import OutOfStock
from marketplace.shared.index import append_id
from marketplace.shared.sequence import ORDERS, RecordSequence, sequence_for
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    caller_id: Identifier(required=True)
    listing_id: Integer(required=True)


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        authorize_buyer(command.caller_id)
        listing = load_listing(command.listing_id)

        try:
            listing.take_one()
        except OutOfStock:
            logger.info(
                "Order rejected, listing out of stock",
                party_id=str(command.caller_id),
                listing_id=command.listing_id,
            )
            raise

        sequence = sequence_for(ORDERS)
        order_id = sequence.claim()

        order = Order.place(order_id=order_id, buyer_id=command.caller_id, listing=listing)
        index = buyer_index_for(command.caller_id)
        append_id(index, order_id)

        # No fallible step past this point
        current_domain.repository_for(Listing).add(listing)
        current_domain.repository_for(Order).add(order)
        current_domain.repository_for(BuyerIndex).add(index)
        current_domain.repository_for(RecordSequence).add(sequence)

        logger.info(
            "Order placed",
            party_id=str(command.caller_id),
            listing_id=listing.listing_id,
            order_id=order_id,
            stock=listing.stock,
        )
        return order

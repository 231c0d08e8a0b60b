"""Listing publication — command and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalog.listing import Category, Listing
from marketplace.catalog.seller_index import SellerIndex, seller_index_for
from marketplace.domain import marketplace
from marketplace.shared.authorization import authorize_seller
from marketplace.shared.index import append_id
from marketplace.shared.sequence import LISTINGS, U64_MAX, RecordSequence, sequence_for
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Listing")
class PublishListing:
    caller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Integer(required=True, min_value=0, max_value=U64_MAX)
    category: String(required=True, choices=Category)
    stock: Integer(required=True, min_value=0, max_value=U64_MAX)


@marketplace.command_handler(part_of=Listing)
class PublishListingHandler:
    @handle(PublishListing)
    def publish_listing(self, command):
        authorize_seller(command.caller_id)

        sequence = sequence_for(LISTINGS)
        listing_id = sequence.claim()

        listing = Listing.publish(
            listing_id=listing_id,
            seller_id=command.caller_id,
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            stock=command.stock,
        )
        index = seller_index_for(command.caller_id)
        append_id(index, listing_id)

        current_domain.repository_for(Listing).add(listing)
        current_domain.repository_for(SellerIndex).add(index)
        current_domain.repository_for(RecordSequence).add(sequence)

        logger.info(
            "Listing published",
            party_id=str(command.caller_id),
            listing_id=listing_id,
            stock=command.stock,
        )
        return listing

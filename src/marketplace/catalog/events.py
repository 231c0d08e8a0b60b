"""Domain events for the Listing aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Listing")
class ListingPublished:
    """A seller appended a new listing to the catalog."""

    __version__ = 1

    listing_id: Integer(required=True)
    seller_id: Identifier(required=True)
    name: String(required=True)
    price: Integer(required=True)
    category: String(required=True)
    stock: Integer(required=True)
    published_at: DateTime(required=True)


@marketplace.event(part_of="Listing")
class ListingStockReduced:
    """One unit of a listing's stock was sold."""

    __version__ = 1

    listing_id: Integer(required=True)
    stock: Integer(required=True)

"""Listing aggregate: a seller's catalog entry.

A listing is stored under the key of its position in the catalog and never
moves. After creation the only mutation is the one-unit stock decrement
performed when an order is placed against it.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.shared.errors import OutOfStock
from marketplace.shared.sequence import U64_MAX, slot_key


class Category(Enum):
    ELECTRONICS = "Electronics"
    APPAREL = "Apparel"
    TOOLS = "Tools"
    FURNITURE = "Furniture"


@marketplace.aggregate
class Listing:
    slot: String(identifier=True, required=True, max_length=20)
    listing_id: Integer(required=True, min_value=0, max_value=U64_MAX)
    seller_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    description: Text()
    price: Integer(required=True, min_value=0, max_value=U64_MAX)
    category: String(required=True, choices=Category)
    stock: Integer(required=True, min_value=0, max_value=U64_MAX)

    @classmethod
    def publish(cls, listing_id, seller_id, name, description, price, category, stock):
        from marketplace.catalog.events import ListingPublished

        category_value = category.value if isinstance(category, Category) else category
        listing = cls(
            slot=slot_key(listing_id),
            listing_id=listing_id,
            seller_id=seller_id,
            name=name,
            description=description,
            price=price,
            category=category_value,
            stock=stock,
        )
        listing.raise_(
            ListingPublished(
                listing_id=listing_id,
                seller_id=seller_id,
                name=name,
                price=price,
                category=category_value,
                stock=stock,
                published_at=datetime.now(UTC),
            )
        )
        return listing

    def take_one(self):
        """Remove a single unit from stock, refusing when none is left."""
        from marketplace.catalog.events import ListingStockReduced

        if self.stock == 0:
            raise OutOfStock({"stock": [f"Listing {self.listing_id} is out of stock"]})

        self.stock = self.stock - 1
        self.raise_(ListingStockReduced(listing_id=self.listing_id, stock=self.stock))

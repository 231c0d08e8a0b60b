"""Read access to the catalog.

Any registered party may read the whole catalog; only sellers may list
their own listings.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.catalog.listing import Listing
from marketplace.catalog.seller_index import seller_index_for
from marketplace.shared.authorization import authorize_seller
from marketplace.shared.errors import ListingNotFound
from marketplace.shared.index import read_ids
from marketplace.shared.sequence import LISTINGS, sequence_for, slot_key
from marketplace.user.queries import get_profile
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def load_listing(listing_id: int) -> Listing:
    """Fetch the listing stored at position ``listing_id``."""
    if not sequence_for(LISTINGS).contains(listing_id):
        raise ListingNotFound({"listing_id": [f"Listing {listing_id} does not exist"]})
    try:
        return current_domain.repository_for(Listing).get(slot_key(listing_id))
    except ObjectNotFoundError:
        raise ListingNotFound({"listing_id": [f"Listing {listing_id} does not exist"]}) from None


def _resolve(positions) -> list[Listing]:
    repo = current_domain.repository_for(Listing)
    listings = []
    for position in positions:
        try:
            listings.append(repo.get(slot_key(position)))
        except ObjectNotFoundError:
            logger.warning("Skipping dangling listing reference", listing_id=position)
    return listings


def get_listing(caller_id, listing_id: int) -> Listing:
    get_profile(caller_id)
    return load_listing(listing_id)


def list_by_seller(caller_id) -> list[Listing]:
    authorize_seller(caller_id)
    return _resolve(read_ids(seller_index_for(caller_id)))


def list_all(caller_id) -> list[Listing]:
    get_profile(caller_id)
    return _resolve(range(sequence_for(LISTINGS).length or 0))

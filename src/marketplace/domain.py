"""Marketplace bounded context: user registry, catalog and order ledger.

Every record lives in a repository of this domain. Listings and orders are
append-only and addressed by their position; per-owner secondary indices
make a seller's listings and a buyer's orders enumerable without a scan.
"""

from protean.domain import Domain

from marketplace.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
marketplace = Domain(name="marketplace")

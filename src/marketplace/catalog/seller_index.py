"""Seller index: the ids of every listing a seller has published."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace


@marketplace.projection
class SellerIndex:
    party_id: Identifier(identifier=True, required=True)
    entries: Text(default="[]")


def seller_index_for(party_id) -> SellerIndex:
    repo = current_domain.repository_for(SellerIndex)
    try:
        return repo.get(party_id)
    except ObjectNotFoundError:
        return SellerIndex(party_id=party_id, entries="[]")

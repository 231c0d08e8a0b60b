"""Buyer index: the ids of every order a buyer has placed."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace


@marketplace.projection
class BuyerIndex:
    party_id: Identifier(identifier=True, required=True)
    entries: Text(default="[]")


def buyer_index_for(party_id) -> BuyerIndex:
    repo = current_domain.repository_for(BuyerIndex)
    try:
        return repo.get(party_id)
    except ObjectNotFoundError:
        return BuyerIndex(party_id=party_id, entries="[]")

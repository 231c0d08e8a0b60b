"""Read access to the user registry."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.shared.errors import NotRegistered
from marketplace.user.profile import UserProfile


def get_profile(caller_id) -> UserProfile:
    try:
        return current_domain.repository_for(UserProfile).get(caller_id)
    except ObjectNotFoundError:
        raise NotRegistered({"party_id": [f"Party `{caller_id}` is not registered"]}) from None

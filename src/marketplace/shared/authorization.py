"""Role gates applied at the top of every role-restricted operation.

Checks run strictly before any write: identity, then registration, then
role, then whatever preconditions the operation itself has.
"""

from marketplace.shared.errors import NotBuyer, NotSeller
from marketplace.user.profile import Role, UserProfile
from marketplace.user.queries import get_profile

BUY = "buy"
SELL = "sell"

# Every Role must appear here; an unmapped role fails loudly on lookup.
_CAPABILITIES = {
    Role.BUYER: frozenset({BUY}),
    Role.SELLER: frozenset({SELL}),
    Role.BOTH: frozenset({BUY, SELL}),
}


def capabilities_of(profile: UserProfile) -> frozenset:
    return _CAPABILITIES[Role(profile.role)]


def require_seller(profile: UserProfile) -> UserProfile:
    if SELL not in capabilities_of(profile):
        raise NotSeller({"role": [f"Party `{profile.party_id}` is registered as {profile.role}, not as a seller"]})
    return profile


def require_buyer(profile: UserProfile) -> UserProfile:
    if BUY not in capabilities_of(profile):
        raise NotBuyer({"role": [f"Party `{profile.party_id}` is registered as {profile.role}, not as a buyer"]})
    return profile


def authorize_seller(caller_id) -> UserProfile:
    """Load the caller's profile and require the selling capability."""
    return require_seller(get_profile(caller_id))


def authorize_buyer(caller_id) -> UserProfile:
    """Load the caller's profile and require the buying capability."""
    return require_buyer(get_profile(caller_id))

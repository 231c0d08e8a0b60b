"""UserProfile aggregate: one profile per calling party, bound to a role."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import Identifier, String

from marketplace.domain import marketplace


class Role(Enum):
    """Capability tag carried by a profile."""

    BUYER = "Buyer"
    SELLER = "Seller"
    BOTH = "Both"


@marketplace.aggregate
class UserProfile:
    """A registered party on the marketplace.

    The profile is keyed by the caller's own party id, so a party can hold at
    most one profile. There is no way to change the username or role once
    registered.
    """

    party_id: Identifier(identifier=True, required=True)
    username: String(required=True, max_length=100)
    role: String(required=True, choices=Role)

    @classmethod
    def register(cls, party_id, username, role):
        from marketplace.user.events import UserRegistered

        role_value = role.value if isinstance(role, Role) else role
        profile = cls(party_id=party_id, username=username, role=role_value)
        profile.raise_(
            UserRegistered(
                party_id=party_id,
                username=username,
                role=role_value,
                registered_at=datetime.now(UTC),
            )
        )
        return profile

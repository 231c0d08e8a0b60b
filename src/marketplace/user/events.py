"""Domain events for the UserProfile aggregate."""

from protean.fields import DateTime, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="UserProfile")
class UserRegistered:
    """A party registered a profile and was bound to a role."""

    __version__ = 1

    party_id: Identifier(required=True)
    username: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)

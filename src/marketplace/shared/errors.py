"""Error kinds raised by marketplace operations.

Each kind subclasses the Protean exception it specializes, so callers that
already handle ``ValidationError`` / ``ObjectNotFoundError`` keep working.
Every kind carries a ``messages`` dict keyed by the offending field, including
the ones whose Protean base only keeps positional args.
"""

from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError


class CarriesMessages:
    """Keep the field-keyed ``messages`` dict on bases that drop it."""

    def __init__(self, messages, *args, **kwargs):
        super().__init__(messages, *args, **kwargs)
        self.messages = messages


class NotRegistered(CarriesMessages, ObjectNotFoundError):
    """The calling party has no profile."""


class AlreadyRegistered(ValidationError):
    """The calling party already owns a profile."""


class NotSeller(ValidationError):
    """The caller's role does not allow selling."""


class NotBuyer(ValidationError):
    """The caller's role does not allow buying."""


class ListingNotFound(CarriesMessages, ObjectNotFoundError):
    """No listing exists at the requested position."""


class OrderNotFound(CarriesMessages, ObjectNotFoundError):
    """No order exists at the requested position."""


class OutOfStock(ValidationError):
    """The listing has no stock left to sell."""


class IndexOverflow(CarriesMessages, InvalidOperationError):
    """A record counter cannot grow without leaving the u64 range."""

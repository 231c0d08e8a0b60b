"""Record sequences: the running length of each append-only collection.

A listing's or order's id is the length of its collection just before the
append, so the id doubles as the record's position. Removing records would
break that correspondence and is not supported.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.shared.errors import IndexOverflow
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

U64_MAX = 2**64 - 1

LISTINGS = "listings"
ORDERS = "orders"


@marketplace.projection
class RecordSequence:
    name: String(identifier=True, required=True, max_length=50)
    length: Integer(default=0, min_value=0)

    def claim(self) -> int:
        """Reserve the next position and return it.

        Raises ``IndexOverflow`` without touching the counter when the new
        length would not fit in u64.
        """
        current = self.length or 0
        if current >= U64_MAX:
            logger.error("Record sequence exhausted", sequence=self.name, length=current)
            raise IndexOverflow({"length": [f"Sequence `{self.name}` cannot grow past {U64_MAX}"]})
        self.length = current + 1
        return current

    def contains(self, position) -> bool:
        return 0 <= position < (self.length or 0)


def sequence_for(name: str) -> RecordSequence:
    repo = current_domain.repository_for(RecordSequence)
    try:
        return repo.get(name)
    except ObjectNotFoundError:
        return RecordSequence(name=name, length=0)


def slot_key(position: int) -> str:
    """Storage key of the record at ``position``."""
    return str(position)

"""Read access to the order ledger."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.ordering.buyer_index import buyer_index_for
from marketplace.ordering.order import Order
from marketplace.shared.authorization import authorize_buyer
from marketplace.shared.errors import OrderNotFound
from marketplace.shared.index import read_ids
from marketplace.shared.sequence import ORDERS, sequence_for, slot_key
from marketplace.user.queries import get_profile
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def _resolve(positions) -> list[Order]:
    repo = current_domain.repository_for(Order)
    orders = []
    for position in positions:
        try:
            orders.append(repo.get(slot_key(position)))
        except ObjectNotFoundError:
            logger.warning("Skipping dangling order reference", order_id=position)
    return orders


def get_order(caller_id, order_id: int) -> Order:
    get_profile(caller_id)
    if not sequence_for(ORDERS).contains(order_id):
        raise OrderNotFound({"order_id": [f"Order {order_id} does not exist"]})
    try:
        return current_domain.repository_for(Order).get(slot_key(order_id))
    except ObjectNotFoundError:
        raise OrderNotFound({"order_id": [f"Order {order_id} does not exist"]}) from None


def list_by_buyer(caller_id) -> list[Order]:
    authorize_buyer(caller_id)
    return _resolve(read_ids(buyer_index_for(caller_id)))


def list_all_orders(caller_id) -> list[Order]:
    get_profile(caller_id)
    return _resolve(range(sequence_for(ORDERS).length or 0))

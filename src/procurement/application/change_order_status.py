"""Application service: Change Order Status use case.

The order's predicates decide which transitions may be requested; the
backend performs and enforces the transition itself.
"""

from __future__ import annotations

import logging

from procurement.domain.exceptions import NotFoundError, ValidationError
from procurement.domain.model.order import OrderStatus, PurchaseOrder
from procurement.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def _may_request(order: PurchaseOrder, new_status: OrderStatus) -> bool:
    if new_status == OrderStatus.APPROVED:
        return order.is_approvable
    if new_status == OrderStatus.RECEIVED:
        return order.is_receivable
    if new_status == OrderStatus.CANCELLED:
        return order.is_cancelable
    return False


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, new_status: OrderStatus) -> None:
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        if not _may_request(order, new_status):
            raise ValidationError(
                f"Cannot move order #{order_id} from {order.status.value} "
                f"to {new_status.value}"
            )

        self._order_repo.set_status(order_id, new_status)
        logger.info("Order #%s moved to %s", order_id, new_status.value)

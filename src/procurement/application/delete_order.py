"""Application service: Delete Order use case."""

from __future__ import annotations

import logging

from procurement.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        self._order_repo.delete(order_id)
        logger.info("Deleted order #%s", order_id)

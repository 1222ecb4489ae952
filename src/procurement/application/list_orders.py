"""Application service: List Orders use case (query).

Filters are applied one at a time, first match wins: status, then
supplier, then a complete date range. With none given, every order is
returned.
"""

from __future__ import annotations

from datetime import date

from procurement.application.dto import OrderDTO, to_order_dto
from procurement.domain.exceptions import ValidationError
from procurement.domain.model.order import OrderStatus
from procurement.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        status: OrderStatus | None = None,
        start: date | None = None,
        end: date | None = None,
        supplier_id: int | None = None,
    ) -> list[OrderDTO]:
        if status is not None:
            orders = self._order_repo.list_by_status(status)
        elif supplier_id is not None:
            orders = self._order_repo.list_by_supplier(supplier_id)
        elif start is not None and end is not None:
            if start > end:
                raise ValidationError("Start date must not be after end date")
            orders = self._order_repo.list_by_date_range(start, end)
        else:
            orders = self._order_repo.list_all()
        return [to_order_dto(order) for order in orders]

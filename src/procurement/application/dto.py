"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from procurement.domain.model.order import PurchaseOrder

DATE_FORMAT = "%d/%m/%Y"


def format_date(value: date | None) -> str:
    return value.strftime(DATE_FORMAT) if value is not None else ""


@dataclass(frozen=True)
class LineItemDTO:
    """Output: a single line item as displayed to the user."""

    position: int
    product_code: str
    product_name: str
    unit: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int | None
    order_number: str
    order_date: str
    supplier: str
    status: str
    status_label: str
    items: list[LineItemDTO]
    subtotal: str
    tax: str
    total: str
    notes: str


def to_order_dto(order: PurchaseOrder) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        order_number=order.order_number or "",
        order_date=format_date(order.order_date),
        supplier=order.supplier_name or (
            str(order.supplier_id) if order.supplier_id is not None else ""
        ),
        status=order.status.value,
        status_label=order.status.label,
        items=[
            LineItemDTO(
                position=position,
                product_code=item.product.code or "",
                product_name=item.product.name,
                unit=item.product.unit or "",
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for position, item in enumerate(order.line_items, start=1)
        ],
        subtotal=str(order.subtotal),
        tax=str(order.tax),
        total=str(order.total),
        notes=order.notes or "",
    )

"""Purchase order aggregate: the core of the domain.

The PurchaseOrder is an aggregate root that owns its line items.
Subtotal, tax and total are derived fields: they are recomputed from the
current line items after every addition or removal and can never be set
from outside.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.product import ProductSnapshot
from procurement.domain.model.value_objects import Money, Quantity

TAX_RATE = Decimal("0.12")


class OrderStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    RECEIVED = "RECEIVED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class LineItem:
    """One product line inside an order.

    Immutable once built: to change a line, remove it and add a new one.
    ``id`` is only set for lines that came back from the backend.
    """

    product_id: int
    product: ProductSnapshot
    quantity: Quantity
    unit_price: Money
    id: int | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def create(
        product: ProductSnapshot,
        quantity: int,
        unit_price: Money | None,
    ) -> LineItem:
        """Build a new line, rejecting non-positive quantity or price."""
        qty = Quantity(quantity)
        if unit_price is None or unit_price.is_zero:
            raise ValidationError(
                f"Unit price for {product.name} must be greater than zero"
            )
        return LineItem(
            product_id=product.id,
            product=product,
            quantity=qty,
            unit_price=unit_price,
        )

    def matches(self, other: LineItem) -> bool:
        if self is other:
            return True
        return self.id is not None and self.id == other.id


@dataclass(eq=False)
class PurchaseOrder:
    """Aggregate root for purchase orders.

    Use ``PurchaseOrder.new_draft()`` when the user starts a new order.
    The constructor accepts existing line items so repositories can
    reconstitute persisted orders; totals are always recomputed from them.
    """

    supplier_id: int | None
    order_date: date | None
    id: int | None = None
    order_number: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    supplier_name: str | None = None
    expected_delivery_date: date | None = None
    notes: str | None = None
    created_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: InitVar[Iterable[LineItem]] = ()

    _line_items: list[LineItem] = field(init=False, repr=False)
    _subtotal: Money = field(init=False, repr=False)
    _tax: Money = field(init=False, repr=False)
    _total: Money = field(init=False, repr=False)

    def __post_init__(self, items: Iterable[LineItem]) -> None:
        self._line_items = list(items)
        self.recompute_totals()

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def new_draft(
        order_number: str | None = None,
        today: date | None = None,
    ) -> PurchaseOrder:
        return PurchaseOrder(
            supplier_id=None,
            order_date=today or date.today(),
            order_number=order_number,
        )

    # --- Line items -----------------------------------------------------------

    @property
    def line_items(self) -> tuple[LineItem, ...]:
        return tuple(self._line_items)

    def add_line_item(self, item: LineItem) -> None:
        self._assert_editable()
        self._line_items.append(item)
        self.recompute_totals()

    def remove_line_item(self, item: LineItem) -> None:
        """Remove the first matching line; an absent line is ignored."""
        self._assert_editable()
        for index, existing in enumerate(self._line_items):
            if existing.matches(item):
                del self._line_items[index]
                break
        self.recompute_totals()

    # --- Derived fields -------------------------------------------------------

    def recompute_totals(self) -> None:
        subtotal = Money.zero()
        for item in self._line_items:
            subtotal = subtotal + item.subtotal
        self._subtotal = subtotal
        self._tax = subtotal.apply_rate(TAX_RATE)
        self._total = subtotal + self._tax

    @property
    def subtotal(self) -> Money:
        return self._subtotal

    @property
    def tax(self) -> Money:
        return self._tax

    @property
    def total(self) -> Money:
        return self._total

    # --- Validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ValidationError for the first unmet submission rule."""
        if self.supplier_id is None:
            raise ValidationError("Select a supplier")
        if self.order_date is None:
            raise ValidationError("Select the order date")
        if not self._line_items:
            raise ValidationError("Add at least one line item")

    # --- Status predicates ----------------------------------------------------
    # The backend enacts transitions; these only say what may be requested.

    @property
    def is_editable(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_approvable(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_receivable(self) -> bool:
        return self.status == OrderStatus.APPROVED

    @property
    def is_cancelable(self) -> bool:
        return self.status in (OrderStatus.PENDING, OrderStatus.APPROVED)

    # --- Internal helpers -----------------------------------------------------

    def _assert_editable(self) -> None:
        if not self.is_editable:
            raise ValidationError(
                f"Order {self.order_number or self.id} is {self.status.value} "
                f"and can no longer be edited"
            )

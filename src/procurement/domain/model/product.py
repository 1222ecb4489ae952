"""Product reference entity and the snapshot captured by order lines.

Products live independently of orders. A line item never links to the
live product; it keeps a ``ProductSnapshot`` taken when the line was
added, so later catalog edits do not rewrite existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.value_objects import Money

MIN_PRICE = Decimal("0.01")


@dataclass(frozen=True)
class ProductSnapshot:
    """Denormalized product fields copied into a line item."""

    id: int
    code: str | None
    name: str
    unit: str | None = None
    unit_price: Money | None = None
    active: bool = True


@dataclass
class Product:
    """A product in a supplier's catalog."""

    id: int | None
    code: str | None
    name: str
    price: Money | None = None
    supplier_id: int | None = None
    supplier_name: str | None = None
    unit: str | None = None
    description: str | None = None
    active: bool = True

    @property
    def label(self) -> str:
        return f"{self.code} - {self.name}" if self.code else self.name

    def validate(self) -> None:
        """Check the fields the backend requires before a save."""
        if not (self.code or "").strip():
            raise ValidationError("Product code is required")
        if not (self.name or "").strip():
            raise ValidationError("Product name is required")
        if not (self.unit or "").strip():
            raise ValidationError("Unit of measure is required")
        if self.price is None or self.price.amount < MIN_PRICE:
            raise ValidationError("Price must be greater than 0")
        if self.supplier_id is None:
            raise ValidationError("Select a supplier")

    def snapshot(self) -> ProductSnapshot:
        return ProductSnapshot(
            id=self.id,
            code=self.code,
            name=self.name,
            unit=self.unit,
            unit_price=self.price,
            active=self.active,
        )

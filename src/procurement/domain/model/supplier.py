"""Supplier entity.

Suppliers are stored by the backend. The admin client registers and
edits them, and reads them to populate pickers and to scope the product
catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from procurement.domain.exceptions import ValidationError

TAX_ID_MAX_LENGTH = 13


@dataclass
class Supplier:

    id: int | None
    business_name: str
    tax_id: str | None = None
    trade_name: str | None = None
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    active: bool = True

    @property
    def display_name(self) -> str:
        if self.trade_name:
            return f"{self.business_name} ({self.trade_name})"
        return self.business_name

    def validate(self) -> None:
        """Check the fields the backend requires before a save."""
        tax_id = (self.tax_id or "").strip()
        if not tax_id:
            raise ValidationError("Tax ID is required")
        if not (self.business_name or "").strip():
            raise ValidationError("Business name is required")
        if len(tax_id) > TAX_ID_MAX_LENGTH:
            raise ValidationError(
                f"Tax ID must be at most {TAX_ID_MAX_LENGTH} characters"
            )

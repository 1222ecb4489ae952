"""Abstract repository for the PurchaseOrder aggregate.

Persistence and status transitions are enacted by the backend; every
method may raise BackendError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from procurement.domain.model.order import OrderStatus, PurchaseOrder


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[PurchaseOrder]:
        """Return every order."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[PurchaseOrder]:
        """Return orders currently in *status*."""

    @abstractmethod
    def list_by_supplier(self, supplier_id: int) -> list[PurchaseOrder]:
        """Return orders placed with one supplier."""

    @abstractmethod
    def list_by_date_range(self, start: date, end: date) -> list[PurchaseOrder]:
        """Return orders dated between *start* and *end*, inclusive."""

    @abstractmethod
    def find_by_id(self, order_id: int) -> PurchaseOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def create(self, order: PurchaseOrder) -> PurchaseOrder:
        """Persist a new order and return the stored version."""

    @abstractmethod
    def update(self, order_id: int, order: PurchaseOrder) -> PurchaseOrder:
        """Replace an existing order and return the stored version."""

    @abstractmethod
    def delete(self, order_id: int) -> None:
        """Remove an order."""

    @abstractmethod
    def set_status(self, order_id: int, status: OrderStatus) -> None:
        """Ask the backend to move an order to *status*."""

    @abstractmethod
    def generate_order_number(self) -> str:
        """Reserve the next order number for a new draft."""

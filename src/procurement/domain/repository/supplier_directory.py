"""Abstract supplier directory.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the REST backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from procurement.domain.model.supplier import Supplier


class SupplierDirectory(ABC):

    @abstractmethod
    def list_active(self) -> list[Supplier]:
        """Return suppliers that can receive new orders."""

    @abstractmethod
    def list_all(self) -> list[Supplier]:
        """Return every supplier, active or not."""

    @abstractmethod
    def search_by_name(self, text: str) -> list[Supplier]:
        """Return suppliers whose business name contains *text*."""

    @abstractmethod
    def find_by_id(self, supplier_id: int) -> Supplier | None:
        """Return a supplier by its ID, or None if not found."""

    @abstractmethod
    def create(self, supplier: Supplier) -> Supplier:
        """Register a new supplier and return the stored version."""

    @abstractmethod
    def update(self, supplier_id: int, supplier: Supplier) -> Supplier:
        """Replace a supplier's details and return the stored version."""

    @abstractmethod
    def delete(self, supplier_id: int) -> None:
        """Remove a supplier."""

    @abstractmethod
    def set_active(self, supplier_id: int, active: bool) -> None:
        """Activate or deactivate a supplier."""

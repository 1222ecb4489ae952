"""Abstract product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from procurement.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return every active product across all suppliers."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, active or not."""

    @abstractmethod
    def list_by_supplier(self, supplier_id: int) -> list[Product]:
        """Return the products offered by one supplier."""

    @abstractmethod
    def search_by_name(self, text: str) -> list[Product]:
        """Return products whose name contains *text*."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Add a product and return the stored version."""

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Product:
        """Replace a product's details and return the stored version."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product."""

    @abstractmethod
    def set_active(self, product_id: int, active: bool) -> None:
        """Activate or deactivate a product."""

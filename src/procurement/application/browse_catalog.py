"""Application services: supplier and product lookups for pickers and listings."""

from __future__ import annotations

from procurement.domain.model.product import Product
from procurement.domain.model.supplier import Supplier
from procurement.domain.repository.product_catalog import ProductCatalog
from procurement.domain.repository.supplier_directory import SupplierDirectory


class ListSuppliersHandler:

    def __init__(self, supplier_directory: SupplierDirectory) -> None:
        self._supplier_directory = supplier_directory

    def handle(self, include_inactive: bool = False, search: str | None = None) -> list[Supplier]:
        """A non-blank *search* on the business name wins over the active filter."""
        if search and search.strip():
            return self._supplier_directory.search_by_name(search.strip())
        if include_inactive:
            return self._supplier_directory.list_all()
        return self._supplier_directory.list_active()


class ListProductsHandler:

    def __init__(self, product_catalog: ProductCatalog) -> None:
        self._product_catalog = product_catalog

    def handle(
        self,
        supplier_id: int | None = None,
        include_inactive: bool = False,
        search: str | None = None,
    ) -> list[Product]:
        """Search by name, else one supplier's products, else the whole catalog."""
        if search and search.strip():
            return self._product_catalog.search_by_name(search.strip())
        if supplier_id is not None:
            return self._product_catalog.list_by_supplier(supplier_id)
        if include_inactive:
            return self._product_catalog.list_all()
        return self._product_catalog.list_active()

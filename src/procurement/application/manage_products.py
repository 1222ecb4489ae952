"""Application services: product maintenance use cases."""

from __future__ import annotations

import logging
from dataclasses import replace

from procurement.domain.exceptions import NotFoundError
from procurement.domain.model.product import Product
from procurement.domain.repository.product_catalog import ProductCatalog
from procurement.domain.repository.supplier_directory import SupplierDirectory

logger = logging.getLogger(__name__)


def _require_product(catalog: ProductCatalog, product_id: int) -> Product:
    product = catalog.find_by_id(product_id)
    if product is None:
        raise NotFoundError(f"Product #{product_id} not found")
    return product


def _check_supplier(directory: SupplierDirectory, product: Product) -> None:
    if product.supplier_id is not None and directory.find_by_id(product.supplier_id) is None:
        raise NotFoundError(f"Supplier #{product.supplier_id} not found")


class CreateProductHandler:

    def __init__(
        self,
        product_catalog: ProductCatalog,
        supplier_directory: SupplierDirectory,
    ) -> None:
        self._product_catalog = product_catalog
        self._supplier_directory = supplier_directory

    def handle(self, product: Product) -> Product:
        product.validate()
        _check_supplier(self._supplier_directory, product)

        saved = self._product_catalog.create(product)
        logger.info("Added product #%s (%s)", saved.id, saved.label)
        return saved


class UpdateProductHandler:

    def __init__(
        self,
        product_catalog: ProductCatalog,
        supplier_directory: SupplierDirectory,
    ) -> None:
        self._product_catalog = product_catalog
        self._supplier_directory = supplier_directory

    def handle(self, product_id: int, **changes) -> Product:
        """Apply *changes* to a stored product; ``None`` leaves a field as is."""
        current = _require_product(self._product_catalog, product_id)
        updated = replace(current, **{k: v for k, v in changes.items() if v is not None})
        updated.validate()
        if updated.supplier_id != current.supplier_id:
            _check_supplier(self._supplier_directory, updated)

        saved = self._product_catalog.update(product_id, updated)
        logger.info("Updated product #%s", product_id)
        return saved


class DeleteProductHandler:

    def __init__(self, product_catalog: ProductCatalog) -> None:
        self._product_catalog = product_catalog

    def handle(self, product_id: int) -> None:
        _require_product(self._product_catalog, product_id)
        self._product_catalog.delete(product_id)
        logger.info("Deleted product #%s", product_id)


class SetProductActiveHandler:

    def __init__(self, product_catalog: ProductCatalog) -> None:
        self._product_catalog = product_catalog

    def handle(self, product_id: int, active: bool) -> None:
        _require_product(self._product_catalog, product_id)
        self._product_catalog.set_active(product_id, active)
        logger.info("Product #%s %s", product_id, "activated" if active else "deactivated")

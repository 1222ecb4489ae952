"""Application services: supplier maintenance use cases.

Each handler checks the supplier exists (or validates the new one) before
calling the backend, so the user gets a NotFoundError or a warning
instead of a raw HTTP failure.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from procurement.domain.exceptions import NotFoundError
from procurement.domain.model.supplier import Supplier
from procurement.domain.repository.supplier_directory import SupplierDirectory

logger = logging.getLogger(__name__)


def _require_supplier(directory: SupplierDirectory, supplier_id: int) -> Supplier:
    supplier = directory.find_by_id(supplier_id)
    if supplier is None:
        raise NotFoundError(f"Supplier #{supplier_id} not found")
    return supplier


class CreateSupplierHandler:

    def __init__(self, supplier_directory: SupplierDirectory) -> None:
        self._supplier_directory = supplier_directory

    def handle(self, supplier: Supplier) -> Supplier:
        supplier.validate()
        saved = self._supplier_directory.create(supplier)
        logger.info("Registered supplier #%s (%s)", saved.id, saved.business_name)
        return saved


class UpdateSupplierHandler:

    def __init__(self, supplier_directory: SupplierDirectory) -> None:
        self._supplier_directory = supplier_directory

    def handle(self, supplier_id: int, **changes) -> Supplier:
        """Apply *changes* (field name to new value) to a stored supplier.

        ``None`` values mean "leave unchanged".
        """
        current = _require_supplier(self._supplier_directory, supplier_id)
        updated = replace(current, **{k: v for k, v in changes.items() if v is not None})
        updated.validate()

        saved = self._supplier_directory.update(supplier_id, updated)
        logger.info("Updated supplier #%s", supplier_id)
        return saved


class DeleteSupplierHandler:

    def __init__(self, supplier_directory: SupplierDirectory) -> None:
        self._supplier_directory = supplier_directory

    def handle(self, supplier_id: int) -> None:
        _require_supplier(self._supplier_directory, supplier_id)
        self._supplier_directory.delete(supplier_id)
        logger.info("Deleted supplier #%s", supplier_id)


class SetSupplierActiveHandler:

    def __init__(self, supplier_directory: SupplierDirectory) -> None:
        self._supplier_directory = supplier_directory

    def handle(self, supplier_id: int, active: bool) -> None:
        _require_supplier(self._supplier_directory, supplier_id)
        self._supplier_directory.set_active(supplier_id, active)
        logger.info(
            "Supplier #%s %s", supplier_id, "activated" if active else "deactivated"
        )

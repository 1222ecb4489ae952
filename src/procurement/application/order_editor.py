"""Application service: Order Editor workflow.

Drives one draft purchase order through the steps a user takes in the
editor: pick a supplier, narrow the catalog to that supplier's products,
add and remove line items, then submit to the backend.

The editor object itself is the workflow context. Callers pass it around
explicitly instead of stashing the order being edited in shared state.

Supplier changes keep the lines already added and only reset the
candidate product/quantity/price inputs.
"""

from __future__ import annotations

import logging

from procurement.domain.exceptions import BackendError, NotFoundError, ValidationError
from procurement.domain.model.order import LineItem, PurchaseOrder
from procurement.domain.model.product import Product
from procurement.domain.model.supplier import Supplier
from procurement.domain.model.value_objects import Money
from procurement.domain.repository.order_repository import OrderRepository
from procurement.domain.repository.product_catalog import ProductCatalog
from procurement.domain.repository.supplier_directory import SupplierDirectory
from procurement.domain.service.catalog_filter import filter_by_supplier, find_product

logger = logging.getLogger(__name__)


class OrderEditor:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_catalog: ProductCatalog,
        supplier_directory: SupplierDirectory,
    ) -> None:
        self._order_repo = order_repo
        self._product_catalog = product_catalog
        self._supplier_directory = supplier_directory

        self.draft: PurchaseOrder | None = None
        self.suppliers: list[Supplier] = []
        self.available_products: list[Product] = []
        self._catalog: list[Product] = []

        self.candidate_product_id: int | None = None
        self.candidate_quantity: int | None = None
        self.candidate_unit_price: Money | None = None

    # --- Opening a draft ------------------------------------------------------

    def start_new(self) -> PurchaseOrder:
        """Begin a new PENDING order dated today with no lines."""
        self._load_reference_data()

        order_number = None
        try:
            order_number = self._order_repo.generate_order_number()
        except BackendError as exc:
            logger.warning("Could not pre-generate an order number: %s", exc)

        self.draft = PurchaseOrder.new_draft(order_number=order_number)
        self.available_products = []
        self._reset_candidate()
        return self.draft

    def open(self, order_id: int) -> PurchaseOrder:
        """Load an existing order for editing."""
        order = self._order_repo.find_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        self._load_reference_data()
        self.draft = order
        self.available_products = filter_by_supplier(order.supplier_id, self._catalog)
        self._reset_candidate()
        return order

    # --- Supplier & candidate selection ---------------------------------------

    def select_supplier(self, supplier_id: int | None) -> None:
        draft = self._require_editable_draft()

        if supplier_id is None:
            draft.supplier_id = None
            draft.supplier_name = None
        else:
            supplier = self._resolve_supplier(supplier_id)
            draft.supplier_id = supplier.id
            draft.supplier_name = supplier.display_name

        self.available_products = filter_by_supplier(draft.supplier_id, self._catalog)
        self._reset_candidate()

    def select_candidate_product(self, product_id: int) -> Product:
        """Pick the product for the next line.

        Fills the unit price from the catalog only while the price input
        is still blank or zero.
        """
        product = self._resolve_product(product_id)
        self.candidate_product_id = product.id
        if self.candidate_unit_price is None or self.candidate_unit_price.is_zero:
            self.candidate_unit_price = product.price
        return product

    # --- Line items -----------------------------------------------------------

    def add_line_item(
        self,
        product_id: int,
        quantity: int,
        price_override: Money | None = None,
    ) -> LineItem:
        draft = self._require_editable_draft()
        product = self._resolve_product(product_id)
        unit_price = price_override if price_override is not None else product.price

        item = LineItem.create(product.snapshot(), quantity, unit_price)
        draft.add_line_item(item)
        return item

    def add_candidate(self) -> LineItem:
        """Add the line described by the candidate inputs, then clear them."""
        if self.candidate_product_id is None:
            raise ValidationError("Select a product")
        if self.candidate_quantity is None or self.candidate_quantity < 1:
            raise ValidationError("Quantity must be greater than 0")

        item = self.add_line_item(
            self.candidate_product_id,
            self.candidate_quantity,
            self.candidate_unit_price,
        )
        self._reset_candidate()
        return item

    def remove_line_item(self, item: LineItem) -> None:
        self._require_editable_draft().remove_line_item(item)

    # --- Submission -----------------------------------------------------------

    def submit(self) -> PurchaseOrder:
        """Validate and send the draft to the backend.

        On a backend failure the draft stays exactly as it was so the
        user can retry.
        """
        draft = self._require_editable_draft()
        draft.validate()

        if draft.id is None:
            saved = self._order_repo.create(draft)
            logger.info("Created order %s", saved.order_number or saved.id)
        else:
            saved = self._order_repo.update(draft.id, draft)
            logger.info("Updated order %s", saved.order_number or saved.id)

        self.draft = saved
        return saved

    # --- Internal helpers -----------------------------------------------------

    def _load_reference_data(self) -> None:
        self.suppliers = self._supplier_directory.list_active()
        self._catalog = self._product_catalog.list_active()

    def _resolve_supplier(self, supplier_id: int) -> Supplier:
        for supplier in self.suppliers:
            if supplier.id == supplier_id:
                return supplier
        supplier = self._supplier_directory.find_by_id(supplier_id)
        if supplier is None:
            raise NotFoundError(f"Supplier #{supplier_id} not found")
        return supplier

    def _resolve_product(self, product_id: int) -> Product:
        product = find_product(product_id, self.available_products)
        if product is None:
            raise NotFoundError(
                f"Product #{product_id} is not offered by the selected supplier"
            )
        return product

    def _reset_candidate(self) -> None:
        self.candidate_product_id = None
        self.candidate_quantity = None
        self.candidate_unit_price = None

    def _require_draft(self) -> PurchaseOrder:
        if self.draft is None:
            raise ValidationError("No order is being edited")
        return self.draft

    def _require_editable_draft(self) -> PurchaseOrder:
        draft = self._require_draft()
        if not draft.is_editable:
            raise ValidationError(
                f"Order {draft.order_number or draft.id} is {draft.status.value} "
                f"and can no longer be edited"
            )
        return draft

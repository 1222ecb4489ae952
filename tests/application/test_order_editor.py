"""Integration tests for the OrderEditor workflow.

Uses in-memory fake collaborators, no network.
"""

from datetime import date

import pytest

from procurement.application.order_editor import OrderEditor
from procurement.domain.exceptions import BackendError, NotFoundError, ValidationError
from procurement.domain.model.order import LineItem, OrderStatus, PurchaseOrder
from procurement.domain.model.product import Product, ProductSnapshot
from procurement.domain.model.supplier import Supplier
from procurement.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProductCatalog, FakeSupplierDirectory

ACME = 1
GLOBEX = 2


def _setup(
    orders: list[PurchaseOrder] | None = None,
) -> tuple[OrderEditor, FakeOrderRepository]:
    suppliers = [
        Supplier(id=ACME, business_name="Acme S.A.", trade_name="Acme"),
        Supplier(id=GLOBEX, business_name="Globex Corp"),
        Supplier(id=3, business_name="Dormant Ltd", active=False),
    ]
    products = [
        Product(id=5, code="BOL", name="Bolts", price=Money.of("10.00"), supplier_id=ACME),
        Product(id=6, code="NUT", name="Nuts", price=None, supplier_id=ACME),
        Product(id=7, code="PNT", name="Paint", price=Money.of("19.99"), supplier_id=ACME),
        Product(id=8, code="GLU", name="Glue", price=Money.of("4.00"), supplier_id=GLOBEX),
    ]
    order_repo = FakeOrderRepository(orders)
    editor = OrderEditor(
        order_repo,
        FakeProductCatalog(products),
        FakeSupplierDirectory(suppliers),
    )
    return editor, order_repo


class _NumberlessRepo(FakeOrderRepository):

    def generate_order_number(self) -> str:
        raise BackendError("sequence unavailable")


def _editor_with_acme() -> tuple[OrderEditor, FakeOrderRepository]:
    editor, repo = _setup()
    editor.start_new()
    editor.select_supplier(ACME)
    return editor, repo


class TestStartNew:

    def test_new_draft_is_pending_and_numbered(self):
        editor, _ = _setup()
        draft = editor.start_new()
        assert draft.status == OrderStatus.PENDING
        assert draft.order_number == "OC-00001"
        assert draft.order_date == date.today()
        assert draft.line_items == ()

    def test_loads_only_active_suppliers(self):
        editor, _ = _setup()
        editor.start_new()
        assert [s.id for s in editor.suppliers] == [ACME, GLOBEX]

    def test_no_products_until_supplier_chosen(self):
        editor, _ = _setup()
        editor.start_new()
        assert editor.available_products == []

    def test_number_generation_failure_is_not_fatal(self):
        editor = OrderEditor(_NumberlessRepo(), FakeProductCatalog(), FakeSupplierDirectory())
        draft = editor.start_new()
        assert draft.order_number is None


class TestSelectSupplier:

    def test_filters_products(self):
        editor, _ = _editor_with_acme()
        assert [p.id for p in editor.available_products] == [5, 6, 7]
        assert editor.draft.supplier_id == ACME
        assert editor.draft.supplier_name == "Acme S.A. (Acme)"

    def test_switching_replaces_product_list(self):
        editor, _ = _editor_with_acme()
        editor.select_supplier(GLOBEX)
        assert [p.id for p in editor.available_products] == [8]

    def test_switching_keeps_existing_line_items(self):
        editor, _ = _editor_with_acme()
        editor.add_line_item(5, 3)

        editor.select_supplier(GLOBEX)

        assert [i.product_id for i in editor.draft.line_items] == [5]
        assert editor.draft.total == Money.of("33.60")

    def test_switching_resets_candidate_fields(self):
        editor, _ = _editor_with_acme()
        editor.select_candidate_product(5)
        editor.candidate_quantity = 4

        editor.select_supplier(GLOBEX)

        assert editor.candidate_product_id is None
        assert editor.candidate_quantity is None
        assert editor.candidate_unit_price is None

    def test_clearing_supplier_empties_product_list(self):
        editor, _ = _editor_with_acme()
        editor.select_supplier(None)
        assert editor.available_products == []
        assert editor.draft.supplier_id is None

    def test_inactive_supplier_resolved_through_directory(self):
        editor, _ = _setup()
        editor.start_new()
        editor.select_supplier(3)
        assert editor.draft.supplier_name == "Dormant Ltd"

    def test_unknown_supplier_rejected(self):
        editor, _ = _setup()
        editor.start_new()
        with pytest.raises(NotFoundError, match="Supplier #99"):
            editor.select_supplier(99)


class TestCandidateProduct:

    def test_autofills_blank_price(self):
        editor, _ = _editor_with_acme()
        editor.select_candidate_product(7)
        assert editor.candidate_unit_price == Money.of("19.99")

    def test_does_not_overwrite_user_price(self):
        editor, _ = _editor_with_acme()
        editor.candidate_unit_price = Money.of("18.00")
        editor.select_candidate_product(7)
        assert editor.candidate_unit_price == Money.of("18.00")

    def test_zero_price_counts_as_blank(self):
        editor, _ = _editor_with_acme()
        editor.candidate_unit_price = Money.zero()
        editor.select_candidate_product(5)
        assert editor.candidate_unit_price == Money.of("10.00")

    def test_product_of_other_supplier_rejected(self):
        editor, _ = _editor_with_acme()
        with pytest.raises(NotFoundError):
            editor.select_candidate_product(8)

    def test_add_candidate_then_reset(self):
        editor, _ = _editor_with_acme()
        editor.select_candidate_product(5)
        editor.candidate_quantity = 2

        item = editor.add_candidate()

        assert item.subtotal == Money.of("20.00")
        assert editor.candidate_product_id is None
        assert editor.candidate_quantity is None

    def test_add_candidate_requires_product(self):
        editor, _ = _editor_with_acme()
        editor.candidate_quantity = 1
        with pytest.raises(ValidationError, match="Select a product"):
            editor.add_candidate()

    def test_add_candidate_requires_quantity(self):
        editor, _ = _editor_with_acme()
        editor.select_candidate_product(5)
        with pytest.raises(ValidationError, match="greater than 0"):
            editor.add_candidate()


class TestAddLineItem:

    def test_end_to_end_totals(self):
        editor, _ = _editor_with_acme()

        editor.add_line_item(5, 3, Money.of("10.00"))
        assert (editor.draft.subtotal, editor.draft.tax, editor.draft.total) == (
            Money.of("30.00"), Money.of("3.60"), Money.of("33.60"),
        )

        second = editor.add_line_item(7, 1, Money.of("19.99"))
        assert (editor.draft.subtotal, editor.draft.tax, editor.draft.total) == (
            Money.of("49.99"), Money.of("6.00"), Money.of("55.99"),
        )

        editor.remove_line_item(second)
        assert (editor.draft.subtotal, editor.draft.tax, editor.draft.total) == (
            Money.of("30.00"), Money.of("3.60"), Money.of("33.60"),
        )

    def test_uses_catalog_price_without_override(self):
        editor, _ = _editor_with_acme()
        item = editor.add_line_item(7, 2)
        assert item.unit_price == Money.of("19.99")

    def test_captures_product_snapshot(self):
        editor, _ = _editor_with_acme()
        item = editor.add_line_item(5, 1)
        editor.available_products[0].name = "Renamed"
        assert item.product.name == "Bolts"
        assert item.product.code == "BOL"

    def test_unknown_product_rejected(self):
        editor, _ = _editor_with_acme()
        with pytest.raises(NotFoundError):
            editor.add_line_item(8, 1)
        assert editor.draft.line_items == ()

    def test_product_without_price_needs_override(self):
        editor, _ = _editor_with_acme()
        with pytest.raises(ValidationError, match="greater than zero"):
            editor.add_line_item(6, 1)
        item = editor.add_line_item(6, 1, Money.of("0.30"))
        assert item.subtotal == Money.of("0.30")

    def test_invalid_quantity_leaves_order_untouched(self):
        editor, _ = _editor_with_acme()
        editor.add_line_item(5, 1)
        with pytest.raises(ValidationError):
            editor.add_line_item(7, 0)
        assert len(editor.draft.line_items) == 1
        assert editor.draft.subtotal == Money.of("10.00")


class TestSubmit:

    def test_creates_new_order(self):
        editor, repo = _editor_with_acme()
        editor.add_line_item(5, 3)

        saved = editor.submit()

        assert saved.id == 1
        assert repo.find_by_id(1).total == Money.of("33.60")
        assert editor.draft is saved

    def test_updates_existing_order(self):
        existing = PurchaseOrder(
            id=4,
            order_number="OC-00004",
            supplier_id=ACME,
            order_date=date(2024, 2, 1),
            items=[
                LineItem(
                    id=11,
                    product_id=5,
                    product=ProductSnapshot(id=5, code="BOL", name="Bolts"),
                    quantity=Quantity(1),
                    unit_price=Money.of("10.00"),
                )
            ],
        )
        editor, repo = _setup([existing])
        editor.open(4)
        editor.add_line_item(7, 1)

        saved = editor.submit()

        assert saved.id == 4
        assert repo.find_by_id(4).subtotal == Money.of("29.99")
        assert len(repo.list_all()) == 1

    def test_validation_failure_blocks_submission(self):
        editor, repo = _setup()
        editor.start_new()
        with pytest.raises(ValidationError, match="supplier"):
            editor.submit()
        assert repo.list_all() == []

    def test_backend_failure_keeps_draft_for_retry(self):
        editor, repo = _editor_with_acme()
        editor.add_line_item(5, 3)
        draft = editor.draft
        repo.fail_with = BackendError("connection refused")

        with pytest.raises(BackendError, match="connection refused"):
            editor.submit()

        assert editor.draft is draft
        assert draft.id is None
        assert draft.total == Money.of("33.60")

        repo.fail_with = None
        assert editor.submit().id == 1

    def test_submit_without_draft(self):
        editor, _ = _setup()
        with pytest.raises(ValidationError, match="No order"):
            editor.submit()


class TestOpen:

    def test_open_filters_products_by_order_supplier(self):
        existing = PurchaseOrder(id=2, supplier_id=GLOBEX, order_date=date(2024, 1, 1))
        editor, _ = _setup([existing])
        editor.open(2)
        assert [p.id for p in editor.available_products] == [8]

    def test_open_missing_order(self):
        editor, _ = _setup()
        with pytest.raises(NotFoundError, match="Order #9"):
            editor.open(9)

    def test_approved_order_is_read_only(self):
        existing = PurchaseOrder(
            id=2, supplier_id=ACME, order_date=date(2024, 1, 1), status=OrderStatus.APPROVED
        )
        editor, _ = _setup([existing])
        editor.open(2)
        with pytest.raises(ValidationError, match="can no longer be edited"):
            editor.add_line_item(5, 1)
        with pytest.raises(ValidationError, match="can no longer be edited"):
            editor.select_supplier(GLOBEX)

    @pytest.mark.parametrize(
        "status", [OrderStatus.APPROVED, OrderStatus.RECEIVED, OrderStatus.CANCELLED]
    )
    def test_closed_order_header_changes_are_not_submitted(self, status):
        line = LineItem.create(ProductSnapshot(id=5, code="BOL", name="Bolts"), 1, Money.of("10.00"))
        existing = PurchaseOrder(
            id=2, supplier_id=ACME, order_date=date(2024, 1, 1), status=status, items=[line]
        )
        editor, repo = _setup([existing])
        draft = editor.open(2)
        draft.order_date = date(2025, 1, 1)

        with pytest.raises(ValidationError, match="can no longer be edited"):
            editor.submit()
        assert repo.find_by_id(2) is existing
        assert editor.draft is draft

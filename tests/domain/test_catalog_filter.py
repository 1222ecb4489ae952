"""Unit tests for the supplier catalog filter."""

from procurement.domain.model.product import Product
from procurement.domain.model.value_objects import Money
from procurement.domain.service.catalog_filter import filter_by_supplier, find_product

CATALOG = [
    Product(id=1, code="BOL-01", name="Bolts", price=Money.of("0.50"), supplier_id=10),
    Product(id=2, code="NUT-01", name="Nuts", price=Money.of("0.25"), supplier_id=10),
    Product(id=3, code="PNT-01", name="Paint", price=Money.of("19.99"), supplier_id=20),
]


class TestFilterBySupplier:

    def test_returns_only_matching_products(self):
        assert [p.id for p in filter_by_supplier(10, CATALOG)] == [1, 2]

    def test_no_supplier_gives_empty_list(self):
        assert filter_by_supplier(None, CATALOG) == []

    def test_unknown_supplier_gives_empty_list(self):
        assert filter_by_supplier(99, CATALOG) == []

    def test_each_call_replaces_previous_result(self):
        first = filter_by_supplier(10, CATALOG)
        second = filter_by_supplier(20, CATALOG)
        assert [p.id for p in first] == [1, 2]
        assert [p.id for p in second] == [3]

    def test_does_not_modify_catalog(self):
        catalog = list(CATALOG)
        filter_by_supplier(10, catalog)
        assert catalog == CATALOG


class TestFindProduct:

    def test_found(self):
        assert find_product(3, CATALOG).name == "Paint"

    def test_missing(self):
        assert find_product(42, CATALOG) is None


class TestSnapshot:

    def test_snapshot_copies_display_fields(self):
        snap = CATALOG[2].snapshot()
        assert (snap.id, snap.code, snap.name, snap.unit_price) == (
            3, "PNT-01", "Paint", Money.of("19.99"),
        )

    def test_label(self):
        assert CATALOG[0].label == "BOL-01 - Bolts"

"""Domain service: Product Catalog Filter.

Narrows the products a user may pick for a new line item to those
supplied by the order's supplier. Each call starts from the full catalog,
so switching suppliers replaces the previous result instead of merging.
"""

from __future__ import annotations

from typing import Iterable

from procurement.domain.model.product import Product


def filter_by_supplier(
    supplier_id: int | None,
    catalog: Iterable[Product],
) -> list[Product]:
    if supplier_id is None:
        return []
    return [product for product in catalog if product.supplier_id == supplier_id]


def find_product(product_id: int | None, products: Iterable[Product]) -> Product | None:
    for product in products:
        if product.id == product_id:
            return product
    return None

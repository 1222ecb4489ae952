"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from procurement.application.order_editor import OrderEditor
from procurement.infrastructure.config import Settings
from procurement.infrastructure.http.api_client import ApiClient
from procurement.infrastructure.http.rest_order_repository import RestOrderRepository
from procurement.infrastructure.http.rest_product_catalog import RestProductCatalog
from procurement.infrastructure.http.rest_supplier_directory import (
    RestSupplierDirectory,
)


def api_client() -> ApiClient:
    settings = Settings.from_env()
    return ApiClient(settings.api_url, timeout=settings.api_timeout)


def supplier_directory() -> RestSupplierDirectory:
    return RestSupplierDirectory(api_client())


def product_catalog() -> RestProductCatalog:
    return RestProductCatalog(api_client())


def order_repository() -> RestOrderRepository:
    return RestOrderRepository(api_client())


def order_editor() -> OrderEditor:
    client = api_client()
    return OrderEditor(
        order_repo=RestOrderRepository(client),
        product_catalog=RestProductCatalog(client),
        supplier_directory=RestSupplierDirectory(client),
    )

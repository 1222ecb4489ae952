"""REST-backed implementation of ProductCatalog."""

from __future__ import annotations

from procurement.domain.exceptions import BackendError
from procurement.domain.model.product import Product
from procurement.domain.model.value_objects import Money
from procurement.domain.repository.product_catalog import ProductCatalog
from procurement.infrastructure.http.api_client import PAYLOAD_ERRORS, ApiClient

_RESOURCE = "productos"


class RestProductCatalog(ProductCatalog):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- ProductCatalog interface ---------------------------------------------

    def list_active(self) -> list[Product]:
        return self._to_domain_list(self._client.get(f"{_RESOURCE}/activos"))

    def list_all(self) -> list[Product]:
        return self._to_domain_list(self._client.get(_RESOURCE))

    def list_by_supplier(self, supplier_id: int) -> list[Product]:
        return self._to_domain_list(self._client.get(f"{_RESOURCE}/proveedor/{supplier_id}"))

    def search_by_name(self, text: str) -> list[Product]:
        return self._to_domain_list(
            self._client.get(f"{_RESOURCE}/nombre", params={"nombre": text})
        )

    def find_by_id(self, product_id: int) -> Product | None:
        try:
            raw = self._client.get(f"{_RESOURCE}/{product_id}")
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise
        return self._to_domain(raw) if raw else None

    def create(self, product: Product) -> Product:
        raw = self._client.post(_RESOURCE, self._to_raw(product))
        return self._expect_product(raw, "create")

    def update(self, product_id: int, product: Product) -> Product:
        raw = self._client.put(f"{_RESOURCE}/{product_id}", self._to_raw(product))
        return self._expect_product(raw, "update")

    def delete(self, product_id: int) -> None:
        self._client.delete(f"{_RESOURCE}/{product_id}")

    def set_active(self, product_id: int, active: bool) -> None:
        self._client.patch(
            f"{_RESOURCE}/{product_id}/estado",
            params={"activo": "true" if active else "false"},
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "codigo": product.code,
            "nombre": product.name,
            "descripcion": product.description,
            "unidadMedida": product.unit,
            "precioUnitario": str(product.price.amount) if product.price is not None else None,
            "proveedorId": product.supplier_id,
            "activo": product.active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            price = raw.get("precioUnitario")
            return Product(
                id=raw["id"],
                code=raw.get("codigo"),
                name=raw.get("nombre") or "",
                price=Money.of(price) if price is not None else None,
                supplier_id=raw.get("proveedorId"),
                supplier_name=raw.get("proveedorNombre"),
                unit=raw.get("unidadMedida"),
                description=raw.get("descripcion"),
                active=bool(raw.get("activo", True)),
            )
        except PAYLOAD_ERRORS as exc:
            raise BackendError(f"Malformed product payload: {exc!r}") from exc

    def _to_domain_list(self, raws: list[dict] | None) -> list[Product]:
        if raws is None:
            return []
        if not isinstance(raws, list):
            raise BackendError("Malformed product list payload")
        return [self._to_domain(raw) for raw in raws]

    def _expect_product(self, raw: dict | None, action: str) -> Product:
        if not raw:
            raise BackendError(f"Backend returned no product after {action}")
        return self._to_domain(raw)

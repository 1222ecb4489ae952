"""REST-backed implementation of SupplierDirectory."""

from __future__ import annotations

from procurement.domain.exceptions import BackendError
from procurement.domain.model.supplier import Supplier
from procurement.domain.repository.supplier_directory import SupplierDirectory
from procurement.infrastructure.http.api_client import PAYLOAD_ERRORS, ApiClient

_RESOURCE = "proveedores"


class RestSupplierDirectory(SupplierDirectory):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- SupplierDirectory interface ------------------------------------------

    def list_active(self) -> list[Supplier]:
        return self._to_domain_list(self._client.get(f"{_RESOURCE}/activos"))

    def list_all(self) -> list[Supplier]:
        return self._to_domain_list(self._client.get(_RESOURCE))

    def search_by_name(self, text: str) -> list[Supplier]:
        return self._to_domain_list(
            self._client.get(f"{_RESOURCE}/buscar", params={"razonSocial": text})
        )

    def find_by_id(self, supplier_id: int) -> Supplier | None:
        try:
            raw = self._client.get(f"{_RESOURCE}/{supplier_id}")
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise
        return self._to_domain(raw) if raw else None

    def create(self, supplier: Supplier) -> Supplier:
        raw = self._client.post(_RESOURCE, self._to_raw(supplier))
        return self._expect_supplier(raw, "create")

    def update(self, supplier_id: int, supplier: Supplier) -> Supplier:
        raw = self._client.put(f"{_RESOURCE}/{supplier_id}", self._to_raw(supplier))
        return self._expect_supplier(raw, "update")

    def delete(self, supplier_id: int) -> None:
        self._client.delete(f"{_RESOURCE}/{supplier_id}")

    def set_active(self, supplier_id: int, active: bool) -> None:
        self._client.patch(
            f"{_RESOURCE}/{supplier_id}/estado",
            params={"activo": "true" if active else "false"},
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(supplier: Supplier) -> dict:
        return {
            "id": supplier.id,
            "ruc": supplier.tax_id,
            "razonSocial": supplier.business_name,
            "nombreComercial": supplier.trade_name,
            "direccion": supplier.address,
            "telefono": supplier.phone,
            "email": supplier.email,
            "contacto": supplier.contact_name,
            "telefonoContacto": supplier.contact_phone,
            "activo": supplier.active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Supplier:
        try:
            return Supplier(
                id=raw["id"],
                business_name=raw.get("razonSocial") or "",
                tax_id=raw.get("ruc"),
                trade_name=raw.get("nombreComercial"),
                address=raw.get("direccion"),
                email=raw.get("email"),
                phone=raw.get("telefono"),
                contact_name=raw.get("contacto"),
                contact_phone=raw.get("telefonoContacto"),
                active=bool(raw.get("activo", True)),
            )
        except PAYLOAD_ERRORS as exc:
            raise BackendError(f"Malformed supplier payload: {exc!r}") from exc

    def _to_domain_list(self, raws: list[dict] | None) -> list[Supplier]:
        if raws is None:
            return []
        if not isinstance(raws, list):
            raise BackendError("Malformed supplier list payload")
        return [self._to_domain(raw) for raw in raws]

    def _expect_supplier(self, raw: dict | None, action: str) -> Supplier:
        if not raw:
            raise BackendError(f"Backend returned no supplier after {action}")
        return self._to_domain(raw)

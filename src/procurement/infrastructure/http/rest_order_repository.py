"""REST-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import date, datetime

from procurement.domain.exceptions import BackendError
from procurement.domain.model.order import LineItem, OrderStatus, PurchaseOrder
from procurement.domain.model.product import ProductSnapshot
from procurement.domain.model.value_objects import Money, Quantity
from procurement.domain.repository.order_repository import OrderRepository
from procurement.infrastructure.http.api_client import PAYLOAD_ERRORS, ApiClient

_RESOURCE = "ordenes-compra"

# The backend names statuses in Spanish.
_STATUS_TO_WIRE = {
    OrderStatus.PENDING: "PENDIENTE",
    OrderStatus.APPROVED: "APROBADA",
    OrderStatus.RECEIVED: "RECIBIDA",
    OrderStatus.CANCELLED: "CANCELADA",
}
_STATUS_FROM_WIRE = {wire: status for status, wire in _STATUS_TO_WIRE.items()}


class RestOrderRepository(OrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[PurchaseOrder]:
        return self._to_domain_list(self._client.get(_RESOURCE))

    def list_by_status(self, status: OrderStatus) -> list[PurchaseOrder]:
        return self._to_domain_list(
            self._client.get(f"{_RESOURCE}/estado/{_STATUS_TO_WIRE[status]}")
        )

    def list_by_supplier(self, supplier_id: int) -> list[PurchaseOrder]:
        return self._to_domain_list(self._client.get(f"{_RESOURCE}/proveedor/{supplier_id}"))

    def list_by_date_range(self, start: date, end: date) -> list[PurchaseOrder]:
        return self._to_domain_list(
            self._client.get(
                f"{_RESOURCE}/fechas",
                params={"inicio": start.isoformat(), "fin": end.isoformat()},
            )
        )

    def find_by_id(self, order_id: int) -> PurchaseOrder | None:
        try:
            raw = self._client.get(f"{_RESOURCE}/{order_id}")
        except BackendError as exc:
            if exc.status_code == 404:
                return None
            raise
        return self._to_domain(raw) if raw else None

    def create(self, order: PurchaseOrder) -> PurchaseOrder:
        raw = self._client.post(_RESOURCE, self._to_raw(order))
        return self._expect_order(raw, "create")

    def update(self, order_id: int, order: PurchaseOrder) -> PurchaseOrder:
        raw = self._client.put(f"{_RESOURCE}/{order_id}", self._to_raw(order))
        return self._expect_order(raw, "update")

    def delete(self, order_id: int) -> None:
        self._client.delete(f"{_RESOURCE}/{order_id}")

    def set_status(self, order_id: int, status: OrderStatus) -> None:
        self._client.patch(
            f"{_RESOURCE}/{order_id}/estado",
            params={"estado": _STATUS_TO_WIRE[status]},
        )

    def generate_order_number(self) -> str:
        number = self._client.get(f"{_RESOURCE}/generar-numero")
        if not number:
            raise BackendError("Backend did not return an order number")
        return str(number)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: PurchaseOrder) -> dict:
        return {
            "id": order.id,
            "numeroOrden": order.order_number,
            "fechaOrden": order.order_date.isoformat() if order.order_date else None,
            "fechaEntregaEstimada": (
                order.expected_delivery_date.isoformat()
                if order.expected_delivery_date
                else None
            ),
            "proveedorId": order.supplier_id,
            "estado": _STATUS_TO_WIRE[order.status],
            "subtotal": str(order.subtotal.amount),
            "impuesto": str(order.tax.amount),
            "total": str(order.total.amount),
            "observaciones": order.notes,
            "detalles": [
                {
                    "id": item.id,
                    "productoId": item.product_id,
                    "cantidad": item.quantity.value,
                    "precioUnitario": str(item.unit_price.amount),
                    "subtotal": str(item.subtotal.amount),
                }
                for item in order.line_items
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> PurchaseOrder:
        try:
            return cls._build_order(raw)
        except PAYLOAD_ERRORS as exc:
            raise BackendError(f"Malformed order payload: {exc!r}") from exc

    @classmethod
    def _build_order(cls, raw: dict) -> PurchaseOrder:
        return PurchaseOrder(
            id=raw.get("id"),
            order_number=raw.get("numeroOrden"),
            order_date=_parse_date(raw.get("fechaOrden")),
            supplier_id=raw.get("proveedorId"),
            supplier_name=raw.get("proveedorNombre"),
            status=_parse_status(raw.get("estado")),
            expected_delivery_date=_parse_date(raw.get("fechaEntregaEstimada")),
            notes=raw.get("observaciones"),
            created_by=raw.get("usuarioCreacion"),
            created_at=_parse_datetime(raw.get("fechaCreacion")),
            updated_at=_parse_datetime(raw.get("fechaActualizacion")),
            items=[cls._line_to_domain(line) for line in raw.get("detalles") or []],
        )

    @staticmethod
    def _line_to_domain(raw: dict) -> LineItem:
        product_raw = raw.get("producto") or {}
        product_id = raw.get("productoId") or product_raw.get("id")
        catalog_price = product_raw.get("precio")
        snapshot = ProductSnapshot(
            id=product_id,
            code=product_raw.get("codigo"),
            name=product_raw.get("nombre") or f"Product #{product_id}",
            unit=product_raw.get("unidadMedida"),
            unit_price=Money.of(catalog_price) if catalog_price is not None else None,
            active=bool(product_raw.get("activo", True)),
        )
        return LineItem(
            id=raw.get("id"),
            product_id=product_id,
            product=snapshot,
            quantity=Quantity(int(raw["cantidad"])),
            unit_price=Money.of(raw.get("precioUnitario") or 0),
        )

    def _to_domain_list(self, raws: list[dict] | None) -> list[PurchaseOrder]:
        if raws is None:
            return []
        if not isinstance(raws, list):
            raise BackendError("Malformed order list payload")
        return [self._to_domain(raw) for raw in raws]

    def _expect_order(self, raw: dict | None, action: str) -> PurchaseOrder:
        if not raw:
            raise BackendError(f"Backend returned no order after {action}")
        return self._to_domain(raw)


def _parse_status(value: str | None) -> OrderStatus:
    if value is None:
        return OrderStatus.PENDING
    if value in _STATUS_FROM_WIRE:
        return _STATUS_FROM_WIRE[value]
    try:
        return OrderStatus(value)
    except ValueError:
        raise BackendError(f"Unknown order status {value!r}") from None


def _parse_date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _parse_datetime(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None

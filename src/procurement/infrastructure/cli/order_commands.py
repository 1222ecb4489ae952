"""CLI commands for purchase orders."""

from __future__ import annotations

from datetime import date, datetime

import click

from procurement.application.change_order_status import ChangeOrderStatusHandler
from procurement.application.delete_order import DeleteOrderHandler
from procurement.application.dto import OrderDTO, to_order_dto
from procurement.application.list_orders import ListOrdersHandler
from procurement.application.order_editor import OrderEditor
from procurement.application.show_order import ShowOrderHandler
from procurement.domain.exceptions import DomainException
from procurement.domain.model.order import OrderStatus
from procurement.domain.model.value_objects import Money
from procurement.infrastructure.bootstrap import order_editor, order_repository
from procurement.infrastructure.cli.errors import to_click_error

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


def _parse_item(raw: str) -> tuple[int, int, Money | None]:
    """Parse 'ProductId:Qty' or 'ProductId:Qty:Price'."""
    parts = [part.strip() for part in raw.split(":")]
    if len(parts) not in (2, 3):
        raise click.BadParameter(
            f"Invalid item format '{raw}'. Expected 'ProductId:Quantity[:Price]'."
        )
    try:
        product_id = int(parts[0])
        quantity = int(parts[1])
    except ValueError:
        raise click.BadParameter(f"Invalid product ID or quantity in '{raw}'.")
    price = None
    if len(parts) == 3:
        try:
            price = Money.of(parts[2])
        except DomainException as exc:
            raise click.BadParameter(str(exc))
    return product_id, quantity, price


def _add_items(editor: OrderEditor, raw_items: tuple[str, ...]) -> None:
    for product_id, quantity, price in (_parse_item(raw) for raw in raw_items):
        editor.add_line_item(product_id, quantity, price)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_number or '(unnumbered)'}  #{dto.id}  (status={dto.status_label})")
    click.echo(f"Supplier: {dto.supplier}")
    click.echo(f"Date:     {dto.order_date}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'#':>3} {'Product':<28} {'Qty':>5} {'Price':>10} {'Subtotal':>12}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        name = f"{item.product_code} {item.product_name}".strip()
        click.echo(
            f"  {item.position:>3} {name:<28} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>12}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Subtotal':<38} {dto.subtotal:>24}")
    click.echo(f"  {'Tax (12%)':<38} {dto.tax:>24}")
    click.echo(f"  {'Total':<38} {dto.total:>24}")


@click.command("list")
@click.option(
    "--status",
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    default=None,
    help="Only orders in this status.",
)
@click.option("--from", "start", type=_DATE, default=None, help="Start date (YYYY-MM-DD).")
@click.option("--to", "end", type=_DATE, default=None, help="End date (YYYY-MM-DD).")
@click.option("--supplier", "supplier_id", type=int, default=None, help="Only orders placed with this supplier.")
def order_list(
    status: str | None,
    start: datetime | None,
    end: datetime | None,
    supplier_id: int | None,
) -> None:
    """List orders, filtered by status, supplier or date range."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(
            status=OrderStatus(status.upper()) if status else None,
            start=_as_date(start),
            end=_as_date(end),
            supplier_id=supplier_id,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Number':<14} {'Date':<11} {'Supplier':<30} {'Status':<10} {'Total':>12}")
    click.echo("-" * 88)
    for o in orders:
        click.echo(
            f"{o.id or '':<6} {o.order_number:<14} {o.order_date:<11} "
            f"{o.supplier:<30} {o.status_label:<10} {o.total:>12}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("create")
@click.option("--supplier", "supplier_id", required=True, type=int, help="Supplier ID.")
@click.option("--date", "order_date", type=_DATE, default=None, help="Order date (defaults to today).")
@click.option("--item", "items", multiple=True, help="Line as 'ProductId:Qty[:Price]'; repeatable.")
@click.option("--notes", default=None, help="Free-text notes.")
def order_create(
    supplier_id: int,
    order_date: datetime | None,
    items: tuple[str, ...],
    notes: str | None,
) -> None:
    """Create a new purchase order."""
    editor = order_editor()

    try:
        draft = editor.start_new()
        editor.select_supplier(supplier_id)
        if order_date is not None:
            draft.order_date = order_date.date()
        draft.notes = notes
        _add_items(editor, items)
        saved = editor.submit()
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Order created.")
    _display_order(to_order_dto(saved))


@click.command("edit")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to edit.")
@click.option("--supplier", "supplier_id", type=int, default=None, help="Switch supplier (existing lines are kept).")
@click.option("--date", "order_date", type=_DATE, default=None, help="New order date.")
@click.option("--remove-line", "remove_lines", multiple=True, type=int, help="Line position to remove; repeatable.")
@click.option("--add-item", "items", multiple=True, help="Line as 'ProductId:Qty[:Price]'; repeatable.")
@click.option("--notes", default=None, help="Replace the notes.")
def order_edit(
    order_id: int,
    supplier_id: int | None,
    order_date: datetime | None,
    remove_lines: tuple[int, ...],
    items: tuple[str, ...],
    notes: str | None,
) -> None:
    """Edit a PENDING order."""
    editor = order_editor()

    try:
        draft = editor.open(order_id)
        if supplier_id is not None:
            editor.select_supplier(supplier_id)
        if order_date is not None:
            draft.order_date = order_date.date()
        if notes is not None:
            draft.notes = notes

        # Positions refer to the listing shown before any edits
        lines = draft.line_items
        for position in remove_lines:
            if not 1 <= position <= len(lines):
                raise click.BadParameter(f"No line at position {position}.")
        for position in sorted(set(remove_lines)):
            editor.remove_line_item(lines[position - 1])

        _add_items(editor, items)
        saved = editor.submit()
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Order updated.")
    _display_order(to_order_dto(saved))


def _change_status(order_id: int, status: OrderStatus) -> None:
    handler = ChangeOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} status changed to {status.label}.")


@click.command("approve")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to approve.")
def order_approve(order_id: int) -> None:
    """Approve a PENDING order."""
    _change_status(order_id, OrderStatus.APPROVED)


@click.command("receive")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to mark received.")
def order_receive(order_id: int) -> None:
    """Mark an APPROVED order as received."""
    _change_status(order_id, OrderStatus.RECEIVED)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel a PENDING or APPROVED order."""
    _change_status(order_id, OrderStatus.CANCELLED)


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.confirmation_option(prompt="Delete this order?")
def order_delete(order_id: int) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} deleted.")

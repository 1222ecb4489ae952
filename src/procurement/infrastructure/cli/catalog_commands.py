"""CLI commands for suppliers and products."""

from __future__ import annotations

import click

from procurement.application.browse_catalog import ListProductsHandler, ListSuppliersHandler
from procurement.application.manage_products import (
    CreateProductHandler,
    DeleteProductHandler,
    SetProductActiveHandler,
    UpdateProductHandler,
)
from procurement.application.manage_suppliers import (
    CreateSupplierHandler,
    DeleteSupplierHandler,
    SetSupplierActiveHandler,
    UpdateSupplierHandler,
)
from procurement.domain.exceptions import DomainException
from procurement.domain.model.product import Product
from procurement.domain.model.supplier import Supplier
from procurement.domain.model.value_objects import Money
from procurement.infrastructure.bootstrap import product_catalog, supplier_directory
from procurement.infrastructure.cli.errors import to_click_error


def _parse_price(ctx: click.Context, param: click.Parameter, value: str | None) -> Money | None:
    if value is None:
        return None
    try:
        return Money.of(value)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


def _display_supplier(s: Supplier) -> None:
    click.echo(f"Supplier #{s.id}: {s.display_name}")
    click.echo(f"Tax ID:   {s.tax_id or '-'}")
    click.echo(f"Status:   {'Active' if s.active else 'Inactive'}")
    if s.contact_name:
        click.echo(f"Contact:  {s.contact_name} {s.contact_phone or ''}".rstrip())
    if s.email or s.phone:
        click.echo(f"Reach:    {s.email or ''} {s.phone or ''}".strip())
    if s.address:
        click.echo(f"Address:  {s.address}")


def _display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}: {p.label}")
    click.echo(f"Supplier: {p.supplier_name or p.supplier_id}")
    click.echo(f"Unit:     {p.unit or '-'}")
    click.echo(f"Price:    {p.price if p.price is not None else '-'}")
    click.echo(f"Status:   {'Active' if p.active else 'Inactive'}")
    if p.description:
        click.echo(f"Details:  {p.description}")


# --- Suppliers ----------------------------------------------------------------


@click.command("list")
@click.option("--all", "include_inactive", is_flag=True, default=False, help="Include inactive suppliers.")
@click.option("--search", default=None, help="Match on business name.")
def supplier_list(include_inactive: bool, search: str | None) -> None:
    """List suppliers."""
    handler = ListSuppliersHandler(supplier_directory=supplier_directory())

    try:
        suppliers = handler.handle(include_inactive=include_inactive, search=search)
    except DomainException as exc:
        raise to_click_error(exc)

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<6} {'Tax ID':<15} {'Name':<40} {'Status':<8}")
    click.echo("-" * 72)
    for s in suppliers:
        status = "Active" if s.active else "Inactive"
        click.echo(f"{s.id:<6} {s.tax_id or '':<15} {s.display_name:<40} {status:<8}")


@click.command("create")
@click.option("--tax-id", required=True, help="Tax ID (RUC), at most 13 characters.")
@click.option("--name", "business_name", required=True, help="Registered business name.")
@click.option("--trade-name", default=None)
@click.option("--address", default=None)
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--contact", "contact_name", default=None, help="Contact person.")
@click.option("--contact-phone", default=None)
def supplier_create(**fields) -> None:
    """Register a new supplier."""
    handler = CreateSupplierHandler(supplier_directory=supplier_directory())

    try:
        saved = handler.handle(Supplier(id=None, **fields))
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Supplier created.")
    _display_supplier(saved)


@click.command("update")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID to update.")
@click.option("--tax-id", default=None)
@click.option("--name", "business_name", default=None)
@click.option("--trade-name", default=None)
@click.option("--address", default=None)
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--contact", "contact_name", default=None)
@click.option("--contact-phone", default=None)
def supplier_update(supplier_id: int, **changes) -> None:
    """Change a supplier's details; omitted options are left as they are."""
    handler = UpdateSupplierHandler(supplier_directory=supplier_directory())

    try:
        saved = handler.handle(supplier_id, **changes)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Supplier updated.")
    _display_supplier(saved)


@click.command("delete")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID to delete.")
@click.confirmation_option(prompt="Delete this supplier?")
def supplier_delete(supplier_id: int) -> None:
    """Delete a supplier."""
    handler = DeleteSupplierHandler(supplier_directory=supplier_directory())

    try:
        handler.handle(supplier_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Supplier #{supplier_id} deleted.")


def _set_supplier_active(supplier_id: int, active: bool) -> None:
    handler = SetSupplierActiveHandler(supplier_directory=supplier_directory())

    try:
        handler.handle(supplier_id, active)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Supplier #{supplier_id} {'activated' if active else 'deactivated'}.")


@click.command("activate")
@click.option("--id", "supplier_id", required=True, type=int)
def supplier_activate(supplier_id: int) -> None:
    """Make a supplier available for new orders."""
    _set_supplier_active(supplier_id, True)


@click.command("deactivate")
@click.option("--id", "supplier_id", required=True, type=int)
def supplier_deactivate(supplier_id: int) -> None:
    """Hide a supplier from new orders."""
    _set_supplier_active(supplier_id, False)


# --- Products -----------------------------------------------------------------


@click.command("list")
@click.option("--supplier", "supplier_id", type=int, default=None, help="Only this supplier's products.")
@click.option("--all", "include_inactive", is_flag=True, default=False, help="Include inactive products.")
@click.option("--search", default=None, help="Match on product name.")
def product_list(supplier_id: int | None, include_inactive: bool, search: str | None) -> None:
    """List active products, optionally for one supplier."""
    handler = ListProductsHandler(product_catalog=product_catalog())

    try:
        products = handler.handle(
            supplier_id=supplier_id, include_inactive=include_inactive, search=search
        )
    except DomainException as exc:
        raise to_click_error(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Product':<32} {'Unit':<8} {'Price':>10}")
    click.echo("-" * 59)
    for p in products:
        price = str(p.price) if p.price is not None else "-"
        click.echo(f"{p.id:<6} {p.label:<32} {p.unit or '':<8} {price:>10}")


@click.command("create")
@click.option("--code", required=True)
@click.option("--name", required=True)
@click.option("--unit", required=True, help="Unit of measure, e.g. box.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price.")
@click.option("--supplier", "supplier_id", required=True, type=int, help="Supplier ID.")
@click.option("--description", default=None)
def product_create(**fields) -> None:
    """Add a product to a supplier's catalog."""
    handler = CreateProductHandler(
        product_catalog=product_catalog(),
        supplier_directory=supplier_directory(),
    )

    try:
        saved = handler.handle(Product(id=None, **fields))
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Product created.")
    _display_product(saved)


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to update.")
@click.option("--code", default=None)
@click.option("--name", default=None)
@click.option("--unit", default=None)
@click.option("--price", default=None, callback=_parse_price)
@click.option("--supplier", "supplier_id", type=int, default=None)
@click.option("--description", default=None)
def product_update(product_id: int, **changes) -> None:
    """Change a product's details; omitted options are left as they are."""
    handler = UpdateProductHandler(
        product_catalog=product_catalog(),
        supplier_directory=supplier_directory(),
    )

    try:
        saved = handler.handle(product_id, **changes)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Product updated.")
    _display_product(saved)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to delete.")
@click.confirmation_option(prompt="Delete this product?")
def product_delete(product_id: int) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(product_catalog=product_catalog())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product #{product_id} deleted.")


def _set_product_active(product_id: int, active: bool) -> None:
    handler = SetProductActiveHandler(product_catalog=product_catalog())

    try:
        handler.handle(product_id, active)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product #{product_id} {'activated' if active else 'deactivated'}.")


@click.command("activate")
@click.option("--id", "product_id", required=True, type=int)
def product_activate(product_id: int) -> None:
    """Offer a product on new orders again."""
    _set_product_active(product_id, True)


@click.command("deactivate")
@click.option("--id", "product_id", required=True, type=int)
def product_deactivate(product_id: int) -> None:
    """Withdraw a product from new orders."""
    _set_product_active(product_id, False)

import click

from procurement.infrastructure.cli.catalog_commands import (
    product_activate,
    product_create,
    product_deactivate,
    product_delete,
    product_list,
    product_update,
    supplier_activate,
    supplier_create,
    supplier_deactivate,
    supplier_delete,
    supplier_list,
    supplier_update,
)
from procurement.infrastructure.cli.order_commands import (
    order_approve,
    order_cancel,
    order_create,
    order_delete,
    order_edit,
    order_list,
    order_receive,
    order_show,
)
from procurement.infrastructure.config import Settings
from procurement.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Log HTTP traffic and internals.")
def cli(debug: bool) -> None:
    """Procurement: supplier purchase order administration"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    setup_logging(settings.log_level, debug=debug)


@cli.group()
def order() -> None:
    """Manage purchase orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


# Register subcommands
order.add_command(order_approve)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_edit)
order.add_command(order_list)
order.add_command(order_receive)
order.add_command(order_show)
product.add_command(product_activate)
product.add_command(product_create)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
supplier.add_command(supplier_activate)
supplier.add_command(supplier_create)
supplier.add_command(supplier_deactivate)
supplier.add_command(supplier_delete)
supplier.add_command(supplier_list)
supplier.add_command(supplier_update)

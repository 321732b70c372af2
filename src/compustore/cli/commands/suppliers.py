"""Supplier commands and menu."""

import click

from compustore.cli.error_handling import report_error
from compustore.cli.menu import run_menu
from compustore.domain.errors import DomainError
from compustore.domain.supplier import SupplierService


def add_supplier(ctx: click.Context) -> None:
    service = SupplierService(ctx.obj["store"])

    supplier_id = click.prompt("Supplier id", type=int)
    name = click.prompt("Name")
    phone = click.prompt("Phone")
    email = click.prompt("Email")
    supplier_type = click.prompt("Type", default="", show_default=False)

    try:
        supplier = service.add_supplier(
            supplier_id=supplier_id, name=name, phone=phone, email=email, type=supplier_type
        )
    except DomainError as e:
        report_error(e)
        return
    click.echo(f"Added supplier '{supplier.name}' (ID: {supplier.id})")


def show_suppliers(ctx: click.Context) -> None:
    suppliers = SupplierService(ctx.obj["store"]).list_suppliers()
    if not suppliers:
        click.echo("No suppliers found.")
        return
    for supplier in suppliers:
        click.echo(
            f"ID: {supplier.id:3d} | {supplier.name:20s} | {supplier.phone} | {supplier.email}"
        )


def menu(ctx: click.Context) -> None:
    """Supplier submenu."""
    run_menu(
        ctx,
        "Suppliers menu:",
        [
            ("Add supplier", add_supplier),
            ("Show suppliers", show_suppliers),
        ],
    )


@click.group()
def supplier_group():
    """Inspect suppliers."""
    pass


@supplier_group.command("list")
@click.pass_context
def list_suppliers(ctx):
    """List suppliers in queue order."""
    show_suppliers(ctx)


def register_commands(cli):
    """Register supplier commands with main CLI."""
    cli.add_command(supplier_group, name="suppliers")

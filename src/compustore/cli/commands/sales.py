"""Sale commands and menu."""

import click

from compustore.cli.date_filters import resolve_cli_date_range
from compustore.cli.error_handling import report_error
from compustore.cli.menu import run_menu
from compustore.cli.params import AMOUNT, DATE
from compustore.domain.entities import Sale, SaleLineItem
from compustore.domain.errors import DomainError
from compustore.domain.sale import SaleService


def echo_line_item(item: SaleLineItem, with_sale: bool = False) -> None:
    click.echo(f"  Detail number: {item.number}")
    if with_sale:
        click.echo(f"  Sale: {item.sale.number}")
    click.echo(f"  Product: {item.product.name or item.product.code}")
    click.echo(f"  Quantity: {item.quantity}")
    click.echo(f"  Subtotal: {item.subtotal}")


def echo_sales(service: SaleService, sales: list[Sale]) -> None:
    """Print each sale followed by its line items."""
    if not sales:
        click.echo("No sales found.")
        return
    for sale in sales:
        click.echo("-" * 42)
        click.echo(f"Sale number: {sale.number}")
        click.echo(f"Date: {sale.date.isoformat()}")
        click.echo(f"Customer: {sale.customer.name} {sale.customer.surname}".rstrip())
        click.echo(f"Total: {sale.total}")
        click.echo(f"Seller: {sale.seller.name} {sale.seller.surname}".rstrip())
        for item in service.line_items_for(sale.number):
            echo_line_item(item)


def add_sale(ctx: click.Context) -> None:
    """Record a sale header, then line items until the operator stops.

    A missing customer or seller cancels the sale. A missing product stops
    the line item entry; items already entered are kept.
    """
    service = SaleService(ctx.obj["store"])

    number = click.prompt("Sale number", type=int)
    sale_date = click.prompt("Sale date", type=DATE)
    customer_name = click.prompt("Customer name")
    total = click.prompt("Sale total", type=AMOUNT)
    seller_name = click.prompt("Seller name")

    try:
        sale = service.create_sale(
            number=number,
            sale_date=sale_date,
            customer_name=customer_name,
            total=total,
            seller_name=seller_name,
        )
    except DomainError as e:
        report_error(e)
        return
    click.echo(f"Recorded sale {sale.number}")

    while True:
        product_code = click.prompt("Product code")
        quantity = click.prompt("Quantity", type=click.IntRange(min=1))
        try:
            item = service.add_line_item(sale.number, product_code, quantity)
        except DomainError as e:
            report_error(e)
            return
        click.echo(f"Added line {item.number}: subtotal {item.subtotal}")

        more = click.prompt(
            "Add another product to the sale? (1 = yes, 0 = no)", type=click.IntRange(0, 1)
        )
        if more == 0:
            return


def show_sales(ctx: click.Context) -> None:
    service = SaleService(ctx.obj["store"])
    echo_sales(service, service.list_sales())


def show_line_items(ctx: click.Context) -> None:
    items = SaleService(ctx.obj["store"]).list_line_items()
    if not items:
        click.echo("No sale details found.")
        return
    for item in items:
        click.echo("-" * 42)
        echo_line_item(item, with_sale=True)


def menu(ctx: click.Context) -> None:
    """Sale submenu."""
    run_menu(
        ctx,
        "Sales menu:",
        [
            ("Add sale", add_sale),
            ("Show sales", show_sales),
            ("Show sale details", show_line_items),
        ],
    )


@click.group()
def sale_group():
    """Inspect sales."""
    pass


@sale_group.command("list")
@click.option("--from", "start_date", help="Start date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--to", "end_date", help="End date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option(
    "--period",
    type=click.Choice(["this-week", "this-month", "this-year", "last-month", "last-year"]),
    help="Named period instead of --from/--to",
)
@click.pass_context
def list_sales(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """List sales with their line items.

    Examples:
        compustore sales list
        compustore sales list --from 2024-09-01 --to 2024-09-30
        compustore sales list --period this-month
    """
    service = SaleService(ctx.obj["store"])
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )
    echo_sales(service, service.list_sales(start_date=start, end_date=end))


def register_commands(cli):
    """Register sale commands with main CLI."""
    cli.add_command(sale_group, name="sales")

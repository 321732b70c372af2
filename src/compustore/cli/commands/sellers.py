"""Seller commands and menu."""

import click

from compustore.cli.error_handling import report_error
from compustore.cli.menu import run_menu
from compustore.cli.params import AMOUNT
from compustore.domain.entities import Seller
from compustore.domain.errors import DomainError
from compustore.domain.seller import SellerService


def echo_seller(seller: Seller) -> None:
    click.echo(f"Name: {seller.name}")
    click.echo(f"Surname: {seller.surname}")
    click.echo(f"Phone: {seller.phone}")
    click.echo(f"Email: {seller.email}")
    click.echo(f"Address: {seller.address}")
    click.echo(f"Salary: {seller.salary}")
    click.echo(f"Sales amount: {seller.sales_amount}")


def add_seller(ctx: click.Context) -> None:
    service = SellerService(ctx.obj["store"])

    name = click.prompt("Name")
    surname = click.prompt("Surname")
    phone = click.prompt("Phone")
    email = click.prompt("Email")
    address = click.prompt("Address")
    salary = click.prompt("Salary", type=AMOUNT)
    sales_amount = click.prompt("Sales amount", type=AMOUNT)

    try:
        seller = service.create_seller(
            name=name,
            surname=surname,
            phone=phone,
            email=email,
            address=address,
            salary=salary,
            sales_amount=sales_amount,
        )
    except DomainError as e:
        report_error(e)
        return
    click.echo(f"Created seller '{seller.name} {seller.surname}'")


def show_sellers(ctx: click.Context) -> None:
    sellers = SellerService(ctx.obj["store"]).list_sellers()
    if not sellers:
        click.echo("No sellers found.")
        return
    for seller in sellers:
        click.echo("-" * 42)
        echo_seller(seller)


def check_new_seller(ctx: click.Context) -> None:
    seller = SellerService(ctx.obj["store"]).peek_new_seller()
    if seller is None:
        click.echo("No new sellers.")
        return
    click.echo(f"New seller: {seller.name} {seller.surname}")


def show_new_seller(ctx: click.Context) -> None:
    seller = SellerService(ctx.obj["store"]).peek_new_seller()
    if seller is None:
        click.echo("No new sellers.")
        return
    echo_seller(seller)


def menu(ctx: click.Context) -> None:
    """Seller submenu."""
    run_menu(
        ctx,
        "Sellers menu:",
        [
            ("Add seller", add_seller),
            ("Show sellers", show_sellers),
            ("Check new seller", check_new_seller),
            ("Show new seller", show_new_seller),
        ],
    )


@click.group()
def seller_group():
    """Inspect sellers."""
    pass


@seller_group.command("list")
@click.pass_context
def list_sellers(ctx):
    """List all sellers."""
    show_sellers(ctx)


def register_commands(cli):
    """Register seller commands with main CLI."""
    cli.add_command(seller_group, name="sellers")

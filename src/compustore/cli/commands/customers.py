"""Customer commands and menu."""

import click

from compustore.cli.error_handling import report_error
from compustore.cli.menu import run_menu
from compustore.domain.customer import CustomerService
from compustore.domain.entities import Customer
from compustore.domain.errors import DomainError


def echo_customer(customer: Customer) -> None:
    click.echo(f"Name: {customer.name}")
    click.echo(f"Surname: {customer.surname}")
    click.echo(f"Phone: {customer.phone}")
    click.echo(f"Email: {customer.email}")
    click.echo(f"Address: {customer.address}")
    click.echo(f"Tax id: {customer.tax_id}")


def add_customer(ctx: click.Context) -> None:
    service = CustomerService(ctx.obj["store"])

    name = click.prompt("Name")
    surname = click.prompt("Surname")
    phone = click.prompt("Phone")
    email = click.prompt("Email")
    address = click.prompt("Address")
    tax_id = click.prompt("Tax id")

    try:
        customer = service.create_customer(
            name=name, surname=surname, phone=phone, email=email, address=address, tax_id=tax_id
        )
    except DomainError as e:
        report_error(e)
        return
    click.echo(f"Created customer '{customer.name} {customer.surname}'")


def show_customers(ctx: click.Context) -> None:
    customers = CustomerService(ctx.obj["store"]).list_customers()
    if not customers:
        click.echo("No customers found.")
        return
    for customer in customers:
        click.echo("-" * 42)
        echo_customer(customer)


def check_new_customer(ctx: click.Context) -> None:
    customer = CustomerService(ctx.obj["store"]).peek_new_customer()
    if customer is None:
        click.echo("No new customers.")
        return
    click.echo(f"New customer: {customer.name} {customer.surname}")


def show_new_customer(ctx: click.Context) -> None:
    customer = CustomerService(ctx.obj["store"]).peek_new_customer()
    if customer is None:
        click.echo("No new customers.")
        return
    echo_customer(customer)


def show_sales_totals(ctx: click.Context) -> None:
    """Print the accumulated sale total of every customer."""
    totals = CustomerService(ctx.obj["store"]).customer_sales_totals()
    if not totals:
        click.echo("No customers found.")
        return
    for row in totals:
        click.echo(f"Customer: {row.customer.name} {row.customer.surname}")
        click.echo(f"Total amount: {row.total}")


def menu(ctx: click.Context) -> None:
    """Customer submenu."""
    run_menu(
        ctx,
        "Customers menu:",
        [
            ("Add customer", add_customer),
            ("Show customers", show_customers),
            ("Check new customer", check_new_customer),
            ("Show new customer", show_new_customer),
            ("Show sales totals", show_sales_totals),
        ],
    )


@click.group()
def customer_group():
    """Inspect customers."""
    pass


@customer_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers."""
    show_customers(ctx)


@customer_group.command("totals")
@click.pass_context
def customer_totals(ctx):
    """Show the accumulated sale total of every customer."""
    show_sales_totals(ctx)


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customers")

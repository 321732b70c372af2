"""Interactive menu shell.

Data is loaded by the root command before the shell starts and saved when the
operator leaves through option 0 of the main menu.
"""

import click

from compustore.cli.commands import customers, products, sales, sellers, suppliers
from compustore.cli.menu import run_menu
from compustore.database.persistence import save_store


def run_shell(ctx: click.Context) -> None:
    """Run the main menu loop, then save all records."""
    click.echo("Welcome to the computer equipment store!")
    run_menu(
        ctx,
        "Main menu:",
        [
            ("Sellers", sellers.menu),
            ("Products", products.menu),
            ("Sales", sales.menu),
            ("Customers", customers.menu),
            ("List sales", sales.show_sales),
            ("Suppliers", suppliers.menu),
        ],
        exit_label="Exit",
    )
    save_store(ctx.obj["storage"], ctx.obj["store"])
    click.echo("Data saved. Goodbye!")

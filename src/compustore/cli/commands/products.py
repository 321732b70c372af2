"""Product commands and menu."""

import click

from compustore.cli.error_handling import report_error
from compustore.cli.menu import run_menu
from compustore.cli.params import AMOUNT, QUANTITY
from compustore.domain.entities import Product
from compustore.domain.errors import DomainError
from compustore.domain.product import ProductService


def echo_product(product: Product) -> None:
    """Print one product as a block."""
    click.echo("-" * 42)
    click.echo(f"Code: {product.code}")
    click.echo(f"Name: {product.name}")
    click.echo(f"Price: {product.price}")
    click.echo(f"Quantity: {product.quantity}")
    click.echo(f"Description: {product.description}")
    click.echo(f"Category: {product.category}")
    click.echo(f"Supplier: {product.supplier.name or '(none)'}")
    click.echo(f"Status: {'active' if product.active else 'inactive'}")


def echo_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return
    for product in products:
        echo_product(product)
    click.echo("-" * 42)


def prompt_active(label: str = "Active? (1 = yes, 0 = no)") -> bool:
    return click.prompt(label, type=click.IntRange(0, 1)) == 1


def add_product(ctx: click.Context) -> None:
    """Prompt for a new product; the code is asked again until it is unused."""
    service = ProductService(ctx.obj["store"])

    code = click.prompt("Product code")
    while service.product_exists(code):
        code = click.prompt("Product code already exists. Enter a new code")

    name = click.prompt("Name")
    price = click.prompt("Price", type=AMOUNT)
    quantity = click.prompt("Quantity", type=QUANTITY)
    description = click.prompt("Description")
    category = click.prompt("Category")
    active = prompt_active()
    supplier_id = click.prompt("Supplier id", type=int)

    try:
        product = service.create_product(
            code=code,
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            category=category,
            supplier_id=supplier_id,
            active=active,
        )
    except DomainError as e:
        report_error(e)
        return

    click.echo(f"Created product '{product.code}'")
    if not product.supplier.name:
        click.echo(f"Warning: no supplier with id {supplier_id}; product has no supplier")


def modify_product(ctx: click.Context) -> None:
    """Prompt for a product code and replace all of its fields."""
    service = ProductService(ctx.obj["store"])

    code = click.prompt("Code of the product to modify")
    if service.get_product(code) is None:
        click.echo("The product does not exist.")
        return

    name = click.prompt("New name")
    price = click.prompt("New price", type=AMOUNT)
    quantity = click.prompt("New quantity", type=QUANTITY)
    description = click.prompt("New description")
    category = click.prompt("New category")
    active = prompt_active("New status (1 = active, 0 = inactive)")

    try:
        service.update_product(
            code=code,
            name=name,
            price=price,
            quantity=quantity,
            description=description,
            category=category,
            active=active,
        )
    except DomainError as e:
        report_error(e)
        return
    click.echo(f"Updated product '{code}'")


def delete_product(ctx: click.Context) -> None:
    service = ProductService(ctx.obj["store"])

    code = click.prompt("Code of the product to delete")
    try:
        product = service.delete_product(code)
    except DomainError:
        click.echo("The product does not exist.")
        return
    click.echo(f"Deleted product '{product.code}'")


def show_products(ctx: click.Context) -> None:
    echo_products(ProductService(ctx.obj["store"]).list_products())


def show_products_by_category(ctx: click.Context) -> None:
    service = ProductService(ctx.obj["store"])

    categories = service.list_categories()
    if not categories:
        click.echo("No products found.")
        return
    click.echo(f"Categories: {', '.join(categories)}")
    category = click.prompt("Category")
    echo_products(service.list_products_in_category(category))


def menu(ctx: click.Context) -> None:
    """Product submenu."""
    run_menu(
        ctx,
        "Products menu:",
        [
            ("Add product", add_product),
            ("Modify product", modify_product),
            ("Delete product", delete_product),
            ("Show products", show_products),
            ("Show products by category", show_products_by_category),
        ],
    )


@click.group()
def product_group():
    """Inspect products."""
    pass


@product_group.command("list")
@click.option("--category", help="Only list products of this category")
@click.pass_context
def list_products(ctx, category: str | None):
    """List products, optionally of one category."""
    service = ProductService(ctx.obj["store"])
    if category:
        echo_products(service.list_products_in_category(category))
    else:
        echo_products(service.list_products())


def register_commands(cli):
    """Register product commands with main CLI."""
    cli.add_command(product_group, name="products")

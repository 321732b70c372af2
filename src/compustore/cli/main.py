"""Main CLI entry point."""

import logging

import click

from compustore.cli.error_handling import handle_domain_error
from compustore.cli.shell import run_shell
from compustore.database.base import CorruptRecordError
from compustore.database.factories import BACKENDS, create_storage
from compustore.database.persistence import load_store

# Import and register all commands at module level
from compustore.cli.commands import (
    customers,
    products,
    sales,
    sellers,
    suppliers,
)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@click.group(invoke_without_command=True)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory for the data files (overrides COMPUSTORE_DATA_DIR environment variable)",
    envvar="COMPUSTORE_DATA_DIR",
)
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default="text",
    show_default=True,
    help="Storage backend (overrides COMPUSTORE_BACKEND environment variable)",
    envvar="COMPUSTORE_BACKEND",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_dir: str | None, backend: str, verbose: bool):
    """Compustore - inventory and sales for a computer equipment store.

    Run without a command to open the interactive menu. Records are loaded
    at start and saved when leaving the menu.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    storage = create_storage(backend, data_dir)
    storage.connect()
    ctx.call_on_close(storage.disconnect)

    try:
        store = load_store(storage)
    except CorruptRecordError as e:
        handle_domain_error(ctx, e)

    ctx.obj["storage"] = storage
    ctx.obj["store"] = store

    if ctx.invoked_subcommand is None:
        run_shell(ctx)


@cli.command("menu")
@click.pass_context
def menu(ctx):
    """Open the interactive menu."""
    run_shell(ctx)


# Register all commands
customers.register_commands(cli)
products.register_commands(cli)
sales.register_commands(cli)
sellers.register_commands(cli)
suppliers.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

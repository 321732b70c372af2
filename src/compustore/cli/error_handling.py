"""CLI error handling helpers."""

import click

from compustore.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_error(error: DomainError | ValueError) -> None:
    """Render a domain error inside the interactive menu, which keeps running."""
    click.echo(f"Error: {error}")

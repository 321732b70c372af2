"""Numbered text menus."""

from typing import Callable

import click

MenuAction = Callable[[click.Context], None]


def run_menu(
    ctx: click.Context,
    title: str,
    options: list[tuple[str, MenuAction]],
    exit_label: str = "Back to main menu",
) -> None:
    """Show a numbered menu until the operator picks 0.

    Options are numbered from 1 in list order. A number outside the menu
    prints "Invalid option." and shows the same menu again.
    """
    while True:
        click.echo(f"\n{title}")
        for number, (label, _) in enumerate(options, start=1):
            click.echo(f"{number}. {label}")
        click.echo(f"0. {exit_label}")

        choice = click.prompt("Select an option", type=int)
        if choice == 0:
            return
        if not 1 <= choice <= len(options):
            click.echo("Invalid option.")
            continue

        _, action = options[choice - 1]
        action(ctx)

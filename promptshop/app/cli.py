from __future__ import annotations

import click
from flask import Blueprint

from promptshop.app.extensions import get_shop

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("reset-state")
def reset_state() -> None:
    """Overwrite the state document with the seed fixture."""
    shop = get_shop()
    shop.store.reset()
    click.echo(f"State reset from {shop.store.seed_path}.")


@cli_bp.cli.command("clear-views")
def clear_views() -> None:
    """Delete cached fragment templates so they are generated again.

    The state document is left alone.
    """
    removed = get_shop().views.clear()
    click.echo(f"Removed {removed} cached template(s).")

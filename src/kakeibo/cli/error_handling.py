"""CLI error handling helpers."""

import click

from kakeibo.domain.errors import DomainError, StoreError


def handle_domain_error(ctx: click.Context, error: DomainError | StoreError) -> None:
    """Render a domain or storage error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)

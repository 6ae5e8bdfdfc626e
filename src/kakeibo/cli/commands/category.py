"""Category commands."""

import click

from kakeibo.cli.error_handling import handle_domain_error
from kakeibo.domain.category import CategoryService
from kakeibo.domain.errors import DomainError, StoreError


@click.group()
def category_group():
    """Browse categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    service = CategoryService(ctx.obj["repository"])

    try:
        categories = service.list_categories()
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    if not categories:
        click.echo("No categories found. Run 'init-db' to create the default categories.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"{cat.name} (ID: {cat.id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")

"""Initialize the relational database."""

import click

from kakeibo.cli.error_handling import handle_domain_error
from kakeibo.database.sqlalchemy_db import SQLAlchemyTransactionRepository
from kakeibo.domain.errors import StoreError


@click.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the tables and seed the default categories."""
    repository = ctx.obj["repository"]
    if not isinstance(repository, SQLAlchemyTransactionRepository):
        click.echo("Error: init-db requires --database-url or DATABASE_URL", err=True)
        ctx.exit(1)

    try:
        inserted = repository.initialize_schema()
    except StoreError as e:
        handle_domain_error(ctx, e)

    if inserted:
        click.echo(f"Created schema and {inserted} default categories.")
    else:
        click.echo("Schema ready; categories already exist.")


def register_commands(cli):
    """Register init-db command with main CLI."""
    cli.add_command(init_db)

"""Main CLI entry point."""

import click

from kakeibo import config
from kakeibo.database.factories import create_repository
from kakeibo.domain.errors import StoreError

# Import and register all commands at module level
from kakeibo.cli.commands import (
    category,
    init_db,
    serve,
    transaction,
)


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy database URL (overrides DATABASE_URL environment variable). "
    "Without one, an in-memory store is used.",
    envvar="DATABASE_URL",
)
@click.pass_context
def cli(ctx, database_url: str | None):
    """Kakeibo - household income and expense ledger.

    Record, list, update and delete dated income and expense entries, and
    serve them over a small REST API.
    """
    ctx.ensure_object(dict)

    # Open the repository only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            repository = create_repository(database_url or "")
        except StoreError as e:
            click.echo(f"Error: could not connect to database: {e}", err=True)
            ctx.exit(1)
        ctx.obj["repository"] = repository
        ctx.call_on_close(repository.close)


# Register all commands
category.register_commands(cli)
init_db.register_commands(cli)
serve.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    config.load_env_file()
    cli()


if __name__ == "__main__":
    main()

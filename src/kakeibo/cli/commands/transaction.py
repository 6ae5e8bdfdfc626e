"""Transaction management commands."""

import click

from kakeibo.cli.error_handling import handle_domain_error
from kakeibo.database.memory import InMemoryTransactionRepository
from kakeibo.domain.errors import DomainError, StoreError
from kakeibo.domain.transaction import TransactionService
from kakeibo.utils.date_parser import parse_date
from kakeibo.utils.amount_parser import parse_amount


KIND_CHOICE = click.Choice(["income", "expense"], case_sensitive=False)


def warn_if_in_memory(ctx) -> None:
    """Warn that changes are lost when the command exits."""
    if isinstance(ctx.obj["repository"], InMemoryTransactionRepository):
        click.echo(
            "Warning: no --database-url or DATABASE_URL set; "
            "changes are kept in memory and discarded on exit.",
            err=True,
        )


def format_transaction(txn) -> str:
    """Render one transaction as a table row."""
    category_name = txn.category.name if txn.category is not None else ""
    return (
        f"{txn.id:<6} {str(txn.date):<12} {txn.kind.value:<8} {txn.amount:>12,} "
        f"{category_name:<16} {txn.memo[:30]:<30}"
    )


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.pass_context
def list_transactions(ctx):
    """List all transactions."""
    service = TransactionService(ctx.obj["repository"])

    try:
        transactions = service.list_transactions()
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 90)
    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>12} {'Category':<16} {'Memo':<30}")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(format_transaction(txn))

    total_expenses = sum(txn.amount for txn in transactions if txn.amount < 0)
    total_income = sum(txn.amount for txn in transactions if txn.amount > 0)
    click.echo("-" * 90)
    click.echo(
        f"{'TOTAL':<6} Expenses: {abs(total_expenses):,} | "
        f"Income: {total_income:,} | Balance: {total_income + total_expenses:,}"
    )


@transaction_group.command("add")
@click.option(
    "--date",
    "date_str",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--type", "kind", type=KIND_CHOICE, required=True, help="income or expense")
@click.option("--category", "category_id", type=int, required=True, help="Category ID")
@click.option(
    "--amount",
    required=True,
    help="Amount in minor units (e.g., 1500); the sign follows --type",
)
@click.option("--memo", default="", help="Memo")
@click.pass_context
def add_transaction(ctx, date_str: str, kind: str, category_id: int, amount: str, memo: str):
    """Add a transaction.

    Examples:
        kakeibo transaction add --date 2025-01-15 --type expense --category 1 --amount 1500 --memo lunch
        kakeibo transaction add --date today --type income --category 10 --amount 250000
    """
    service = TransactionService(ctx.obj["repository"])
    warn_if_in_memory(ctx)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        txn = service.create_transaction(
            txn_date=txn_date,
            kind=kind.lower(),
            category_id=category_id,
            amount=txn_amount,
            memo=memo,
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id} ({txn.kind.value} {txn.amount:,} on {txn.date})")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", "date_str", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.option("--type", "kind", type=KIND_CHOICE, help="income or expense")
@click.option("--category", "category_id", type=int, help="Category ID")
@click.option("--amount", help="Amount in minor units; the sign follows the type")
@click.option("--memo", help="Memo")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    date_str: str | None,
    kind: str | None,
    category_id: int | None,
    amount: str | None,
    memo: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided; the rest keep their stored
    values.

    Examples:
        kakeibo transaction update 1 --amount 1500 --memo "team lunch"
        kakeibo transaction update 1 --type income --category 10
    """
    service = TransactionService(ctx.obj["repository"])
    warn_if_in_memory(ctx)

    try:
        existing = service.get_transaction(transaction_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    txn_date = existing.date
    if date_str is not None:
        try:
            txn_date = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = existing.amount
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        txn = service.update_transaction(
            transaction_id=transaction_id,
            txn_date=txn_date,
            kind=kind.lower() if kind is not None else existing.kind,
            category_id=category_id if category_id is not None else existing.category_id,
            amount=txn_amount,
            memo=memo if memo is not None else existing.memo,
        )
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {txn.id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        kakeibo transaction delete 1
        kakeibo transaction delete 1 --yes
    """
    service = TransactionService(ctx.obj["repository"])
    warn_if_in_memory(ctx)

    try:
        txn = service.get_transaction(transaction_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    if not yes:
        click.echo(format_transaction(txn))
        if not click.confirm("Delete this transaction?"):
            click.echo("Cancelled.")
            return

    try:
        service.delete_transaction(transaction_id)
    except (DomainError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")

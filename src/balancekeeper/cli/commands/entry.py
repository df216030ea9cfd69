"""Entry commands."""

import click
from balancekeeper.cli.account_resolution import resolve_account_or_exit
from balancekeeper.cli.error_handling import handle_domain_error
from balancekeeper.domain.account import AccountService
from balancekeeper.utils.parsing import parse_amount, parse_date


@click.group()
def entry_group():
    """Manage account entries."""
    pass


@entry_group.command("add")
@click.argument("account", metavar="ACCOUNT")
@click.argument("date_str", metavar="DATE")
@click.argument("amount_str", metavar="AMOUNT")
@click.option("--name", help="Entry name (defaults to 'Transaction')")
@click.option("--notes", help="Notes")
@click.pass_context
def add_entry(ctx, account: str, date_str: str, amount_str: str, name: str | None, notes: str | None):
    """Add a transaction entry to an account.

    Examples:
        balancekeeper entry add "Checking" 2024-01-15 "(42.50)" --name "Groceries"
        balancekeeper entry add 1 yesterday 1200
    """
    service = AccountService(ctx.obj["db"])
    account_obj = resolve_account_or_exit(ctx, service, account)

    try:
        entry_date = parse_date(date_str)
        amount = parse_amount(amount_str)
        entry_id = service.add_transaction(
            account_id=account_obj.id,
            entry_date=entry_date,
            amount=amount,
            name=name,
            notes=notes,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added entry {entry_id} to '{account_obj.name}'")


@entry_group.command("list")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def list_entries(ctx, account: str):
    """List entries of an account, newest first."""
    service = AccountService(ctx.obj["db"])
    account_obj = resolve_account_or_exit(ctx, service, account)

    entries = service.list_entries(account_obj.id)
    if not entries:
        click.echo("No entries found.")
        return

    for e in entries:
        kind = e.valuation_kind.value if e.valuation_kind else "transaction"
        click.echo(
            f"{e.date.isoformat()} | {kind:15s} | {e.name:25s} | {e.amount:>12,.2f} {e.currency}"
        )


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")

"""Account management commands."""

from decimal import Decimal

import click
from balancekeeper.cli.account_resolution import resolve_account_or_exit
from balancekeeper.cli.error_handling import handle_domain_error
from balancekeeper.domain.account import AccountService
from balancekeeper.domain.current_balance import CurrentBalanceManager
from balancekeeper.domain.entities import AccountType
from balancekeeper.domain.errors import DomainError
from balancekeeper.domain.opening_balance import OpeningBalanceManager
from balancekeeper.utils.parsing import parse_amount


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option("--currency", default="USD", show_default=True, help="ISO currency code")
@click.option(
    "--type",
    "account_type",
    type=click.Choice([t.value for t in AccountType]),
    default=AccountType.DEPOSITORY.value,
    show_default=True,
    help="Account type",
)
@click.option("--linked", is_flag=True, help="Balance is synchronized from an external source")
@click.option("--balance", default="0", help="Initial cached balance")
@click.pass_context
def create_account(ctx, name: str, currency: str, account_type: str, linked: bool, balance: str):
    """Create a new account.

    Examples:
        balancekeeper account create "Checking"
        balancekeeper account create "House" --type property --currency EUR
        balancekeeper account create "Brokerage" --type investment --linked
    """
    service = AccountService(ctx.obj["db"])

    try:
        amount = parse_amount(balance) if balance else Decimal("0")
        account_id = service.create_account(
            name=name,
            currency=currency,
            account_type=account_type,
            linked=linked,
            balance=amount,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    service = AccountService(ctx.obj["db"])

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        source = "linked" if acc.linked else "manual"
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | {acc.account_type.value:15s} | "
            f"{source:6s} | {acc.balance:,.2f} {acc.currency}"
        )


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show opening and current balance of an account.

    ACCOUNT can be an account name or ID.
    """
    db = ctx.obj["db"]
    service = AccountService(db)
    account_obj = resolve_account_or_exit(ctx, service, account)

    try:
        opening = OpeningBalanceManager(db, account_obj)
        current = CurrentBalanceManager(db, account_obj)
        click.echo(f"Account: {account_obj.name} ({account_obj.account_type.value})")
        click.echo(
            f"Opening: {opening.opening_balance():,.2f} {account_obj.currency} "
            f"on {opening.opening_date().isoformat()}"
            + ("" if opening.has_opening_anchor() else " (inferred)")
        )
        click.echo(
            f"Current: {current.current_balance():,.2f} {account_obj.currency} "
            f"on {current.current_date().isoformat()}"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")

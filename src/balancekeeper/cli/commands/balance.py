"""Balance commands."""

import click
from balancekeeper.cli.account_resolution import resolve_account_or_exit
from balancekeeper.cli.error_handling import handle_domain_error, report_result
from balancekeeper.domain.account import AccountService
from balancekeeper.domain.current_balance import CurrentBalanceManager
from balancekeeper.domain.opening_balance import OpeningBalanceManager
from balancekeeper.utils.parsing import parse_amount, parse_date


@click.group()
def balance_group():
    """Set opening and current balances."""
    pass


@balance_group.command("set-opening")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount_str", metavar="AMOUNT")
@click.option("--date", "date_str", help="Opening date (must precede the oldest entry)")
@click.pass_context
def set_opening(ctx, account: str, amount_str: str, date_str: str | None):
    """Set the opening balance of an account.

    Without --date a new opening balance is dated the day before the oldest
    entry (at most two years back), and an existing one keeps its date.

    Examples:
        balancekeeper balance set-opening "Checking" 1000
        balancekeeper balance set-opening "Checking" 1000 --date 2023-01-01
    """
    db = ctx.obj["db"]
    account_obj = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        amount = parse_amount(amount_str)
        opening_date = parse_date(date_str) if date_str else None
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    result = OpeningBalanceManager(db, account_obj).set_opening_balance(amount, date=opening_date)
    report_result(ctx, result, f"Opening balance of '{account_obj.name}' set to {amount:,.2f}")


@balance_group.command("set-current")
@click.argument("account", metavar="ACCOUNT")
@click.argument("amount_str", metavar="AMOUNT")
@click.pass_context
def set_current(ctx, account: str, amount_str: str):
    """Set the current balance of an account.

    Examples:
        balancekeeper balance set-current "Checking" 1250.00
        balancekeeper balance set-current "Card" -- -200
    """
    db = ctx.obj["db"]
    account_obj = resolve_account_or_exit(ctx, AccountService(db), account)

    try:
        amount = parse_amount(amount_str)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    result = CurrentBalanceManager(db, account_obj).set_current_balance(amount)
    report_result(ctx, result, f"Current balance of '{account_obj.name}' set to {amount:,.2f}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(balance_group, name="balance")

"""CLI helpers for account resolution and error handling."""

from __future__ import annotations

import click
from balancekeeper.domain.account import AccountService
from balancekeeper.domain.entities import Account
from balancekeeper.utils.account_resolver import resolve_account


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str | int
) -> Account:
    """Resolve account name or ID to an account, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        account_id = resolve_account(account_service, account)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
    return account_service.require_account(account_id)

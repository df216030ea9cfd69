"""CLI error handling helpers."""

import click

from balancekeeper.domain.errors import DomainError
from balancekeeper.domain.results import BalanceResult


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_result(ctx: click.Context, result: BalanceResult, success_message: str) -> None:
    """Render a balance operation result, exiting with failure if it failed."""
    if not result.success:
        click.echo(f"Error: {result.error}", err=True)
        ctx.exit(1)
    if result.changes_made:
        click.echo(success_message)
    else:
        click.echo("No changes made.")

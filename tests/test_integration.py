"""Integration tests for end-to-end workflows."""

from datetime import date, timedelta
from decimal import Decimal

from balancekeeper.cli.main import cli
from balancekeeper.domain.entities import ValuationKind
from balancekeeper.domain.opening_balance import OpeningBalanceManager


def invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def test_manual_account_workflow(cli_runner, temp_db):
    """Account → entries → opening balance → current balance → show."""
    result = invoke(cli_runner, temp_db, "account", "create", "Checking")
    assert result.exit_code == 0

    result = invoke(cli_runner, temp_db, "entry", "add", "Checking", "30 days ago", "(40.00)", "--name", "Groceries")
    assert result.exit_code == 0
    assert "Added entry" in result.output

    oldest = date.today() - timedelta(days=30)
    result = invoke(
        cli_runner, temp_db, "balance", "set-opening", "Checking", "1000", "--date", oldest.isoformat()
    )
    assert result.exit_code == 1
    assert "Opening balance date must be before the oldest entry date" in result.output

    opening_date = oldest - timedelta(days=1)
    result = invoke(
        cli_runner, temp_db, "balance", "set-opening", "Checking", "1000", "--date", opening_date.isoformat()
    )
    assert result.exit_code == 0
    assert "Opening balance of 'Checking' set to 1,000.00" in result.output

    result = invoke(cli_runner, temp_db, "balance", "set-opening", "Checking", "1000")
    assert result.exit_code == 0
    assert "No changes made." in result.output

    result = invoke(cli_runner, temp_db, "entry", "add", "Checking", opening_date.isoformat(), "5")
    assert result.exit_code == 1
    assert "must be after the opening balance date" in result.output

    result = invoke(cli_runner, temp_db, "balance", "set-current", "Checking", "1,250")
    assert result.exit_code == 0
    assert "Current balance of 'Checking' set to 1,250.00" in result.output

    account = temp_db.get_account_by_name("Checking")
    assert account.balance == Decimal("1250")
    assert OpeningBalanceManager(temp_db, account).opening_balance() == Decimal("2250")

    result = invoke(cli_runner, temp_db, "account", "show", "Checking")
    assert result.exit_code == 0
    assert f"Opening: 2,250.00 USD on {opening_date.isoformat()}" in result.output
    assert "Current: 1,250.00 USD" in result.output


def test_linked_account_workflow(cli_runner, temp_db):
    """Linked accounts keep a single current anchor dated today."""
    assert invoke(cli_runner, temp_db, "account", "create", "Brokerage", "--type", "investment", "--linked").exit_code == 0

    assert invoke(cli_runner, temp_db, "balance", "set-current", "Brokerage", "5000").exit_code == 0
    result = invoke(cli_runner, temp_db, "balance", "set-current", "Brokerage", "5000")
    assert result.exit_code == 0
    assert "No changes made." in result.output

    result = invoke(cli_runner, temp_db, "entry", "list", "Brokerage")
    assert result.exit_code == 0
    assert result.output.count("current_anchor") == 1
    assert "Current balance" in result.output


def test_property_account_reconciles(cli_runner, temp_db):
    """Non-cash accounts record a reconciliation instead of moving the opening balance."""
    invoke(cli_runner, temp_db, "account", "create", "House", "--type", "property", "--balance", "300000")
    invoke(cli_runner, temp_db, "balance", "set-opening", "House", "300000")

    result = invoke(cli_runner, temp_db, "balance", "set-current", "House", "320000")
    assert result.exit_code == 0

    account = temp_db.get_account_by_name("House")
    reconciliations = temp_db.list_valuations(account.id, ValuationKind.RECONCILIATION)
    assert len(reconciliations) == 1
    assert reconciliations[0].entry.name == "Manual value update"
    assert OpeningBalanceManager(temp_db, account).opening_balance() == Decimal("300000")


def test_invalid_amount(cli_runner, temp_db):
    invoke(cli_runner, temp_db, "account", "create", "Checking")

    result = invoke(cli_runner, temp_db, "balance", "set-current", "Checking", "lots")

    assert result.exit_code == 1
    assert "Could not parse amount" in result.output

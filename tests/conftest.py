"""Shared pytest fixtures for balancekeeper tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest
from dateutil.relativedelta import relativedelta

from balancekeeper.database.factories import create_sqlite_database
from balancekeeper.domain.account import AccountService
from balancekeeper.domain.entities import AccountType, ValuationKind
from balancekeeper.domain.opening_balance import OpeningBalanceManager


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def make_account(account_service):
    """Factory creating accounts and returning the domain entity."""

    def _make(
        name="Checking",
        currency="USD",
        account_type=AccountType.DEPOSITORY,
        linked=False,
        balance=Decimal("0"),
    ):
        account_id = account_service.create_account(
            name=name,
            currency=currency,
            account_type=account_type,
            linked=linked,
            balance=balance,
        )
        return account_service.get_account(account_id)

    return _make


@pytest.fixture
def manual_account(make_account):
    """Manual depository (cash-type) account."""
    return make_account(name="Manual Checking")


@pytest.fixture
def linked_account(make_account):
    """Linked depository account."""
    return make_account(name="Linked Checking", linked=True)


@pytest.fixture
def property_account(make_account):
    """Manual property (non-cash) account."""
    return make_account(name="House", account_type=AccountType.PROPERTY)


@pytest.fixture
def add_transaction(temp_db):
    """Add a transaction entry to an account."""

    def _add(account, entry_date, amount=Decimal("-50"), name="Test transaction"):
        return temp_db.create_transaction_entry(
            account_id=account.id,
            entry_date=entry_date,
            amount=Decimal(amount),
            name=name,
            currency=account.currency,
        )

    return _add


@pytest.fixture
def add_valuation(temp_db):
    """Add a valuation entry of any kind to an account."""

    def _add(account, kind, entry_date, amount, name=None):
        return temp_db.create_valuation_entry(
            account_id=account.id,
            kind=kind,
            entry_date=entry_date,
            name=name or f"Test {ValuationKind(kind).value}",
            amount=Decimal(amount),
            currency=account.currency,
        )

    return _add


@pytest.fixture
def setup_opening_balance(temp_db):
    """Give an account an opening anchor one year ago and a matching cached balance."""

    def _setup(account, balance):
        result = OpeningBalanceManager(temp_db, account).set_opening_balance(
            Decimal(balance), date=date.today() - relativedelta(years=1)
        )
        assert result.success, result.error
        temp_db.update_account_balance(account.id, Decimal(balance))
        return temp_db.get_account(account.id)

    return _setup


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

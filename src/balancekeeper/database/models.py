"""SQLAlchemy models for balancekeeper database."""

from datetime import datetime, UTC
from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its string form.

    SQLite has no fixed-point type and round-trips NUMERIC through float, so
    amounts are kept as text to read back exactly what was written.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


AMOUNT_TYPE = ExactDecimal


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    account_type = Column(String, nullable=False, default="depository")
    linked = Column(Boolean, default=False, nullable=False)
    balance = Column(AMOUNT_TYPE, default=Decimal("0"), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    entries = relationship("Entry", back_populates="account", cascade="all, delete-orphan")
    valuations = relationship("Valuation", back_populates="account", cascade="all, delete-orphan")


class Entry(Base):
    """Dated record carrying the amount and date of a transaction or valuation."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    date = Column(Date, nullable=False)
    name = Column(String, nullable=False)
    amount = Column(AMOUNT_TYPE, nullable=False)
    currency = Column(String(3), nullable=False)
    entryable_type = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_entries_account_date", "account_id", "date"),)

    # Relationships
    account = relationship("Account", back_populates="entries")
    valuation = relationship("Valuation", back_populates="entry", uselist=False)
    transaction = relationship(
        "Transaction", back_populates="entry", uselist=False, cascade="all, delete-orphan"
    )


class Valuation(Base):
    """Valuation model.

    ``entry_id`` is nullable so that a valuation which lost its entry can still
    be loaded; such rows are treated as absent balances.
    """

    __tablename__ = "valuations"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    entry_id = Column(Integer, ForeignKey("entries.id"), nullable=True, unique=True)
    kind = Column(String, nullable=False)

    # At most one opening anchor and one current anchor per account
    __table_args__ = (
        Index(
            "uq_valuations_account_anchor",
            "account_id",
            "kind",
            unique=True,
            sqlite_where=kind.in_(["opening_anchor", "current_anchor"]),
            postgresql_where=kind.in_(["opening_anchor", "current_anchor"]),
        ),
    )

    # Relationships
    account = relationship("Account", back_populates="valuations")
    entry = relationship("Entry", back_populates="valuation")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    entry_id = Column(Integer, ForeignKey("entries.id"), nullable=False, unique=True)
    notes = Column(String, nullable=True)

    # Relationships
    entry = relationship("Entry", back_populates="transaction")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)

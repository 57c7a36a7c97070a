"""Ledger package."""

from accounting.ledger.accounting_system import (
    DEFAULT_INITIAL_BALANCE,
    AccountingSystem,
    Ledger,
)

__all__ = ["DEFAULT_INITIAL_BALANCE", "AccountingSystem", "Ledger"]

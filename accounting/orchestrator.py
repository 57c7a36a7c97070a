"""
Application Wiring

This module ties configuration, audit logging and the ledger together
for the front ends (console menu and Streamlit app).

DESIGN DECISION: The ledger never reads configuration itself.
Front ends ask this factory for components, so tests can build a
ledger directly with explicit values.
"""

from typing import Any, Optional

from accounting.audit import AuditLogger
from accounting.config import get_settings
from accounting.ledger import AccountingSystem


def create_app_components(
    initial_balance: Optional[Any] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> tuple[AccountingSystem, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        initial_balance: Opening balance. Falls back to LEDGER_INITIAL_BALANCE
                         (1000.00 unless configured).
        audit_logger: Shared audit logger. A new local one if None.

    Returns:
        (accounting_system, audit_logger)

    Raises:
        InvalidAmountError: the opening balance is not a valid amount.
    """
    if initial_balance is None:
        initial_balance = get_settings().ledger.initial_balance

    audit_logger = audit_logger or AuditLogger()

    accounting_system = AccountingSystem(
        initial_balance=initial_balance,
        audit_logger=audit_logger,
    )

    return accounting_system, audit_logger

"""
Data Models Package

This package contains all Pydantic models used by the ledger.
Everything the ledger hands back to a caller conforms to these schemas.
"""

from accounting.models.transaction import (
    LedgerErrorType,
    MenuChoiceResult,
    MenuOption,
    OperationResult,
    Transaction,
    TransactionType,
)
from accounting.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "LedgerErrorType",
    "MenuChoiceResult",
    "MenuOption",
    "OperationResult",
    "Transaction",
    "TransactionType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]

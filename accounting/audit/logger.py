"""
Audit Logger

DESIGN DECISION: Every ledger state transition is logged.
This provides:
1. Complete traceability of balance changes
2. Debugging capability for refused operations
3. A session history independent of the in-memory ledger

The audit logger:
- Is synchronous, like the ledger it observes
- Writes structured JSON through structlog
- Supports a per-ledger ID so events from several ledgers can be told apart
"""

from decimal import Decimal
from typing import Any
from uuid import UUID

import structlog

from accounting.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from accounting.models.transaction import (
    LedgerErrorType,
    Transaction,
    TransactionType,
)


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs every event to the structured local log at the level that
    matches the event severity.
    """

    def __init__(self, logger_name: str = "accounting.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> AuditEvent:
        """Log an audit event and hand it back to the caller."""
        log_dict = event.to_log_dict()

        if event.severity in (AuditSeverity.ERROR, AuditSeverity.CRITICAL):
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_ledger_opened(self, ledger_id: UUID, balance: Decimal) -> AuditEvent:
        """Log ledger creation."""
        return self.log(AuditEventBuilder.ledger_opened(
            ledger_id=ledger_id,
            balance=balance,
        ))

    def log_ledger_reset(
        self,
        ledger_id: UUID,
        balance: Decimal,
        discarded_transactions: int,
    ) -> AuditEvent:
        """Log a ledger reset."""
        return self.log(AuditEventBuilder.ledger_reset(
            ledger_id=ledger_id,
            balance=balance,
            discarded_transactions=discarded_transactions,
        ))

    def log_transaction_applied(
        self,
        ledger_id: UUID,
        transaction: Transaction,
    ) -> AuditEvent:
        """Log a successful credit or debit."""
        return self.log(AuditEventBuilder.transaction_applied(
            ledger_id=ledger_id,
            transaction=transaction,
        ))

    def log_operation_rejected(
        self,
        ledger_id: UUID,
        transaction_type: TransactionType,
        error_type: LedgerErrorType,
        error_message: str,
        raw_amount: Any,
        balance: Decimal,
    ) -> AuditEvent:
        """Log a refused credit or debit."""
        return self.log(AuditEventBuilder.operation_rejected(
            ledger_id=ledger_id,
            transaction_type=transaction_type,
            error_type=error_type,
            error_message=error_message,
            raw_amount=raw_amount,
            balance=balance,
        ))

    def log_menu_choice_rejected(
        self,
        raw_choice: Any,
        error_message: str,
    ) -> AuditEvent:
        """Log invalid menu input."""
        return self.log(AuditEventBuilder.menu_choice_rejected(
            raw_choice=raw_choice,
            error_message=error_message,
        ))

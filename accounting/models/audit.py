"""
Audit Models for the Ledger

Every significant ledger action is logged for audit purposes.
This provides:
1. Traceability of every balance change
2. Debugging information when an operation is refused
3. A way to reconstruct what a session did from the log alone

DESIGN DECISION: Audit events are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from accounting.models.transaction import (
    LedgerErrorType,
    Transaction,
    TransactionType,
)


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every ledger state transition has its own event type.
    """
    # Lifecycle
    LEDGER_OPENED = "ledger_opened"
    LEDGER_RESET = "ledger_reset"

    # Operations
    CREDIT_APPLIED = "credit_applied"
    CREDIT_REJECTED = "credit_rejected"
    DEBIT_APPLIED = "debit_applied"
    DEBIT_REJECTED = "debit_rejected"

    # Front ends
    MENU_CHOICE_REJECTED = "menu_choice_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which ledger and transaction is this about?
    ledger_id: Optional[UUID] = Field(
        default=None,
        description="ID of the ledger this event relates to"
    )
    transaction_id: Optional[UUID] = Field(
        default=None,
        description="ID of the transaction recorded by this event, if any"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.

        Decimal amounts are rendered as strings so the JSON renderer
        never falls back to floats.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "ledger_id": str(self.ledger_id) if self.ledger_id else None,
            "transaction_id": str(self.transaction_id) if self.transaction_id else None,
            "description": self.description,
            "details": {
                key: str(value) if isinstance(value, (Decimal, UUID)) else value
                for key, value in self.details.items()
            },
            "error_code": self.error_code,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.ledger_opened(ledger_id, balance)
        event = AuditEventBuilder.transaction_applied(ledger_id, transaction)
    """

    @staticmethod
    def ledger_opened(
        ledger_id: UUID,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_OPENED,
            ledger_id=ledger_id,
            description=f"Ledger opened with balance {balance:.2f}",
            details={
                "balance": balance,
            },
        )

    @staticmethod
    def ledger_reset(
        ledger_id: UUID,
        balance: Decimal,
        discarded_transactions: int,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_RESET,
            ledger_id=ledger_id,
            description=(
                f"Ledger reset to {balance:.2f}, "
                f"{discarded_transactions} transactions discarded"
            ),
            details={
                "balance": balance,
                "discarded_transactions": discarded_transactions,
            },
            is_user_action=True,
        )

    @staticmethod
    def transaction_applied(
        ledger_id: UUID,
        transaction: Transaction,
    ) -> AuditEvent:
        event_type = (
            AuditEventType.CREDIT_APPLIED
            if transaction.type == TransactionType.CREDIT
            else AuditEventType.DEBIT_APPLIED
        )
        return AuditEvent(
            event_type=event_type,
            ledger_id=ledger_id,
            transaction_id=transaction.transaction_id,
            description=(
                f"{transaction.type.value.capitalize()} of {transaction.amount:.2f} applied, "
                f"balance {transaction.previous_balance:.2f} -> {transaction.new_balance:.2f}"
            ),
            details={
                "amount": transaction.amount,
                "previous_balance": transaction.previous_balance,
                "new_balance": transaction.new_balance,
            },
            is_user_action=True,
        )

    @staticmethod
    def operation_rejected(
        ledger_id: UUID,
        transaction_type: TransactionType,
        error_type: LedgerErrorType,
        error_message: str,
        raw_amount: Any,
        balance: Decimal,
    ) -> AuditEvent:
        event_type = (
            AuditEventType.CREDIT_REJECTED
            if transaction_type == TransactionType.CREDIT
            else AuditEventType.DEBIT_REJECTED
        )
        return AuditEvent(
            event_type=event_type,
            severity=AuditSeverity.WARNING,
            ledger_id=ledger_id,
            description=f"{transaction_type.value.capitalize()} rejected: {error_message}",
            details={
                "requested_amount": repr(raw_amount),
                "balance": balance,
            },
            error_code=error_type.value,
            error_message=error_message,
            is_user_action=True,
        )

    @staticmethod
    def menu_choice_rejected(
        raw_choice: Any,
        error_message: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.MENU_CHOICE_REJECTED,
            severity=AuditSeverity.WARNING,
            description="Menu choice rejected",
            details={
                "raw_choice": repr(raw_choice),
            },
            error_message=error_message,
            is_user_action=True,
        )

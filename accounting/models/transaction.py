"""
Core Data Models for the Ledger

These models define the strict schemas for everything the ledger hands
back to its callers:
1. Transaction records kept in the append-only history
2. Operation results returned by credit/debit
3. Menu choice validation results for the front ends

DESIGN DECISION: Records and results are frozen Pydantic models.
A caller holding a Transaction can read it but never rewrite history.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionType(str, Enum):
    """Direction of a recorded transaction."""
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class LedgerErrorType(str, Enum):
    """
    Why a credit or debit was refused.

    Every failed OperationResult carries exactly one of these.
    """
    INVALID_AMOUNT = "invalid_amount"          # Not a finite number
    NEGATIVE_AMOUNT = "negative_amount"        # Parsed fine, but below zero
    INSUFFICIENT_FUNDS = "insufficient_funds"  # Debit larger than balance


class MenuOption(IntEnum):
    """
    Choices offered by the account menu.

    The numbers are what the user types.
    """
    VIEW_BALANCE = 1
    CREDIT = 2
    DEBIT = 3
    EXIT = 4


# =============================================================================
# LEDGER RECORDS
# =============================================================================

class Transaction(BaseModel):
    """
    One successful credit or debit.

    CRITICAL: Transactions are only created by the ledger, and only on
    the success path of credit/debit. They are never edited or removed.
    """
    model_config = ConfigDict(frozen=True)

    transaction_id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction identifier"
    )
    type: TransactionType = Field(
        ...,
        description="CREDIT or DEBIT"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        decimal_places=2,
        description="Normalized amount moved by this transaction"
    )
    previous_balance: Decimal = Field(
        ...,
        decimal_places=2,
        description="Balance before the transaction"
    )
    new_balance: Decimal = Field(
        ...,
        decimal_places=2,
        description="Balance after the transaction"
    )
    timestamp: datetime = Field(
        default_factory=_utc_now,
        description="When the transaction was recorded (UTC)"
    )

    @property
    def delta(self) -> Decimal:
        """Signed change this transaction applied to the balance."""
        if self.type == TransactionType.CREDIT:
            return self.amount
        return -self.amount


class OperationResult(BaseModel):
    """
    Outcome of a credit or debit.

    On failure the balance is the current, unchanged balance so a caller
    can display it without a separate query.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    amount: Optional[Decimal] = Field(
        default=None,
        description="Normalized amount, present on success"
    )
    balance: Decimal = Field(
        ...,
        description="Balance after the operation (unchanged on failure)"
    )
    message: Optional[str] = Field(
        default=None,
        description="Human-readable confirmation or notice"
    )
    error: Optional[str] = Field(
        default=None,
        description="Human-readable failure reason"
    )
    error_type: Optional[LedgerErrorType] = None

    @classmethod
    def failure(
        cls,
        error: str,
        error_type: LedgerErrorType,
        balance: Decimal,
        message: Optional[str] = None,
    ) -> "OperationResult":
        return cls(
            success=False,
            error=error,
            error_type=error_type,
            balance=balance,
            message=message,
        )


class MenuChoiceResult(BaseModel):
    """Result of validating raw menu input."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    choice: Optional[MenuOption] = None
    error: Optional[str] = None

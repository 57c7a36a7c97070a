"""
Ledger Core

DESIGN DECISION: The ledger owns all state (balance and transaction
history) and is the only thing allowed to change it.

GUARANTEES:
- The balance is always a two-place Decimal and never negative
- The balance equals the initial balance plus every recorded delta
- History is append-only; callers only ever get a copy
- credit/debit never raise for bad input; they return a failed
  OperationResult and leave state untouched

Construction and reset are different: there is no previous valid state
to fall back on, so an invalid initial balance raises InvalidAmountError.
"""

import threading
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from accounting.audit import AuditLogger
from accounting.models.transaction import (
    LedgerErrorType,
    MenuChoiceResult,
    OperationResult,
    Transaction,
    TransactionType,
)
from accounting.validation import (
    InvalidAmountError,
    normalize_amount,
    round_to_two_decimals,
    validate_menu_choice,
)

DEFAULT_INITIAL_BALANCE = Decimal("1000.00")

INSUFFICIENT_FUNDS_ERROR = "Insufficient funds for this debit"
INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."
NEGATIVE_INITIAL_BALANCE_ERROR = "Initial balance cannot be negative"

_SUCCESS_VERBS = {
    TransactionType.CREDIT: "credited",
    TransactionType.DEBIT: "debited",
}


class AccountingSystem:
    """
    Single-account ledger.

    Usage:
        system = AccountingSystem()
        system.credit(500)    # OperationResult(success=True, balance=1500.00)
        system.debit(2000)    # OperationResult(success=False, error="Insufficient funds ...")
    """

    def __init__(
        self,
        initial_balance: Any = DEFAULT_INITIAL_BALANCE,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Initialize the ledger.

        Args:
            initial_balance: Opening balance; numbers and numeric text accepted.
            audit_logger: Where ledger events go. A local-only logger if None.

        Raises:
            InvalidAmountError: initial_balance is not a finite, non-negative number.
        """
        self._lock = threading.RLock()
        self._audit_logger = audit_logger or AuditLogger()
        self._ledger_id = uuid4()
        self._balance = self._validate_initial_balance(initial_balance)
        self._transaction_history: list[Transaction] = []

        self._audit_logger.log_ledger_opened(
            ledger_id=self._ledger_id,
            balance=self._balance,
        )

    @property
    def ledger_id(self) -> UUID:
        return self._ledger_id

    def get_balance(self) -> Decimal:
        """Current balance, two decimal places."""
        return self._balance

    def credit(self, amount: Any) -> OperationResult:
        """Add an amount to the balance."""
        return self._apply(TransactionType.CREDIT, amount)

    def debit(self, amount: Any) -> OperationResult:
        """
        Subtract an amount from the balance.

        Overdraft protection: a debit larger than the balance is refused.
        Debiting exactly the balance is allowed and leaves 0.00.
        """
        return self._apply(TransactionType.DEBIT, amount)

    def get_transaction_history(self) -> list[Transaction]:
        """Chronological copy of all recorded transactions."""
        with self._lock:
            return list(self._transaction_history)

    def reset(self, initial_balance: Any = DEFAULT_INITIAL_BALANCE) -> None:
        """
        Start over with a new balance and an empty history.

        Prior history is discarded, not archived. If initial_balance is
        invalid, InvalidAmountError is raised and nothing changes.
        """
        balance = self._validate_initial_balance(initial_balance)

        with self._lock:
            discarded = len(self._transaction_history)
            self._balance = balance
            self._transaction_history = []

        self._audit_logger.log_ledger_reset(
            ledger_id=self._ledger_id,
            balance=balance,
            discarded_transactions=discarded,
        )

    @staticmethod
    def validate_menu_choice(choice: Any) -> MenuChoiceResult:
        """Validate raw menu input (1-4)."""
        return validate_menu_choice(choice)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _apply(self, transaction_type: TransactionType, raw_amount: Any) -> OperationResult:
        with self._lock:
            result, transaction = self._evaluate(transaction_type, raw_amount)
            if transaction is not None:
                self._balance = transaction.new_balance
                self._transaction_history.append(transaction)

        if transaction is not None:
            self._audit_logger.log_transaction_applied(
                ledger_id=self._ledger_id,
                transaction=transaction,
            )
        else:
            self._audit_logger.log_operation_rejected(
                ledger_id=self._ledger_id,
                transaction_type=transaction_type,
                error_type=result.error_type,
                error_message=result.error,
                raw_amount=raw_amount,
                balance=result.balance,
            )

        return result

    def _evaluate(
        self,
        transaction_type: TransactionType,
        raw_amount: Any,
    ) -> tuple[OperationResult, Optional[Transaction]]:
        """
        Decide the outcome of a credit/debit without touching state.

        Returns the result and, on success, the transaction to record.
        """
        previous_balance = self._balance

        try:
            amount = normalize_amount(raw_amount)

            if amount < 0:
                return OperationResult.failure(
                    error=f"{transaction_type.value.capitalize()} amount cannot be negative",
                    error_type=LedgerErrorType.NEGATIVE_AMOUNT,
                    balance=previous_balance,
                ), None

            if transaction_type == TransactionType.DEBIT:
                if amount > previous_balance:
                    return OperationResult.failure(
                        error=INSUFFICIENT_FUNDS_ERROR,
                        error_type=LedgerErrorType.INSUFFICIENT_FUNDS,
                        balance=previous_balance,
                        message=INSUFFICIENT_FUNDS_MESSAGE,
                    ), None
                new_balance = round_to_two_decimals(previous_balance - amount)
            else:
                new_balance = round_to_two_decimals(previous_balance + amount)
        except InvalidAmountError as e:
            return OperationResult.failure(
                error=str(e),
                error_type=LedgerErrorType.INVALID_AMOUNT,
                balance=previous_balance,
            ), None

        transaction = Transaction(
            type=transaction_type,
            amount=amount,
            previous_balance=previous_balance,
            new_balance=new_balance,
        )
        result = OperationResult(
            success=True,
            amount=amount,
            balance=new_balance,
            message=f"Amount {_SUCCESS_VERBS[transaction_type]}. New balance: {new_balance:.2f}",
        )
        return result, transaction

    @staticmethod
    def _validate_initial_balance(initial_balance: Any) -> Decimal:
        balance = normalize_amount(initial_balance)
        if balance < 0:
            raise InvalidAmountError(NEGATIVE_INITIAL_BALANCE_ERROR)
        return balance


# Glossary name for the component
Ledger = AccountingSystem

"""
School Accounting System - Source Package

A single-account ledger that keeps a running balance, applies credits
and debits with overdraft protection, and records every successful
operation in an append-only transaction history.

DESIGN PRINCIPLES:
1. Money is Decimal with exactly two fractional digits
2. Validation failures are reported, never raised, by credit/debit
3. State changes only on the success path
4. Every operation is auditable
"""

__version__ = "1.0.0"
__author__ = "School Accounting Team"

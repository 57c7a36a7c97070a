"""CLI entry point: parse arguments, configure logging, run the menu loop."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from accounting.cli.menu import AccountingMenu
from accounting.config import get_settings
from accounting.orchestrator import create_app_components
from accounting.validation import InvalidAmountError


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="accounting",
        description="Interactive single-account ledger.",
    )
    parser.add_argument(
        "--initial-balance", type=str, default=None,
        help=f"Opening balance (default: {settings.ledger.initial_balance})",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Log level for audit events (default: {settings.app.log_level})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()
    args = build_parser().parse_args(argv)

    # Audit events are JSON lines on stderr so they never mix with the menu
    logging.basicConfig(
        level=args.log_level or settings.app.log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        system, audit_logger = create_app_components(
            initial_balance=args.initial_balance,
        )
    except InvalidAmountError as exc:
        print(f"  ERROR: Invalid initial balance: {exc}", file=sys.stderr)
        return 1

    AccountingMenu(
        system,
        audit_logger=audit_logger,
        currency_symbol=settings.ledger.currency_symbol,
    ).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

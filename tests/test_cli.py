"""Tests for the console menu and entry point."""

import io

import pytest
from decimal import Decimal

from accounting.cli import AccountingMenu, main
from accounting.cli.menu import GOODBYE_MESSAGE, MENU_PROMPT
from accounting.models.audit import AuditEventType


def scripted(*answers):
    """Input function that replays answers, then signals end of input."""
    remaining = iter(answers)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    _input.prompts = prompts
    return _input


def run_menu(system, *answers, **kwargs):
    output = []
    input_func = scripted(*answers)
    AccountingMenu(system, input_func=input_func, output_func=output.append, **kwargs).run()
    return output, input_func.prompts


class TestAccountingMenu:
    """Menu loop driven by scripted input."""

    def test_menu_lists_all_options(self, system):
        """Test the menu shows title and the four options."""
        output, _ = run_menu(system, "4")
        assert "Account Management System" in output
        for line in ("1. View Balance", "2. Credit Account", "3. Debit Account", "4. Exit"):
            assert line in output
        assert output[-1] == GOODBYE_MESSAGE

    def test_view_balance(self, system):
        """Test option 1 prints the balance."""
        output, _ = run_menu(system, "1", "4")
        assert "Current balance: 1,000.00" in output

    def test_credit_and_debit(self, system):
        """Test options 2 and 3 apply operations and print confirmations."""
        output, prompts = run_menu(system, "2", "500", "3", "200", "4")
        assert "Amount credited. New balance: 1500.00" in output
        assert "Amount debited. New balance: 1300.00" in output
        assert "Enter credit amount: " in prompts
        assert "Enter debit amount: " in prompts
        assert system.get_balance() == Decimal("1300.00")

    def test_overdraft_message(self, system):
        """Test a refused debit prints the insufficient funds notice."""
        output, _ = run_menu(system, "3", "2000", "4")
        assert "Insufficient funds for this debit." in output
        assert system.get_balance() == Decimal("1000.00")

    def test_invalid_amount_message(self, system):
        """Test a non-numeric amount prints the validation error."""
        output, _ = run_menu(system, "2", "lots", "4")
        assert "Invalid amount: must be a number" in output

    def test_invalid_choice_loops(self, system, audit_logger):
        """Test an invalid choice prints an error and shows the menu again."""
        output, prompts = run_menu(system, "9", "ABC", "1", "4", audit_logger=audit_logger)
        assert output.count("Invalid choice, please select 1-4.") == 2
        assert prompts.count(MENU_PROMPT) == 4
        rejected = [
            event for event in audit_logger.events
            if event.event_type == AuditEventType.MENU_CHOICE_REJECTED
        ]
        assert len(rejected) == 2

    def test_end_of_input_exits(self, system):
        """Test EOF at the menu prompt ends the loop."""
        output, _ = run_menu(system)
        assert output[-1] == GOODBYE_MESSAGE

    def test_end_of_input_at_amount_prompt_exits(self, system):
        """Test EOF while asking for an amount ends the loop."""
        output, _ = run_menu(system, "2")
        assert output[-1] == GOODBYE_MESSAGE
        assert system.get_balance() == Decimal("1000.00")

    def test_currency_symbol(self, system):
        """Test the balance is shown with the configured symbol."""
        output, _ = run_menu(system, "1", "4", currency_symbol="$")
        assert "Current balance: $1,000.00" in output


class TestMain:
    """Tests for the python -m accounting entry point."""

    def test_runs_menu_until_exit(self, monkeypatch, capsys):
        """Test main() drives the menu from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("2\n100\n1\n4\n"))
        assert main(["--initial-balance", "250"]) == 0
        out = capsys.readouterr().out
        assert "Amount credited. New balance: 350.00" in out
        assert "Current balance: $350.00" in out
        assert GOODBYE_MESSAGE in out

    def test_invalid_initial_balance(self, capsys):
        """Test a bad --initial-balance exits with status 1."""
        assert main(["--initial-balance", "abc"]) == 1
        assert "Invalid initial balance" in capsys.readouterr().err

    def test_rejects_unknown_log_level(self):
        """Test argparse refuses an unknown log level."""
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD"])

"""CLI menu: print the account menu and dispatch choices to the ledger."""

from typing import Callable, Optional

from accounting.audit import AuditLogger
from accounting.ledger import AccountingSystem
from accounting.models.transaction import MenuOption, OperationResult

MENU_TITLE = "Account Management System"
MENU_PROMPT = "Enter your choice (1-4): "
GOODBYE_MESSAGE = "Exiting the program. Goodbye!"

MENU_LABELS = {
    MenuOption.VIEW_BALANCE: "View Balance",
    MenuOption.CREDIT: "Credit Account",
    MenuOption.DEBIT: "Debit Account",
    MenuOption.EXIT: "Exit",
}


def format_amount(amount, currency_symbol: str = "") -> str:
    return f"{currency_symbol}{amount:,.2f}"


class AccountingMenu:
    """
    Interactive menu loop over one ledger.

    Input and output are injectable so the loop can be driven by tests.
    """

    def __init__(
        self,
        system: AccountingSystem,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        audit_logger: Optional[AuditLogger] = None,
        currency_symbol: str = "",
    ):
        self._system = system
        self._input = input_func
        self._output = output_func
        self._audit_logger = audit_logger
        self._currency_symbol = currency_symbol

    def print_menu(self) -> None:
        """Print the main menu."""
        self._output("-" * 30)
        self._output(MENU_TITLE)
        for option in MenuOption:
            self._output(f"{option.value}. {MENU_LABELS[option]}")
        self._output("-" * 30)

    def run(self) -> None:
        """Loop until the user picks Exit or input runs out."""
        while True:
            self.print_menu()
            try:
                raw_choice = self._input(MENU_PROMPT)
            except EOFError:
                self._output(GOODBYE_MESSAGE)
                return

            validation = AccountingSystem.validate_menu_choice(raw_choice)
            if not validation.is_valid:
                if self._audit_logger:
                    self._audit_logger.log_menu_choice_rejected(
                        raw_choice=raw_choice,
                        error_message=validation.error,
                    )
                self._output(validation.error)
                continue

            if validation.choice == MenuOption.EXIT:
                self._output(GOODBYE_MESSAGE)
                return

            try:
                self.dispatch(validation.choice)
            except EOFError:
                self._output(GOODBYE_MESSAGE)
                return

    def dispatch(self, choice: MenuOption) -> None:
        """Run one non-exit menu option."""
        if choice == MenuOption.VIEW_BALANCE:
            self.show_balance()
        elif choice == MenuOption.CREDIT:
            amount = self._input("Enter credit amount: ")
            self.show_result(self._system.credit(amount))
        elif choice == MenuOption.DEBIT:
            amount = self._input("Enter debit amount: ")
            self.show_result(self._system.debit(amount))

    def show_balance(self) -> None:
        balance = format_amount(self._system.get_balance(), self._currency_symbol)
        self._output(f"Current balance: {balance}")

    def show_result(self, result: OperationResult) -> None:
        if result.success:
            self._output(result.message)
        else:
            self._output(result.message or result.error)

"""Console front end."""

from accounting.cli.main import main
from accounting.cli.menu import AccountingMenu

__all__ = ["AccountingMenu", "main"]

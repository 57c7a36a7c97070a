"""Shared fixtures."""

import pytest

from accounting.audit import AuditLogger
from accounting.config import get_settings
from accounting.ledger import AccountingSystem
from accounting.models.audit import AuditEvent


class RecordingAuditLogger(AuditLogger):
    """AuditLogger that keeps every event in memory."""

    def __init__(self):
        super().__init__()
        self.events: list[AuditEvent] = []

    def log(self, event: AuditEvent) -> AuditEvent:
        self.events.append(event)
        return event


@pytest.fixture
def audit_logger() -> RecordingAuditLogger:
    return RecordingAuditLogger()


@pytest.fixture
def system(audit_logger) -> AccountingSystem:
    return AccountingSystem(audit_logger=audit_logger)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep LEDGER_* / log settings from the environment out of tests."""
    for name in ("LEDGER_INITIAL_BALANCE", "LEDGER_CURRENCY_SYMBOL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

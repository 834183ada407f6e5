# tests/test_notifier.py

"""Tests for the notification channel."""

import io
import logging
import unittest

from rich.console import Console

from src.services.notifier import (
    ConsoleNotifier,
    LogNotifier,
    Notifier,
    Severity,
)


class TestNotifier(unittest.TestCase):
    """History bookkeeping and the log/console subclasses."""

    def test_history_is_bounded(self) -> None:
        """Only the most recent notifications are kept."""
        notifier = Notifier(history_size=3)
        for i in range(5):
            notifier.notify("Title", f"message {i}")
        self.assertEqual(
            [n.message for n in notifier.history],
            ["message 2", "message 3", "message 4"],
        )

    def test_default_severity_is_info(self) -> None:
        notifier = Notifier()
        notifier.notify("Hello", "world")
        self.assertIs(notifier.history[0].severity, Severity.INFO)

    def test_log_notifier_logs_errors_as_warnings(self) -> None:
        notifier = LogNotifier()
        with self.assertLogs("ecofinds.notifications", level="INFO") as logs:
            notifier.notify("Error", "Product not found", Severity.ERROR)
            notifier.notify("Saved", "All good", Severity.SUCCESS)
        self.assertEqual(
            [r.levelno for r in logs.records], [logging.WARNING, logging.INFO]
        )

    def test_console_notifier_prints_title_and_message(self) -> None:
        buffer = io.StringIO()
        notifier = ConsoleNotifier(Console(file=buffer, no_color=True))
        notifier.notify("Cart cleared", "All items removed", Severity.INFO)
        self.assertIn("Cart cleared All items removed", buffer.getvalue())
        self.assertEqual(len(notifier.history), 1)


if __name__ == "__main__":
    unittest.main()

# src/services/notifier.py

"""Fire-and-forget notification channel used by the stores."""

import logging
from dataclasses import dataclass
from enum import Enum

from rich.console import Console

logger = logging.getLogger("ecofinds.notifications")


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    severity: Severity


class Notifier:
    """Base notifier. Subclasses decide how a notification is shown.

    The base implementation only keeps a bounded history.
    """

    def __init__(self, history_size: int = 50) -> None:
        self._history_size = history_size
        self.history: list[Notification] = []

    def notify(
        self,
        title: str,
        message: str,
        severity: Severity = Severity.INFO,
    ) -> None:
        note = Notification(title=title, message=message, severity=severity)
        self.history = (self.history + [note])[-self._history_size:]
        self.emit(note)

    def emit(self, note: Notification) -> None:
        """Hook for subclasses; the base notifier shows nothing."""


class LogNotifier(Notifier):
    """Route notifications into the ``ecofinds.notifications`` logger."""

    def emit(self, note: Notification) -> None:
        if note.severity is Severity.ERROR:
            logger.warning("%s: %s", note.title, note.message)
        else:
            logger.info("%s: %s", note.title, note.message)


_STYLES = {
    Severity.INFO: "dim",
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
}


class ConsoleNotifier(LogNotifier):
    """Log notifications and also print them to stderr."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self._console = console or Console(stderr=True)

    def emit(self, note: Notification) -> None:
        super().emit(note)
        style = _STYLES[note.severity]
        self._console.print(
            f"[{style}]{note.title}[/{style}] {note.message}"
        )

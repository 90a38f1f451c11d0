"""Base mismatch handler and the adapter for plain callbacks."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from models.schemas import Mismatch, MismatchReport


class MismatchHandler(ABC):
    """Abstract base class for turning a mismatch into a report."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler name for logging and identification."""
        ...

    @abstractmethod
    def handle(self, mismatch: Mismatch) -> MismatchReport:
        """Build a report for ``mismatch``, writing artifacts if the handler does."""
        ...

    def __call__(self, mismatch: Mismatch) -> MismatchReport:
        return self.handle(mismatch)


class CallbackMismatchHandler(MismatchHandler):
    """Wraps a caller-supplied ``Mismatch -> MismatchReport`` callable."""

    def __init__(self, callback: Callable[[Mismatch], MismatchReport]) -> None:
        self.callback = callback

    @property
    def name(self) -> str:
        return getattr(self.callback, "__name__", "callback")

    def handle(self, mismatch: Mismatch) -> MismatchReport:
        return self.callback(mismatch)

"""Mismatch handlers turning a failed comparison into a report."""

from handlers.base import CallbackMismatchHandler, MismatchHandler
from handlers.default import DefaultMismatchHandler
from handlers.diff import DiffMismatchHandler
from handlers.selection import select_handler

__all__ = [
    "CallbackMismatchHandler",
    "DefaultMismatchHandler",
    "DiffMismatchHandler",
    "MismatchHandler",
    "select_handler",
]

"""Helpers for normalizing output before it is recorded."""

from filters.filter_json import JsonFilter
from filters.log_capture import LogCapture

__all__ = ["JsonFilter", "LogCapture"]

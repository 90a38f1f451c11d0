"""Logging helpers for the recorder."""

from __future__ import annotations

import logging

from config.settings import get_settings


ROOT_LOGGER_NAME = "datarecorder"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(get_settings().log_level.upper())
        root.propagate = False
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Return a logger under the single ``datarecorder`` parent.

    Only the parent owns a handler and it does not propagate, so every
    record is emitted exactly once.
    """
    root = _configure_root()
    if name == ROOT_LOGGER_NAME:
        return root
    return root.getChild(name)


__all__ = ["ROOT_LOGGER_NAME", "get_logger"]

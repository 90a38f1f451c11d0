"""Logging handler that collects messages for recording."""

from __future__ import annotations

import logging
from typing import Callable


class LogCapture(logging.Handler):
    """
    Collects formatted log messages in ``lines``.

    Attach to a logger, run the code under test, then record the lines:

        capture = LogCapture(transform=lambda m: JsonFilter(m).remove_keys("ts").to_str())
        logging.getLogger("service").addHandler(capture)
        ...
        recorder.record(capture.lines)
    """

    def __init__(
        self,
        level: int = logging.DEBUG,
        transform: Callable[[str], str] | None = None,
    ) -> None:
        super().__init__(level)
        self.transform = transform
        self.lines: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        if self.transform is not None:
            message = self.transform(message)
        self.lines.append(message)

    def clear(self) -> None:
        self.lines.clear()

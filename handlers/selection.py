"""One-time choice between the default and the diff mismatch handler."""

from __future__ import annotations

from pathlib import Path

from config.logging import get_logger
from handlers.base import MismatchHandler
from handlers.default import DefaultMismatchHandler
from handlers.diff import DiffMismatchHandler
from recorder.errors import PathNotFoundError
from recorder.paths import resolve_upward


logger = get_logger(__name__)


def select_handler(visualizer_path: str | Path) -> MismatchHandler:
    """
    Pick the diff handler if the visualizer template can be found upward
    from the cwd, otherwise the default handler.
    """
    try:
        template_path = resolve_upward(visualizer_path)
    except PathNotFoundError as e:
        logger.debug(
            "Using default mismatch handler, %s not found (%d candidates)",
            visualizer_path,
            len(e.searched_paths),
        )
        return DefaultMismatchHandler()

    logger.debug("Using diff visualizer %s", template_path)
    return DiffMismatchHandler(template_path)

"""Mismatch handler that renders an HTML diff of recording vs. produced data."""

from __future__ import annotations

import re
from pathlib import Path

from config.logging import get_logger
from handlers.base import MismatchHandler
from models.schemas import Mismatch, MismatchReport
from recorder.store import RecordingStore


logger = get_logger(__name__)

# `${expr}` would be evaluated when the text sits inside a JS template literal
_TEMPLATE_MARKER = re.compile(r"\$\{[^}]+\}")

# const oldText = `...`;  /  const newText = `...`;
_TEXT_SLOT = re.compile(r"(const\s+(oldText|newText)\s*=\s*`)([^`]*)(`;)")


def escape_template_markers(text: str) -> str:
    """Prefix every ``${...}`` in ``text`` with a backslash."""
    return _TEMPLATE_MARKER.sub(lambda m: "\\" + m.group(0), text)


def render_diff(template: str, old_text: str, new_text: str) -> str:
    """
    Fill the ``oldText`` and ``newText`` slots of a diff template.

    Both payloads are escaped first. The substitution is a single pass over
    the template, so text inserted into one slot is never matched again.
    """
    values = {
        "oldText": escape_template_markers(old_text),
        "newText": escape_template_markers(new_text),
    }

    def fill(match: re.Match[str]) -> str:
        return match.group(1) + values[match.group(2)] + match.group(4)

    return _TEXT_SLOT.sub(fill, template)


class DiffMismatchHandler(MismatchHandler):
    """Writes a rendered diff document and the produced data as artifacts."""

    def __init__(self, template_path: Path) -> None:
        self.template_path = Path(template_path)

    @property
    def name(self) -> str:
        return "diff"

    def handle(self, mismatch: Mismatch) -> MismatchReport:
        logger.debug(
            "Using diff mismatch handler, template=%s mismatch_dir=%s",
            self.template_path,
            mismatch.mismatch_dir,
        )

        template = RecordingStore.read(self.template_path)
        document = render_diff(
            template, mismatch.recording_data, mismatch.mismatch_data
        )

        html_diff = mismatch.mismatch_dir / self.template_path.name
        RecordingStore.write(html_diff, document)

        mismatch_path = mismatch.mismatch_dir / mismatch.recording_path.name
        RecordingStore.write(mismatch_path, mismatch.mismatch_data)

        return MismatchReport(
            recording_data=mismatch.recording_data,
            mismatch_data=mismatch.mismatch_data,
            recording_path=mismatch.recording_path,
            mismatch_path=mismatch_path,
            html_diff=html_diff,
        )

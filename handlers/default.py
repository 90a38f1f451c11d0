"""Default mismatch handler: report only, no artifacts."""

from __future__ import annotations

from handlers.base import MismatchHandler
from models.schemas import Mismatch, MismatchReport


class DefaultMismatchHandler(MismatchHandler):
    """Returns both payloads verbatim without touching the filesystem."""

    @property
    def name(self) -> str:
        return "default"

    def handle(self, mismatch: Mismatch) -> MismatchReport:
        return MismatchReport(
            recording_data=mismatch.recording_data,
            mismatch_data=mismatch.mismatch_data,
            recording_path=mismatch.recording_path,
        )

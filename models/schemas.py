"""Pydantic schemas for mismatches, reports and record results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


# =============================================================================
# Mismatch Schemas
# =============================================================================


class Mismatch(BaseModel):
    """A failed comparison between a recording and newly produced data."""

    recording_data: str = Field(description="Data stored in the recording")
    mismatch_data: str = Field(description="Data that was produced")
    mismatch_dir: Path = Field(description="Directory where mismatch artifacts can be stored")
    recording_path: Path = Field(description="Path of the recording file")


class MismatchReport(BaseModel):
    """Structured report returned by a mismatch handler."""

    message: str = Field(default="Mismatch found", description="Short description")
    recording_data: str = Field(description="Data stored in the recording")
    mismatch_data: str = Field(description="Data that was produced")
    recording_path: Path | None = Field(
        default=None, description="Path of the recording file"
    )
    mismatch_path: Path | None = Field(
        default=None, description="Artifact file holding the produced data"
    )
    html_diff: Path | None = Field(
        default=None, description="Rendered diff document, if one was written"
    )

    def __str__(self) -> str:
        lines = [self.message]
        if self.recording_path is not None:
            lines.append(f"recording_path: {self.recording_path}")
        if self.mismatch_path is not None:
            lines.append(f"mismatch_path: {self.mismatch_path}")
        if self.html_diff is not None:
            lines.append(f"html_diff: {self.html_diff}")
        lines.append(f"recording_data: {self.recording_data!r}")
        lines.append(f"mismatch_data: {self.mismatch_data!r}")
        return "\n".join(lines)


# =============================================================================
# Record Result Schemas
# =============================================================================


class RecordResult(BaseModel):
    """Outcome of a single record call."""

    success: bool = Field(description="True unless the data mismatched the recording")
    created: bool = Field(
        default=False, description="True if this call wrote a new recording"
    )
    recording_path: Path = Field(description="Path of the recording file")
    report: MismatchReport | None = Field(
        default=None, description="Mismatch report when success is False"
    )

    def __bool__(self) -> bool:
        return self.success

"""Models module containing Pydantic schemas for all data structures."""

from models.schemas import (
    Mismatch,
    MismatchReport,
    RecordResult,
)

__all__ = [
    "Mismatch",
    "MismatchReport",
    "RecordResult",
]

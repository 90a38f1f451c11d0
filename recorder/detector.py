"""Exact comparison of produced data against a recording."""

from __future__ import annotations

from typing import Literal


Comparison = Literal["match", "mismatch"]


def compare(produced: str, baseline: str) -> Comparison:
    """Compare exactly; no trimming, newline or encoding normalization."""
    return "match" if produced == baseline else "mismatch"

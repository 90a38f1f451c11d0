"""Allocation of numbered directories for mismatch artifacts."""

from __future__ import annotations

import re
import tempfile
from pathlib import Path

from recorder.errors import FatalIOError


class ArtifactAllocator:
    """
    Allocates ``<root>/<prefix>-<N>`` directories for mismatch artifacts.

    Candidates are checked from ``N = 0`` upwards and the first free one is
    created. If another process creates it between the existence check and
    the mkdir the allocation fails with :class:`FatalIOError` instead of
    retrying, so concurrent test runs sharing a root show up as errors.
    """

    def __init__(self, prefix: str, root: str | Path | None = None) -> None:
        self.prefix = prefix
        self.root = Path(root) if root is not None else Path(tempfile.gettempdir())

    def candidate(self, index: int) -> Path:
        return self.root / f"{self.prefix}-{index}"

    def allocate(self) -> Path:
        """Create and return the first free artifact directory."""
        index = 0
        mismatch_dir = self.candidate(index)
        while mismatch_dir.exists():
            index += 1
            mismatch_dir = self.candidate(index)

        try:
            mismatch_dir.mkdir()
        except OSError as e:
            raise FatalIOError("Could not create directory", mismatch_dir) from e

        return mismatch_dir

    def existing(self) -> list[Path]:
        """Return the artifact directories under the root, ordered by index."""
        if not self.root.is_dir():
            return []

        pattern = re.compile(rf"^{re.escape(self.prefix)}-(\d+)$")
        found: list[tuple[int, Path]] = []
        for entry in self.root.iterdir():
            match = pattern.match(entry.name)
            if match and entry.is_dir():
                found.append((int(match.group(1)), entry))
        return [path for _, path in sorted(found)]

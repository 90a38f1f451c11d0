"""Recording store, path resolution and artifact allocation.

The orchestrating :class:`recorder.recorder.DataRecorder` is imported from
its own module since it depends on the ``handlers`` package.
"""

from recorder.allocator import ArtifactAllocator
from recorder.detector import compare
from recorder.errors import (
    ConfigError,
    FatalIOError,
    MismatchError,
    PathNotFoundError,
    RecorderError,
)
from recorder.identity import IdentityProvider, PytestIdentity, StaticIdentity
from recorder.paths import resolve_recording_dir, resolve_upward
from recorder.store import RecordingStore, validate_extension

__all__ = [
    "ArtifactAllocator",
    "ConfigError",
    "FatalIOError",
    "IdentityProvider",
    "MismatchError",
    "PathNotFoundError",
    "PytestIdentity",
    "RecorderError",
    "RecordingStore",
    "StaticIdentity",
    "compare",
    "resolve_recording_dir",
    "resolve_upward",
    "validate_extension",
]

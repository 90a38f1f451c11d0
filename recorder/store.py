"""Recording directory/filename ownership and byte-exact file access."""

from __future__ import annotations

import re
from pathlib import Path

from recorder.errors import ConfigError, FatalIOError
from recorder.identity import IdentityProvider
from recorder.paths import resolve_recording_dir


_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def validate_extension(name: str) -> str:
    """Check that ``name`` looks like ``.something``."""
    if len(name) <= 2 or not name.startswith("."):
        raise ConfigError(f"Recording filename must start with .something: {name!r}")
    return name


class RecordingStore:
    """Owns where a recording lives and reads/writes it verbatim."""

    def __init__(self, extension: str = ".data") -> None:
        self.extension = validate_extension(extension)
        self.directory: Path | None = None
        self.filename: str | None = None

    def set_directory(self, path: str | Path) -> Path:
        """Resolve and store the recording directory."""
        self.directory = resolve_recording_dir(path)
        return self.directory

    def set_filename(self, name: str) -> None:
        self.filename = validate_extension(name)

    def default_filename(self, identity: IdentityProvider) -> str:
        """Build ``<suite>_<case><extension>`` from the test identity."""
        suite, case = identity.identify()
        if not suite:
            raise ConfigError("Test suite name must not be empty")
        if not case:
            raise ConfigError("Test case name must not be empty")

        suite = _UNSAFE_CHARS.sub("_", suite)
        case = _UNSAFE_CHARS.sub("_", case)
        return f"{suite}_{case}{self.extension}"

    def full_path(self) -> Path:
        if self.directory is None:
            raise ConfigError("Recording directory is not set")
        if self.filename is None:
            raise ConfigError("Recording filename is not set")
        return self.directory / self.filename

    @staticmethod
    def read(path: Path) -> str:
        """Read a file without newline translation."""
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise FatalIOError("Could not open file for reading", path) from e

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FatalIOError("Recording is not valid UTF-8", path) from e

    @staticmethod
    def write(path: Path, data: str) -> None:
        """Write ``data`` exactly, truncating any existing file."""
        # the file is only opened once the data has encoded
        try:
            raw = data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FatalIOError("Data cannot be encoded as UTF-8", path) from e

        try:
            with open(path, "wb") as f:
                f.write(raw)
        except OSError as e:
            raise FatalIOError("Could not write file", path) from e

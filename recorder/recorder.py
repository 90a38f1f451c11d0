"""Record data to a golden file and compare later runs against it."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal, Sequence

from config.logging import get_logger
from config.settings import Settings, get_settings
from handlers.base import CallbackMismatchHandler, MismatchHandler
from handlers.selection import select_handler
from models.schemas import Mismatch, MismatchReport, RecordResult
from recorder.allocator import ArtifactAllocator
from recorder.detector import compare
from recorder.errors import ConfigError, MismatchError
from recorder.identity import IdentityProvider, PytestIdentity
from recorder.store import RecordingStore


logger = get_logger(__name__)

RecorderState = Literal["unconfigured", "directory_set", "ready"]


class DataRecorder:
    """
    Records data and checks later runs for mismatches.

    Example:
        recorder = DataRecorder()
        recorder.set_recording_dir("test/recordings")
        result = recorder.record("test data")
        assert result, result.report

    The first ``record`` call for a recording path writes the data as the
    recording. Later calls compare against it byte for byte. On mismatch an
    artifact directory is allocated and the mismatch handler builds the
    report returned in the failed :class:`RecordResult`.

    Unless a handler is installed with :meth:`on_mismatch` before the first
    ``record`` call, the handler is chosen once: the diff handler if the
    visualizer template is found upward from the cwd, else the default one.
    """

    def __init__(
        self,
        identity: IdentityProvider | None = None,
        allocator: ArtifactAllocator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.identity = identity or PytestIdentity()
        self.allocator = allocator or ArtifactAllocator(
            self.settings.mismatch_prefix, self.settings.mismatch_root
        )
        self.store = RecordingStore(extension=self.settings.default_extension)
        self._handler: MismatchHandler | None = None
        self._used = False

    @property
    def state(self) -> RecorderState:
        if self.store.directory is None:
            return "unconfigured"
        if self.store.filename is None:
            return "directory_set"
        return "ready"

    @property
    def handler(self) -> MismatchHandler | None:
        return self._handler

    def set_recording_dir(self, recording_dir: str | Path) -> Path:
        """
        Set the directory where recordings are stored.

        Absolute paths are used as given. A relative path with a directory
        component is searched for upward from the cwd, e.g. with a cwd of
        ``/home/user/project/build``, ``test/recordings`` is looked up in
        ``build/``, then ``project/``, ``user/`` and so on up to ``/``. A
        bare name is taken relative to the cwd without searching.
        """
        self._check_unused("directory")
        directory = self.store.set_directory(recording_dir)
        logger.debug("Recording directory %s", directory)
        return directory

    def set_recording_filename(self, filename: str) -> None:
        self._check_unused("filename")
        self.store.set_filename(filename)

    def on_mismatch(
        self,
        handler: MismatchHandler | Callable[[Mismatch], MismatchReport],
    ) -> None:
        """Install the mismatch handler, skipping automatic selection."""
        if not isinstance(handler, MismatchHandler):
            handler = CallbackMismatchHandler(handler)
        self._handler = handler

    def record(self, data: str | Sequence[str]) -> RecordResult:
        """
        Record ``data`` or compare it against the existing recording.

        A sequence of strings is joined with a newline after every element.
        """
        if not isinstance(data, str):
            data = "".join(line + "\n" for line in data)

        if self._handler is None:
            self._handler = select_handler(self.settings.visualizer_path)

        if self.store.directory is None:
            raise ConfigError("Recording directory must be set before recording")

        if self.store.filename is None:
            self.store.filename = self.store.default_filename(self.identity)
            logger.debug("Recording filename not set, using %s", self.store.filename)

        self._used = True
        recording_path = self.store.full_path()

        if not recording_path.exists():
            logger.debug("Recording file does not exist, creating %s", recording_path)
            self.store.write(recording_path, data)
            return RecordResult(success=True, created=True, recording_path=recording_path)

        logger.debug("Recording file already exists %s", recording_path)
        recording_data = self.store.read(recording_path)

        if compare(data, recording_data) == "match":
            logger.debug("No mismatch found")
            return RecordResult(success=True, recording_path=recording_path)

        mismatch_dir = self.allocator.allocate()
        logger.debug("Mismatch found, artifacts in %s", mismatch_dir)

        mismatch = Mismatch(
            recording_data=recording_data,
            mismatch_data=data,
            mismatch_dir=mismatch_dir,
            recording_path=recording_path,
        )
        report = self._handler.handle(mismatch)
        return RecordResult(success=False, recording_path=recording_path, report=report)

    def assert_record(self, data: str | Sequence[str]) -> RecordResult:
        """Like :meth:`record` but raise :class:`MismatchError` on mismatch."""
        result = self.record(data)
        if not result.success:
            assert result.report is not None
            raise MismatchError(result.report)
        return result

    def _check_unused(self, what: str) -> None:
        if self._used:
            raise ConfigError(f"Recording {what} cannot change after the first record call")

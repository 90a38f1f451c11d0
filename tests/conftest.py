"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path
from typing import Callable

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("LOG_LEVEL", "WARNING")

from config.settings import Settings  # noqa: E402
from recorder.identity import StaticIdentity  # noqa: E402
from recorder.pytest_plugin import data_recorder  # noqa: E402,F401
from recorder.recorder import DataRecorder  # noqa: E402

VISUALIZER_TEMPLATE = project_root / "visualizer" / "recording_diff.html"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Project tree ``<tmp>/project`` with cwd set to ``<tmp>/project/build``."""
    project = tmp_path.resolve() / "project"
    (project / "test" / "recordings").mkdir(parents=True)
    build = project / "build"
    build.mkdir()
    monkeypatch.chdir(build)
    return project


@pytest.fixture
def artifact_root(tmp_path: Path) -> Path:
    """Directory standing in for the system temp dir."""
    root = tmp_path / "artifacts"
    root.mkdir()
    return root


@pytest.fixture
def settings(artifact_root: Path) -> Settings:
    return Settings(log_level="DEBUG", mismatch_root=str(artifact_root))


@pytest.fixture
def install_visualizer(workdir: Path) -> Callable[[], Path]:
    """Copy the diff template into the project so handler selection finds it."""

    def _install() -> Path:
        target = workdir / "visualizer" / "recording_diff.html"
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(VISUALIZER_TEMPLATE, target)
        return target

    return _install


@pytest.fixture
def make_recorder(workdir: Path, settings: Settings) -> Callable[..., DataRecorder]:
    """
    Usage:
        recorder = make_recorder()
    Returns a recorder for ``test/recordings`` named ``suite_case.data``.
    """

    def _make(suite: str = "suite", case: str = "case") -> DataRecorder:
        recorder = DataRecorder(identity=StaticIdentity(suite, case), settings=settings)
        recorder.set_recording_dir("test/recordings")
        return recorder

    return _make


def count_artifact_dirs(root: Path) -> int:
    return sum(1 for p in root.iterdir() if p.is_dir())

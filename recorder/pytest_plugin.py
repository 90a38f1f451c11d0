"""
Pytest fixtures for recording test output.

Enable in a conftest with::

    pytest_plugins = ["recorder.pytest_plugin"]

and use::

    def test_report(data_recorder):
        data_recorder.set_recording_dir("tests/recordings")
        data_recorder.assert_record(render_report())
"""

from __future__ import annotations

import pytest

from recorder.identity import PytestIdentity
from recorder.recorder import DataRecorder


@pytest.fixture
def data_recorder(request: pytest.FixtureRequest) -> DataRecorder:
    """Recorder named after the requesting test."""
    return DataRecorder(identity=PytestIdentity(request.node))

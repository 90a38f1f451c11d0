"""Schema validation tests for recorder data structures."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from config.settings import Settings
from models.schemas import Mismatch, MismatchReport, RecordResult


class TestMismatchSchemas:
    """Test mismatch-related schemas."""

    def test_mismatch_valid(self) -> None:
        """Test: Valid Mismatch schema."""
        mismatch = Mismatch(
            recording_data="a",
            mismatch_data="b",
            mismatch_dir="/tmp/datarecorder-mismatch-0",
            recording_path="/src/test/recordings/suite_case.data",
        )
        assert mismatch.mismatch_dir == Path("/tmp/datarecorder-mismatch-0")
        assert mismatch.recording_path.name == "suite_case.data"

    def test_mismatch_requires_all_fields(self) -> None:
        """Test: Mismatch without paths is rejected."""
        with pytest.raises(ValidationError):
            Mismatch(recording_data="a", mismatch_data="b")  # type: ignore[call-arg]

    def test_report_optional_fields(self) -> None:
        """Test: MismatchReport with only payloads."""
        report = MismatchReport(recording_data="a", mismatch_data="b")
        assert report.message == "Mismatch found"
        assert report.recording_path is None
        assert report.mismatch_path is None
        assert report.html_diff is None

    def test_report_str(self) -> None:
        """Test: String form lists paths and payloads."""
        report = MismatchReport(
            recording_data="a",
            mismatch_data="b\n",
            recording_path=Path("/r/x.data"),
            html_diff=Path("/tmp/m-0/recording_diff.html"),
        )
        assert str(report).splitlines() == [
            "Mismatch found",
            f"recording_path: {Path('/r/x.data')}",
            f"html_diff: {Path('/tmp/m-0/recording_diff.html')}",
            "recording_data: 'a'",
            "mismatch_data: 'b\\n'",
        ]


class TestRecordResultSchema:
    """Test record results."""

    def test_truthiness_follows_success(self) -> None:
        """Test: Result is truthy only on success."""
        ok = RecordResult(success=True, recording_path=Path("/r/x.data"))
        failed = RecordResult(
            success=False,
            recording_path=Path("/r/x.data"),
            report=MismatchReport(recording_data="a", mismatch_data="b"),
        )
        assert ok
        assert not ok.created
        assert not failed
        assert failed.report.mismatch_data == "b"


class TestSettingsSchema:
    """Test settings validation."""

    def test_defaults(self) -> None:
        """Test: Defaults match the documented values."""
        settings = Settings()
        assert settings.mismatch_prefix == "datarecorder-mismatch"
        assert settings.mismatch_root is None
        assert settings.visualizer_path == "visualizer/recording_diff.html"
        assert settings.default_extension == ".data"

    @pytest.mark.parametrize("extension", ["data", ".d", ""])
    def test_bad_extension(self, extension: str) -> None:
        """Test: Extension must look like '.something'."""
        with pytest.raises(ValidationError):
            Settings(default_extension=extension)

    def test_empty_prefix(self) -> None:
        """Test: Artifact prefix must not be empty."""
        with pytest.raises(ValidationError):
            Settings(mismatch_prefix="")

    def test_get_settings_reads_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test: Environment variables override defaults."""
        from config.settings import get_settings

        monkeypatch.setenv("DATARECORDER_MISMATCH_PREFIX", "pymismatch")
        monkeypatch.setenv("DATARECORDER_MISMATCH_ROOT", str(tmp_path))
        monkeypatch.setenv("DATARECORDER_EXTENSION", ".json")
        get_settings.cache_clear()
        try:
            settings = get_settings()
            assert settings.mismatch_prefix == "pymismatch"
            assert settings.mismatch_root == str(tmp_path)
            assert settings.default_extension == ".json"
        finally:
            get_settings.cache_clear()

"""Tests for the PathAdapter boundary service."""

from __future__ import annotations

import io
import json

import pytest

from redirpath.logging import PathRedactor, StructuredLogger
from redirpath.paths import EmbeddedNulError, LengthUnit, PathAdapter, SourcePath, TargetPath


def _entries(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def adapter(log_stream):
    logger = StructuredLogger(component="test_adapter", output_file=log_stream)
    return PathAdapter(logger=logger, unit="utf-8", warn_unrestricted=True)


def test_to_target_accepts_raw_and_wrapped(adapter):
    assert adapter.to_target("\\test_directory\\desktop.ini") == TargetPath(
        "test_directory/desktop.ini"
    )
    assert adapter.to_target(SourcePath("\\")) == TargetPath("")


def test_restricted_path_is_not_logged(adapter, log_stream):
    adapter.to_target("\\desktop.ini")
    adapter.to_target("2018\\January.xlsx")
    assert _entries(log_stream) == []


def test_unrestricted_path_warns_and_still_converts(adapter, log_stream):
    target = adapter.to_target("C:\\Users\\jane\\secret.txt")
    assert target.text == "C:/Users/jane/secret.txt"

    (entry,) = _entries(log_stream)
    assert entry["level"] == "warning"
    assert entry["component"] == "test_adapter"
    # Only the final segment reaches the log
    assert entry["source"] == "[REDACTED]/secret.txt"
    assert "jane" not in log_stream.getvalue()


def test_unrestricted_warning_can_be_disabled(log_stream):
    logger = StructuredLogger(component="quiet", output_file=log_stream)
    quiet = PathAdapter(logger=logger, warn_unrestricted=False)
    assert quiet.to_target("\\\\server\\share").text == "/server/share"
    assert _entries(log_stream) == []


def test_to_source(adapter):
    assert adapter.to_source("dir/file.txt") == SourcePath("\\dir\\file.txt")
    assert adapter.to_source(TargetPath("")) == SourcePath("\\")


def test_null_terminated(adapter):
    assert adapter.null_terminated("dir/file.txt") == b"dir/file.txt\x00"
    assert adapter.null_terminated(TargetPath("x")) == b"x\x00"


def test_null_terminated_logs_and_reraises(adapter, log_stream):
    with pytest.raises(EmbeddedNulError) as exc_info:
        adapter.null_terminated("dir/bad\x00name")
    assert exc_info.value.position == 7

    (entry,) = _entries(log_stream)
    assert entry["level"] == "error"
    assert entry["nul_position"] == 7


def test_length_uses_adapter_unit(log_stream):
    logger = StructuredLogger(component="units", output_file=log_stream)
    utf16 = PathAdapter(logger=logger, unit=LengthUnit.UTF16)
    utf8 = PathAdapter(logger=logger, unit="utf-8")
    path = SourcePath("\\名前")
    assert utf16.length(path) == 3
    assert utf8.length(path) == 7


def test_unknown_unit_rejected(log_stream):
    with pytest.raises(ValueError):
        PathAdapter(logger=StructuredLogger(component="x", output_file=log_stream), unit="ucs-4")


def test_full_paths_when_redaction_disabled(log_stream):
    logger = StructuredLogger(
        component="full", output_file=log_stream, redactor=PathRedactor(enabled=False)
    )
    PathAdapter(logger=logger).to_target("D:\\data\\a.txt")
    (entry,) = _entries(log_stream)
    assert entry["source"] == "D:\\data\\a.txt"


def test_context_manager_closes_file_logger(tmp_path):
    logger = StructuredLogger(component="ctx", output_file=tmp_path / "ctx.jsonl")
    with PathAdapter(logger=logger, warn_unrestricted=True) as adapter:
        adapter.to_target("C:\\x")
    assert logger.log_file is None
    assert (tmp_path / "ctx.jsonl").read_text(encoding="utf-8").count("\n") == 1


def test_default_logger_is_created(monkeypatch, tmp_path):
    monkeypatch.setenv("RP_LOG_DIR", str(tmp_path))
    import importlib

    from redirpath.config import defaults

    importlib.reload(defaults)
    try:
        with PathAdapter(warn_unrestricted=True) as adapter:
            adapter.to_target("C:\\x")
        assert (tmp_path / "path_adapter_default.jsonl").exists()
    finally:
        monkeypatch.delenv("RP_LOG_DIR")
        importlib.reload(defaults)


def test_to_target_survives_failed_log_rotation(tmp_path):
    blocker = tmp_path / "a.1.jsonl"
    blocker.mkdir()
    (blocker / "keep").write_text("x", encoding="utf-8")
    logger = StructuredLogger(
        component="rot", output_file=tmp_path / "a.jsonl", max_log_size_mb=1, max_log_files=1
    )
    logger.max_log_size_bytes = 10

    with PathAdapter(logger=logger, warn_unrestricted=True) as adapter:
        for _ in range(3):
            assert adapter.to_target("C:\\x\\y") == TargetPath("C:/x/y")

    assert (tmp_path / "a.jsonl").read_text(encoding="utf-8").count("\n") == 3

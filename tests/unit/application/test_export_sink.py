"""Unit tests for export sinks."""
from __future__ import annotations

import os
import tempfile
from datetime import datetime

import pytest

from tabexport.application.export import BlobSink, ColumnDef, DirectoryBlobSink, ExportService
from tabexport.kernel.time import FrozenClock
from tabexport.testing.fakes import RecordingBlobSink


class TestDirectoryBlobSink:
    def test_is_blob_sink(self, tmp_path):
        assert isinstance(DirectoryBlobSink(tmp_path), BlobSink)
        assert isinstance(RecordingBlobSink(), BlobSink)

    def test_writes_file(self, tmp_path):
        sink = DirectoryBlobSink(tmp_path)
        sink.emit(b"a,b\n1,2", "report.csv", "text/csv;charset=utf-8")
        assert (tmp_path / "report.csv").read_bytes() == b"a,b\n1,2"
        assert sink.last_path == tmp_path / "report.csv"

    def test_creates_missing_directory(self, tmp_path):
        target = tmp_path / "downloads" / "exports"
        DirectoryBlobSink(target).emit(b"{}", "x.json", "application/json")
        assert (target / "x.json").exists()

    def test_name_clash_gets_suffix(self, tmp_path):
        sink = DirectoryBlobSink(tmp_path)
        sink.emit(b"1", "r.csv", "text/csv")
        sink.emit(b"2", "r.csv", "text/csv")
        sink.emit(b"3", "r.csv", "text/csv")
        assert (tmp_path / "r.csv").read_bytes() == b"1"
        assert (tmp_path / "r (1).csv").read_bytes() == b"2"
        assert (tmp_path / "r (2).csv").read_bytes() == b"3"

    def test_name_taken_during_write_is_not_overwritten(self, tmp_path, monkeypatch):
        real_mkstemp = tempfile.mkstemp

        def mkstemp_then_other_writer(*args, **kwargs):
            result = real_mkstemp(*args, **kwargs)
            (tmp_path / "r.csv").write_bytes(b"other writer")
            return result

        monkeypatch.setattr(tempfile, "mkstemp", mkstemp_then_other_writer)
        sink = DirectoryBlobSink(tmp_path)
        sink.emit(b"mine", "r.csv", "text/csv")
        assert (tmp_path / "r.csv").read_bytes() == b"other writer"
        assert (tmp_path / "r (1).csv").read_bytes() == b"mine"
        assert sink.last_path == tmp_path / "r (1).csv"

    def test_failed_rename_releases_reserved_name(self, tmp_path, monkeypatch):
        def refuse(src, dst):
            raise PermissionError("rename blocked")

        monkeypatch.setattr(os, "replace", refuse)
        with pytest.raises(PermissionError):
            DirectoryBlobSink(tmp_path).emit(b"x", "r.csv", "text/csv")
        assert list(tmp_path.iterdir()) == []

    def test_overwrite(self, tmp_path):
        sink = DirectoryBlobSink(tmp_path, overwrite=True)
        sink.emit(b"old", "r.csv", "text/csv")
        sink.emit(b"new", "r.csv", "text/csv")
        assert (tmp_path / "r.csv").read_bytes() == b"new"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["r.csv"]

    def test_path_components_stripped(self, tmp_path):
        DirectoryBlobSink(tmp_path / "out").emit(b"x", "../escape.csv", "text/csv")
        assert (tmp_path / "out" / "escape.csv").exists()
        assert not (tmp_path / "escape.csv").exists()

    def test_failed_write_leaves_no_partial_file(self, tmp_path):
        sink = DirectoryBlobSink(tmp_path)
        with pytest.raises(TypeError):
            sink.emit("not bytes", "r.csv", "text/csv")  # type: ignore[arg-type]
        assert list(tmp_path.iterdir()) == []
        assert sink.last_path is None

    def test_service_writes_through_sink(self, tmp_path):
        sink = DirectoryBlobSink(tmp_path)
        svc = ExportService(sink, clock=FrozenClock(datetime(2026, 2, 3, 4, 5)))
        assert svc.export_data([{"a": "x"}], [ColumnDef("a", "A")], "xlsx", "assets")
        saved = tmp_path / "assets_20260203_0405.xls"
        assert saved.exists()
        assert "<td>x</td>" in saved.read_text(encoding="utf-8")


class TestRecordingBlobSink:
    def test_records_emissions(self):
        sink = RecordingBlobSink()
        sink.emit(b"abc", "f.csv", "text/csv")
        assert sink.last.filename == "f.csv"
        assert sink.last.text == "abc"

    def test_last_without_emission_raises(self):
        with pytest.raises(AssertionError):
            RecordingBlobSink().last

    def test_clear(self):
        sink = RecordingBlobSink()
        sink.emit(b"abc", "f.csv", "text/csv")
        sink.clear()
        assert sink.emissions == []

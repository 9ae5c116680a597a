"""Tests for decoding uploaded JSON / ZIP files."""

import io
import json
import zipfile

import pytest

from workflow_extractor.io_utils import WorkflowDecodeError, read_workflow_documents


def _write_zip(path, entries):
    with zipfile.ZipFile(path, "w") as archive:
        for name, payload in entries:
            archive.writestr(name, payload)
    return path


class TestReadWorkflowDocuments:
    """Tests for read_workflow_documents."""

    def test_json_object_is_wrapped(self, tmp_path):
        path = tmp_path / "wf.json"
        path.write_text(json.dumps({"name": "one"}), encoding="utf-8")
        assert read_workflow_documents(str(path)) == [{"name": "one"}]

    def test_json_array_is_spread(self, tmp_path):
        path = tmp_path / "wf.json"
        path.write_text(json.dumps([{"a": 1}, {"b": 2}]), encoding="utf-8")
        assert read_workflow_documents(str(path)) == [{"a": 1}, {"b": 2}]

    def test_file_like_object(self):
        buffer = io.BytesIO(json.dumps({"x": 1}).encode("utf-8"))
        assert read_workflow_documents(buffer) == [{"x": 1}]

    def test_zip_entries_in_archive_order(self, tmp_path):
        path = _write_zip(
            tmp_path / "bundle.zip",
            [
                ("first.json", json.dumps({"id": 1})),
                ("nested/", ""),
                ("second.json", json.dumps([{"id": 2}, {"id": 3}])),
            ],
        )
        assert read_workflow_documents(str(path)) == [{"id": 1}, {"id": 2}, {"id": 3}]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(WorkflowDecodeError):
            read_workflow_documents(str(path))

    def test_invalid_zip_entry(self, tmp_path):
        path = _write_zip(tmp_path / "bundle.zip", [("bad.json", "[1, 2")])
        with pytest.raises(WorkflowDecodeError, match="bad.json"):
            read_workflow_documents(str(path))

    def test_corrupt_zip(self, tmp_path):
        path = tmp_path / "broken.zip"
        path.write_bytes(b"not a zip")
        with pytest.raises(WorkflowDecodeError):
            read_workflow_documents(str(path))

    def test_none_upload(self):
        with pytest.raises(WorkflowDecodeError, match="No file uploaded"):
            read_workflow_documents(None)

    def test_missing_file(self, tmp_path):
        with pytest.raises(WorkflowDecodeError):
            read_workflow_documents(str(tmp_path / "missing.json"))

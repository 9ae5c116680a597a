from __future__ import annotations

import io
import json
import zipfile
from typing import Any, List

from .logger import get_logger

logger = get_logger(__name__)


class WorkflowDecodeError(ValueError):
    """Raised when an upload cannot be decoded into workflow JSON."""


def _spread(parsed: Any) -> List[Any]:
    return list(parsed) if isinstance(parsed, list) else [parsed]


def _read_raw_bytes(file_obj) -> bytes:
    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, str):
            content = content.encode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return f.read()


def _source_name(file_obj) -> str:
    name = getattr(file_obj, 'name', file_obj)
    return name if isinstance(name, str) else ''


def decode_json_bytes(raw: bytes, source: str = '<upload>') -> List[Any]:
    try:
        parsed = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise WorkflowDecodeError(f"{source}: {exc}") from exc
    return _spread(parsed)


def decode_zip_bytes(raw: bytes) -> List[Any]:
    """Decode every file entry of a ZIP archive as JSON, in archive order."""
    documents: List[Any] = []
    try:
        with zipfile.ZipFile(io.BytesIO(raw)) as archive:
            for info in archive.infolist():
                if info.is_dir():
                    continue
                documents.extend(decode_json_bytes(archive.read(info), info.filename))
    except zipfile.BadZipFile as exc:
        raise WorkflowDecodeError(f"Invalid ZIP archive: {exc}") from exc
    return documents


def read_workflow_documents(file_obj) -> List[Any]:
    """Read decoded workflow documents from an uploaded file or file path.

    ZIP archives contribute all of their entries; a JSON array is spread into
    its elements, a single object is wrapped in a list.
    """
    if file_obj is None:
        raise WorkflowDecodeError("No file uploaded.")

    source = _source_name(file_obj)
    try:
        raw = _read_raw_bytes(file_obj)
    except OSError as exc:
        raise WorkflowDecodeError(f"Could not read {source or 'upload'}: {exc}") from exc

    if source.lower().endswith('.zip'):
        documents = decode_zip_bytes(raw)
    else:
        documents = decode_json_bytes(raw, source or '<upload>')

    logger.debug("Decoded %d document(s) from %s", len(documents), source or '<upload>')
    return documents

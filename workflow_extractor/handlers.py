from __future__ import annotations

from typing import Any, Dict, List, Optional

from openpyxl.utils.exceptions import IllegalCharacterError

from .config import ExportConfig, load_config
from .exporters import build_output_path, export_csv, export_xlsx, rows_to_dataframe
from .flattening import flatten_workflows
from .io_utils import WorkflowDecodeError, read_workflow_documents
from .logger import get_logger
from .records import resolve_workflows

logger = get_logger(__name__)

INVALID_FILE_MESSAGE = "Invalid or unreadable file. Please upload a valid JSON/ZIP."


def compute_row_count_text(rows: Optional[List[Dict[str, Any]]], workflow_count: int = 0) -> str:
    if not rows:
        return ""
    return f"Rows: {len(rows)} (workflows: {workflow_count})"


def load_workflows_with_preview(file_obj):
    """Decode an upload and flatten it.

    Returns (rows, status, row count text, table).
    """
    if file_obj is None:
        return [], "No file uploaded.", "", rows_to_dataframe([])

    try:
        documents = read_workflow_documents(file_obj)
    except WorkflowDecodeError as exc:
        logger.warning("Error reading file: %s", exc)
        return [], f"{INVALID_FILE_MESSAGE} ({exc})", "", rows_to_dataframe([])

    workflows = resolve_workflows(documents)
    rows = flatten_workflows(workflows)
    message = f"Successfully loaded {len(workflows)} workflow(s). Extracted {len(rows)} row(s)."
    return rows, message, compute_row_count_text(rows, len(workflows)), rows_to_dataframe(rows)


def export_rows_handler(rows, output_format: str, file_name: Optional[str] = None, config: Optional[ExportConfig] = None):
    if not rows:
        return None, "No rows to export. Upload a workflow first."

    config = config or load_config()
    output_format = (output_format or 'CSV').upper()
    if output_format not in ('CSV', 'XLSX'):
        return None, f"Unsupported export format: {output_format}"

    path = build_output_path(file_name, output_format.lower(), config.output_stem)
    try:
        if output_format == 'CSV':
            export_csv(rows, path, delimiter=config.csv_delimiter)
        else:
            export_xlsx(rows, path, sheet_name=config.sheet_name)
    except (OSError, ValueError, IllegalCharacterError) as e:
        logger.error("Export to %s failed: %s", path, e)
        return None, f"Error during export: {str(e)}"

    logger.info("Exported %d row(s) to %s", len(rows), path)
    return path, f"Export successful! Saved to {path}"


def export_csv_handler(rows, file_name=None):
    return export_rows_handler(rows, 'CSV', file_name)


def export_xlsx_handler(rows, file_name=None):
    return export_rows_handler(rows, 'XLSX', file_name)

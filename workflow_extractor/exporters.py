from __future__ import annotations

import csv
import os
import tempfile
from typing import Any, Dict, List, Optional

import openpyxl
import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from .config import DEFAULT_CSV_DELIMITER, DEFAULT_OUTPUT_STEM, DEFAULT_SHEET_NAME
from .flattening import OUTPUT_COLUMNS

HEADER_FONT = Font(bold=True)
WRAP = Alignment(wrap_text=True, vertical='top')
MAX_COLUMN_WIDTH = 60


def _cell(value: Any) -> Any:
    if value is None:
        return ''
    if isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def _xlsx_cell(value: Any) -> Any:
    value = _cell(value)
    if isinstance(value, str):
        # Control characters are not allowed in worksheet cells.
        return ILLEGAL_CHARACTERS_RE.sub('', value)
    return value


def build_output_path(file_name: Optional[str], ext: str, default_stem: str = DEFAULT_OUTPUT_STEM) -> str:
    if not file_name or not file_name.strip():
        file_name = default_stem
    file_name = file_name.strip()

    if not ext.startswith('.'):
        ext = f".{ext}"
    if not file_name.lower().endswith(ext.lower()):
        file_name += ext
    return os.path.join(tempfile.gettempdir(), file_name)


def rows_to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)


def export_csv(rows: List[Dict[str, Any]], path: str, delimiter: str = DEFAULT_CSV_DELIMITER) -> str:
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=OUTPUT_COLUMNS, delimiter=delimiter, extrasaction='ignore')
        writer.writeheader()
        for row in rows:
            writer.writerow({col: _cell(row.get(col)) for col in OUTPUT_COLUMNS})
    return path


def _auto_width(ws) -> None:
    for col in range(1, ws.max_column + 1):
        max_len = 0
        for row in ws.iter_rows(min_row=1, max_row=min(ws.max_row, 50), min_col=col, max_col=col):
            for cell in row:
                if cell.value:
                    max_len = max(max_len, min(len(str(cell.value)), MAX_COLUMN_WIDTH))
        ws.column_dimensions[get_column_letter(col)].width = max(max_len + 2, 12)


def export_xlsx(rows: List[Dict[str, Any]], path: str, sheet_name: str = DEFAULT_SHEET_NAME) -> str:
    """Write rows to a single-sheet workbook with the output columns as header."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.append(OUTPUT_COLUMNS)
    for cell in ws[1]:
        cell.font = HEADER_FONT

    for row in rows:
        ws.append([_xlsx_cell(row.get(col)) for col in OUTPUT_COLUMNS])
    for row in ws.iter_rows(min_row=2, max_row=ws.max_row):
        for cell in row:
            cell.alignment = WRAP

    _auto_width(ws)
    ws.freeze_panes = 'A2'
    wb.save(path)
    return path

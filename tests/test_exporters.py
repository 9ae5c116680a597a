"""Tests for CSV / XLSX export."""

import csv
import os

import openpyxl

from workflow_extractor import OUTPUT_COLUMNS, flatten_workflows
from workflow_extractor.exporters import build_output_path, export_csv, export_xlsx, rows_to_dataframe


class TestBuildOutputPath:
    """Tests for build_output_path."""

    def test_default_stem(self):
        assert os.path.basename(build_output_path("", "csv")) == "workflow_extracted.csv"

    def test_extension_added_once(self):
        assert os.path.basename(build_output_path("report.xlsx", "xlsx")) == "report.xlsx"
        assert os.path.basename(build_output_path(" report ", ".csv")) == "report.csv"


class TestExportCsv:
    """Tests for export_csv."""

    def test_header_and_delimiter(self, tmp_path, sample_workflow):
        rows = flatten_workflows([sample_workflow])
        path = export_csv(rows, str(tmp_path / "out.csv"))
        with open(path, newline="", encoding="utf-8") as f:
            records = list(csv.reader(f, delimiter=";"))
        assert records[0] == OUTPUT_COLUMNS
        assert len(records) == len(rows) + 1
        assert records[2][3] == "Performer selects if Status. Available Options: • Yes • No"

    def test_custom_delimiter(self, tmp_path, sample_workflow):
        path = export_csv(flatten_workflows([sample_workflow]), str(tmp_path / "out.csv"), delimiter=",")
        with open(path, newline="", encoding="utf-8") as f:
            header = next(csv.reader(f, delimiter=","))
        assert header == OUTPUT_COLUMNS

    def test_none_written_as_empty(self, tmp_path):
        rows = flatten_workflows([{"parameterRequests": [{"type": "DATE"}]}])
        path = export_csv(rows, str(tmp_path / "out.csv"))
        with open(path, newline="", encoding="utf-8") as f:
            records = list(csv.reader(f, delimiter=";"))
        assert records[1][OUTPUT_COLUMNS.index("Instruction Title")] == ""


class TestExportXlsx:
    """Tests for export_xlsx."""

    def test_sheet_name_and_content(self, tmp_path, sample_workflow):
        rows = flatten_workflows([sample_workflow])
        path = export_xlsx(rows, str(tmp_path / "out.xlsx"))
        wb = openpyxl.load_workbook(path)
        assert wb.sheetnames == ["Workflow"]
        ws = wb["Workflow"]
        assert [c.value for c in ws[1]] == OUTPUT_COLUMNS
        assert ws.max_row == len(rows) + 1
        assert ws.cell(row=2, column=1).value == "Create Job Form"

    def test_control_characters_are_stripped(self, tmp_path):
        rows = flatten_workflows([{"parameterRequests": [{"label": "Line\x0bBreak\x01", "type": "SINGLE_LINE"}]}])
        path = export_xlsx(rows, str(tmp_path / "out.xlsx"))
        ws = openpyxl.load_workbook(path)["Workflow"]
        title = ws.cell(row=2, column=OUTPUT_COLUMNS.index("Instruction Title") + 1).value
        assert title == "LineBreak"
        assert ws.cell(row=2, column=OUTPUT_COLUMNS.index("Activity Description in detail") + 1).value == (
            "Performer enters LineBreak."
        )


class TestRowsToDataframe:
    """Tests for rows_to_dataframe."""

    def test_columns_always_present(self):
        assert list(rows_to_dataframe([]).columns) == OUTPUT_COLUMNS

    def test_row_count(self, sample_workflow):
        assert len(rows_to_dataframe(flatten_workflows([sample_workflow]))) == 4

"""Export settings, overridable through environment variables."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CSV_DELIMITER = ';'
DEFAULT_SHEET_NAME = 'Workflow'
DEFAULT_OUTPUT_STEM = 'workflow_extracted'
DEFAULT_LOG_LEVEL = 'INFO'

MAX_SHEET_NAME_LENGTH = 31
INVALID_SHEET_NAME_RE = re.compile(r'[\\/?*\[\]:]')


def is_valid_sheet_name(name: str) -> bool:
    """Excel limits sheet titles to 31 characters without any of \\/?*[]:."""
    return bool(name) and len(name) <= MAX_SHEET_NAME_LENGTH and not INVALID_SHEET_NAME_RE.search(name)


@dataclass
class ExportConfig:
    csv_delimiter: str = field(
        default_factory=lambda: os.getenv('WORKFLOW_EXTRACTOR_CSV_DELIMITER', DEFAULT_CSV_DELIMITER)
    )
    sheet_name: str = field(
        default_factory=lambda: os.getenv('WORKFLOW_EXTRACTOR_SHEET_NAME', DEFAULT_SHEET_NAME)
    )
    output_stem: str = field(
        default_factory=lambda: os.getenv('WORKFLOW_EXTRACTOR_OUTPUT_STEM', DEFAULT_OUTPUT_STEM)
    )
    log_level: str = field(
        default_factory=lambda: os.getenv('WORKFLOW_EXTRACTOR_LOG_LEVEL', DEFAULT_LOG_LEVEL)
    )

    def __post_init__(self):
        # csv.writer only accepts a one-character delimiter.
        if not self.csv_delimiter or len(self.csv_delimiter) != 1:
            raise ValueError(f"CSV delimiter must be a single character, got {self.csv_delimiter!r}")
        if not is_valid_sheet_name(self.sheet_name):
            if self.sheet_name:
                logger.warning("Invalid sheet name %r, using %r", self.sheet_name, DEFAULT_SHEET_NAME)
            self.sheet_name = DEFAULT_SHEET_NAME
        if not self.output_stem:
            self.output_stem = DEFAULT_OUTPUT_STEM


def load_config() -> ExportConfig:
    return ExportConfig()

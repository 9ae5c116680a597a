"""Core logic for the Workflow JSON to CSV/XLSX converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- decode uploaded JSON / ZIP workflow documents
- walk stages, tasks and parameters
- describe each parameter and its visibility rules
- flatten/export one row per parameter
"""

from .flattening import OUTPUT_COLUMNS, flatten_workflows

__all__ = ['OUTPUT_COLUMNS', 'flatten_workflows']

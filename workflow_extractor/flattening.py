from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .descriptions import describe_parameter
from .logger import get_logger
from .records import ParameterContext, iter_workflow_contexts
from .rules import format_rules

logger = get_logger(__name__)

OUTPUT_COLUMNS: List[str] = [
    'Stage Name',
    'Activity Name',
    'Performer',
    'Activity Description in detail',
    'Validations / Conditions',
    'Instruction Title',
    'Field Type',
    'Activity / Parameter Type',
    'Configuration Feasibility',
    'Configuration Feasibility Notes',
    'Configuration Status',
    'Verification Status',
    'Tester Comments',
    'Verification B Status',
    'Tester Comments (B)',
]

PERFORMER = 'Performer/Verifier'
NOT_APPLICABLE = 'N/A'
ENABLED = 'Enabled'
DISABLED = 'Disabled'


def build_row(context: ParameterContext) -> Dict[str, Any]:
    """Assemble the fixed-schema output row for one parameter."""
    parameter = context.parameter
    verification = parameter.get('verificationType')

    return {
        'Stage Name': context.stage_label,
        'Activity Name': context.task_label,
        'Performer': PERFORMER,
        'Activity Description in detail': describe_parameter(parameter),
        'Validations / Conditions': format_rules(parameter),
        'Instruction Title': parameter.get('label'),
        'Field Type': 'Mandatory' if parameter.get('mandatory') else 'Optional',
        'Activity / Parameter Type': parameter.get('type'),
        'Configuration Feasibility': 'Configurable',
        'Configuration Feasibility Notes': NOT_APPLICABLE,
        'Configuration Status': 'Configured',
        'Verification Status': ENABLED if verification in ('SELF', 'BOTH') else DISABLED,
        'Tester Comments': NOT_APPLICABLE,
        'Verification B Status': ENABLED if verification == 'BOTH' else DISABLED,
        'Tester Comments (B)': NOT_APPLICABLE,
    }


def flatten_workflows(workflows: Iterable[Any]) -> List[Dict[str, Any]]:
    """Flatten workflows into list[dict] rows, workflow by workflow."""
    rows = [build_row(context) for context in iter_workflow_contexts(workflows)]
    logger.debug("Flattened %d row(s)", len(rows))
    return rows

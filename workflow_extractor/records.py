from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, NamedTuple

from .logger import get_logger

logger = get_logger(__name__)

JOB_FORM_STAGE = 'Create Job Form'


class ParameterContext(NamedTuple):
    stage_label: Any
    task_label: Any
    parameter: Dict[str, Any]


def _dict_items(container: Any, key: str) -> List[Dict[str, Any]]:
    """Return the dict entries of ``container[key]``; anything else is empty."""
    if not isinstance(container, dict):
        return []
    value = container.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _parameter_items(container: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return parameter entries; a non-object entry becomes an empty parameter."""
    value = container.get('parameterRequests')
    if not isinstance(value, list):
        return []
    parameters: List[Dict[str, Any]] = []
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            logger.warning("Parameter entry %d is not an object (%r); emitting an empty row", index, item)
            item = {}
        parameters.append(item)
    return parameters


def resolve_workflows(data: Any) -> List[Dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    if isinstance(data, dict):
        return [data]
    return []


def iter_parameter_contexts(workflow: Dict[str, Any]) -> Iterator[ParameterContext]:
    """Yield one context per parameter of a single workflow.

    Job-form parameters come first and use their own label as the task label;
    then every task parameter, stage by stage and task by task.
    """
    for parameter in _parameter_items(workflow):
        yield ParameterContext(JOB_FORM_STAGE, parameter.get('label'), parameter)

    for stage in _dict_items(workflow, 'stageRequests'):
        for task in _dict_items(stage, 'taskRequests'):
            for parameter in _parameter_items(task):
                yield ParameterContext(stage.get('name'), task.get('name'), parameter)


def iter_workflow_contexts(workflows: Iterable[Any]) -> Iterator[ParameterContext]:
    for workflow in workflows:
        if not isinstance(workflow, dict):
            continue
        yield from iter_parameter_contexts(workflow)

from __future__ import annotations

from typing import Any, Dict, List, NamedTuple

from .logger import get_logger

logger = get_logger(__name__)

OPTION_SEPARATOR = ' • '

DESCRIPTION_TEMPLATES: Dict[str, str] = {
    'SINGLE_SELECT': "Performer selects if {label}.",
    'MULTISELECT': "Performer selects one or more options for {label}.",
    'CHECKLIST': "Performer checks applicable items for {label}.",
    'SINGLE_LINE': "Performer enters {label}.",
    'MULTI_LINE': "Performer enters a detailed response for {label}.",
    'FILE_UPLOAD': "Performer uploads the required file(s) for {label}.",
    'RESOURCE': "Performer selects a resource for {label}.",
    'DATE': "Performer enters the date for {label}.",
    'INSTRUCTION': "Performer provides input for {label}.",
}

UNKNOWN_TYPE_TEMPLATE = "Unknown activity type ({type}) for {label}."


class ParameterOptions(NamedTuple):
    """Options of a parameter; ``source`` is 'data', 'choices' or 'none'."""

    source: str
    names: List[str]


def _text(value: Any) -> str:
    return '' if value is None else str(value)


def _option_names(entries: List[Any]) -> List[str]:
    return [_text(entry.get('name')) if isinstance(entry, dict) else '' for entry in entries]


def resolve_options(parameter: Dict[str, Any]) -> ParameterOptions:
    data = parameter.get('data')
    if isinstance(data, list):
        return ParameterOptions('data', _option_names(data))
    if isinstance(data, dict) and isinstance(data.get('choices'), list):
        return ParameterOptions('choices', _option_names(data['choices']))
    return ParameterOptions('none', [])


def render_options_suffix(options: ParameterOptions) -> str:
    if not options.names:
        return ''
    return " Available Options: • " + OPTION_SEPARATOR.join(options.names)


def is_known_type(parameter_type: Any) -> bool:
    return isinstance(parameter_type, str) and parameter_type in DESCRIPTION_TEMPLATES


def describe_parameter(parameter: Dict[str, Any]) -> str:
    """Build the performer instruction for a parameter, plus its options.

    Unrecognized types get a marked placeholder instead of a template.
    """
    label = _text(parameter.get('label'))
    parameter_type = parameter.get('type')

    if is_known_type(parameter_type):
        description = DESCRIPTION_TEMPLATES[parameter_type].format(label=label)
    else:
        logger.warning("Unknown parameter type %r for parameter %r", parameter_type, label)
        description = UNKNOWN_TYPE_TEMPLATE.format(type=_text(parameter_type), label=label)

    return description + render_options_suffix(resolve_options(parameter))

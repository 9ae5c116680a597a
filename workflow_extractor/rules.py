from __future__ import annotations

from typing import Any, Dict, List

RULE_SEPARATOR = '; '


def _joined(values: Any) -> str:
    if not isinstance(values, list):
        return ''
    return ", ".join('' if v is None else str(v) for v in values)


def format_rule(label: Any, rule: Dict[str, Any]) -> str:
    show = rule.get('show')
    shown = show.get('parameters') if isinstance(show, dict) else None
    return (
        f"Visible if [{'' if label is None else label}] is [{_joined(rule.get('input'))}]. "
        f"Shows parameters: [{_joined(shown)}]"
    )


def format_rules(parameter: Dict[str, Any]) -> str:
    """Render all visibility rules of a parameter, labelled with its own label."""
    rules = parameter.get('rules')
    if not isinstance(rules, list):
        return ''
    label = parameter.get('label')
    rendered: List[str] = [format_rule(label, rule) for rule in rules if isinstance(rule, dict)]
    return RULE_SEPARATOR.join(rendered)

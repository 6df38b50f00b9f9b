"""Field interpolation for configuration values.

A value like :code:`"%{locale}"` or :code:`"%{user.lang}-%{user.country}"` is expanded
against the fields of the current event. Field references use the dotted field notation.
References to missing fields are left as they are.
"""

import json
import re

from logdate.util.helper import get_dotted_field_value, has_dotted_field

PLACEHOLDER_MARKER = "%{"

PLACEHOLDER_PATTERN = re.compile(r"%\{([^}]+)\}")


def has_placeholder(value: str | None) -> bool:
    """True if the value references event fields and has to be expanded per event"""
    return isinstance(value, str) and PLACEHOLDER_MARKER in value


def _to_string(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join(_to_string(element) for element in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def interpolate(template: str, event: dict) -> str:
    """expand all field references in the template

    Parameters
    ----------
    template : str
        the value with :code:`%{field}` references
    event : dict
        the event to take the field values from

    Returns
    -------
    str
        the expanded value
    """

    def replace(match: re.Match) -> str:
        dotted_field = match.group(1)
        if not has_dotted_field(event, dotted_field):
            return match.group(0)
        return _to_string(get_dotted_field_value(event, dotted_field))

    return PLACEHOLDER_PATTERN.sub(replace, template)

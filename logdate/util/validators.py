""" validators to use with `attrs` fields"""

from logdate.factory_error import InvalidConfigurationError
from logdate.util.defaults import RESERVED_TIMESTAMP_FIELD


def not_reserved_field_validator(_, attribute, value):
    """validate that a target field is not the reserved timestamp field"""
    if value == RESERVED_TIMESTAMP_FIELD:
        raise InvalidConfigurationError(
            f"{attribute.name}: This processor cannot write its string result "
            f"to the {RESERVED_TIMESTAMP_FIELD} field"
        )


def not_blank_validator(_, attribute, value):
    """validate that a string option is not empty or whitespace only"""
    if value is None:
        return
    if not value.strip():
        raise InvalidConfigurationError(f"{attribute.name} must not be empty")

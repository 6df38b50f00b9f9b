# pylint: disable=missing-docstring
import pytest

from logdate.factory_error import InvalidConfigurationError
from logdate.util.defaults import RESERVED_TIMESTAMP_FIELD
from logdate.util.validators import not_blank_validator, not_reserved_field_validator


class TestNotReservedFieldValidator:
    def test_raises_for_reserved_timestamp_field(self):
        attribute = type("myclass", (), {"name": "target", "default": None})
        with pytest.raises(InvalidConfigurationError, match=r"target: .* @timestamp field"):
            not_reserved_field_validator(None, attribute(), RESERVED_TIMESTAMP_FIELD)

    @pytest.mark.parametrize("value", ["locale_date", "timestamp", "event.@timestamp"])
    def test_passes_other_fields(self, value):
        attribute = type("myclass", (), {"name": "target", "default": None})
        assert not not_reserved_field_validator(None, attribute(), value)


class TestNotBlankValidator:
    def test_validator_passes_on_not_set_optional_attribute(self):
        attribute = type("myclass", (), {"name": "locale", "default": None})
        assert not not_blank_validator(None, attribute(), None)

    @pytest.mark.parametrize("value", ["", " ", "\t"])
    def test_raises_for_blank_values(self, value):
        attribute = type("myclass", (), {"name": "locale", "default": None})
        with pytest.raises(InvalidConfigurationError, match=r"locale must not be empty"):
            not_blank_validator(None, attribute(), value)

    def test_passes_on_values(self):
        attribute = type("myclass", (), {"name": "locale", "default": None})
        assert not not_blank_validator(None, attribute(), "fr-FR")

# pylint: disable=missing-docstring
import pytest

from logdate.abc.processor import Processor
from logdate.configuration import Configuration
from logdate.factory_error import NoTypeSpecifiedError, UnknownComponentTypeError
from logdate.processor.date_formatter.processor import DateFormatter


class TestConfiguration:
    def test_create_returns_component_config(self):
        config = Configuration.create(
            "localized_date",
            {
                "type": "date_formatter",
                "source": "mydate",
                "target": "locale_date",
                "pattern": "yyyy-MM-dd",
            },
        )
        assert isinstance(config, DateFormatter.Config)
        assert config.locale is None
        assert config.timezone is None
        assert config.tag_on_failure == ["_dateformatfailure"]

    def test_create_raises_on_unknown_parameters(self):
        with pytest.raises(TypeError, match="unexpected keyword argument"):
            Configuration.create(
                "localized_date",
                {
                    "type": "date_formatter",
                    "source": "mydate",
                    "target": "locale_date",
                    "pattern": "yyyy-MM-dd",
                    "i_do_not_exist": True,
                },
            )

    def test_get_class_returns_registered_class(self):
        assert Configuration.get_class("foo", {"type": "date_formatter"}) is DateFormatter

    def test_get_class_raises_without_type(self):
        with pytest.raises(NoTypeSpecifiedError, match="'foo'"):
            Configuration.get_class("foo", {"source": "mydate"})

    def test_get_class_raises_for_unknown_type(self):
        with pytest.raises(UnknownComponentTypeError, match="Unknown type 'unknown' for 'foo'"):
            Configuration.get_class("foo", {"type": "unknown"})

    def test_processor_config_defaults_failure_tag_to_type(self):
        config = Processor.Config(type="my_processor")
        assert config.tag_on_failure == ["_my_processor_failure"]

    def test_processor_config_keeps_empty_failure_tags(self):
        config = Processor.Config(type="my_processor", tag_on_failure=[])
        assert config.tag_on_failure == []

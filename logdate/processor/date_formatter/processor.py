"""
DateFormatter
=============

The `date_formatter` processor renders a timestamp field as a human-readable,
locale- and timezone-aware string and writes it to a target field.

The source field has to hold a :code:`datetime` or an :code:`arrow.Arrow` value.
If the source field is a list, only the first element is used.
Naive datetimes are treated as UTC.

Pattern, locale and timezone can reference event fields with the :code:`%{field}`
syntax. In this case the formatter is built for every event from its field values.
Otherwise it is built once at startup.

If a date can not be formatted, the target field is not written and the tags of
:code:`tag_on_failure` are appended to the :code:`tags` field of the event.

Processor Configuration
^^^^^^^^^^^^^^^^^^^^^^^
..  code-block:: yaml
    :linenos:

    - localized_date:
        type: date_formatter
        source: mydate
        target: locale_date
        pattern: "EEEE, dd MMMM yyyy"
        locale: fr-FR
        timezone: Europe/Paris

..  code-block:: yaml
    :linenos:

    - japan_date:
        type: date_formatter
        source: "@timestamp"
        target: japan_date
        pattern: "yyyy'年'MM'月'dd'日'"
        timezone: Asia/Tokyo

.. autoclass:: logdate.processor.date_formatter.processor.DateFormatter.Config
   :members:
   :undoc-members:
   :inherited-members:
   :noindex:

.. automodule:: logdate.util.date_pattern
"""

import logging
from typing import List, Optional

from attrs import define, field, validators
from prometheus_client import CollectorRegistry

from logdate.abc.processor import Processor, ProcessorResult
from logdate.metrics.metrics import CounterMetric
from logdate.processor.date_formatter.exceptions import DateFormatFailureWarning
from logdate.processor.date_formatter.resolver import FormatterSource, create_formatter_source
from logdate.util.date_pattern import DatePatternError
from logdate.util.defaults import DEFAULT_DATE_FORMAT_FAILURE_TAG
from logdate.util.helper import add_and_overwrite, get_dotted_field_value
from logdate.util.locales import UnknownLocaleError
from logdate.util.time import TimeParser, TimeParserException, UnsupportedTimeValueError
from logdate.util.validators import not_blank_validator, not_reserved_field_validator

logger = logging.getLogger("DateFormatter")


class DateFormatter(Processor):
    """A processor that renders timestamps as localized strings"""

    @define(kw_only=True, slots=False, frozen=True)
    class Config(Processor.Config):
        """DateFormatter Configuration"""

        source: str = field(validator=[validators.instance_of(str), not_blank_validator])
        """The field containing the date to be formatted.
        If this field is a list, only the first value is used."""
        target: str = field(
            validator=[
                validators.instance_of(str),
                not_blank_validator,
                not_reserved_field_validator,
            ]
        )
        """The field to write the formatted string to. Existing values are overwritten.
        Writing to :code:`@timestamp` is not allowed."""
        pattern: str = field(validator=[validators.instance_of(str), not_blank_validator])
        """The date pattern, see :ref:`Date Pattern`. Can reference event fields with
        :code:`%{field}`."""
        locale: Optional[str] = field(
            default=None,
            validator=[validators.optional(validators.instance_of(str)), not_blank_validator],
        )
        """The locale for month and weekday names as BCP 47 language tag, e.g. :code:`en`,
        :code:`en-US`. POSIX tags like :code:`en_US` are accepted with a warning.
        Defaults to the platform locale. Can reference event fields with :code:`%{field}`."""
        timezone: Optional[str] = field(
            default=None,
            validator=[validators.optional(validators.instance_of(str)), not_blank_validator],
        )
        """The timezone id, e.g. :code:`Europe/Paris` or :code:`+01:00`.
        Defaults to the platform timezone. Can reference event fields with :code:`%{field}`."""
        tag_on_failure: List[str] = field(
            validator=[
                validators.instance_of(list),
                validators.deep_iterable(member_validator=validators.instance_of(str)),
            ],
            converter=lambda x: list(dict.fromkeys(x)) if isinstance(x, (list, tuple)) else x,
            factory=lambda: [DEFAULT_DATE_FORMAT_FAILURE_TAG],
        )
        """Tags appended to the event if formatting fails,
        defaults to :code:`["_dateformatfailure"]`."""

    @define(kw_only=True)
    class Metrics(Processor.Metrics):
        """Tracks statistics about the DateFormatter"""

        number_of_dynamic_formatters: CounterMetric = field(
            factory=lambda: CounterMetric(
                description="Number of formatters built from event fields",
                name="date_formatter_number_of_dynamic_formatters",
            )
        )
        """Number of formatters built from event fields"""

    __slots__ = ["_formatter_source"]

    _formatter_source: FormatterSource

    def __init__(
        self,
        name: str,
        configuration: "DateFormatter.Config",
        registry: Optional[CollectorRegistry] = None,
    ):
        super().__init__(name, configuration, registry)
        self._formatter_source = create_formatter_source(configuration, logger)

    def _apply(self, event: dict, result: ProcessorResult):
        source = self._config.source
        if not self._field_exists(event, source):
            return
        source_value = get_dotted_field_value(event, source)
        if isinstance(source_value, (list, tuple)):
            source_value = source_value[0] if source_value else None
        try:
            millis = TimeParser.to_epoch_millis(source_value)
            formatter = self._formatter_source.formatter_for(event)
            if self._formatter_source.is_dynamic:
                self.metrics.number_of_dynamic_formatters += 1
            formatted = formatter.format(millis)
        except UnsupportedTimeValueError as error:
            logger.warning(
                "Unsupported source field '%s'. It is neither a datetime nor an arrow timestamp",
                source,
            )
            raise DateFormatFailureWarning(source, source_value, error, event) from error
        except (DatePatternError, TimeParserException, UnknownLocaleError) as error:
            logger.warning(
                "Failed formatting date from field '%s' with value %r: %s",
                source,
                source_value,
                error,
            )
            raise DateFormatFailureWarning(source, source_value, error, event) from error
        add_and_overwrite(event, self._config.target, formatted)
        result.matched = True

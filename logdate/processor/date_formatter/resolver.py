"""
Formatter Resolution
====================

Decides once per processor whether the configured pattern, locale and timezone are
static or reference event fields (:code:`%{field}`), and provides the formatter for
each event accordingly:

* :code:`StaticFormatterSource` holds a single formatter that was built at startup
  and is shared by all events.
* :code:`DynamicFormatterSource` builds a new formatter for every event from the
  interpolated values. Static parts are resolved at startup.

Problems with static values are configuration errors and are raised by
:code:`create_formatter_source`. Problems with interpolated values are raised
per event by :code:`formatter_for`.
"""

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING, ClassVar, Optional, Union

from arrow.locales import Locale
from attrs import define, field

from logdate.factory_error import InvalidConfigurationError
from logdate.util.date_pattern import DatePattern, DatePatternError
from logdate.util.interpolation import has_placeholder, interpolate
from logdate.util.locales import UnknownLocaleError, resolve_locale
from logdate.util.time import TimeParser, TimeParserException

if TYPE_CHECKING:  # pragma: no cover
    from logdate.processor.date_formatter.processor import DateFormatter

logger = logging.getLogger("DateFormatter")


@define(frozen=True)
class DynamicFlags:
    """Marks which of pattern, locale and timezone have to be resolved per event"""

    pattern: bool = False
    locale: bool = False
    timezone: bool = False

    @classmethod
    def from_config(cls, config: "DateFormatter.Config") -> "DynamicFlags":
        """flags every configured value that contains a field reference"""
        return cls(
            pattern=has_placeholder(config.pattern),
            locale=has_placeholder(config.locale),
            timezone=has_placeholder(config.timezone),
        )

    @property
    def any(self) -> bool:
        """True if at least one value is resolved per event"""
        return self.pattern or self.locale or self.timezone


def normalize_locale_tag(tag: str, logger_: logging.Logger = logger) -> str:
    """replaces the POSIX underscore separator by the BCP 47 dash"""
    if "_" in tag:
        logger_.warning(
            "Date formatter uses BCP47 format for locale, replacing underscore with dash in '%s'",
            tag,
        )
        tag = tag.replace("_", "-")
    return tag


def localize(
    formatter: DatePattern, locale: Optional[Locale], timezone: Optional[tzinfo]
) -> DatePattern:
    """binds timezone and locale to the formatter, in this order"""
    if timezone is not None:
        formatter = formatter.with_zone(timezone)
    if locale is not None:
        formatter = formatter.with_locale(locale)
    return formatter


@define(frozen=True)
class StaticFormatterSource:
    """Provides the formatter built at startup for every event"""

    is_dynamic: ClassVar[bool] = False

    formatter: DatePattern

    def formatter_for(self, _: dict) -> DatePattern:
        """returns the shared formatter"""
        return self.formatter


@define(frozen=True)
class DynamicFormatterSource:
    """Builds a formatter for each event from its field values"""

    is_dynamic: ClassVar[bool] = True

    flags: DynamicFlags
    pattern: str
    locale: Optional[str]
    timezone: Optional[str]
    base: Optional[DatePattern] = None
    """the compiled static pattern with the static timezone and locale applied"""
    static_locale: Optional[Locale] = field(default=None, eq=False)
    static_timezone: Optional[tzinfo] = None
    logger: logging.Logger = field(default=logger, eq=False, repr=False)

    def formatter_for(self, event: dict) -> DatePattern:
        """builds the formatter for the event

        Raises
        ------
        DatePatternError
            if the interpolated pattern is malformed
        UnknownTimezoneError
            if the interpolated timezone is unknown
        UnknownLocaleError
            if the interpolated locale is unknown
        """
        if self.flags.pattern:
            pattern = interpolate(self.pattern, event)
            formatter = localize(
                DatePattern.compile(pattern), self.static_locale, self.static_timezone
            )
        else:
            formatter = self.base
        timezone = None
        if self.flags.timezone:
            timezone = TimeParser.resolve_timezone(interpolate(self.timezone, event))
        locale = None
        if self.flags.locale:
            tag = normalize_locale_tag(interpolate(self.locale, event), self.logger)
            locale = resolve_locale(tag)
        self.logger.debug("Built formatter %s for event", formatter.pattern)
        return localize(formatter, locale, timezone)


FormatterSource = Union[StaticFormatterSource, DynamicFormatterSource]


def create_formatter_source(
    config: "DateFormatter.Config", logger_: logging.Logger = logger
) -> FormatterSource:
    """Resolves everything that is known at startup.

    Parameters
    ----------
    config : DateFormatter.Config
        the processor configuration
    logger_ : logging.Logger
        receives warnings about the locale notation

    Returns
    -------
    FormatterSource
        a :code:`StaticFormatterSource` if no value references event fields,
        a :code:`DynamicFormatterSource` otherwise

    Raises
    ------
    InvalidConfigurationError
        if the static pattern is malformed or a static timezone or locale is unknown
    """
    flags = DynamicFlags.from_config(config)
    try:
        static_timezone = None
        if config.timezone is not None and not flags.timezone:
            static_timezone = TimeParser.resolve_timezone(config.timezone)
        static_locale = None
        if config.locale is not None and not flags.locale:
            static_locale = resolve_locale(normalize_locale_tag(config.locale, logger_))
        base = None
        if not flags.pattern:
            base = localize(DatePattern.compile(config.pattern), static_locale, static_timezone)
    except (DatePatternError, TimeParserException, UnknownLocaleError) as error:
        raise InvalidConfigurationError(
            f"{error.message} for pattern '{config.pattern}'"
        ) from error
    if not flags.any:
        return StaticFormatterSource(base)
    return DynamicFormatterSource(
        flags=flags,
        pattern=config.pattern,
        locale=config.locale,
        timezone=config.timezone,
        base=base,
        static_locale=static_locale,
        static_timezone=static_timezone,
        logger=logger_,
    )

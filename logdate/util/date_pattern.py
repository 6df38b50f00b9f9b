"""
Date Pattern
============

Compiles letter-coded date patterns, as known from Joda-Time and Logstash, into
reusable, immutable formatters.

.. table::

    +--------+------------------------------+--------------+-------------------------------------+
    | letter | meaning                      | presentation | examples                            |
    +========+==============================+==============+=====================================+
    | G      | era                          | text         | AD                                  |
    | C      | century of era               | number       | 20                                  |
    | Y      | year of era                  | year         | 1996                                |
    | x      | weekyear                     | year         | 1996                                |
    | w      | week of weekyear             | number       | 27                                  |
    | e      | day of week                  | number       | 2                                   |
    | E      | day of week                  | text         | Tuesday; Tue                        |
    | y      | year                         | year         | 1996; 96                            |
    | D      | day of year                  | number       | 189                                 |
    | M      | month of year                | month        | July; Jul; 07                       |
    | d      | day of month                 | number       | 10                                  |
    | a      | halfday of day               | text         | PM                                  |
    | K      | hour of halfday (0~11)       | number       | 0                                   |
    | h      | clockhour of halfday (1~12)  | number       | 12                                  |
    | H      | hour of day (0~23)           | number       | 0                                   |
    | k      | clockhour of day (1~24)      | number       | 24                                  |
    | m      | minute of hour               | number       | 30                                  |
    | s      | second of minute             | number       | 55                                  |
    | S      | fraction of second           | millis       | 978                                 |
    | z      | time zone                    | text         | CET; Europe/Paris                   |
    | Z      | time zone offset/id          | zone         | -0800; -08:00; America/Los_Angeles  |
    | '      | escape for text              | delimiter    |                                     |
    | ''     | single quote                 | literal      | '                                   |
    +--------+------------------------------+--------------+-------------------------------------+

Numbers are zero padded to the count of pattern letters. Text with four or more letters
is printed in its full form, otherwise in its short form. Every other ASCII letter is
reserved and makes the pattern invalid.
"""

import string
from datetime import datetime, tzinfo
from typing import Callable, Optional, Tuple

from arrow.locales import Locale
from attrs import define, evolve, field, validators

from logdate.abc.exceptions import LogdateException
from logdate.util.locales import default_locale
from logdate.util.time import TimeParser


class DatePatternError(LogdateException):
    """Raised if a date pattern is malformed"""


@define(frozen=True)
class PatternToken:
    """A single pattern letter run or a literal text"""

    letter: Optional[str]
    width: int = 0
    text: str = ""

    @property
    def is_literal(self) -> bool:
        """True if the token is printed as is"""
        return self.letter is None


def _number(value: int, width: int) -> str:
    return f"{value:0{width}d}"


def _year(value: int, width: int) -> str:
    if width == 2:
        return f"{value % 100:02d}"
    return _number(value, width)


def _offset(moment: datetime, separator: str) -> str:
    total_seconds = moment.utcoffset().total_seconds()
    sign = "-" if total_seconds < 0 else "+"
    # seconds of historic offsets are dropped, not rounded
    hours, minutes = divmod(int(abs(total_seconds) // 60), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _zone_name(moment: datetime) -> str:
    name = moment.tzname() or ""
    if not name or (name.startswith("UTC") and len(name) > 3):
        return _offset(moment, ":")
    return name


def _zone_id(moment: datetime) -> str:
    key = getattr(moment.tzinfo, "key", None)
    return key if key else _zone_name(moment)


def _meridian(moment: datetime, locale: Locale) -> str:
    meridian = locale.meridian(moment.hour, "A")
    if meridian:
        return meridian
    return "AM" if moment.hour < 12 else "PM"


def _fraction(moment: datetime, width: int) -> str:
    millis = f"{moment.microsecond // 1000:03d}"
    if width <= 3:
        return millis[:width]
    return millis.ljust(width, "0")


_Printer = Callable[[datetime, int, Locale], str]

PRINTERS: dict[str, _Printer] = {
    "G": lambda moment, width, locale: "AD",
    "C": lambda moment, width, locale: _number(moment.year // 100, width),
    "Y": lambda moment, width, locale: _year(moment.year, width),
    "x": lambda moment, width, locale: _year(moment.isocalendar()[0], width),
    "w": lambda moment, width, locale: _number(moment.isocalendar()[1], width),
    "e": lambda moment, width, locale: _number(moment.isoweekday(), width),
    "E": lambda moment, width, locale: (
        locale.day_name(moment.isoweekday())
        if width >= 4
        else locale.day_abbreviation(moment.isoweekday())
    ),
    "y": lambda moment, width, locale: _year(moment.year, width),
    "D": lambda moment, width, locale: _number(moment.timetuple().tm_yday, width),
    "M": lambda moment, width, locale: (
        locale.month_name(moment.month)
        if width >= 4
        else (
            locale.month_abbreviation(moment.month)
            if width == 3
            else _number(moment.month, width)
        )
    ),
    "d": lambda moment, width, locale: _number(moment.day, width),
    "a": lambda moment, width, locale: _meridian(moment, locale),
    "K": lambda moment, width, locale: _number(moment.hour % 12, width),
    "h": lambda moment, width, locale: _number(moment.hour % 12 or 12, width),
    "H": lambda moment, width, locale: _number(moment.hour, width),
    "k": lambda moment, width, locale: _number(moment.hour or 24, width),
    "m": lambda moment, width, locale: _number(moment.minute, width),
    "s": lambda moment, width, locale: _number(moment.second, width),
    "S": lambda moment, width, locale: _fraction(moment, width),
    "z": lambda moment, width, locale: _zone_id(moment) if width >= 4 else _zone_name(moment),
    "Z": lambda moment, width, locale: (
        _offset(moment, "")
        if width == 1
        else (_offset(moment, ":") if width == 2 else _zone_id(moment))
    ),
}


def tokenize(pattern: str) -> Tuple[PatternToken, ...]:
    """split a pattern into letter runs and literal texts

    Raises
    ------
    DatePatternError
        if the pattern is empty or contains a reserved letter
    """
    if not isinstance(pattern, str) or not pattern:
        raise DatePatternError("Invalid pattern specification")
    tokens = []
    literal = []
    index, length = 0, len(pattern)
    while index < length:
        char = pattern[index]
        if char == "'":
            text, index = _read_quoted(pattern, index)
            literal.append(text)
            continue
        if char not in string.ascii_letters:
            literal.append(char)
            index += 1
            continue
        end = index
        while end < length and pattern[end] == char:
            end += 1
        if char not in PRINTERS:
            raise DatePatternError(f"Illegal pattern component: {pattern[index:end]}")
        if literal:
            tokens.append(PatternToken(None, text="".join(literal)))
            literal = []
        tokens.append(PatternToken(char, width=end - index))
        index = end
    if literal:
        tokens.append(PatternToken(None, text="".join(literal)))
    return tuple(tokens)


def _read_quoted(pattern: str, index: int) -> Tuple[str, int]:
    """read a quoted text starting at the quote at :code:`index`
    returns the unquoted text and the index after the closing quote"""
    if pattern.startswith("''", index):
        return "'", index + 2
    text = []
    index += 1
    while index < len(pattern):
        if pattern[index] == "'":
            if pattern.startswith("''", index):
                text.append("'")
                index += 2
                continue
            return "".join(text), index + 1
        text.append(pattern[index])
        index += 1
    # an unterminated quote runs to the end of the pattern
    return "".join(text), index


@define(frozen=True)
class DatePattern:
    """A compiled date pattern bound to an optional timezone and locale.

    Instances are immutable. :code:`with_zone` and :code:`with_locale` return new
    instances, so a compiled pattern can be shared between threads.
    Without a timezone the local timezone is used, without a locale the
    platform locale.
    """

    pattern: str = field(validator=validators.instance_of(str))
    tokens: Tuple[PatternToken, ...] = field(repr=False)
    timezone: Optional[tzinfo] = field(default=None)
    locale: Optional[Locale] = field(default=None, eq=False)

    @classmethod
    def compile(cls, pattern: str) -> "DatePattern":
        """compile a pattern string

        Raises
        ------
        DatePatternError
            if the pattern is malformed
        """
        return cls(pattern, tokenize(pattern))

    def with_zone(self, timezone: tzinfo) -> "DatePattern":
        """returns a copy that prints in the given timezone"""
        return evolve(self, timezone=timezone)

    def with_locale(self, locale: Locale) -> "DatePattern":
        """returns a copy that prints names in the given locale"""
        return evolve(self, locale=locale)

    def format(self, millis: int) -> str:
        """render milliseconds since the unix epoch

        Parameters
        ----------
        millis : int
            the instant in milliseconds since 1970-01-01T00:00:00Z

        Returns
        -------
        str
            the rendered date
        """
        moment = TimeParser.from_epoch_millis(millis, self.timezone).datetime
        locale = self.locale if self.locale is not None else default_locale()
        return "".join(
            token.text if token.is_literal else PRINTERS[token.letter](moment, token.width, locale)
            for token in self.tokens
        )

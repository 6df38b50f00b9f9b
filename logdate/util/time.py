"""logdate time helpers module"""

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import arrow
from dateutil import tz

from logdate.abc.exceptions import LogdateException

UTC = ZoneInfo("UTC")

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

MILLISECOND = timedelta(milliseconds=1)

_OFFSET_PATTERN = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})$")


class TimeParserException(LogdateException):
    """exception class for time parsing"""


class UnknownTimezoneError(TimeParserException):
    """Raised if a timezone identifier can not be resolved"""

    def __init__(self, timezone_id: str):
        super().__init__(f"The datetime zone id '{timezone_id}' is not recognised")


class UnsupportedTimeValueError(TimeParserException):
    """Raised if a value is neither a datetime nor an arrow timestamp"""

    def __init__(self, value: Any):
        super().__init__(
            f"Unsupported source value of type '{type(value).__name__}'. "
            "It is neither a datetime nor an arrow timestamp"
        )


class TimeParser:
    """encapsulation of time related methods"""

    @classmethod
    def to_epoch_millis(cls, value: Any) -> int:
        """coerce a time value to milliseconds since the unix epoch

        Sub-millisecond precision is truncated toward zero, also for instants before
        the epoch. Naive datetimes are treated as UTC.

        Parameters
        ----------
        value : datetime | arrow.Arrow
            the instant to convert

        Returns
        -------
        int
            milliseconds since 1970-01-01T00:00:00Z

        Raises
        ------
        UnsupportedTimeValueError
            if the value is not a time instant
        """
        if isinstance(value, arrow.Arrow):
            value = value.datetime
        if not isinstance(value, datetime):
            raise UnsupportedTimeValueError(value)
        delta = cls._set_utc_if_timezone_is_missing(value) - EPOCH
        if delta < timedelta(0):
            return -(-delta // MILLISECOND)
        return delta // MILLISECOND

    @classmethod
    def from_epoch_millis(cls, millis: int, timezone_: tzinfo = None) -> arrow.Arrow:
        """get an arrow timestamp from milliseconds since the unix epoch

        Parameters
        ----------
        millis : int
            milliseconds since the unix epoch
        timezone_ : tzinfo
            the timezone the result is converted to, defaults to the local timezone

        Returns
        -------
        arrow.Arrow
            the timestamp in the requested timezone
        """
        if timezone_ is None:
            timezone_ = cls.local_timezone()
        return arrow.Arrow.fromdatetime(EPOCH + millis * MILLISECOND).to(timezone_)

    @classmethod
    def resolve_timezone(cls, timezone_id: str) -> tzinfo:
        """resolve a timezone identifier

        Supported are IANA identifiers like :code:`Europe/Paris`, :code:`UTC` and
        fixed offsets like :code:`+01:00`.

        Raises
        ------
        UnknownTimezoneError
            if the identifier is unknown
        """
        if not isinstance(timezone_id, str) or not timezone_id:
            raise UnknownTimezoneError(timezone_id)
        offset = _OFFSET_PATTERN.match(timezone_id)
        if offset:
            return cls._fixed_offset(offset)
        try:
            return ZoneInfo(timezone_id)
        except (ZoneInfoNotFoundError, ValueError, OSError) as error:
            raise UnknownTimezoneError(timezone_id) from error

    @staticmethod
    def _fixed_offset(match: re.Match) -> tzinfo:
        hours, minutes = int(match.group("hours")), int(match.group("minutes"))
        if hours > 23 or minutes > 59:
            raise UnknownTimezoneError(match.string)
        delta = timedelta(hours=hours, minutes=minutes)
        if match.group("sign") == "-":
            delta = -delta
        return UTC if not delta else timezone(delta)

    @staticmethod
    def local_timezone() -> tzinfo:
        """the platform default timezone"""
        return tz.tzlocal()

    @classmethod
    def _set_utc_if_timezone_is_missing(cls, time_object):
        if time_object.tzinfo is None:
            time_object = time_object.replace(tzinfo=UTC)
        return time_object

"""Exceptions of the date formatter processor"""

from typing import Any, List

from logdate.processor.base.exceptions import ProcessingWarning


class DateFormatFailureWarning(ProcessingWarning):
    """Raised if a date could not be formatted. The event is tagged and kept."""

    def __init__(
        self, source: str, value: Any, cause: Exception, event: dict, tags: List[str] = None
    ):
        self.source = source
        self.value = value
        self.cause = cause
        message = f"Failed formatting date from field '{source}' with value {value!r}: {cause}"
        super().__init__(message, event, tags)

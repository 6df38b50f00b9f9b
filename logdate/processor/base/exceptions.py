"""This module contains exceptions for processing events."""

from typing import List


class ProcessingWarning(Warning):
    """A warning occurred - log the warning, but continue processing the event."""

    def __init__(self, message: str, event: dict, tags: List[str] = None):
        self.tags = tags if tags else []
        message += f", {event=}"
        super().__init__(f"{self.__class__.__name__}: {message}")

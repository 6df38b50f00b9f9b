"""abstract module for exceptions"""


class LogdateException(Exception):
    """Base class for logdate related exceptions."""

    def __init__(self, message: str, *args) -> None:
        self.message = message
        super().__init__(message, *args)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LogdateException):
            return self.args == other.args
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.args)

"""Exceptions for emailreply reply extraction."""

from dataclasses import dataclass


class ReplyParserError(Exception):
    """Base exception for all reply parsing errors."""

    pass


@dataclass
class InvalidInputError(ReplyParserError):
    """Input is not valid for processing.

    Raised when the input is not a ``str``. Byte input must be decoded by
    the caller before parsing.
    """

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class FragmentStateError(ReplyParserError):
    """A fragment was used in a way its lifecycle does not allow.

    Raised when lines are added to a finished fragment or a fragment is
    finished twice.
    """

    message: str

    def __str__(self) -> str:
        return self.message

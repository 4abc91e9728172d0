"""emailreply - Extract the visible reply from plain-text email bodies."""

from emailreply.exceptions import (
    FragmentStateError,
    InvalidInputError,
    ReplyParserError,
)
from emailreply.message import Message
from emailreply.parser import EmailReplyParser, parse_reply, read
from emailreply.pipeline import (
    AccumulatedFragments,
    ClassifiedLine,
    Fragment,
    FragmentAccumulator,
    LineClassifier,
    PreprocessedText,
    Preprocessor,
    VisibilityResolver,
)

__version__ = "0.1.0"

__all__ = [
    "AccumulatedFragments",
    "ClassifiedLine",
    "EmailReplyParser",
    "Fragment",
    "FragmentAccumulator",
    "FragmentStateError",
    "InvalidInputError",
    "LineClassifier",
    "Message",
    "PreprocessedText",
    "Preprocessor",
    "ReplyParserError",
    "VisibilityResolver",
    "parse_reply",
    "read",
]

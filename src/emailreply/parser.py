"""EmailReplyParser - Main public interface for reply parsing.

Provides three parsing methods:
- read(): Full parse into classified fragments
- parse_reply(): Visible reply text only
- parse_reply_safe(): Visible reply text, returns None on failure
"""

import logging

from emailreply.exceptions import InvalidInputError
from emailreply.message import Message
from emailreply.pipeline.accumulator import FragmentAccumulator
from emailreply.pipeline.classifier import LineClassifier
from emailreply.pipeline.preprocessor import Preprocessor

logger = logging.getLogger(__name__)


class EmailReplyParser:
    """Extracts the visible reply from plain-text email bodies.

    The parsing pipeline:
    1. Preprocess text (line endings, wrapped quote headers, Outlook boundaries)
    2. Classify lines bottom-up
    3. Accumulate lines into fragments
    4. Resolve fragment visibility

    Example:
        parser = EmailReplyParser()

        # All fragments with their flags
        message = parser.read(email_body)

        # Only the new text
        reply = parser.parse_reply(email_body)
    """

    def __init__(
        self,
        *,
        collapse_quote_headers: bool = True,
        repair_signature_boundaries: bool = True,
        normalize_width: bool = False,
    ) -> None:
        """Initialize the parser.

        Args:
            collapse_quote_headers: Join "On ... wrote:" headers wrapped
                across lines before classification.
            repair_signature_boundaries: Insert a blank line above Outlook
                boundary lines that directly follow text.
            normalize_width: Classify full-width markers like their ASCII
                forms.
        """
        self._preprocessor = Preprocessor(
            collapse_quote_headers=collapse_quote_headers,
            repair_signature_boundaries=repair_signature_boundaries,
        )
        self._accumulator = FragmentAccumulator(LineClassifier(normalize_width=normalize_width))

    def read(self, text: str) -> Message:
        """Parse an email body into fragments.

        Args:
            text: Plain-text email body, any line ending convention.

        Returns:
            Message with fragments in message order.

        Raises:
            InvalidInputError: If text is not a str.
        """
        if not isinstance(text, str):
            raise InvalidInputError(message=f"Expected str, got {type(text).__name__}")

        preprocessed = self._preprocessor.preprocess(text)
        accumulated = self._accumulator.accumulate(preprocessed.lines)

        return Message(
            text=preprocessed.text,
            lines=preprocessed.lines,
            fragments=accumulated.fragments,
            found_visible=accumulated.found_visible,
        )

    def parse_reply(self, text: str) -> str:
        """Return only the visible reply of an email body.

        Args:
            text: Plain-text email body.

        Returns:
            Content of fragments that are neither hidden nor quoted,
            joined with newlines.

        Raises:
            InvalidInputError: If text is not a str.
        """
        return self.read(text).reply

    def parse_reply_safe(self, text: str) -> str | None:
        """Return the visible reply, or None on any failure.

        Args:
            text: Plain-text email body.

        Returns:
            Visible reply text, or None if parsing failed.
        """
        try:
            return self.parse_reply(text)
        except InvalidInputError as exc:
            logger.warning("Rejected input: %s", exc)
            return None
        except Exception:
            logger.exception("Unexpected error during reply parsing")
            return None


_default_parser = EmailReplyParser()


def read(text: str) -> Message:
    """Parse an email body with the default parser.

    Args:
        text: Plain-text email body.

    Returns:
        Message with fragments in message order.
    """
    return _default_parser.read(text)


def parse_reply(text: str) -> str:
    """Return the visible reply of an email body using the default parser.

    Args:
        text: Plain-text email body.

    Returns:
        Visible reply text.
    """
    return _default_parser.parse_reply(text)

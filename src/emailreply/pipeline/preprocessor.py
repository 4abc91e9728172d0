"""Text preprocessing for reply parsing.

Handles:
- Line ending normalization
- Collapsing a multi-line quote header onto one line
- Outlook signature-boundary repair
"""

import logging
from dataclasses import dataclass

from emailreply.patterns.headers import find_quote_header_span
from emailreply.patterns.signatures import is_signature_boundary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PreprocessedText:
    """Result of preprocessing an email body.

    Attributes:
        text: Preprocessed text with newlines.
        lines: Lines of the preprocessed text (without line endings).
        quote_header_collapsed: Whether a multi-line quote header was joined.
        boundaries_repaired: Number of blank lines inserted above
            signature boundaries.
    """

    text: str
    lines: tuple[str, ...]
    quote_header_collapsed: bool
    boundaries_repaired: int


class Preprocessor:
    """Rewrites raw email text before line classification.

    Applies the following transformations:
    1. Line ending normalization (CRLF/CR → LF)
    2. Multi-line quote header collapse
    3. Outlook signature-boundary repair
    """

    def __init__(
        self,
        *,
        collapse_quote_headers: bool = True,
        repair_signature_boundaries: bool = True,
    ) -> None:
        """Initialize the preprocessor.

        Args:
            collapse_quote_headers: If True, join a quote header that was
                wrapped across lines.
            repair_signature_boundaries: If True, insert a blank line above
                boundary lines that directly follow text.
        """
        self._collapse_quote_headers = collapse_quote_headers
        self._repair_signature_boundaries = repair_signature_boundaries

    def preprocess(self, text: str) -> PreprocessedText:
        """Preprocess email text.

        Args:
            text: Raw email body.

        Returns:
            PreprocessedText with rewritten text and its lines.
        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")

        collapsed = False
        if self._collapse_quote_headers:
            text, collapsed = self._collapse_quote_header(text)

        lines = text.split("\n")

        repaired = 0
        if self._repair_signature_boundaries:
            lines, repaired = self._repair_boundaries(lines)
            if repaired:
                text = "\n".join(lines)

        return PreprocessedText(
            text=text,
            lines=tuple(lines),
            quote_header_collapsed=collapsed,
            boundaries_repaired=repaired,
        )

    def _collapse_quote_header(self, text: str) -> tuple[str, bool]:
        """Remove the newlines inside the innermost complete quote header.

        Mail clients wrap long "On <date>, <name> wrote:" lines. Joining
        the span lets the classifier see the header as a single line.

        Args:
            text: Text with normalized line endings.

        Returns:
            Tuple of (rewritten text, whether a wrapped header was joined).
        """
        span = find_quote_header_span(text)
        if span is None:
            return text, False

        start, end = span
        header = text[start:end]
        if "\n" not in header:
            return text, False

        logger.debug("Collapsing quote header spanning %d lines", header.count("\n") + 1)
        return text[:start] + header.replace("\n", "") + text[end:], True

    def _repair_boundaries(self, lines: list[str]) -> tuple[list[str], int]:
        """Insert a blank line between text and a following boundary line.

        Outlook places the reply directly above its "____" boundary. The
        blank line lets the boundary start its own fragment.

        Args:
            lines: Lines of the message.

        Returns:
            Tuple of (repaired lines, number of blank lines inserted).
        """
        repaired: list[str] = []
        inserted = 0

        for index, line in enumerate(lines):
            if index > 0 and lines[index - 1] != "" and is_signature_boundary(line):
                repaired.append("")
                inserted += 1
            repaired.append(line)

        if inserted:
            logger.debug("Inserted %d blank line(s) above signature boundaries", inserted)

        return repaired, inserted

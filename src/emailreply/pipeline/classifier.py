"""Line classification for reply parsing.

Classifies a single line of email text:
- Quote headers ("On ... wrote:")
- Quoted lines ("> ...")
- Outlook header fields and forwarded-message banners
"""

import unicodedata
from dataclasses import dataclass

import neologdn

from emailreply.patterns.headers import is_forwarded_banner, is_header_field, is_quote_header
from emailreply.patterns.quotes import is_quoted_line


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line with its classification facets.

    Attributes:
        text: Original line text.
        line_index: Zero-based position in the message.
        is_quote_header: Line ends an "On ... wrote:" header.
        is_quoted: Line starts with a ``>`` quote marker.
        is_header_field: Line is a From/Sent/To/Subject field.
        is_forwarded_banner: Line is a forwarded-message banner.
        is_blank: Line is empty or whitespace-only.
    """

    text: str
    line_index: int
    is_quote_header: bool
    is_quoted: bool
    is_header_field: bool
    is_forwarded_banner: bool
    is_blank: bool

    @property
    def is_header(self) -> bool:
        """Whether the line belongs to a reply or forward header block."""
        return self.is_quote_header or self.is_header_field or self.is_forwarded_banner


class LineClassifier:
    """Computes the classification facets of single lines.

    Stateless: the same line always yields the same facets.
    """

    def __init__(self, *, normalize_width: bool = False) -> None:
        """Initialize the classifier.

        Args:
            normalize_width: If True, classify a neologdn + NFKC normalized
                view of each line so full-width markers (＞, Ｆｒｏｍ:) are
                recognized. The line text itself is never changed.
        """
        self._normalize_width = normalize_width

    def classify(self, line: str, line_index: int) -> ClassifiedLine:
        """Classify a single line.

        Args:
            line: A single line of text.
            line_index: Zero-based position of the line in the message.

        Returns:
            ClassifiedLine with the original text and its facets.
        """
        view = self._normalize(line) if self._normalize_width else line

        return ClassifiedLine(
            text=line,
            line_index=line_index,
            is_quote_header=is_quote_header(view),
            is_quoted=is_quoted_line(view),
            is_header_field=is_header_field(view),
            is_forwarded_banner=is_forwarded_banner(view),
            is_blank=not line.strip(),
        )

    def _normalize(self, line: str) -> str:
        """Fold full-width and compatibility characters to their ASCII forms.

        neologdn handles Japanese-specific width variants first, NFKC
        handles the remaining compatibility characters.
        """
        line = neologdn.normalize(line)
        return unicodedata.normalize("NFKC", line)

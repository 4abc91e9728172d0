"""Reply and forward header detection.

Patterns for detecting:
- Quote headers ("On Jan 1, 2020, Bob wrote:")
- Outlook-style header fields (From:, Sent:, To:, Subject:)
- Forwarded-message banners ("---------- Forwarded message ----------")

Also locates the multi-line quote header span that the preprocessor
collapses onto a single line.
"""

import re

_QUOTE_HEADER_PREFIX = "On"
_QUOTE_HEADER_SUFFIX = "wrote:"

# Field name optionally wrapped in asterisks (bold in plain-text Outlook)
_HEADER_FIELD_PATTERN = re.compile(r"^\*?(From|Sent|To|Subject):\*? .+")

_FORWARDED_BANNER_PATTERN = re.compile(r"-+ Forwarded message -+")

# "On" followed by one whitespace character opens a quote header
_QUOTE_HEADER_START_PATTERN = re.compile(r"On\s")


def is_quote_header(line: str) -> bool:
    """Check if a line ends a quote header.

    Same result as searching ``On.*wrote:$``: the line ends with
    ``wrote:`` and ``On`` occurs somewhere before that suffix.

    Args:
        line: A single line of text.

    Returns:
        True if the line is a quote header line.
    """
    if not line.endswith(_QUOTE_HEADER_SUFFIX):
        return False

    return _QUOTE_HEADER_PREFIX in line[: -len(_QUOTE_HEADER_SUFFIX)]


def is_header_field(line: str) -> bool:
    """Check if a line is an Outlook-style header field.

    Examples:
        From: Jane Doe <jane@example.com>
        *Sent:* Monday, January 1, 2024 9:00 AM

    Args:
        line: A single line of text.

    Returns:
        True if the line starts with From/Sent/To/Subject and has a value.
    """
    return _HEADER_FIELD_PATTERN.match(line) is not None


def is_forwarded_banner(line: str) -> bool:
    """Check if a line is a forwarded-message banner.

    Args:
        line: A single line of text.

    Returns:
        True if the trimmed line is dashes, " Forwarded message ", dashes.
    """
    return _FORWARDED_BANNER_PATTERN.fullmatch(line.strip()) is not None


def find_quote_header_span(text: str) -> tuple[int, int] | None:
    """Find the quote header span that gets collapsed to one line.

    Same result as the first match of
    ``(?s)(?!On.*On\\s.+?wrote:)(On\\s(.+?)wrote:)``: the span starts at
    the last ``On<whitespace>`` that still has a ``wrote:`` at least one
    character after it, and ends at the first such ``wrote:``. Every
    earlier ``On`` is rejected by the lookahead because this later
    complete header follows it.

    The scan is linear in the length of the text.

    Args:
        text: Full message text with normalized line endings.

    Returns:
        (start, end) offsets of the span, or None if there is no header.
    """
    last_suffix = text.rfind(_QUOTE_HEADER_SUFFIX)
    if last_suffix == -1:
        return None

    start: int | None = None
    for match in _QUOTE_HEADER_START_PATTERN.finditer(text):
        # At least one character must sit between "On\s" and "wrote:"
        if match.end() + 1 > last_suffix:
            break
        start = match.start()

    if start is None:
        return None

    suffix_start = text.find(_QUOTE_HEADER_SUFFIX, start + 4)
    return start, suffix_start + len(_QUOTE_HEADER_SUFFIX)

"""Quoted line detection.

A quoted line carries one or more leading ``>`` markers, optionally
indented. Quote depth is not tracked; only presence matters.
"""

import re

_QUOTE_MARKER_PATTERN = re.compile(r"^\s*>")


def is_quoted_line(line: str) -> bool:
    """Check if a line is part of a quoted block.

    Args:
        line: A single line of text.

    Returns:
        True if the line starts with a ``>`` quote marker.
    """
    return _QUOTE_MARKER_PATTERN.match(line) is not None

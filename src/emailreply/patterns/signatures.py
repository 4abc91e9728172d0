"""Email signature detection.

Patterns for detecting:
- Signature delimiters ("--", "__", "-Name")
- Mobile client signatures ("Sent from my iPhone")
- Signature boundary lines drawn by Outlook ("________________")
"""

import re

_SIGNATURE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Delimiter anywhere on the line: "-- ", "__", "-Abhishek"
    re.compile(r"--|__|-\w"),
    # Mobile clients: one to three words after the prefix
    re.compile(r"^Sent from my (?:\w+\s*){1,3}"),
)

# Optional single leading space, then seven or more underscores/dashes
_SIGNATURE_BOUNDARY_PATTERN = re.compile(r" ?[_-]{7}")


def is_signature_line(line: str) -> bool:
    """Check if a line opens a signature block.

    Callers pass the trimmed line.

    Args:
        line: A single line of text.

    Returns:
        True if the line contains a signature delimiter or is a
        "Sent from my ..." mobile signature.
    """
    return any(pattern.search(line) for pattern in _SIGNATURE_PATTERNS)


def is_signature_boundary(line: str) -> bool:
    """Check if a line is an Outlook-style signature boundary.

    Examples:
        ________________________________
        -------------
         ------------------------------

    Args:
        line: A single line of text.

    Returns:
        True if the line starts with seven or more ``_``/``-`` characters.
    """
    return _SIGNATURE_BOUNDARY_PATTERN.match(line) is not None

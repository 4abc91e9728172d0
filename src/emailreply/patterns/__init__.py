"""Pattern predicates for email reply line classification."""

from emailreply.patterns.headers import (
    find_quote_header_span,
    is_forwarded_banner,
    is_header_field,
    is_quote_header,
)
from emailreply.patterns.quotes import is_quoted_line
from emailreply.patterns.signatures import is_signature_boundary, is_signature_line

__all__ = [
    "find_quote_header_span",
    "is_forwarded_banner",
    "is_header_field",
    "is_quote_header",
    "is_quoted_line",
    "is_signature_boundary",
    "is_signature_line",
]

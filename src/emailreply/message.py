"""Parsed email message."""

from dataclasses import dataclass

from emailreply.pipeline.fragment import Fragment


@dataclass(frozen=True, slots=True)
class Message:
    """Result of reading one email body.

    Attributes:
        text: Scanned text (normalized line endings, after preprocessing).
        lines: Lines of ``text``; fragment ``start``/``end`` index into it.
        fragments: Finished fragments in message order.
        found_visible: Whether the scan ended with a visible fragment found
            below the top-most header block.
    """

    text: str
    lines: tuple[str, ...]
    fragments: tuple[Fragment, ...]
    found_visible: bool

    @property
    def visible_fragments(self) -> tuple[Fragment, ...]:
        """Fragments that make up the visible reply."""
        return tuple(f for f in self.fragments if not (f.hidden or f.quoted))

    @property
    def reply(self) -> str:
        """The visible reply text."""
        return "\n".join(f.content for f in self.visible_fragments)

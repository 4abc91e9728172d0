"""Fragments of an email message.

A fragment is a contiguous run of lines sharing the same quoted/header
classification. Lines arrive bottom-up while the fragment is open and are
put back in message order when it is finished.
"""

from dataclasses import dataclass, field

from emailreply.exceptions import FragmentStateError

_QUOTE_HEADER_SUFFIX = "wrote:"


@dataclass(slots=True)
class Fragment:
    """A run of lines with shared classification and visibility flags.

    Attributes:
        quoted: Lines are part of a quoted block.
        headers: Lines are a reply/forward header block.
        signature: Lines are a signature block.
        hidden: Fragment is excluded from the visible reply.
        content: Joined, trimmed text. Empty until the fragment is finished.
        start: Index of the first line of the fragment in the message.
        end: Index one past the last line of the fragment.
        finished: Whether content has been computed.
    """

    quoted: bool
    headers: bool
    signature: bool = False
    hidden: bool = False
    content: str = ""
    start: int = 0
    end: int = 0
    finished: bool = False
    _lines: list[str] = field(default_factory=list, repr=False)

    @classmethod
    def open(cls, line: str, line_index: int, *, quoted: bool, headers: bool) -> "Fragment":
        """Open a fragment seeded with its bottom-most line.

        Args:
            line: The seed line.
            line_index: Position of the seed line in the message.
            quoted: Classification carried by the fragment.
            headers: Classification carried by the fragment.

        Returns:
            An open Fragment holding the seed line.
        """
        return cls(
            quoted=quoted,
            headers=headers,
            start=line_index,
            end=line_index + 1,
            _lines=[line],
        )

    @property
    def last_line(self) -> str | None:
        """The most recently added line (the top-most one seen so far)."""
        return self._lines[-1] if self._lines else None

    def add_line(self, line: str) -> None:
        """Add the line directly above the fragment's current top line.

        Raises:
            FragmentStateError: If the fragment is already finished.
        """
        if self.finished:
            raise FragmentStateError(message="Cannot add lines to a finished fragment")

        self._lines.append(line)
        self.start -= 1

    def finish(self) -> None:
        """Compute content from the buffered lines and release them.

        Lines are restored to message order, joined and trimmed. A
        trailing "wrote:" left over from a quote header is dropped.

        Raises:
            FragmentStateError: If the fragment is already finished.
        """
        if self.finished:
            raise FragmentStateError(message="Fragment is already finished")

        self._lines.reverse()
        content = "\n".join(self._lines).strip()
        if content.endswith(_QUOTE_HEADER_SUFFIX):
            content = content[: -len(_QUOTE_HEADER_SUFFIX)].rstrip()

        self.content = content
        self._lines.clear()
        self.finished = True

"""Fragment accumulation state machine.

Scans message lines bottom-up and groups them into fragments:
- Blank lines below a signature line close a signature fragment
- Lines sharing the quoted/header classification of the open fragment
  join it; quoted fragments also absorb blank lines and quote headers
- Any other line closes the open fragment and opens a new one
"""

import logging
from dataclasses import dataclass, field

from emailreply.patterns.signatures import is_signature_line
from emailreply.pipeline.classifier import ClassifiedLine, LineClassifier
from emailreply.pipeline.fragment import Fragment
from emailreply.pipeline.visibility import VisibilityResolver

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AccumulatedFragments:
    """Result of accumulating the lines of a message.

    Attributes:
        fragments: Finished fragments in message order (top to bottom).
        found_visible: Final visibility state of the scan.
    """

    fragments: tuple[Fragment, ...]
    found_visible: bool


@dataclass(slots=True)
class _ScanState:
    """Mutable state of a single bottom-up scan."""

    resolver: VisibilityResolver
    open_fragment: Fragment | None = None
    finished: list[Fragment] = field(default_factory=list)


class FragmentAccumulator:
    """Groups message lines into fragments.

    The accumulator holds no per-message state; each call to
    ``accumulate`` runs its own scan.
    """

    def __init__(self, classifier: LineClassifier | None = None) -> None:
        """Initialize the accumulator.

        Args:
            classifier: Line classifier to use. Defaults to a plain
                LineClassifier.
        """
        self._classifier = classifier or LineClassifier()

    def accumulate(self, lines: tuple[str, ...]) -> AccumulatedFragments:
        """Group lines into fragments and resolve their visibility.

        Args:
            lines: Preprocessed message lines in message order.

        Returns:
            AccumulatedFragments in message order.
        """
        state = _ScanState(resolver=VisibilityResolver())

        for line_index in range(len(lines) - 1, -1, -1):
            classified = self._classifier.classify(lines[line_index], line_index)
            self._scan_line(state, classified)

        self._close(state)
        state.finished.reverse()

        return AccumulatedFragments(
            fragments=tuple(state.finished),
            found_visible=state.resolver.found_visible,
        )

    def _scan_line(self, state: _ScanState, line: ClassifiedLine) -> None:
        """Feed one line (bottom-up) into the scan."""
        fragment = state.open_fragment

        # A blank line above a signature line ends the signature block
        if fragment is not None and line.is_blank:
            last_line = fragment.last_line
            if last_line is not None and is_signature_line(last_line.strip()):
                fragment.signature = True
                self._close(state)
                fragment = None

        if fragment is None:
            self._open(state, line)
            return

        same_kind = fragment.headers == line.is_header and fragment.quoted == line.is_quoted
        absorbed = fragment.quoted and (line.is_quote_header or line.is_blank)

        if same_kind or absorbed:
            fragment.add_line(line.text)
        else:
            self._close(state)
            self._open(state, line)

    def _open(self, state: _ScanState, line: ClassifiedLine) -> None:
        state.open_fragment = Fragment.open(
            line.text,
            line.line_index,
            quoted=line.is_quoted,
            headers=line.is_header,
        )

    def _close(self, state: _ScanState) -> None:
        """Finish the open fragment, resolve it, and move it to the finished list."""
        fragment = state.open_fragment
        if fragment is None:
            return

        state.open_fragment = None
        fragment.finish()
        state.resolver.resolve(fragment, state.finished)
        state.finished.append(fragment)

        logger.debug(
            "Closed fragment lines %d-%d (quoted=%s headers=%s signature=%s hidden=%s)",
            fragment.start,
            fragment.end,
            fragment.quoted,
            fragment.headers,
            fragment.signature,
            fragment.hidden,
        )

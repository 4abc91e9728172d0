"""Visibility resolution for finished fragments.

Decides, as each fragment closes, whether it belongs to the visible reply.
Fragments close bottom-up, so the first fragment that is not quoted,
header, signature or blank is the bottom of the visible reply.
"""

import logging

from emailreply.pipeline.fragment import Fragment

logger = logging.getLogger(__name__)


class VisibilityResolver:
    """Tracks visibility state across the fragments of one message.

    A resolver is created per scan; ``found_visible`` belongs to that scan.

    Attributes:
        found_visible: Whether a visible fragment has been seen since the
            last header block.
    """

    def __init__(self) -> None:
        self.found_visible = False

    def resolve(self, fragment: Fragment, finished: list[Fragment]) -> None:
        """Set the hidden flags for a fragment that has just been finished.

        A header block starts a new quoted region: every fragment closed
        before it lies below the header and is hidden, and the search for
        a visible fragment starts over.

        Args:
            fragment: The fragment just finished.
            finished: Fragments finished earlier in this scan (bottom-up).
        """
        if fragment.headers:
            self.found_visible = False
            for earlier in finished:
                earlier.hidden = True
            if finished:
                logger.debug("Header block at line %d hid %d fragment(s)", fragment.start, len(finished))

        if self.found_visible:
            return

        if fragment.quoted or fragment.headers or fragment.signature or not fragment.content.strip():
            fragment.hidden = True
        else:
            self.found_visible = True

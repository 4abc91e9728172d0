#!/usr/bin/env python
"""Inspect how an email body is split into fragments.

Usage:
    python scripts/inspect_fragments.py mail.txt                 # Fragment table
    python scripts/inspect_fragments.py mail.txt --fragment 2    # Full content of fragment 2
    python scripts/inspect_fragments.py mail.txt --reply         # Visible reply only
    cat mail.txt | python scripts/inspect_fragments.py -         # Read from stdin
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from emailreply import EmailReplyParser, Message


def load_text(source: str) -> str:
    """Load email text from a file path, or stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def print_fragment_table(message: Message) -> None:
    """Print one row per fragment with its flags and a content preview."""
    print(f"  {'#':>3}  {'Lines':<9}  {'Q H S':<5}  {'Hid':<3}  Content")
    print(f"  {'-'*3}  {'-'*9}  {'-'*5}  {'-'*3}  {'-'*55}")

    for idx, fragment in enumerate(message.fragments):
        first_line = fragment.content.split("\n", 1)[0]
        preview = first_line[:55] + "..." if len(first_line) > 55 else first_line
        if not fragment.content:
            preview = "(blank)"

        flags = " ".join(
            "x" if flag else "."
            for flag in (fragment.quoted, fragment.headers, fragment.signature)
        )
        hidden = "yes" if fragment.hidden else "no"
        span = f"{fragment.start}-{fragment.end - 1}"
        print(f"  {idx:>3}  {span:<9}  {flags}  {hidden:<3}  {preview}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("source", help="Email body file, or - for stdin")
    parser.add_argument("--fragment", type=int, help="Print the full content of one fragment")
    parser.add_argument("--reply", action="store_true", help="Print only the visible reply")
    parser.add_argument("--normalize-width", action="store_true", help="Classify full-width markers")
    parser.add_argument("--no-collapse", action="store_true", help="Keep wrapped quote headers as-is")
    parser.add_argument("--no-repair", action="store_true", help="Skip Outlook boundary repair")
    parser.add_argument("--debug", action="store_true", help="Log pipeline decisions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    reply_parser = EmailReplyParser(
        collapse_quote_headers=not args.no_collapse,
        repair_signature_boundaries=not args.no_repair,
        normalize_width=args.normalize_width,
    )
    message = reply_parser.read(load_text(args.source))

    if args.reply:
        print(message.reply)
        return

    if args.fragment is not None:
        if not 0 <= args.fragment < len(message.fragments):
            print(f"Error: Fragment {args.fragment} out of range (max {len(message.fragments) - 1})")
            return
        print(message.fragments[args.fragment].content)
        return

    print(f"{len(message.fragments)} fragment(s), {len(message.lines)} line(s)")
    print("=" * 80)
    print_fragment_table(message)
    print()
    print("Visible reply:")
    print("-" * 80)
    print(message.reply)


if __name__ == "__main__":
    main()

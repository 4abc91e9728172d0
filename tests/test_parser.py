"""End-to-end tests for EmailReplyParser."""

import time

import pytest

from emailreply import EmailReplyParser, InvalidInputError, Message, parse_reply, read

MAILING_LIST_SIGNATURE = """Hi folks

What is the best way to clear a Riak bucket of all key, values after
running a test?
I am currently using the Java HTTP API.

-Abhishek Kona


_______________________________________________
riak-users mailing list
riak-users@lists.basho.com
http://lists.basho.com/mailman/listinfo/riak-users_lists.basho.com
"""

QUOTED_LIST_SIGNATURE = (
    "folks\n\nthis is a quote\n\nOn Jan 1, 2020, Bob wrote:\n\n> quoted text\n\n--\nriak-users mailing list"
)

WRAPPED_REPLY_HEADER = """I get proper rendering as well.

Sent from a magnificent torch of pixels

On Dec 16, 2011, at 12:47 PM, Corey Donohoe
<reply@reply.github.com>
wrote:

> Was this caching related or fixed already?  I get proper rendering here.
>
> ![](https://img.skitch.com/20111216-m9munqjsy112yqap5cjee5wr6c.jpg)
>
> ---
> Reply to this email directly or view it on GitHub:
> https://github.com/github/github/issues/2278#issuecomment-3182418
"""

WINDOWS_LINE_ENDINGS = (
    "Awesome! :+1:\r\n"
    "\r\n"
    "On Mon, Jan 6, 2014 at 9:12 AM, Example <dev@example.com> wrote:\r\n"
    "\r\n"
    "> Steps 0-2 done\r\n"
)

OUTLOOK_REPLY = """Outlook with a reply


 ________________________________

From: Google Apps Sync Team [mailto:mail-noreply@google.com]
Sent: Thursday, February 09, 2012 1:41 PM
To: jow@example.com
Subject: Google Apps Sync was updated!



Dear user, an update is available."""

OUTLOOK_REPLY_ABOVE_LINE = """Outlook with a reply directly above line
-------------
From: CRM Test <support@example.com>
Sent: Monday, January 1, 2018 12:00 PM
To: Jane Doe
Subject: Test Reply

Original message body"""

OUTLOOK_UNUSUAL_HEADERS = """Outlook with a reply above headers using unusual format

*From:* Kim Doe [mailto:kim@example.com]
*Sent:* Monday, March 4, 2019 11:32 AM
*To:* Support <support@example.com>
*Subject:* Test

Original text"""

GREEDY_ON = """On your remote host you can run:

  telnet 127.0.0.1 52698

This should connect to TextMate

On 9 Jan 2014, at 2:47, George Plymale wrote:

> I am having an issue
"""

ONE_IS_NOT_ON = """Thank, this is really helpful.

One outstanding question I had:

Locally (on development), when I run the app it works.

On Oct 1, 2012, at 11:55 PM, Dave Tapley wrote:

> The good news is that I've found a much better query for lastLocation.
>"""


class TestFragments:
    """Fragment structure of complete messages."""

    def test_mailing_list_signature(self) -> None:
        """Personal and list signatures are separate hidden fragments."""
        message = read(MAILING_LIST_SIGNATURE)

        assert len(message.fragments) == 3
        assert [f.signature for f in message.fragments] == [False, True, True]
        assert [f.hidden for f in message.fragments] == [False, True, True]
        assert "folks" in message.fragments[0].content
        assert "riak-users" in message.fragments[2].content

    def test_quoted_list_signature(self) -> None:
        """Only the top fragment of a quoted reply with a list footer is visible."""
        message = read(QUOTED_LIST_SIGNATURE)

        assert "folks" in message.fragments[0].content
        assert message.fragments[0].hidden is False
        assert all(f.hidden for f in message.fragments[1:])
        assert message.fragments[-1].signature is True
        assert message.reply == "folks\n\nthis is a quote"

    def test_wrapped_reply_header(self) -> None:
        """A header wrapped over three lines stays with the quote."""
        message = read(WRAPPED_REPLY_HEADER)

        assert "I get" in message.fragments[0].content
        assert "On" in message.fragments[1].content
        assert "Donohoe" in message.fragments[1].content
        assert message.fragments[1].quoted is True

    def test_windows_line_endings(self) -> None:
        """CRLF input splits like LF input."""
        message = read(WINDOWS_LINE_ENDINGS)

        assert ":+1:" in message.fragments[0].content
        assert "On" in message.fragments[1].content
        assert "\r" not in message.text

    def test_greedy_on(self) -> None:
        """An earlier sentence starting with On is not a header."""
        message = read(GREEDY_ON)

        assert message.fragments[0].content.startswith("On your remote host")
        assert message.fragments[1].content.startswith("On 9 Jan 2014")
        assert [f.quoted for f in message.fragments] == [False, True, False]
        assert [f.signature for f in message.fragments] == [False, False, False]
        assert [f.hidden for f in message.fragments] == [False, True, True]

    def test_empty_input(self) -> None:
        """Empty input gives one empty hidden fragment."""
        message = read("")

        assert isinstance(message, Message)
        assert len(message.fragments) <= 1
        assert all(f.content == "" for f in message.fragments)


class TestParseReply:
    """Visible reply extraction."""

    def test_reply_from_mailing_list(self) -> None:
        """List footers are dropped from the reply."""
        reply = parse_reply(MAILING_LIST_SIGNATURE)

        assert reply.startswith("Hi folks")
        assert "riak-users" not in reply
        assert "Abhishek" not in reply

    def test_sent_from_iphone(self) -> None:
        """Mobile signatures are dropped."""
        reply = parse_reply("Reply text\n\nSent from my iPhone")

        assert "Sent from my iPhone" not in reply
        assert reply == "Reply text"

    def test_outlook_reply(self) -> None:
        """Outlook quoted header block is dropped."""
        assert parse_reply(OUTLOOK_REPLY) == "Outlook with a reply"

    def test_outlook_reply_directly_above_line(self) -> None:
        """A boundary directly under the reply is split off."""
        assert parse_reply(OUTLOOK_REPLY_ABOVE_LINE) == "Outlook with a reply directly above line"

    def test_outlook_unusual_headers(self) -> None:
        """Bold *From:* style fields are headers."""
        assert parse_reply(OUTLOOK_UNUSUAL_HEADERS) == "Outlook with a reply above headers using unusual format"

    def test_headers_without_delimiter(self) -> None:
        """A header block directly under the reply ends it."""
        text = (
            "And another reply!\n"
            "From: Dan Watson [mailto:user@host.com]\n"
            "Sent: Monday, November 26, 2012 10:48 AM\n"
            "To: Watson, Dan\n"
            "Subject: Re: New Issue\n"
            "\n"
            "A new issue has been created in a tracker."
        )

        assert parse_reply(text).strip() == "And another reply!"

    def test_one_is_not_on(self) -> None:
        """A word starting with On does not hide the reply."""
        reply = parse_reply(ONE_IS_NOT_ON)

        assert "One outstanding question I had:" in reply
        assert "On Oct 1, 2012, at 11:55 PM, Dave Tapley wrote:" not in reply

    def test_partial_quote_header(self) -> None:
        """Every paragraph above the real header is kept."""
        reply = parse_reply(GREEDY_ON)

        assert "On your remote host you can run:" in reply
        assert "telnet 127.0.0.1 52698" in reply
        assert "This should connect to TextMate" in reply
        assert "I am having an issue" not in reply

    def test_trailing_wrote_stripped(self) -> None:
        """A header fragment loses its wrote: suffix."""
        message = read("Thanks!\n\nOn Mon, Bob wrote:\n\nold body text")

        assert message.fragments[1].content == "On Mon, Bob"
        assert message.reply == "Thanks!"

    def test_empty_input(self) -> None:
        """Empty input has an empty reply."""
        assert parse_reply("") == ""

    def test_idempotent(self) -> None:
        """Parsing the same text twice gives the same reply."""
        assert parse_reply(OUTLOOK_REPLY) == parse_reply(OUTLOOK_REPLY)
        assert parse_reply(GREEDY_ON) == parse_reply(GREEDY_ON)


class TestEmailReplyParser:
    """Parser configuration and error handling."""

    def test_rejects_bytes(self) -> None:
        """Byte input raises InvalidInputError."""
        with pytest.raises(InvalidInputError, match="Expected str"):
            EmailReplyParser().read(b"Reply")  # type: ignore[arg-type]

    def test_safe_returns_none_on_bad_input(self) -> None:
        """parse_reply_safe returns None instead of raising."""
        assert EmailReplyParser().parse_reply_safe(None) is None  # type: ignore[arg-type]

    def test_safe_returns_reply(self) -> None:
        """parse_reply_safe returns the reply on success."""
        assert EmailReplyParser().parse_reply_safe("Reply text\n\nSent from my iPhone") == "Reply text"

    def test_boundary_repair_disabled(self) -> None:
        """Without repair the boundary stays glued to the reply."""
        parser = EmailReplyParser(repair_signature_boundaries=False)
        reply = parser.parse_reply(OUTLOOK_REPLY_ABOVE_LINE)

        assert reply != "Outlook with a reply directly above line"

    def test_width_normalization(self) -> None:
        """Full-width quote markers are quoted only when normalizing."""
        text = "了解です。\n\n＞ 明日の会議について\n"

        assert EmailReplyParser(normalize_width=True).parse_reply(text) == "了解です。"
        assert "明日" in EmailReplyParser().parse_reply(text)

    def test_parser_is_reusable(self) -> None:
        """One parser gives identical results across calls."""
        parser = EmailReplyParser()

        first = parser.read(MAILING_LIST_SIGNATURE)
        second = parser.read(MAILING_LIST_SIGNATURE)

        assert first == second


class TestReconstruction:
    """Fragments reproduce the scanned text."""

    @pytest.mark.parametrize(
        "text",
        [MAILING_LIST_SIGNATURE, WRAPPED_REPLY_HEADER, OUTLOOK_REPLY_ABOVE_LINE, GREEDY_ON, ""],
    )
    def test_fragment_lines_rebuild_text(self, text: str) -> None:
        """Joining fragment line ranges gives back Message.text."""
        message = read(text)

        rebuilt = "\n".join("\n".join(message.lines[f.start : f.end]) for f in message.fragments)
        assert rebuilt == message.text

    def test_text_unchanged_without_rewrites(self) -> None:
        """Without preprocessing rewrites the scanned text is the input."""
        assert read(MAILING_LIST_SIGNATURE).text == MAILING_LIST_SIGNATURE


class TestPathologicalInput:
    """Parsing stays fast on adversarial input."""

    @pytest.mark.parametrize(
        "text",
        [
            "On " * 10000 + "\nwrote:",
            ("On a day\n" * 5000) + "Bob wrote:\n" + "> x\n" * 5000,
            ("-" * 6 + "\n") * 10000,
            "x" + "\n" + "_" * 100000,
            ("> " + "On " * 50 + "\n\n") * 2000,
        ],
    )
    def test_completes_quickly(self, text: str) -> None:
        """Adversarial messages parse in well under two seconds."""
        start = time.perf_counter()
        read(text)

        assert time.perf_counter() - start < 2.0

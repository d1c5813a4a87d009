"""
Parser for single exported chat lines.

Format: "DD/MM/YYYY, HH:MM - Sender Name: Message text"

Delimiters are single characters found left to right: the first comma ends
the date, the first hyphen after it ends the time, the first colon after
that ends the sender. Date and time are not validated.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Optional

from .models import ParsedMessage, Sentiment
from .rules import (
    DATE_DELIMITER,
    FUNNY_KEYWORDS,
    LOVE_KEYWORDS,
    PAYLOAD_OFFSET,
    SENDER_DELIMITER,
    TIME_DELIMITER,
    TOKEN_SEPARATOR,
    TRIM_CHARS,
)

logger = logging.getLogger(__name__)


def _classify(current: Sentiment, token: str) -> Sentiment:
    # neutral -> love -> funny, never backwards
    if token in FUNNY_KEYWORDS:
        return Sentiment.FUNNY
    if token in LOVE_KEYWORDS and current is not Sentiment.FUNNY:
        return Sentiment.LOVE
    return current


def classify_sentiment(text: str) -> Sentiment:
    """Keyword sentiment of a message body; funny wins over love."""
    tokens = (token.strip(TRIM_CHARS).lower() for token in text.split(TOKEN_SEPARATOR))
    return reduce(_classify, tokens, Sentiment.NEUTRAL)


def count_words(text: str) -> int:
    return sum(1 for token in text.split(TOKEN_SEPARATOR) if token.strip(TRIM_CHARS))


def _reject(reason: str, line: Any) -> None:
    logger.debug("chat line rejected (%s): %r", reason, line)
    return None


def parse_chat_line(line: Any) -> Optional[ParsedMessage]:
    """
    Split one chat export line into date, time, sender and message.

    Returns None for anything that does not fit the format; never raises.
    """
    if not isinstance(line, str):
        return _reject("not a string", line)
    if len(line) == 0:
        return _reject("empty", line)

    date, sep, rest = line.partition(DATE_DELIMITER)
    if not sep:
        return _reject("missing comma", line)

    time, sep, rest = rest.partition(TIME_DELIMITER)
    if not sep:
        return _reject("missing hyphen", line)

    colon = rest.find(SENDER_DELIMITER)
    if colon == -1:
        return _reject("missing colon", line)

    sender = rest[:colon]
    payload = rest[colon + PAYLOAD_OFFSET:]
    if not payload:
        return _reject("empty payload", line)

    text = payload.strip(TRIM_CHARS)

    return ParsedMessage(
        date=date.strip(TRIM_CHARS),
        time=time.strip(TRIM_CHARS),
        sender=sender.strip(TRIM_CHARS),
        text=text,
        word_count=count_words(text),
        sentiment=classify_sentiment(text),
    )

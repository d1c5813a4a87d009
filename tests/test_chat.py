import logging

import pytest
from pydantic import ValidationError

from app.chat import classify_sentiment, count_words, parse_chat_line
from app.models import ParsedMessage, Sentiment


def test_parse_funny_line():
    msg = parse_chat_line("25/01/2025, 14:30 - Rahul: Bhai party kab hai? 😂")
    assert msg == ParsedMessage(
        date="25/01/2025",
        time="14:30",
        sender="Rahul",
        text="Bhai party kab hai? 😂",
        word_count=5,
        sentiment=Sentiment.FUNNY,
    )


def test_parse_love_line():
    msg = parse_chat_line("01/12/2024, 09:15 - Priya: I love this song")
    assert msg is not None
    assert msg.model_dump(by_alias=True) == {
        "date": "01/12/2024",
        "time": "09:15",
        "sender": "Priya",
        "text": "I love this song",
        "wordCount": 4,
        "sentiment": Sentiment.LOVE,
    }


def test_parse_neutral_line():
    msg = parse_chat_line("02/02/2025, 10:00 - Amit Kumar: kal milte hain")
    assert msg.sender == "Amit Kumar"
    assert msg.sentiment is Sentiment.NEUTRAL
    assert msg.word_count == 3


@pytest.mark.parametrize(
    "line",
    [
        None,
        42,
        ["25/01/2025, 14:30 - Rahul: hi"],
        "",
        "25/01/2025 14:30 - Rahul: hi",  # no comma
        "25/01/2025, 14:30 Rahul Bhai",  # no hyphen
        "25/01/2025, 14:30 - Rahul Bhai",  # no colon
        "25/01/2025, 14:30 - Rahul:",  # nothing after colon
        "25/01/2025, 14:30 - Rahul:x",  # payload starts past the end
    ],
)
def test_malformed_lines_return_none(line):
    assert parse_chat_line(line) is None


def test_rejection_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="app.chat")
    assert parse_chat_line("25/01/2025, 14:30 Rahul Bhai") is None
    assert "missing hyphen" in caplog.text


def test_rest_of_line_kept_after_later_delimiters():
    msg = parse_chat_line("25/01/2025, 14:30 - Rahul: ok, see you - at 5: sharp")
    assert msg.text == "ok, see you - at 5: sharp"
    assert msg.word_count == 7


def test_first_hyphen_ends_time():
    # a hyphen inside the time moves the boundary
    msg = parse_chat_line("25/01/2025, 14-30 - Rahul: hi")
    assert msg.time == "14"
    assert msg.sender == "30 - Rahul"


def test_blank_payload_gives_empty_text():
    msg = parse_chat_line("25/01/2025, 14:30 - Rahul:    ")
    assert msg.text == ""
    assert msg.word_count == 0
    assert msg.sentiment is Sentiment.NEUTRAL


def test_word_count_ignores_extra_spaces():
    msg = parse_chat_line("25/01/2025, 14:30 - Rahul:   bhai   sun   na  ")
    assert msg.text == "bhai   sun   na"
    assert msg.word_count == 3


@pytest.mark.parametrize(
    "text, expected",
    [
        ("HAHA bhai", Sentiment.FUNNY),
        ("nice one :)", Sentiment.FUNNY),
        ("pyaar hai ❤", Sentiment.LOVE),
        ("LOVE it", Sentiment.LOVE),
        ("love you haha", Sentiment.FUNNY),
        ("haha love you", Sentiment.FUNNY),
        ("lovely hahaha", Sentiment.NEUTRAL),
        ("", Sentiment.NEUTRAL),
    ],
)
def test_classify_sentiment(text, expected):
    assert classify_sentiment(text) is expected


def test_both_keywords_funny_wins_in_parse():
    msg = parse_chat_line("25/01/2025, 14:30 - Rahul: 😂 love")
    assert msg.sentiment is Sentiment.FUNNY


def test_count_words():
    assert count_words("a  b c ") == 3
    assert count_words("") == 0


def test_parsed_message_is_frozen():
    msg = parse_chat_line("01/12/2024, 09:15 - Priya: I love this song")
    with pytest.raises(ValidationError):
        msg.text = "changed"


def test_parsed_message_rejects_negative_word_count():
    with pytest.raises(ValidationError):
        ParsedMessage(date="d", time="t", sender="s", text="", wordCount=-1)


@pytest.mark.parametrize(
    "line, text, word_count",
    [
        ("25/01/2025, 14:30 - Rahul: hi \ufeff", "hi", 1),
        ("25/01/2025, 14:30 - Rahul: hi \x1c", "hi \x1c", 2),
        ("25/01/2025, 14:30 - Rahul: \u00a0hi\u3000", "hi", 1),
        ("25/01/2025, 14:30 - Rahul: hi \x85", "hi \x85", 2),
    ],
)
def test_trimming_keeps_control_separators(line, text, word_count):
    msg = parse_chat_line(line)
    assert msg.text == text
    assert msg.word_count == word_count


def test_fields_trim_byte_order_mark():
    msg = parse_chat_line("\ufeff25/01/2025,\ufeff14:30 -\ufeffRahul\ufeff: hi")
    assert msg.date == "25/01/2025"
    assert msg.time == "14:30"
    assert msg.sender == "Rahul"

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Sentiment(str, Enum):
    FUNNY = "funny"
    LOVE = "love"
    NEUTRAL = "neutral"


class ParsedMessage(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    time: str
    sender: str
    text: str
    word_count: int = Field(ge=0, alias="wordCount")
    sentiment: Sentiment = Sentiment.NEUTRAL


class TitleRequest(BaseModel):
    # Any JSON value; non-strings normalize to "".
    title: Any = Field(examples=["  DILWALE   DULHANIA   LE   JAYENGE  "])


class TitleResponse(BaseModel):
    title: str


class ChatLineRequest(BaseModel):
    line: Any = Field(examples=["25/01/2025, 14:30 - Rahul: Bhai party kab hai?"])


class HealthResponse(BaseModel):
    ok: bool = True

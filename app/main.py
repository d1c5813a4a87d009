from fastapi import FastAPI, HTTPException, Request

from .chat import parse_chat_line
from .logging_setup import setup_logging
from .models import ChatLineRequest, HealthResponse, ParsedMessage, TitleRequest, TitleResponse
from .normalize import decode_line, normalize_title
from .rules import EXPECTED_LINE_FORMAT
from .settings import get_settings

settings = get_settings()
setup_logging(settings)

app = FastAPI(
    title="chat-line-normalizer",
    description="Title casing and chat export line parsing",
    version="0.1.0",
)

UNPARSEABLE = "Line does not match the chat export format"


def _parse_or_422(line) -> ParsedMessage:
    parsed = parse_chat_line(line)
    if parsed is None:
        raise HTTPException(status_code=422, detail=UNPARSEABLE)
    return parsed


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/titles/normalize", response_model=TitleResponse)
def titles_normalize(body: TitleRequest):
    return {"title": normalize_title(body.title)}


@app.post("/chat/parse", response_model=ParsedMessage)
def chat_parse(body: ChatLineRequest):
    return _parse_or_422(body.line)


async def _read_capped(request: Request, limit: int) -> bytes:
    too_large = HTTPException(status_code=413, detail=f"Line exceeds {limit} bytes")

    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise too_large

    raw = bytearray()
    async for chunk in request.stream():
        raw.extend(chunk)
        if len(raw) > limit:
            raise too_large
    return bytes(raw)


@app.post(
    "/chat/parse/raw",
    response_model=ParsedMessage,
    description=f"Raw body holding one line: {EXPECTED_LINE_FORMAT}",
)
async def chat_parse_raw(request: Request):
    raw = await _read_capped(request, settings.MAX_LINE_BYTES)
    line, _ = decode_line(raw)
    return _parse_or_422(line)

"""FastAPI web service for parsing NMEA sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Clients ``POST /parse`` with ``{"sentence": "$GNRMC,...*7B"}`` and receive
the parsed record as JSON, or HTTP 422 with the error tag. Every record parsed
successfully is also pushed to the clients connected on ``ws://<host>:8000/ws``.
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from gpslib.formatters import format_error_json, sample_to_dict
from gpslib.nmea.parser import parse
from gpslib.nmea.types import ParseError
from server.broadcaster import (
    add_subscriber,
    broadcast_message,
    remove_subscriber,
    subscriber_count,
)
from server.config import ServerSettings, load_settings

logger = logging.getLogger(__name__)

_CLOSE_GOING_AWAY = 1001


class SentenceRequest(BaseModel):
    sentence: str


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    application.state.settings = load_settings()
    logger.info("Server settings: %s", application.state.settings)
    yield


app = FastAPI(lifespan=_lifespan)


def _settings(state: object) -> ServerSettings:
    return getattr(state, "settings", None) or ServerSettings()


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/parse")
async def parse_sentence(body: SentenceRequest) -> Response:
    """Parse one sentence and broadcast the record to WebSocket clients.

    Returns:
        200 with ``{"type": ..., "data": {...}}`` on success, or 422 with
        ``{"error": <tag>, "sentence": <input>}`` when parsing fails.
    """
    result = parse(body.sentence)
    if isinstance(result, ParseError):
        logger.warning("Rejected sentence (%s): %r", result.value, body.sentence)
        return Response(
            content=format_error_json(result, body.sentence),
            status_code=422,
            media_type="application/json",
        )

    payload = sample_to_dict(result)
    broadcast_message(json.dumps(payload))
    return JSONResponse(content=payload)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
    timeout_seconds: float,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=timeout_seconds)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=_CLOSE_GOING_AWAY)
    except WebSocketDisconnect:
        pass


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream parsed records as JSON messages to a connected WebSocket client.

    Each client gets its own bounded queue. The oldest message is dropped when
    the queue is full so slow clients do not stall the parser. The connection
    closes, and the client should reconnect, if no message arrives within the
    configured timeout.

    Args:
        websocket: The incoming WebSocket connection.
    """
    settings = _settings(websocket.app.state)
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=settings.queue_max_size)
    add_subscriber(queue)
    try:
        await websocket.accept()
        logger.info("WebSocket client connected, %d subscribers", subscriber_count())
        await _send_messages_until_disconnect(queue, websocket, settings.timeout_seconds)
    finally:
        remove_subscriber(queue)

"""Tests for websocket broadcasting and connection lifecycle."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import WebSocketDisconnect
from fastapi.testclient import TestClient

from server.broadcaster import (
    _enqueue_message,
    add_subscriber,
    broadcast_message,
    remove_subscriber,
    subscriber_count,
)
from server.main import _send_messages_until_disconnect, app
from tests.server.conftest import RMC_VALID, ZDA_VALID


def test_parsed_record_is_broadcast(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        client.post("/parse", json={"sentence": ZDA_VALID})
        data = websocket.receive_json()
        assert data["type"] == "$GPZDA"
        assert data["data"]["utc_year"] == "2002"


def test_multiple_clients(client: TestClient) -> None:
    with (
        client.websocket_connect("/ws") as socket_one,
        client.websocket_connect("/ws") as socket_two,
    ):
        client.post("/parse", json={"sentence": RMC_VALID})
        assert socket_one.receive_json()["type"] == "$GNRMC"
        assert socket_two.receive_json()["type"] == "$GNRMC"


def test_rejected_sentence_not_broadcast(client: TestClient) -> None:
    with client.websocket_connect("/ws") as websocket:
        client.post("/parse", json={"sentence": "$GPXXX,1,2,3*53"})
        client.post("/parse", json={"sentence": ZDA_VALID})
        assert websocket.receive_json()["type"] == "$GPZDA"


def test_connect_logs_subscriber_count(
    client: TestClient, caplog: pytest.LogCaptureFixture
) -> None:
    with (
        caplog.at_level(logging.INFO, logger="server.main"),
        client.websocket_connect("/ws"),
        client.websocket_connect("/ws"),
    ):
        count = subscriber_count()
        assert count >= 2
    assert f"WebSocket client connected, {count} subscribers" in caplog.text


def test_drop_oldest_overflow() -> None:
    message_queue: asyncio.Queue[str] = asyncio.Queue(maxsize=2)
    _enqueue_message(message_queue, "message_one")
    _enqueue_message(message_queue, "message_two")
    _enqueue_message(message_queue, "message_three")
    assert message_queue.qsize() == 2
    assert message_queue.get_nowait() == "message_two"
    assert message_queue.get_nowait() == "message_three"


def test_broadcast_reaches_every_subscriber() -> None:
    first: asyncio.Queue[str] = asyncio.Queue(maxsize=1)
    second: asyncio.Queue[str] = asyncio.Queue(maxsize=1)
    add_subscriber(first)
    add_subscriber(second)
    try:
        assert subscriber_count() >= 2
        broadcast_message("hello")
    finally:
        remove_subscriber(first)
        remove_subscriber(second)
    assert first.get_nowait() == "hello"
    assert second.get_nowait() == "hello"


def test_timeout_disconnect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GPSLIB_WS_TIMEOUT_SECONDS", "0.05")
    with (
        TestClient(app) as client,
        pytest.raises(WebSocketDisconnect) as exc_info,
        client.websocket_connect("/ws") as websocket,
    ):
        websocket.receive_json()
    assert exc_info.value.code == 1001


def test_client_disconnect_silent() -> None:
    class MockWebSocket:
        async def send_text(self, _text: str) -> None:
            raise WebSocketDisconnect(code=1000)

    async def _run() -> None:
        message_queue = MagicMock(spec=asyncio.Queue)
        message_queue.get = AsyncMock(return_value="message")
        websocket = MockWebSocket()
        await _send_messages_until_disconnect(message_queue, websocket, 1.0)  # type: ignore[arg-type]

    asyncio.run(_run())

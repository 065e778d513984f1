import asyncio
import json
from typing import Any, Optional, Union

import pytest_asyncio
from aiohttp import web

from mystrom_exporter.const import ENDPOINT_INFO, ENDPOINT_REPORT

INFO_PAYLOAD = {
    "version": "3.1",
    "mac": "AA:BB:CC",
    "type": 101,
    "ssid": "home",
    "static": False,
    "connected": True,
}

REPORT_PAYLOAD = {
    "power": 12.5,
    "Ws": 0.8,
    "relay": True,
    "temperature": 21.3,
}


def _encode(payload: Union[dict[str, Any], bytes]) -> bytes:
    if isinstance(payload, bytes):
        return payload
    return json.dumps(payload).encode()


class FakeSwitch:
    """Local stand-in for a myStrom switch."""

    def __init__(self, port: int) -> None:
        self.port = port
        self.bodies = {
            ENDPOINT_INFO: _encode(INFO_PAYLOAD),
            ENDPOINT_REPORT: _encode(REPORT_PAYLOAD),
        }
        self.delays: dict[str, float] = {}
        self.requests: list[tuple[str, Any]] = []

    @property
    def target(self) -> str:
        return f"127.0.0.1:{self.port}"

    def set_info(self, payload: Union[dict[str, Any], bytes]) -> None:
        self.bodies[ENDPOINT_INFO] = _encode(payload)

    def set_report(self, payload: Union[dict[str, Any], bytes]) -> None:
        self.bodies[ENDPOINT_REPORT] = _encode(payload)

    async def handle(self, request: web.Request) -> web.Response:
        self.requests.append((request.path, request.headers.copy()))
        delay = self.delays.get(request.path)
        if delay:
            await asyncio.sleep(delay)
        return web.Response(
            body=self.bodies[request.path], content_type="application/json"
        )


@pytest_asyncio.fixture
async def fake_switch(unused_tcp_port_factory):
    port = unused_tcp_port_factory()
    switch = FakeSwitch(port)

    app = web.Application()
    app.router.add_get(ENDPOINT_INFO, switch.handle)
    app.router.add_get(ENDPOINT_REPORT, switch.handle)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()

    try:
        yield switch
    finally:
        await runner.cleanup()


def http_response(body: bytes, content_length: Optional[int] = None) -> bytes:
    """Raw HTTP/1.1 response closing the connection after ``body``."""
    length = len(body) if content_length is None else content_length
    head = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: application/json\r\n"
        f"Content-Length: {length}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return head.encode() + body


class RawSwitch:
    """Socket-level switch for answers aiohttp.web cannot produce.

    Paths without an entry in ``responses`` get the connection closed
    without any reply.
    """

    def __init__(self, port: int) -> None:
        self.port = port
        self.responses: dict[str, bytes] = {}

    @property
    def target(self) -> str:
        return f"127.0.0.1:{self.port}"

    async def handle(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            request_line = await reader.readline()
            await reader.readuntil(b"\r\n\r\n")
            path = request_line.split()[1].decode()
            response = self.responses.get(path)
            if response is not None:
                writer.write(response)
                await writer.drain()
        finally:
            writer.close()


@pytest_asyncio.fixture
async def raw_switch(unused_tcp_port_factory):
    port = unused_tcp_port_factory()
    switch = RawSwitch(port)
    server = await asyncio.start_server(switch.handle, "127.0.0.1", port)
    try:
        yield switch
    finally:
        server.close()
        await server.wait_closed()

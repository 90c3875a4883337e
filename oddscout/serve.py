"""A WebSocket server broadcasting every line read from standard input."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import sys
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed

HOST = "0.0.0.0"
PORT = 8080
CAPACITY = 100


class Hub:
    """Fans messages out to subscriber queues.

    A subscriber whose queue is full has fallen behind; it is dropped and
    its queue ends with None.
    """

    def __init__(self, capacity: int = CAPACITY) -> None:
        self.capacity = capacity
        self._queues: set[asyncio.Queue[str | None]] = set()

    def __len__(self) -> int:
        return len(self._queues)

    def subscribe(self) -> asyncio.Queue[str | None]:
        queue: asyncio.Queue[str | None] = asyncio.Queue(maxsize=self.capacity)
        self._queues.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str | None]) -> None:
        self._queues.discard(queue)

    def publish(self, message: str) -> int:
        """Send ``message`` to every subscriber; return how many received it."""
        delivered = 0
        for queue in list(self._queues):
            try:
                queue.put_nowait(message)
            except asyncio.QueueFull:
                self._queues.discard(queue)
                while not queue.empty():
                    queue.get_nowait()
                queue.put_nowait(None)
            else:
                delivered += 1
        return delivered


async def _print_incoming(websocket: Any) -> None:
    with contextlib.suppress(ConnectionClosed):
        async for message in websocket:
            if isinstance(message, bytes):
                try:
                    message = message.decode("utf-8")
                except UnicodeDecodeError:
                    message = ""
            print(f"Received from client: {message}")


async def handle_client(hub: Hub, websocket: Any) -> None:
    """Forward published messages to the client until it goes away."""
    queue = hub.subscribe()
    print("New WebSocket connection established")
    reader = asyncio.create_task(_print_incoming(websocket))
    try:
        while True:
            message = await queue.get()
            if message is None:
                break
            try:
                await websocket.send(message)
            except ConnectionClosed:
                break
    finally:
        hub.unsubscribe(queue)
        reader.cancel()


async def read_lines(hub: Hub, stream: asyncio.StreamReader) -> None:
    """Publish every non-empty line of ``stream`` until it ends."""
    while True:
        raw = await stream.readline()
        if not raw:
            return
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            return
        line = line.rstrip("\n").removesuffix("\r")
        if line:
            hub.publish(line)
            print(f"Sent: {line}")


async def _stdin_reader() -> asyncio.StreamReader:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    return reader


async def run(host: str = HOST, port: int = PORT) -> None:
    """Serve WebSocket clients and broadcast standard input to them."""
    hub = Hub()
    async with websockets.serve(lambda ws: handle_client(hub, ws), host, port):
        print(f"WebSocket server running on ws://{host}:{port}")
        stdin = await _stdin_reader()
        lines = asyncio.create_task(read_lines(hub, stdin))
        try:
            await asyncio.Future()
        finally:
            lines.cancel()


def main(argv: list[str] | None = None) -> int:
    """Start the broadcast server."""
    parser = argparse.ArgumentParser(
        prog="serve", description="Broadcast standard input over WebSocket."
    )
    parser.add_argument("--host", default=HOST)
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args(argv)
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(run(args.host, args.port))
    return 0
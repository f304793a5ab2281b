"""TCP client used to share player positions with a server."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Callable, Iterator
from typing import TextIO

from . import logger
from .definitions import NetPlayer

BUFFER_SIZE = 1024
DEFAULT_SERVER_IP = "127.0.0.1"
DEFAULT_SERVER_PORT = 8080

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def connect(server_ip: str, server_port: int) -> socket.socket:
    """Open a TCP connection; raise ConnectionError if it fails."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.connect((server_ip, server_port))
    except OSError as exc:
        sock.close()
        raise ConnectionError(f"Connection failed: {exc}") from exc
    print("Connected to server.")
    return sock


def _messages(sock: socket.socket) -> Iterator[str]:
    """Received chunks as text, until the connection ends or fails."""
    while True:
        try:
            data = sock.recv(BUFFER_SIZE - 1)
        except OSError:
            return
        if not data:
            return
        yield data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def receive_messages(sock: socket.socket, out: TextIO | None = None) -> None:
    """Print everything the server sends until the connection ends."""
    stream = sys.stdout if out is None else out
    for message in _messages(sock):
        print(f"Server: {message}", file=stream)


def receive_messages_with_callback(sock: socket.socket, callback: Callable[[str], None]) -> None:
    """Pass everything the server sends to `callback` until the connection ends."""
    for message in _messages(sock):
        callback(message)


def send_message(sock: socket.socket, message: str | bytes) -> None:
    data = message.encode("utf-8") if isinstance(message, str) else message
    sock.sendall(data)


def _stoi(text: str) -> int:
    stripped = text.lstrip()
    digits_end = 1 if stripped[:1] in ("+", "-") else 0
    while digits_end < len(stripped) and stripped[digits_end].isdigit():
        digits_end += 1
    value = int(stripped[:digits_end])
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def parse_message(message: str) -> NetPlayer:
    """Parse a '<7-char prefix><id> <x>,<y>' message; invalid input gives id -1."""
    try:
        if len(message) < 7:
            raise ValueError("message too short")
        body = message[7:]
        delim = body.find(" ")
        player_id = _stoi(body if delim < 0 else body[:delim])
        pos = body[delim + 1:]
        pos_delim = pos.find(",")
        x = _stoi(pos if pos_delim < 0 else pos[:pos_delim])
        y = _stoi(pos[pos_delim + 1:])
    except ValueError:
        return NetPlayer()
    return NetPlayer(player_id, x, y)


class ConnectionManager:
    """Keeps a server connection and the latest known position of each other player."""

    def __init__(
        self,
        server_ip: str = DEFAULT_SERVER_IP,
        server_port: int = DEFAULT_SERVER_PORT,
        sock: socket.socket | None = None,
    ) -> None:
        self._socket = sock if sock is not None else connect(server_ip, server_port)
        self.players: dict[int, NetPlayer] = {}
        logger.debug("Client socket", self._socket.fileno())

    def send_message(self, message: str | bytes) -> None:
        send_message(self._socket, message)

    def receive_message(self, message: str) -> None:
        logger.debug("Got message", message)
        player = parse_message(message)
        if player.id != -1:
            self.players[player.id] = player

    def start_receiving(self) -> threading.Thread:
        """Handle incoming messages on a background thread."""
        thread = threading.Thread(
            target=receive_messages_with_callback,
            args=(self._socket, self.receive_message),
            daemon=True,
        )
        thread.start()
        return thread

    def close(self) -> None:
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()

    def __enter__(self) -> ConnectionManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
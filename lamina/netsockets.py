"""Event-driven TCP and UDP sockets addressed by integer ids."""

from __future__ import annotations

import enum
import errno
import itertools
import logging
import os
import selectors
import socket
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_BACKLOG = 128
EOF_CODE = -4095
_READ_SIZE = 65536

ReceiveCallback = Callable[[int, str], None]

_ERROR_MESSAGES = {
    errno.EADDRINUSE: "Address already in use",
    errno.ECONNREFUSED: "Connection refused",
    errno.ECONNRESET: "Connection reset by peer",
    errno.ENOTCONN: "Socket is not connected",
    errno.ETIMEDOUT: "Operation timed out",
}

_CONNECT_PENDING = {
    0,
    errno.EINPROGRESS,
    errno.EWOULDBLOCK,
    errno.EALREADY,
    errno.EAGAIN,
}


def _code(exc: OSError) -> int:
    return exc.errno if exc.errno is not None else -1


def _message(exc: OSError) -> str:
    if exc.errno in _ERROR_MESSAGES:
        return _ERROR_MESSAGES[exc.errno]
    return exc.strerror or str(exc)


class SocketKind(enum.IntEnum):
    """Transport protocol of a socket."""

    TCP = 0
    UDP = 1


class SocketState(enum.IntEnum):
    """Lifecycle state of a socket."""

    CLOSED = 0
    LISTENING = 1
    CONNECTED = 2
    ERR_STATE = 3
    DISCONNECTED = 4
    CONNECTING = 5


@dataclass(eq=False)
class LaminaSocket:
    """One socket known to a registry, with its queue of received data."""

    id: int
    kind: SocketKind = SocketKind.TCP
    state: SocketState = SocketState.CLOSED
    error_code: int = 0
    error_message: str = ""
    handle: socket.socket | None = field(default=None, repr=False)
    local_address: tuple | None = None
    on_receive: ReceiveCallback | None = field(default=None, repr=False)
    _queue: deque = field(default_factory=deque, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def set_error(self, code: int, message: str) -> None:
        """Record an error and move to the error state."""
        self.error_code = code
        self.error_message = message
        self.state = SocketState.ERR_STATE

    def queue_data(self, data: str) -> None:
        """Append received data to the queue."""
        with self._lock:
            self._queue.append(data)

    def get_queued_data(self) -> str:
        """Pop the oldest queued chunk, or return an empty string."""
        with self._lock:
            return self._queue.popleft() if self._queue else ""


class SocketRegistry:
    """Owns sockets, hands out ids, and dispatches their events."""

    def __init__(self) -> None:
        self.sockets: dict[int, LaminaSocket] = {}
        self._ids = itertools.count(1)
        self._selector = selectors.DefaultSelector()

    def _get(self, socket_id: object) -> LaminaSocket:
        try:
            return self.sockets[int(socket_id)]  # type: ignore[arg-type]
        except (KeyError, TypeError, ValueError):
            raise KeyError("Invalid socket ID") from None

    def _add(
        self, kind: SocketKind, handle: socket.socket, state: SocketState
    ) -> LaminaSocket:
        sock = LaminaSocket(next(self._ids), kind, state, handle=handle)
        try:
            sock.local_address = handle.getsockname()
        except OSError:
            sock.local_address = None
        self.sockets[sock.id] = sock
        return sock

    def _watch(self, sock: LaminaSocket, events: int, role: str) -> None:
        assert sock.handle is not None
        try:
            self._selector.get_key(sock.handle)
        except KeyError:
            self._selector.register(sock.handle, events, (sock.id, role))
        else:
            self._selector.modify(sock.handle, events, (sock.id, role))

    def _release(self, sock: LaminaSocket) -> None:
        if sock.handle is None:
            return
        try:
            self._selector.unregister(sock.handle)
        except (KeyError, ValueError):
            pass
        sock.handle.close()
        sock.handle = None

    def create(self, address: str, port: int, protocol: int, kind: int) -> int:
        """Start a listening IPv4 TCP server and return its id."""
        if protocol != 4 or kind != 0:
            raise ValueError("Only IPv4 + TCP is supported currently.")
        handle = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        handle.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        if os.name != "nt":
            handle.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            handle.bind((address, int(port)))
        except OSError as exc:
            handle.close()
            raise OSError(f"Bind error: {_message(exc)}") from exc
        try:
            handle.listen(DEFAULT_BACKLOG)
        except OSError as exc:
            handle.close()
            raise OSError(f"Listen error: {_message(exc)}") from exc
        handle.setblocking(False)
        sock = self._add(SocketKind.TCP, handle, SocketState.CONNECTED)
        self._watch(sock, selectors.EVENT_READ, "server")
        logger.info("Server listening on %s:%s", address, port)
        return sock.id

    def bind(self, socket_id: int, address: str, port: int) -> int:
        """Bind a socket; 0 on success, -1 with the error recorded otherwise."""
        sock = self._get(socket_id)
        if sock.handle is None:
            sock.set_error(-1, "Socket is closed")
            return -1
        try:
            sock.handle.bind((address, int(port)))
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            return -1
        sock.local_address = sock.handle.getsockname()
        return 0

    def listen(self, socket_id: int, backlog: int) -> int:
        """Start accepting connections; 0 on success, -1 on failure."""
        sock = self._get(socket_id)
        if sock.handle is None:
            sock.set_error(-1, "Socket is closed")
            return -1
        try:
            sock.handle.listen(int(backlog))
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            return -1
        sock.handle.setblocking(False)
        self._watch(sock, selectors.EVENT_READ, "server")
        sock.state = SocketState.CONNECTED
        return 0

    def accept(self, socket_id: int) -> int:
        """Check the server id; connections are accepted while polling."""
        self._get(socket_id)
        return 0

    def send(self, socket_id: int, data: str) -> int:
        """Send text on a connected socket; 0 on success, -1 on failure."""
        sock = self._get(socket_id)
        if not isinstance(data, str):
            raise TypeError("Usage: socket_send(socket_id, string_data)")
        if sock.state is not SocketState.CONNECTED or sock.handle is None:
            sock.set_error(-1, "Socket not connected")
            return -1
        payload = data.encode("utf-8", "surrogateescape")
        handle = sock.handle
        try:
            if sock.kind is SocketKind.TCP:
                handle.setblocking(True)
                try:
                    handle.sendall(payload)
                finally:
                    handle.setblocking(False)
            else:
                handle.send(payload)
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            return -1
        return 0

    def recv(self, socket_id: int) -> str:
        """Oldest received chunk, or an empty string."""
        return self._get(socket_id).get_queued_data()

    def close(self, socket_id: int) -> int:
        """Close a socket and forget its id."""
        sock = self._get(socket_id)
        self._release(sock)
        sock.state = SocketState.CLOSED
        del self.sockets[sock.id]
        return 0

    def get_state(self, socket_id: int) -> SocketState:
        """Current state of a socket."""
        return self._get(socket_id).state

    def get_error(self, socket_id: int) -> str:
        """Message of the last error on a socket, empty if none."""
        return self._get(socket_id).error_message

    def register_receive_callback(
        self, socket_id: int, callback: ReceiveCallback
    ) -> int:
        """Call ``callback(socket_id, data)`` whenever data arrives."""
        sock = self._get(socket_id)
        if not callable(callback):
            raise TypeError("callback must be callable")
        sock.on_receive = callback
        return 0

    def connect(self, address: str, port: int) -> int:
        """Start a TCP connection and return the new socket's id."""
        handle = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        handle.setblocking(False)
        try:
            code = handle.connect_ex((address, int(port)))
        except OSError as exc:
            handle.close()
            raise ConnectionError(f"Connection failed: {_message(exc)}") from exc
        if code not in _CONNECT_PENDING:
            handle.close()
            raise ConnectionError(f"Connection failed: {os.strerror(code)}")
        sock = self._add(SocketKind.TCP, handle, SocketState.CONNECTING)
        self._watch(sock, selectors.EVENT_WRITE, "connecting")
        return sock.id

    def udp_create(self, address: str, port: int) -> int:
        """Bind a UDP socket that starts receiving; return its id."""
        handle = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        handle.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            handle.bind((address, int(port)))
        except OSError as exc:
            handle.close()
            raise OSError(f"UDP bind failed: {_message(exc)}") from exc
        handle.setblocking(False)
        sock = self._add(SocketKind.UDP, handle, SocketState.CONNECTED)
        self._watch(sock, selectors.EVENT_READ, "udp")
        return sock.id

    def udp_send(self, socket_id: int, address: str, port: int, data: str) -> int:
        """Send a datagram; 0 on success, -1 with the error recorded otherwise."""
        sock = self._get(socket_id)
        if sock.kind is not SocketKind.UDP:
            raise TypeError("Socket is not UDP")
        if sock.handle is None:
            sock.set_error(-1, "Socket is closed")
            return -1
        payload = str(data).encode("utf-8", "surrogateescape")
        try:
            sock.handle.sendto(payload, (address, int(port)))
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            return -1
        return 0

    def poll(self, timeout: float | None = None) -> int:
        """Wait up to ``timeout`` seconds and handle ready sockets.

        Returns the number of events handled.
        """
        if not self._selector.get_map():
            return 0
        events = self._selector.select(timeout)
        handlers = {
            "server": self._accept,
            "connecting": self._finish_connect,
            "stream": self._read_stream,
            "udp": self._read_datagram,
        }
        for key, _mask in events:
            socket_id, role = key.data
            sock = self.sockets.get(socket_id)
            if sock is None or sock.handle is None or sock.handle is not key.fileobj:
                continue
            handlers[role](sock)
        return len(events)

    def run(self) -> int:
        """Handle events until no open socket is left."""
        while self._selector.get_map():
            self.poll()
        return 0

    def _accept(self, server: LaminaSocket) -> None:
        assert server.handle is not None
        try:
            conn, _ = server.handle.accept()
        except BlockingIOError:
            return
        except OSError as exc:
            server.set_error(_code(exc), _message(exc))
            return
        conn.setblocking(False)
        client = self._add(SocketKind.TCP, conn, SocketState.CONNECTED)
        self._watch(client, selectors.EVENT_READ, "stream")
        logger.info("New socket connected: ID=%d", client.id)

    def _finish_connect(self, sock: LaminaSocket) -> None:
        assert sock.handle is not None
        code = sock.handle.getsockopt(socket.SOL_SOCKET, socket.SO_ERROR)
        if code:
            message = _ERROR_MESSAGES.get(code, os.strerror(code))
            sock.set_error(code, message)
            self._release(sock)
            logger.error("Connection error: %s", message)
            return
        sock.state = SocketState.CONNECTED
        sock.local_address = sock.handle.getsockname()
        self._watch(sock, selectors.EVENT_READ, "stream")
        logger.info("Connected successfully")

    def _read_stream(self, sock: LaminaSocket) -> None:
        assert sock.handle is not None
        try:
            chunk = sock.handle.recv(_READ_SIZE)
        except BlockingIOError:
            return
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            self._release(sock)
            return
        if not chunk:
            sock.set_error(EOF_CODE, "End of file")
            self._release(sock)
            return
        self._deliver(sock, chunk)

    def _read_datagram(self, sock: LaminaSocket) -> None:
        assert sock.handle is not None
        try:
            chunk, _ = sock.handle.recvfrom(_READ_SIZE)
        except BlockingIOError:
            return
        except OSError as exc:
            sock.set_error(_code(exc), _message(exc))
            self._release(sock)
            sock.state = SocketState.CLOSED
            return
        if chunk:
            self._deliver(sock, chunk)

    @staticmethod
    def _deliver(sock: LaminaSocket, chunk: bytes) -> None:
        text = chunk.decode("utf-8", "surrogateescape")
        sock.queue_data(text)
        if sock.on_receive is not None:
            sock.on_receive(sock.id, text)
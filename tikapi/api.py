"""Connection manager that sends tagged requests and routes tagged responses."""

from __future__ import annotations

import asyncio
import enum
import errno
import os
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from tikapi.transport import open_connection

_TAG_MODULUS = 1 << 32


class Request(Protocol):
    tag: int

    def encode(self) -> bytes: ...


ResponseHandler = Callable[[BaseException | None, Any], bool]
ReadResponse = Callable[[asyncio.StreamReader], Awaitable[Any]]
ErrorHandler = Callable[[BaseException], Any]


def _not_connected() -> ConnectionError:
    return ConnectionError(errno.ENOTCONN, os.strerror(errno.ENOTCONN))


class ApiState(enum.Enum):
    """Lifecycle state of an API connection."""

    closed = "closed"
    connecting = "connecting"
    connected = "connected"


class Api:
    """An API connection to a router.

    ``read_response`` reads one response from the stream; responses carry a
    ``tag`` attribute that routes them to the handler of the matching request.
    ``error_handler`` is called with the exception when reading fails, after
    the connection has been closed.

    ``ssl_verify`` selects the transport used by :meth:`open`: ``None`` for
    plain TCP, otherwise TLS with or without peer verification.
    """

    def __init__(self, read_response: ReadResponse, error_handler: ErrorHandler) -> None:
        self._read_response = read_response
        self._error_handler = error_handler
        self.ssl_verify: bool | None = None
        self._state = ApiState.closed
        self._current_tag = 0
        self._reader: asyncio.StreamReader | None = None
        self._writer: asyncio.StreamWriter | None = None
        self._read_task: asyncio.Task[None] | None = None
        self._send_lock = asyncio.Lock()
        self._handlers: dict[int, ResponseHandler] = {}

    async def __aenter__(self) -> Api:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        if self.is_open:
            self.close()

    @property
    def state(self) -> ApiState:
        return self._state

    @property
    def is_open(self) -> bool:
        return (
            self._state is ApiState.connected
            and self._writer is not None
            and not self._writer.is_closing()
        )

    @property
    def current_tag(self) -> int:
        """The tag the next request will receive."""
        return self._current_tag

    def acquire_unique_tag(self) -> int:
        """Return a fresh request tag."""
        tag = self._current_tag
        self._current_tag = (tag + 1) % _TAG_MODULUS
        return tag

    async def open(self, host: str, port: int) -> None:
        """Connect to the router and start routing responses.

        Raises ``ConnectionError`` (EINPROGRESS) if a connection attempt is
        already under way, and ``RuntimeError`` if the connection is open.
        """
        if self._state is ApiState.connecting:
            raise ConnectionError(errno.EINPROGRESS, os.strerror(errno.EINPROGRESS))
        if self._state is not ApiState.closed:
            raise RuntimeError("connection is already open")

        self._state = ApiState.connecting
        try:
            reader, writer = await open_connection(host, port, self.ssl_verify)
        except BaseException:
            self._state = ApiState.closed
            raise

        self._reader, self._writer = reader, writer
        self._state = ApiState.connected
        self._read_task = asyncio.get_running_loop().create_task(self._read_loop())

    def close(self) -> None:
        """Close an open connection."""
        if not self.is_open:
            raise RuntimeError("connection is not open")
        self._shutdown()

    async def send(self, request: Request, handler: ResponseHandler) -> None:
        """Send ``request`` and register ``handler`` for its responses.

        ``handler(error, response)`` is called with ``error`` set and no
        response on failure, or with ``None`` and each response carrying the
        request's tag; it keeps receiving responses while it returns true.
        """
        async with self._send_lock:
            if not self.is_open or self._writer is None:
                handler(_not_connected(), None)
                return

            tag = request.tag
            self._handlers[tag] = handler
            try:
                self._writer.write(request.encode())
                await self._writer.drain()
            except OSError as err:
                self._handlers.pop(tag, None)
                if self.is_open:
                    self._shutdown()
                handler(err, None)
                return

            if not self.is_open and self._handlers.pop(tag, None) is not None:
                handler(_not_connected(), None)

    def _shutdown(self) -> None:
        writer, task = self._writer, self._read_task
        self._state = ApiState.closed
        self._reader = self._writer = self._read_task = None
        if writer is not None:
            writer.close()
        if task is not None and task is not asyncio.current_task():
            task.cancel()

    async def _read_loop(self) -> None:
        while self.is_open and self._reader is not None:
            try:
                response = await self._read_response(self._reader)
            except asyncio.CancelledError:
                raise
            except Exception as err:
                if self.is_open:
                    self._shutdown()
                    self._error_handler(err)
                return
            if not self.is_open:
                return
            self._dispatch(response)

    def _dispatch(self, response: Any) -> None:
        tag = getattr(response, "tag", None)
        if tag is None:
            return
        handler = self._handlers.get(tag)
        if handler is not None and not handler(None, response):
            self._handlers.pop(tag, None)
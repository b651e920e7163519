"""Stream transport: plain or TLS connections and reading length-prefixed words."""

from __future__ import annotations

import asyncio
import ssl
from collections.abc import Awaitable, Callable
from typing import Any

ReadLength = Callable[[asyncio.StreamReader], Awaitable[int]]


def make_ssl_context(verify: bool = False) -> ssl.SSLContext:
    """Return a client TLS context that either verifies the peer or accepts any certificate."""
    if verify:
        return ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


async def open_connection(
    host: str, port: int, ssl_verify: bool | None = None
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Connect to ``host:port``.

    With ``ssl_verify`` left as ``None`` the connection is plain TCP; ``True`` or
    ``False`` performs a TLS handshake with or without peer verification.
    """
    kwargs: dict[str, Any] = {}
    if ssl_verify is not None:
        kwargs["ssl"] = make_ssl_context(ssl_verify)
        kwargs["server_hostname"] = host
    return await asyncio.open_connection(host, port, **kwargs)


async def read_word(reader: asyncio.StreamReader, read_length: ReadLength) -> str:
    """Read one word: its length through ``read_length``, then that many bytes.

    Raises ``asyncio.IncompleteReadError`` if the stream ends early.
    """
    length = await read_length(reader)
    data = await reader.readexactly(length)
    return data.decode("utf-8", errors="surrogateescape")
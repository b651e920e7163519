# tikapi

Building blocks for an asynchronous RouterOS API client on `asyncio`: a
connection manager that routes tagged responses, plain and TLS transports,
the legacy login password hash, error codes, and typed data models for
common router lists.

## Installation

```
pip install tikapi
```

To run the test suite, install the test extra and run pytest:

```
pip install "tikapi[test]"
pytest
```

## Modules

- `tikapi.api`
  - `ApiState`: `closed`, `connecting` or `connected`.
  - `Api(read_response, error_handler)`: a connection to a router.
    `read_response` is a coroutine function that reads one response from an
    `asyncio.StreamReader`; responses are routed by their `tag` attribute.
    `error_handler` is called with the exception when reading fails, after
    the connection has been closed.
    - `await api.open(host, port)` connects and starts reading responses.
      It raises `ConnectionError` (EINPROGRESS) while another attempt is
      under way and `RuntimeError` if already open. Set `api.ssl_verify` to
      `True` or `False` beforehand for TLS with or without peer
      verification; `None` (the default) is plain TCP.
    - `api.close()` closes an open connection (`RuntimeError` otherwise).
    - `api.acquire_unique_tag()` returns a fresh 32-bit tag;
      `api.current_tag` is the one the next call will return.
    - `await api.send(request, handler)` writes `request.encode()` and
      registers `handler(error, response)` for responses carrying
      `request.tag`. The handler keeps receiving responses while it returns
      true. On failure it is called with an exception and `None`. Sends are
      serialized with a lock.
    - `api.is_open`, `api.state`, and use as `async with Api(...) as api:`,
      which closes the connection on exit.
- `tikapi.transport`: `make_ssl_context(verify)`,
  `open_connection(host, port, ssl_verify)` and
  `read_word(reader, read_length)`, which reads a word whose length is
  returned by the `read_length` coroutine you supply.
- `tikapi.crypto.hash_password(plain, challenge)`: the lower-case hex MD5 of
  a zero byte, the password and the decoded 32-digit hex challenge. Raises
  `ValueError` on a malformed challenge.
- `tikapi.errors`: `ErrorCode` (an `IntEnum`) with `message()` and
  `condition()`, and the `ApiError(code)` exception.
- `tikapi.sentence.Sentence`: a mapping of words. Indexing a missing key
  inserts an empty string; `get(key, convert)` converts a value, with
  `bool` treating `true` and `yes` as true, and raises `KeyError` for a
  missing key.
- `tikapi.types`: `ValueWrapper` (tracks `has_value`, supports arithmetic
  and comparison with plain values), `StatefulValueWrapper` (also tracks
  `changed`), `ReadOnly`, `ReadWrite` (in-place arithmetic), `Sticky`, and
  the `Model` dataclass with its `id` field.
- Models, each with an `api_path` and a `convert(converter)` method:
  `tikapi.interface.Interface`, `tikapi.hotspot.Hotspot`,
  `tikapi.hotspot.Cookie`, `tikapi.hotspot.Host`,
  `tikapi.hotspot_user.User` and `tikapi.hotspot_user.UserProfile`.

## Examples

```python
from tikapi.crypto import hash_password

password = "password"
challenge = "00112233445566778899aabbccddeeff"
print(hash_password(password, challenge))  # 32 lower-case hex digits
```

`convert` calls `converter(name, wrapper)` or
`converter(name, wrapper, default)` for every property, starting with
`.id`, so one function can fill a model or list its properties:

```python
from tikapi.interface import Interface

names = []
Interface().convert(lambda name, wrapper, *default: names.append(name))
print(names[:4])  # ['.id', 'l2mtu', 'mtu', 'name']
```

## What it does not do

The package does not encode requests, decode the word stream into
responses, or perform the login exchange. `Api.send` expects request
objects with a `tag` and an `encode()` method, and `Api` expects a
`read_response` coroutine that you provide. There are no ready-made
commands, no converter that fills models from responses, no repository
for loading or updating router lists, and no command-line program.
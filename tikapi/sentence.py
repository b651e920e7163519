"""A sentence: the key/value words of an API request or response."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

_TRUE_WORDS = frozenset({"true", "yes"})


def _convert(value: str, convert: Callable[[str], Any]) -> Any:
    if convert is bool:
        return value in _TRUE_WORDS
    return convert(value)


class Sentence:
    """An unordered collection of words keyed by name.

    Indexing a missing key inserts and returns an empty string.
    """

    def __init__(
        self, words: Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._words: dict[str, str] = dict(words)

    def __getitem__(self, key: str) -> str:
        return self._words.setdefault(key, "")

    def __setitem__(self, key: str, value: str) -> None:
        self._words[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sentence):
            return self._words == other._words
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._words!r})"

    def items(self):
        """Return a view of the (key, value) pairs."""
        return self._words.items()

    def get(self, key: str, convert: Callable[[str], T] = str) -> T:
        """Return the word under ``key`` converted with ``convert``.

        ``bool`` treats ``true`` and ``yes`` as true and anything else as false.
        Raises ``KeyError`` if the key is absent.
        """
        if key not in self._words:
            raise KeyError(key)
        return _convert(self._words[key], convert)
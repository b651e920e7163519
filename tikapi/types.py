"""Value wrappers that track presence and changes of model properties."""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass, field
from typing import Any, Callable

_UNSET: Any = object()


def _unwrap(other: Any) -> Any:
    return other.value if isinstance(other, ValueWrapper) else other


@functools.total_ordering
class ValueWrapper:
    """A value that remembers whether it has been set."""

    def __init__(self, value: Any = _UNSET) -> None:
        if value is _UNSET:
            self._value: Any = None
            self._has_value = False
        else:
            self._value = value
            self._has_value = True

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new: Any) -> None:
        self._assign(new)

    def _assign(self, new: Any) -> None:
        self._value = new
        self._has_value = True

    @property
    def has_value(self) -> bool:
        return self._has_value

    def reset_value(self) -> None:
        """Mark the wrapper as holding no value."""
        self._has_value = False

    def __repr__(self) -> str:
        if not self._has_value:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return str(self._value)

    def __eq__(self, other: object) -> bool:
        return self._value == _unwrap(other)

    def __lt__(self, other: Any) -> bool:
        return self._value < _unwrap(other)

    __hash__ = None  # type: ignore[assignment]

    def __bool__(self) -> bool:
        return bool(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __index__(self) -> int:
        return operator.index(self._value)

    def __neg__(self) -> Any:
        return -self._value


def _binary(op: Callable[[Any, Any], Any]):
    def forward(self: ValueWrapper, other: Any) -> Any:
        return op(self.value, _unwrap(other))

    def reverse(self: ValueWrapper, other: Any) -> Any:
        return op(_unwrap(other), self.value)

    return forward, reverse


ValueWrapper.__add__, ValueWrapper.__radd__ = _binary(operator.add)
ValueWrapper.__sub__, ValueWrapper.__rsub__ = _binary(operator.sub)
ValueWrapper.__mul__, ValueWrapper.__rmul__ = _binary(operator.mul)
ValueWrapper.__truediv__, ValueWrapper.__rtruediv__ = _binary(operator.truediv)
ValueWrapper.__floordiv__, ValueWrapper.__rfloordiv__ = _binary(operator.floordiv)
ValueWrapper.__mod__, ValueWrapper.__rmod__ = _binary(operator.mod)


class StatefulValueWrapper(ValueWrapper):
    """A value wrapper that also records whether it was changed after creation."""

    def __init__(self, value: Any = _UNSET) -> None:
        super().__init__(value)
        self.changed = False

    def _assign(self, new: Any) -> None:
        self.changed = True
        super()._assign(new)


class _InPlaceOps:
    """In-place arithmetic that stores the result back into the wrapper."""

    value: Any

    def __iadd__(self, other: Any):
        self.value = self.value + _unwrap(other)
        return self

    def __isub__(self, other: Any):
        self.value = self.value - _unwrap(other)
        return self

    def __imul__(self, other: Any):
        self.value = self.value * _unwrap(other)
        return self

    def __itruediv__(self, other: Any):
        self.value = self.value / _unwrap(other)
        return self

    def __ifloordiv__(self, other: Any):
        self.value = self.value // _unwrap(other)
        return self

    def __imod__(self, other: Any):
        self.value = self.value % _unwrap(other)
        return self


class ReadOnly(ValueWrapper):
    """A property that the router reports but does not accept."""


class ReadWrite(_InPlaceOps, StatefulValueWrapper):
    """A property that can be read and written, tracking local changes."""


class Sticky(ReadOnly):
    """A read-only property that identifies an item across requests."""


@dataclass
class Model:
    """Base of all data models: every item carries its router identity."""

    id: Sticky = field(default_factory=Sticky)

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property of the model to ``converter(name, wrapper)``."""
        converter(".id", self.id)
"""NamedValue — one (name, Value) pair, the unit a pyson entry encodes."""

from __future__ import annotations

from .errors import InvalidArgumentError
from .model import ENTRY_SEPARATOR, Type, Value, is_value


def _check_name(name: object) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"Name must be a non-empty string, got {name!r}")
    return name


def _check_value(value: object) -> Value:
    if not is_value(value):
        raise InvalidArgumentError(
            f"Expected a pyson Value, got {type(value).__name__}"
        )
    return value  # type: ignore[return-value]


class NamedValue:
    """A named, typed value.

    Values are immutable; ``change_*`` / ``swap_*`` replace the whole value
    (or name) in place. The ``swap_*`` variants return what was replaced::

        nv = NamedValue("port", VInt(80))
        nv.change_value(VInt(8080))
        old = nv.swap_name("http_port")   # → "port"
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: Value) -> None:
        self._name = _check_name(name)
        self._value = _check_value(value)

    # -- Accessors -------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Value:
        return self._value

    @property
    def type(self) -> Type:
        """Shortcut for ``self.value.type``."""
        return self._value.type

    # -- Mutation --------------------------------------------------------

    def change_name(self, new_name: str) -> None:
        self._name = _check_name(new_name)

    def swap_name(self, new_name: str) -> str:
        old, self._name = self._name, _check_name(new_name)
        return old

    def change_value(self, new_value: Value) -> None:
        self._value = _check_value(new_value)

    def swap_value(self, new_value: Value) -> Value:
        old, self._value = self._value, _check_value(new_value)
        return old

    # -- Projections -----------------------------------------------------

    def to_tuple(self) -> tuple[str, Value]:
        return self._name, self._value

    def encode(self) -> str:
        """Canonical entry line: ``<name>:<type>:<content>``."""
        return ENTRY_SEPARATOR.join(
            (self._name, str(self._value.type), self._value.content())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedValue):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"NamedValue(name={self._name!r}, value={self._value!r})"

    def __str__(self) -> str:
        return self.encode()

"""Data model for pyson Core: type tags and typed values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .errors import (
    EmbeddedNewlineError,
    InvalidListElementError,
    InvalidTypeError,
    UnsupportedValueTypeError,
)

LIST_DELIMITER = "(*)"
ENTRY_SEPARATOR = ":"
LINE_SEPARATOR = "\n"

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Type
# ---------------------------------------------------------------------------

class Type(Enum):
    Int = "int"
    Float = "float"
    Str = "str"
    List = "list"

    @classmethod
    def from_tag(cls, tag: str) -> Type:
        """Return the member whose wire tag is *tag*."""
        if not isinstance(tag, str):
            raise InvalidTypeError(tag)
        try:
            return cls(tag)
        except ValueError:
            raise InvalidTypeError(tag) from None

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Value variants
# ---------------------------------------------------------------------------

class _ValueMixin:
    """Accessors shared by every Value variant."""

    __slots__ = ()

    type: ClassVar[Type]

    def is_int(self) -> bool:
        return self.type is Type.Int

    def is_float(self) -> bool:
        return self.type is Type.Float

    def is_str(self) -> bool:
        return self.type is Type.Str

    def is_list(self) -> bool:
        return self.type is Type.List

    def content(self) -> str:
        """Bare wire content, without the type tag."""
        ...

    def encode(self) -> str:
        """The pyson string of a bare value.

        Scalars carry their tag (``int:42``); lists are only the
        delimiter-joined elements, the tag is added by the entry encoder.
        """
        if self.is_list():
            return self.content()
        return f"{self.type}{ENTRY_SEPARATOR}{self.content()}"

    def __str__(self) -> str:
        return self.encode()


def _check_no_newline(text: str) -> None:
    if LINE_SEPARATOR in text:
        raise EmbeddedNewlineError(text)


@dataclass(frozen=True, slots=True)
class VInt(_ValueMixin):
    value: int

    type: ClassVar[Type] = Type.Int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedValueTypeError(self.value)
        if not INT_MIN <= self.value <= INT_MAX:
            # no repr in the message: huge ints refuse str conversion
            raise UnsupportedValueTypeError(
                self.value, "Integer outside the signed 64-bit range"
            )

    def content(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VFloat(_ValueMixin):
    value: float

    type: ClassVar[Type] = Type.Float

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise UnsupportedValueTypeError(self.value)
        if self.value.is_integer():
            raise UnsupportedValueTypeError(
                self.value, f"Integral number {self.value!r} must be a VInt"
            )

    def content(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, slots=True)
class VStr(_ValueMixin):
    value: str

    type: ClassVar[Type] = Type.Str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise UnsupportedValueTypeError(self.value)
        _check_no_newline(self.value)

    def content(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class VList(_ValueMixin):
    value: tuple[str, ...]

    type: ClassVar[Type] = Type.List

    def __post_init__(self) -> None:
        if not isinstance(self.value, (list, tuple)):
            raise UnsupportedValueTypeError(self.value)
        for i, item in enumerate(self.value):
            if not isinstance(item, str):
                raise InvalidListElementError(item, i)
            _check_no_newline(item)
        # frozen: bypass __setattr__ to normalise lists to tuples
        object.__setattr__(self, "value", tuple(self.value))

    def content(self) -> str:
        return LIST_DELIMITER.join(self.value)


Value = Union[VInt, VFloat, VStr, VList]

VALUE_TYPES: tuple[type, ...] = (VInt, VFloat, VStr, VList)


def is_value(obj: object) -> bool:
    return isinstance(obj, VALUE_TYPES)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def to_value(payload: object) -> Value:
    """Convert a plain Python payload to the matching Value.

    - ``int`` → VInt (``bool`` is rejected)
    - ``float`` → VInt when integral, otherwise VFloat
    - ints (and integral floats) outside the signed 64-bit range are rejected
    - ``str`` → VStr
    - ``list`` / ``tuple`` of strings → VList
    - an existing Value is returned as-is
    """
    if is_value(payload):
        return payload  # type: ignore[return-value]
    if isinstance(payload, bool):
        raise UnsupportedValueTypeError(payload)
    if isinstance(payload, int):
        return VInt(payload)
    if isinstance(payload, float):
        if payload.is_integer():
            if not INT_MIN <= payload <= INT_MAX:
                raise UnsupportedValueTypeError(
                    payload, f"Integral number {payload!r} is outside the signed 64-bit range"
                )
            return VInt(int(payload))
        return VFloat(payload)
    if isinstance(payload, str):
        return VStr(payload)
    if isinstance(payload, (list, tuple)):
        return VList(tuple(payload))
    raise UnsupportedValueTypeError(payload)

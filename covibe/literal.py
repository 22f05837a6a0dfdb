"""Literal values as they appear in source code."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from covibe.expr import Expr


class IntBase(enum.Enum):
    """The radix an integer literal was written in."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class IntSuffix(enum.Enum):
    """Type suffix of an integer literal, such as ``i32``."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"


@dataclass
class IntLit:
    """An integer literal; ``raw`` is its text as written in the source."""

    raw: str
    base: IntBase
    span: tuple[int, int]
    suffix: Optional[IntSuffix] = None


class FloatSuffix(enum.Enum):
    """Type suffix of a floating-point literal."""

    F32 = "f32"
    F64 = "f64"


@dataclass
class FloatLit:
    """A floating-point literal; ``raw`` is its text as written in the source."""

    raw: str
    span: tuple[int, int]
    suffix: Optional[FloatSuffix] = None


class StrKind(enum.Enum):
    """How a string literal was written."""

    NORMAL = "normal"
    RAW = "raw"
    FORMAT = "format"
    HEREDOC = "heredoc"


@dataclass
class StrLiteralPart:
    """A plain text piece of a format string."""

    value: str
    span: tuple[int, int]


@dataclass
class StrInterpolation:
    """An interpolated ``{expr}`` or ``{expr:spec}`` piece of a format string."""

    expr: Expr
    span: tuple[int, int]
    format_spec: Optional[str] = None


StrPart = Union[StrLiteralPart, StrInterpolation]


@dataclass
class StrLit:
    """A string literal; ``parts`` is filled for format strings."""

    kind: StrKind
    value: str
    span: tuple[int, int]
    parts: list[StrPart] = field(default_factory=list)


@dataclass
class CharLit:
    """A character literal holding exactly one Unicode scalar value."""

    value: str
    span: tuple[int, int]

    def __post_init__(self) -> None:
        if len(self.value) != 1:
            raise ValueError(f"a character literal holds one character, got {self.value!r}")
        if 0xD800 <= ord(self.value) <= 0xDFFF:
            raise ValueError("a character literal cannot hold a surrogate code point")


@dataclass
class BoolLit:
    """A boolean literal."""

    value: bool
    span: tuple[int, int]


@dataclass
class ByteLit:
    """A byte literal such as ``b'A'``."""

    value: int
    span: tuple[int, int]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"byte literal {self.value} does not fit in a byte")


@dataclass
class ByteStrLit:
    """A byte string literal such as ``b"hello"``."""

    value: bytes
    span: tuple[int, int]

    def __post_init__(self) -> None:
        self.value = bytes(self.value)


Literal = Union[IntLit, FloatLit, StrLit, CharLit, BoolLit, ByteLit, ByteStrLit]
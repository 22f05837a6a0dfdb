"""Binary, unary and assignment operators."""

from __future__ import annotations

import enum
from typing import Optional


class BinOp(enum.Enum):
    """Binary operators; each value is the operator's source spelling."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    FLOOR_DIV = "//"
    MOD = "%"
    POW = "**"
    BIT_AND = "&"
    BIT_OR = "|"
    BIT_XOR = "^"
    SHL = "<<"
    SHR = ">>"
    USHR = ">>>"
    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="
    SPACESHIP = "<=>"
    AND = "and"
    OR = "or"
    RANGE_INCLUSIVE = "..="
    RANGE = ".."
    PIPE = "|>"
    OPTIONAL_CHAINING = "?."
    NULL_COALESCE = "??"
    IS = "is"
    IN = "in"

    def is_arithmetic(self) -> bool:
        return self in _ARITHMETIC

    def is_comparison(self) -> bool:
        return self in _COMPARISON

    def is_logical(self) -> bool:
        return self in _LOGICAL

    def is_bitwise(self) -> bool:
        return self in _BITWISE

    def is_short_circuit(self) -> bool:
        """True when the right operand may be left unevaluated."""
        return self in _SHORT_CIRCUIT

    def __str__(self) -> str:
        return self.value


_ARITHMETIC = frozenset(
    {BinOp.ADD, BinOp.SUB, BinOp.MUL, BinOp.DIV, BinOp.FLOOR_DIV, BinOp.MOD, BinOp.POW}
)
_COMPARISON = frozenset(
    {BinOp.EQ, BinOp.NE, BinOp.LT, BinOp.LE, BinOp.GT, BinOp.GE, BinOp.SPACESHIP}
)
_LOGICAL = frozenset({BinOp.AND, BinOp.OR})
_BITWISE = frozenset(
    {BinOp.BIT_AND, BinOp.BIT_OR, BinOp.BIT_XOR, BinOp.SHL, BinOp.SHR, BinOp.USHR}
)
_SHORT_CIRCUIT = frozenset({BinOp.AND, BinOp.OR, BinOp.OPTIONAL_CHAINING})


class UnOp(enum.Enum):
    """Unary operators; each value is the operator's source spelling."""

    NEG = "-"
    NOT = "not"
    BIT_NOT = "~"
    DEREF = "*"
    REF = "&"
    REF_MUT = "&mut"
    SPREAD = "..."
    TRY = "?"

    def __str__(self) -> str:
        return self.value


class AssignOp(enum.Enum):
    """Assignment operators; each value is the operator's source spelling."""

    ASSIGN = "="
    ADD_ASSIGN = "+="
    SUB_ASSIGN = "-="
    MUL_ASSIGN = "*="
    DIV_ASSIGN = "/="
    FLOOR_DIV_ASSIGN = "//="
    MOD_ASSIGN = "%="
    POW_ASSIGN = "**="
    BIT_AND_ASSIGN = "&="
    BIT_OR_ASSIGN = "|="
    BIT_XOR_ASSIGN = "^="
    SHL_ASSIGN = "<<="
    SHR_ASSIGN = ">>="
    USHR_ASSIGN = ">>>="
    WALRUS = ":="

    def to_binop(self) -> Optional[BinOp]:
        """The binary operator a compound assignment applies, or None."""
        return _TO_BINOP.get(self)

    def __str__(self) -> str:
        return self.value


_TO_BINOP = {
    AssignOp.ADD_ASSIGN: BinOp.ADD,
    AssignOp.SUB_ASSIGN: BinOp.SUB,
    AssignOp.MUL_ASSIGN: BinOp.MUL,
    AssignOp.DIV_ASSIGN: BinOp.DIV,
    AssignOp.FLOOR_DIV_ASSIGN: BinOp.FLOOR_DIV,
    AssignOp.MOD_ASSIGN: BinOp.MOD,
    AssignOp.POW_ASSIGN: BinOp.POW,
    AssignOp.BIT_AND_ASSIGN: BinOp.BIT_AND,
    AssignOp.BIT_OR_ASSIGN: BinOp.BIT_OR,
    AssignOp.BIT_XOR_ASSIGN: BinOp.BIT_XOR,
    AssignOp.SHL_ASSIGN: BinOp.SHL,
    AssignOp.SHR_ASSIGN: BinOp.SHR,
    AssignOp.USHR_ASSIGN: BinOp.USHR,
}
"""Expressions and the pieces they are built from."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from covibe.core import GenericArgs, Ident, NodeId, Path
from covibe.op import AssignOp, BinOp, UnOp

if TYPE_CHECKING:
    from covibe.literal import Literal
    from covibe.pat import Pattern
    from covibe.stmt import Block
    from covibe.ty import Type


@dataclass
class Expr:
    """An expression."""

    id: NodeId
    kind: ExprKind
    span: tuple[int, int]


@dataclass
class Arg:
    """A call argument, optionally named or spread (``...args``)."""

    value: Expr
    name: Optional[Ident] = None
    spread: bool = False


@dataclass
class Comprehension:
    """A ``for pattern in iter if ...`` clause of a comprehension."""

    pattern: Pattern
    iter: Expr
    filters: list[Expr] = field(default_factory=list)
    is_async: bool = False


@dataclass
class MatchArm:
    """One arm of a ``match``, with an optional guard."""

    id: NodeId
    pattern: Pattern
    body: Expr
    span: tuple[int, int]
    guard: Optional[Expr] = None


@dataclass
class CatchClause:
    """A ``catch`` clause; no pattern catches everything."""

    body: Block
    span: tuple[int, int]
    pattern: Optional[Pattern] = None


@dataclass
class FieldInit:
    """A field initialiser in a struct expression; no value means shorthand."""

    name: Ident
    span: tuple[int, int]
    value: Optional[Expr] = None


class CaptureKind(enum.Enum):
    """How a closure captures a variable."""

    BY_REF = "ref"
    BY_REF_MUT = "ref_mut"
    BY_MOVE = "move"


@dataclass
class Capture:
    """A variable captured by a closure."""

    var: Ident
    kind: CaptureKind


@dataclass
class FunctionParam:
    """A function or closure parameter."""

    id: NodeId
    pattern: Pattern
    span: tuple[int, int]
    ty: Optional[Type] = None
    default: Optional[Expr] = None


@dataclass
class LiteralExpr:
    """A literal value such as ``42`` or ``"hello"``."""

    literal: Literal


@dataclass
class PathExpr:
    """A variable or path reference."""

    path: Path


@dataclass
class BinaryExpr:
    """A binary operation such as ``a + b``."""

    op: BinOp
    left: Expr
    right: Expr


@dataclass
class UnaryExpr:
    """A unary operation such as ``-x``."""

    op: UnOp
    operand: Expr


@dataclass
class AssignExpr:
    """An assignment such as ``x = 5`` or ``y += 3``."""

    op: AssignOp
    target: Expr
    value: Expr


@dataclass
class CallExpr:
    """A function call."""

    func: Expr
    args: list[Arg] = field(default_factory=list)


@dataclass
class MethodCallExpr:
    """A method call such as ``vec.push(item)``."""

    receiver: Expr
    method: Ident
    args: list[Arg] = field(default_factory=list)
    generics: Optional[GenericArgs] = None


@dataclass
class FieldExpr:
    """A field access such as ``point.x``."""

    object: Expr
    field: Ident


@dataclass
class TupleIndexExpr:
    """A tuple field access such as ``pair.1``."""

    object: Expr
    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"tuple index {self.index} is negative")


@dataclass
class IndexExpr:
    """An indexing expression such as ``arr[i]``."""

    object: Expr
    index: Expr


@dataclass
class RangeExpr:
    """A range such as ``1..10``, ``0..=5`` or ``..``."""

    start: Optional[Expr] = None
    end: Optional[Expr] = None
    inclusive: bool = False


@dataclass
class TupleExpr:
    """A tuple such as ``(1, 2, 3)``."""

    elements: list[Expr] = field(default_factory=list)


@dataclass
class ArrayExpr:
    """An array literal such as ``[1, 2, 3]``."""

    elements: list[Expr] = field(default_factory=list)


@dataclass
class ArrayRepeatExpr:
    """An array repeat such as ``[0; 10]``."""

    value: Expr
    count: Expr


@dataclass
class DictExpr:
    """A dictionary literal of key-value pairs."""

    entries: list[tuple[Expr, Expr]] = field(default_factory=list)


@dataclass
class SetExpr:
    """A set literal."""

    elements: list[Expr] = field(default_factory=list)


@dataclass
class ListCompExpr:
    """A list comprehension."""

    element: Expr
    comprehensions: list[Comprehension]


@dataclass
class SetCompExpr:
    """A set comprehension."""

    element: Expr
    comprehensions: list[Comprehension]


@dataclass
class DictCompExpr:
    """A dict comprehension."""

    key: Expr
    value: Expr
    comprehensions: list[Comprehension]


@dataclass
class GeneratorExpr:
    """A generator expression."""

    element: Expr
    comprehensions: list[Comprehension]


@dataclass
class IfExpr:
    """An ``if``/``elif``/``else`` expression."""

    condition: Expr
    then_branch: Expr
    elif_branches: list[tuple[Expr, Expr]] = field(default_factory=list)
    else_branch: Optional[Expr] = None


@dataclass
class MatchExpr:
    """A ``match`` expression."""

    scrutinee: Expr
    arms: list[MatchArm] = field(default_factory=list)


@dataclass
class BlockExpr:
    """A block used as an expression."""

    block: Block


@dataclass
class LambdaExpr:
    """A closure such as ``lambda x: x + 1``."""

    params: list[FunctionParam]
    body: Expr
    return_type: Optional[Type] = None
    captures: list[Capture] = field(default_factory=list)


@dataclass
class ReturnExpr:
    """A ``return``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class BreakExpr:
    """A ``break``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class ContinueExpr:
    """A ``continue``."""


@dataclass
class YieldExpr:
    """A ``yield``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class AwaitExpr:
    """An ``await`` of a future."""

    expr: Expr


@dataclass
class AsyncExpr:
    """An ``async`` block."""

    block: Block


@dataclass
class SpawnExpr:
    """A ``spawn`` of a task."""

    expr: Expr


@dataclass
class TryExpr:
    """A ``try``/``catch``/``finally`` expression."""

    body: Block
    catch_clauses: list[CatchClause] = field(default_factory=list)
    finally_block: Optional[Block] = None


@dataclass
class CastExpr:
    """A cast such as ``x as int``."""

    expr: Expr
    ty: Type


@dataclass
class TypeAscriptionExpr:
    """A type ascription such as ``x: int``."""

    expr: Expr
    ty: Type


@dataclass
class StructExpr:
    """A struct initialiser, with an optional ``..base`` update."""

    path: Path
    fields: list[FieldInit] = field(default_factory=list)
    base: Optional[Expr] = None


@dataclass
class TupleStructExpr:
    """A tuple struct initialiser such as ``Color(255, 0, 0)``."""

    path: Path
    fields: list[Expr] = field(default_factory=list)


@dataclass
class UnitStructExpr:
    """A unit struct value."""

    path: Path


@dataclass
class ParenExpr:
    """A parenthesised expression."""

    expr: Expr


@dataclass
class ComptimeExpr:
    """A ``comptime`` block."""

    block: Block


@dataclass
class MacroExpr:
    """A macro invocation such as ``vec![1, 2]``."""

    path: Path
    args: list[Expr] = field(default_factory=list)


@dataclass
class UnsafeExpr:
    """An ``unsafe`` block."""

    block: Block


@dataclass
class MoveExpr:
    """A ``move`` expression."""

    expr: Expr


@dataclass
class CloneExpr:
    """A ``clone`` expression."""

    expr: Expr


@dataclass
class CopyExpr:
    """A ``copy`` expression."""

    expr: Expr


@dataclass
class BoxExpr:
    """A heap allocation, ``box value``."""

    expr: Expr


@dataclass
class ErrorExpr:
    """Placeholder left by error recovery."""


ExprKind = Union[
    LiteralExpr,
    PathExpr,
    BinaryExpr,
    UnaryExpr,
    AssignExpr,
    CallExpr,
    MethodCallExpr,
    FieldExpr,
    TupleIndexExpr,
    IndexExpr,
    RangeExpr,
    TupleExpr,
    ArrayExpr,
    ArrayRepeatExpr,
    DictExpr,
    SetExpr,
    ListCompExpr,
    SetCompExpr,
    DictCompExpr,
    GeneratorExpr,
    IfExpr,
    MatchExpr,
    BlockExpr,
    LambdaExpr,
    ReturnExpr,
    BreakExpr,
    ContinueExpr,
    YieldExpr,
    AwaitExpr,
    AsyncExpr,
    SpawnExpr,
    TryExpr,
    CastExpr,
    TypeAscriptionExpr,
    StructExpr,
    TupleStructExpr,
    UnitStructExpr,
    ParenExpr,
    ComptimeExpr,
    MacroExpr,
    UnsafeExpr,
    MoveExpr,
    CloneExpr,
    CopyExpr,
    BoxExpr,
    ErrorExpr,
]
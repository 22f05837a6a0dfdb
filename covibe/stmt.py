"""Statements, blocks and their parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from covibe.core import Ident, Item, NodeId

if TYPE_CHECKING:
    from covibe.expr import CatchClause, Expr, MatchArm
    from covibe.pat import Pattern
    from covibe.ty import Type


@dataclass
class Stmt:
    """A statement."""

    id: NodeId
    kind: StmtKind
    span: tuple[int, int]


@dataclass
class Block:
    """A block of statements with an optional trailing value expression."""

    id: NodeId
    stmts: list[Stmt]
    span: tuple[int, int]
    expr: Optional[Expr] = None

    def is_empty(self) -> bool:
        """True when the block has neither statements nor a trailing expression."""
        return not self.stmts and self.expr is None


@dataclass
class ExprStmt:
    """An expression evaluated for its effect."""

    expr: Expr


@dataclass
class LetStmt:
    """A ``let`` binding."""

    pattern: Pattern
    ty: Optional[Type] = None
    init: Optional[Expr] = None
    mutable: bool = False


@dataclass
class VarStmt:
    """A ``var`` declaration."""

    pattern: Pattern
    ty: Optional[Type] = None
    init: Optional[Expr] = None


@dataclass
class ConstStmt:
    """A local ``const`` declaration."""

    name: Ident
    value: Expr
    ty: Optional[Type] = None


@dataclass
class AssignStmt:
    """An assignment statement."""

    target: Expr
    value: Expr


@dataclass
class IfStmt:
    """An ``if``/``elif``/``else`` statement."""

    condition: Expr
    then_branch: Block
    elif_branches: list[tuple[Expr, Block]] = field(default_factory=list)
    else_branch: Optional[Block] = None


@dataclass
class MatchStmt:
    """A ``match`` statement."""

    scrutinee: Expr
    arms: list[MatchArm]


@dataclass
class WhileStmt:
    """A ``while`` loop."""

    condition: Expr
    body: Block


@dataclass
class ForStmt:
    """A ``for pattern in iter`` loop."""

    pattern: Pattern
    iter: Expr
    body: Block


@dataclass
class LoopStmt:
    """An infinite loop."""

    body: Block


@dataclass
class BreakStmt:
    """A ``break``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class ContinueStmt:
    """A ``continue``."""


@dataclass
class ReturnStmt:
    """A ``return``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class YieldStmt:
    """A ``yield``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class DeferStmt:
    """A statement deferred to the end of the scope."""

    stmt: Stmt


@dataclass
class DropStmt:
    """An explicit drop of a value."""

    expr: Expr


@dataclass
class AssertStmt:
    """An ``assert`` with an optional message."""

    condition: Expr
    message: Optional[Expr] = None


@dataclass
class TryStmt:
    """A ``try``/``catch``/``finally`` statement."""

    body: Block
    catch_clauses: list[CatchClause] = field(default_factory=list)
    finally_block: Optional[Block] = None


@dataclass
class RaiseStmt:
    """A ``raise``, optionally with a value."""

    value: Optional[Expr] = None


@dataclass
class WithItem:
    """A context manager in a ``with`` statement, with an optional binding."""

    context: Expr
    span: tuple[int, int]
    binding: Optional[Pattern] = None


@dataclass
class WithStmt:
    """A ``with`` statement."""

    items: list[WithItem]
    body: Block


@dataclass
class AsyncStmt:
    """An ``async`` block."""

    block: Block


@dataclass
class SpawnStmt:
    """A ``spawn`` of a task."""

    expr: Expr


@dataclass
class RecvArm:
    """A select arm receiving from a channel."""

    pattern: Pattern
    channel: Expr


@dataclass
class SendArm:
    """A select arm sending to a channel."""

    value: Expr
    channel: Expr


@dataclass
class DefaultArm:
    """The select arm taken when no channel is ready."""


SelectArmKind = Union[RecvArm, SendArm, DefaultArm]


@dataclass
class SelectArm:
    """One arm of a ``select`` statement."""

    id: NodeId
    kind: SelectArmKind
    body: Block
    span: tuple[int, int]


@dataclass
class SelectStmt:
    """A ``select`` over channel operations."""

    arms: list[SelectArm]


@dataclass
class UnsafeStmt:
    """An ``unsafe`` block."""

    block: Block


@dataclass
class ComptimeStmt:
    """A ``comptime`` block."""

    block: Block


@dataclass
class ItemStmt:
    """A nested item such as a local function."""

    item: Item


@dataclass
class EmptyStmt:
    """An empty statement, e.g. a lone semicolon."""


StmtKind = Union[
    ExprStmt,
    LetStmt,
    VarStmt,
    ConstStmt,
    AssignStmt,
    IfStmt,
    MatchStmt,
    WhileStmt,
    ForStmt,
    LoopStmt,
    BreakStmt,
    ContinueStmt,
    ReturnStmt,
    YieldStmt,
    DeferStmt,
    DropStmt,
    AssertStmt,
    TryStmt,
    RaiseStmt,
    WithStmt,
    AsyncStmt,
    SpawnStmt,
    SelectStmt,
    UnsafeStmt,
    ComptimeStmt,
    ItemStmt,
    EmptyStmt,
]
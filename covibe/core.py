"""Core syntax-tree building blocks: node ids, identifiers, paths and items."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Optional, Union

if TYPE_CHECKING:
    from covibe.decl import (
        ConstDecl,
        EnumDecl,
        ExportDecl,
        ExternBlock,
        Function,
        ImplDecl,
        ImportDecl,
        MacroDecl,
        ModuleDecl,
        StaticDecl,
        StructDecl,
        TraitDecl,
        TypeAlias,
    )
    from covibe.expr import Expr
    from covibe.ty import Type

    ItemKind = Union[
        Function,
        StructDecl,
        EnumDecl,
        TraitDecl,
        ImplDecl,
        TypeAlias,
        ConstDecl,
        StaticDecl,
        ImportDecl,
        ExportDecl,
        ExternBlock,
        ModuleDecl,
        MacroDecl,
    ]

_NODE_ID_MAX = 2**32 - 1


@dataclass(frozen=True, order=True)
class NodeId:
    """A unique identifier for a syntax-tree node (an unsigned 32-bit value)."""

    value: int

    DUMMY: ClassVar[NodeId]

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _NODE_ID_MAX:
            raise ValueError(f"node id {self.value} is outside the 32-bit unsigned range")

    def __int__(self) -> int:
        return self.value


NodeId.DUMMY = NodeId(0)


@dataclass
class NodeIdGen:
    """An endless iterator of fresh node ids; 0 is reserved for ``NodeId.DUMMY``."""

    next_id: int = 1

    def __iter__(self) -> NodeIdGen:
        return self

    def __next__(self) -> NodeId:
        node_id = NodeId(self.next_id)
        if self.next_id + 1 > _NODE_ID_MAX:
            raise OverflowError("NodeId overflow")
        self.next_id += 1
        return node_id


@dataclass(frozen=True)
class Ident:
    """An identifier: an interned symbol and its source span."""

    symbol: str
    span: tuple[int, int]


@dataclass
class PathSegment:
    """One segment of a path, possibly with generic arguments."""

    ident: Ident
    args: Optional[GenericArgs] = None


@dataclass
class Path:
    """A path naming a type, module or value, such as ``std::io::read``."""

    segments: list[PathSegment]
    span: tuple[int, int]

    @classmethod
    def from_ident(cls, ident: Ident) -> Path:
        """Build a one-segment path from an identifier."""
        return cls([PathSegment(ident)], ident.span)

    def is_simple(self) -> bool:
        """True when the path is a single plain name."""
        return len(self.segments) == 1

    def last_segment(self) -> Optional[PathSegment]:
        """The final segment, or None for an empty path."""
        return self.segments[-1] if self.segments else None


@dataclass
class GenericArgs:
    """Generic arguments of a path segment, e.g. ``Vec<int>``."""

    types: list[Type]
    consts: list[Expr]
    span: tuple[int, int]


@dataclass(frozen=True)
class Lifetime:
    """A lifetime such as ``'a``; the name is stored without the apostrophe."""

    name: str
    span: tuple[int, int]


class Visibility(enum.Enum):
    """Visibility of an item."""

    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"

    def is_public(self) -> bool:
        return self is Visibility.PUBLIC

    def is_private(self) -> bool:
        return self is Visibility.PRIVATE


@dataclass(frozen=True)
class Restricted:
    """Visibility limited to a path, e.g. ``pub(crate)``; span points at the path."""

    span: tuple[int, int]

    def is_public(self) -> bool:
        return False

    def is_private(self) -> bool:
        return False


class Mutability(enum.Enum):
    """Whether a binding may be mutated."""

    IMMUTABLE = "immutable"
    MUTABLE = "mutable"

    def is_mutable(self) -> bool:
        return self is Mutability.MUTABLE


@dataclass
class TraitBound:
    """A trait bound on a type parameter."""

    path: Path
    span: tuple[int, int]


@dataclass
class TypeParam:
    """A type parameter such as ``T: Display = int``."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    bounds: list[TraitBound] = field(default_factory=list)
    default: Optional[Type] = None


@dataclass
class ConstParam:
    """A const generic parameter such as ``N: usize``."""

    id: NodeId
    name: Ident
    ty: Type
    span: tuple[int, int]
    default: Optional[Expr] = None


@dataclass
class LifetimeParam:
    """A lifetime parameter such as ``'a: 'b``."""

    id: NodeId
    lifetime: Lifetime
    span: tuple[int, int]
    bounds: list[Lifetime] = field(default_factory=list)


@dataclass
class BoundPredicate:
    """A where-clause predicate bounding a type, e.g. ``T: Display``."""

    ty: Type
    bounds: list[TraitBound]
    span: tuple[int, int]


@dataclass
class LifetimePredicate:
    """A where-clause predicate bounding a lifetime, e.g. ``'a: 'b``."""

    lifetime: Lifetime
    bounds: list[Lifetime]
    span: tuple[int, int]


@dataclass
class WhereClause:
    """A where clause made of predicates."""

    predicates: list[Union[BoundPredicate, LifetimePredicate]]
    span: tuple[int, int]


@dataclass
class Attribute:
    """An attribute such as ``@inline`` or ``@deprecated("...")``."""

    path: Path
    span: tuple[int, int]
    args: list[Expr] = field(default_factory=list)


@dataclass
class DocComment:
    """A doc comment attached to the following item, without its markers."""

    content: str
    span: tuple[int, int]


@dataclass
class Item:
    """A top-level item in a module."""

    id: NodeId
    kind: ItemKind
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    vis: Union[Visibility, Restricted] = Visibility.PRIVATE


@dataclass
class Module:
    """The root of a syntax tree."""

    id: NodeId
    items: list[Item]
    span: tuple[int, int]
"""Type expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from covibe.core import Ident, Lifetime, NodeId, Path, TraitBound

if TYPE_CHECKING:
    from covibe.expr import Expr


@dataclass
class Type:
    """A type expression."""

    id: NodeId
    kind: TypeKind
    span: tuple[int, int]

    @classmethod
    def error(cls, span: tuple[int, int]) -> Type:
        """A placeholder type for error recovery."""
        return cls(NodeId.DUMMY, ErrorType(), span)


@dataclass
class PathType:
    """A named type such as ``int`` or ``Vec<T>``."""

    path: Path


@dataclass
class TupleType:
    """A tuple type such as ``(int, str)``; empty for the unit type."""

    elements: list[Type] = field(default_factory=list)


@dataclass
class ArrayType:
    """A fixed-size array type such as ``[int; 10]``."""

    element: Type
    size: Expr


@dataclass
class SliceType:
    """A slice type such as ``[int]``."""

    inner: Type


@dataclass
class RefType:
    """A reference type such as ``&'a mut T``."""

    inner: Type
    mutable: bool = False
    lifetime: Optional[Lifetime] = None


@dataclass
class PointerType:
    """A raw pointer type such as ``*const int``."""

    inner: Type
    mutable: bool = False


@dataclass
class FunctionType:
    """A function type such as ``def(int, str) -> bool``."""

    params: list[Type]
    return_type: Type
    is_async: bool = False


@dataclass
class NeverType:
    """The ``!`` type of expressions that never return."""


@dataclass
class InferType:
    """The ``_`` type, left for inference."""


@dataclass
class UnionType:
    """A union such as ``int | str``."""

    members: list[Type]


@dataclass
class IntersectionType:
    """An intersection such as ``T & Clone``."""

    members: list[Type]


@dataclass
class TraitObjectType:
    """A trait object such as ``dyn Display``."""

    bounds: list[TraitBound]
    lifetime: Optional[Lifetime] = None


@dataclass
class ImplTraitType:
    """An ``impl Trait`` type."""

    bounds: list[TraitBound]


@dataclass
class ParenType:
    """A parenthesised type."""

    inner: Type


@dataclass
class TypeofType:
    """The type of an expression, ``typeof(x)``."""

    expr: Expr


@dataclass
class RefinementPredicate:
    """The predicate of a refinement type, e.g. ``x: x > 0``."""

    var: Ident
    condition: Expr
    span: tuple[int, int]


@dataclass
class RefinementType:
    """A refinement type such as ``int { x: x > 0 }``."""

    base: Type
    predicate: RefinementPredicate


@dataclass
class Effect:
    """An effect annotation such as ``IO``."""

    name: Path
    span: tuple[int, int]


@dataclass
class EffectType:
    """A type with effects such as ``T ! IO``."""

    base: Type
    effects: list[Effect]


@dataclass
class LinearType:
    """A type whose values must be used exactly once."""

    inner: Type


@dataclass
class OpaqueType:
    """An opaque type hiding its implementation."""

    name: Ident
    bounds: list[TraitBound] = field(default_factory=list)


@dataclass
class AssociatedType:
    """An associated type such as ``T::Item``."""

    base: Type
    ident: Ident


@dataclass
class MacroType:
    """A macro invocation in type position."""

    path: Path
    args: list[Type] = field(default_factory=list)


@dataclass
class TypeVar:
    """A type variable used during inference."""

    name: Ident


@dataclass
class ErrorType:
    """Placeholder left by error recovery."""


TypeKind = Union[
    PathType,
    TupleType,
    ArrayType,
    SliceType,
    RefType,
    PointerType,
    FunctionType,
    NeverType,
    InferType,
    UnionType,
    IntersectionType,
    TraitObjectType,
    ImplTraitType,
    ParenType,
    TypeofType,
    RefinementType,
    EffectType,
    LinearType,
    OpaqueType,
    AssociatedType,
    MacroType,
    TypeVar,
    ErrorType,
]
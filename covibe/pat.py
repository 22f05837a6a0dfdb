"""Patterns for matching and destructuring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from covibe.core import Ident, NodeId, Path

if TYPE_CHECKING:
    from covibe.expr import Expr
    from covibe.literal import Literal
    from covibe.ty import Type


@dataclass
class Pattern:
    """A pattern in a binding, parameter or match arm."""

    id: NodeId
    kind: PatternKind
    span: tuple[int, int]


@dataclass
class WildcardPattern:
    """The ``_`` pattern."""


@dataclass
class RestPattern:
    """The ``...`` pattern capturing remaining elements."""


@dataclass
class IdentPattern:
    """A binding such as ``x``, ``mut x`` or ``x @ sub``."""

    name: Ident
    mutable: bool = False
    subpattern: Optional[Pattern] = None


@dataclass
class LiteralPattern:
    """A literal such as ``42`` or ``"hello"``."""

    literal: Literal


@dataclass
class RangePattern:
    """A range such as ``1..10`` or ``'a'..='z'``."""

    start: Pattern
    end: Pattern
    inclusive: bool = False


@dataclass
class TuplePattern:
    """A tuple such as ``(x, _, z)``."""

    elements: list[Pattern]


@dataclass
class FieldPattern:
    """A field inside a struct pattern; no sub-pattern means shorthand."""

    name: Ident
    span: tuple[int, int]
    pattern: Optional[Pattern] = None

    def is_shorthand(self) -> bool:
        """True for ``Point { x }`` style fields."""
        return self.pattern is None


@dataclass
class StructPattern:
    """A struct pattern such as ``Color { r: 255, .. }``."""

    path: Path
    fields: list[FieldPattern] = field(default_factory=list)
    ignore_rest: bool = False


@dataclass
class TupleStructPattern:
    """A tuple-struct pattern such as ``Some(x)``."""

    path: Path
    elements: list[Pattern] = field(default_factory=list)


@dataclass
class UnitStructPattern:
    """A unit struct pattern such as ``None``."""

    path: Path


@dataclass
class ArrayPattern:
    """An array or slice pattern such as ``[head, ...tail]``."""

    elements: list[Pattern]


@dataclass
class OrPattern:
    """Alternatives such as ``1 | 2 | 3``."""

    alternatives: list[Pattern]


@dataclass
class ParenPattern:
    """A parenthesised pattern."""

    pattern: Pattern


@dataclass
class RefPattern:
    """A reference pattern such as ``&x`` or ``&mut y``."""

    pattern: Pattern
    mutable: bool = False


@dataclass
class BoxPattern:
    """A ``box x`` pattern."""

    pattern: Pattern


@dataclass
class TypedPattern:
    """A pattern with a type annotation such as ``x: int``."""

    pattern: Pattern
    ty: Type


@dataclass
class PathPattern:
    """A path naming a data-less enum variant, e.g. ``Option::None``."""

    path: Path


@dataclass
class MacroPattern:
    """A macro invocation in pattern position."""

    path: Path
    args: list[Pattern] = field(default_factory=list)


@dataclass
class GuardPattern:
    """A pattern with a condition attached."""

    pattern: Pattern
    condition: Expr


@dataclass
class ErrorPattern:
    """Placeholder left by error recovery."""


PatternKind = Union[
    WildcardPattern,
    RestPattern,
    IdentPattern,
    LiteralPattern,
    RangePattern,
    TuplePattern,
    StructPattern,
    TupleStructPattern,
    UnitStructPattern,
    ArrayPattern,
    OrPattern,
    ParenPattern,
    RefPattern,
    BoxPattern,
    TypedPattern,
    PathPattern,
    MacroPattern,
    GuardPattern,
    ErrorPattern,
]
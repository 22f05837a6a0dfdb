"""Declarations: functions, types, traits, impls, imports and macros."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from covibe.core import (
    Attribute,
    DocComment,
    Ident,
    Item,
    NodeId,
    Path,
    Restricted,
    TraitBound,
    Visibility,
    WhereClause,
)

if TYPE_CHECKING:
    from covibe.core import ConstParam, LifetimeParam, TypeParam
    from covibe.expr import Expr, FunctionParam
    from covibe.stmt import Block
    from covibe.ty import Type

    GenericParam = Union[TypeParam, ConstParam, LifetimeParam]


@dataclass
class Function:
    """A function declaration; ``body`` is None for extern and trait functions."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    generics: list[GenericParam] = field(default_factory=list)
    params: list[FunctionParam] = field(default_factory=list)
    return_type: Optional[Type] = None
    where_clause: Optional[WhereClause] = None
    body: Optional[Block] = None
    is_async: bool = False
    is_unsafe: bool = False
    is_const: bool = False
    is_extern: bool = False
    abi: Optional[str] = None


@dataclass
class FieldDecl:
    """A named field of a struct or struct-like variant."""

    id: NodeId
    name: Ident
    ty: Type
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    vis: Union[Visibility, Restricted] = Visibility.PRIVATE
    default: Optional[Expr] = None


@dataclass
class TupleFieldDecl:
    """A positional field of a tuple struct or tuple variant."""

    id: NodeId
    ty: Type
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    vis: Union[Visibility, Restricted] = Visibility.PRIVATE


@dataclass
class NamedFields:
    """Named fields, as in ``struct Point { x: int, y: int }``."""

    fields: list[FieldDecl] = field(default_factory=list)


@dataclass
class TupleFields:
    """Positional fields, as in ``struct Color(u8, u8, u8)``."""

    fields: list[TupleFieldDecl] = field(default_factory=list)


@dataclass
class NoFields:
    """No fields, as in a unit struct or unit variant."""


FieldsKind = Union[NamedFields, TupleFields, NoFields]


@dataclass
class StructDecl:
    """A struct declaration."""

    id: NodeId
    name: Ident
    kind: FieldsKind
    span: tuple[int, int]
    generics: list[GenericParam] = field(default_factory=list)
    where_clause: Optional[WhereClause] = None


@dataclass
class VariantDecl:
    """An enum variant with an optional explicit discriminant."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    kind: FieldsKind = field(default_factory=NoFields)
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    discriminant: Optional[Expr] = None


@dataclass
class EnumDecl:
    """An enum declaration."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    variants: list[VariantDecl] = field(default_factory=list)
    generics: list[GenericParam] = field(default_factory=list)
    where_clause: Optional[WhereClause] = None


@dataclass
class FunctionSignature:
    """A function signature without a body."""

    name: Ident
    span: tuple[int, int]
    generics: list[GenericParam] = field(default_factory=list)
    params: list[FunctionParam] = field(default_factory=list)
    return_type: Optional[Type] = None
    where_clause: Optional[WhereClause] = None
    is_async: bool = False
    is_unsafe: bool = False
    is_const: bool = False


@dataclass
class TraitMethod:
    """A trait method, optionally with a default body."""

    sig: FunctionSignature
    body: Optional[Block] = None


@dataclass
class TraitType:
    """An associated type in a trait, optionally bounded and defaulted."""

    name: Ident
    bounds: list[TraitBound] = field(default_factory=list)
    default: Optional[Type] = None


@dataclass
class TraitConst:
    """An associated constant in a trait, optionally defaulted."""

    name: Ident
    ty: Type
    default: Optional[Expr] = None


TraitItemKind = Union[TraitMethod, TraitType, TraitConst]


@dataclass
class TraitItem:
    """An item inside a trait."""

    id: NodeId
    kind: TraitItemKind
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)


@dataclass
class TraitDecl:
    """A trait declaration."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    items: list[TraitItem] = field(default_factory=list)
    generics: list[GenericParam] = field(default_factory=list)
    supertraits: list[TraitBound] = field(default_factory=list)
    where_clause: Optional[WhereClause] = None
    is_unsafe: bool = False
    is_auto: bool = False


@dataclass
class ImplMethod:
    """A method inside an impl block."""

    function: Function


@dataclass
class ImplType:
    """An associated type definition inside an impl block."""

    name: Ident
    ty: Type


@dataclass
class ImplConst:
    """An associated constant definition inside an impl block."""

    name: Ident
    ty: Type
    value: Expr


ImplItemKind = Union[ImplMethod, ImplType, ImplConst]


@dataclass
class ImplItem:
    """An item inside an impl block."""

    id: NodeId
    kind: ImplItemKind
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    vis: Union[Visibility, Restricted] = Visibility.PRIVATE


@dataclass
class ImplDecl:
    """An impl block; ``trait_ref`` is None for inherent impls."""

    id: NodeId
    self_ty: Type
    span: tuple[int, int]
    items: list[ImplItem] = field(default_factory=list)
    generics: list[GenericParam] = field(default_factory=list)
    trait_ref: Optional[Path] = None
    where_clause: Optional[WhereClause] = None
    is_unsafe: bool = False


@dataclass
class TypeAlias:
    """A type alias."""

    id: NodeId
    name: Ident
    ty: Type
    span: tuple[int, int]
    generics: list[GenericParam] = field(default_factory=list)
    where_clause: Optional[WhereClause] = None


@dataclass
class ConstDecl:
    """A top-level constant."""

    id: NodeId
    name: Ident
    value: Expr
    span: tuple[int, int]
    ty: Optional[Type] = None


@dataclass
class StaticDecl:
    """A static; the value may be missing for extern statics."""

    id: NodeId
    name: Ident
    ty: Type
    span: tuple[int, int]
    value: Optional[Expr] = None
    mutable: bool = False


@dataclass
class SimpleImport:
    """``import foo`` with an optional alias."""

    path: Path
    alias: Optional[Ident] = None


@dataclass
class GlobImport:
    """``from foo import *``."""

    path: Path


@dataclass
class NestedImport:
    """``from foo import {bar, baz}``."""

    prefix: Path
    trees: list[ImportTree] = field(default_factory=list)


ImportTree = Union[SimpleImport, GlobImport, NestedImport]


@dataclass
class ImportDecl:
    """An import declaration."""

    id: NodeId
    tree: ImportTree
    span: tuple[int, int]


@dataclass
class ExportName:
    """Export of an item by name, with an optional alias."""

    name: Ident
    alias: Optional[Ident] = None


@dataclass
class Reexport:
    """Re-export of items from another module."""

    tree: ImportTree


@dataclass
class ExportAll:
    """Export of everything."""


ExportTree = Union[ExportName, Reexport, ExportAll]


@dataclass
class ExportDecl:
    """An export declaration."""

    id: NodeId
    tree: ExportTree
    span: tuple[int, int]


@dataclass
class ExternFunction:
    """A foreign function."""

    sig: FunctionSignature


@dataclass
class ExternStatic:
    """A foreign static."""

    name: Ident
    ty: Type
    mutable: bool = False


@dataclass
class ExternType:
    """An opaque foreign type."""

    name: Ident


ExternItemKind = Union[ExternFunction, ExternStatic, ExternType]


@dataclass
class ExternItem:
    """An item inside an extern block."""

    id: NodeId
    kind: ExternItemKind
    span: tuple[int, int]
    docs: list[DocComment] = field(default_factory=list)
    attrs: list[Attribute] = field(default_factory=list)
    vis: Union[Visibility, Restricted] = Visibility.PRIVATE


@dataclass
class ExternBlock:
    """An extern block with an optional ABI name such as ``"C"``."""

    id: NodeId
    span: tuple[int, int]
    items: list[ExternItem] = field(default_factory=list)
    abi: Optional[str] = None


@dataclass
class ModuleDecl:
    """A module declaration; ``content`` is None for external modules."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    content: Optional[list[Item]] = None


class MacroFragmentKind(enum.Enum):
    """The fragment a macro metavariable matches."""

    EXPR = "expr"
    STMT = "stmt"
    PAT = "pat"
    TY = "ty"
    IDENT = "ident"
    PATH = "path"
    BLOCK = "block"
    ITEM = "item"
    META = "meta"
    LITERAL = "literal"


class MacroRepeatKind(enum.Enum):
    """How often a macro repetition may occur."""

    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    ZERO_OR_ONE = "?"


@dataclass
class MacroLiteralToken:
    """A literal token in a macro rule."""

    symbol: str


@dataclass
class MacroMetavar:
    """A metavariable such as ``$x:expr``."""

    name: Ident
    kind: MacroFragmentKind


@dataclass
class MacroRepeat:
    """A repetition such as ``$(...),*``."""

    tokens: list[MacroToken]
    kind: MacroRepeatKind
    separator: Optional[str] = None


MacroToken = Union[MacroLiteralToken, MacroMetavar, MacroRepeat]


@dataclass
class MacroRule:
    """A macro rule: a matcher and its transcriber."""

    matcher: list[MacroToken]
    transcriber: list[MacroToken]
    span: tuple[int, int]


@dataclass
class MacroDecl:
    """A macro declaration."""

    id: NodeId
    name: Ident
    span: tuple[int, int]
    rules: list[MacroRule] = field(default_factory=list)
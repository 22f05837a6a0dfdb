"""Read-only traversal of the syntax tree.

Subclass :class:`Visitor` and override the ``visit_*`` methods of interest.
Every default method calls the matching ``walk_*`` function, which visits
the node's children in source order.
"""

from __future__ import annotations

from typing import Iterable, Optional

from covibe.core import Ident, Item, Module, Path
from covibe.decl import (
    ConstDecl,
    EnumDecl,
    ExportDecl,
    ExternBlock,
    ExternFunction,
    ExternStatic,
    ExternType,
    Function,
    FunctionSignature,
    GlobImport,
    ImplConst,
    ImplDecl,
    ImplMethod,
    ImplType,
    ImportDecl,
    ImportTree,
    MacroDecl,
    ModuleDecl,
    NamedFields,
    NestedImport,
    NoFields,
    SimpleImport,
    StaticDecl,
    StructDecl,
    TraitConst,
    TraitDecl,
    TraitMethod,
    TraitType,
    TupleFields,
    TypeAlias,
)
from covibe.expr import (
    ArrayExpr,
    ArrayRepeatExpr,
    AssignExpr,
    AsyncExpr,
    AwaitExpr,
    BinaryExpr,
    BlockExpr,
    BoxExpr,
    BreakExpr,
    CallExpr,
    CastExpr,
    CatchClause,
    CloneExpr,
    Comprehension,
    ComptimeExpr,
    ContinueExpr,
    CopyExpr,
    DictCompExpr,
    DictExpr,
    ErrorExpr,
    Expr,
    FieldExpr,
    GeneratorExpr,
    IfExpr,
    IndexExpr,
    LambdaExpr,
    ListCompExpr,
    LiteralExpr,
    MacroExpr,
    MatchArm,
    MatchExpr,
    MethodCallExpr,
    MoveExpr,
    ParenExpr,
    PathExpr,
    RangeExpr,
    ReturnExpr,
    SetCompExpr,
    SetExpr,
    SpawnExpr,
    StructExpr,
    TryExpr,
    TupleExpr,
    TupleIndexExpr,
    TupleStructExpr,
    TypeAscriptionExpr,
    UnaryExpr,
    UnitStructExpr,
    UnsafeExpr,
    YieldExpr,
)
from covibe.pat import (
    ArrayPattern,
    BoxPattern,
    ErrorPattern,
    GuardPattern,
    IdentPattern,
    LiteralPattern,
    MacroPattern,
    OrPattern,
    ParenPattern,
    PathPattern,
    Pattern,
    RangePattern,
    RefPattern,
    RestPattern,
    StructPattern,
    TuplePattern,
    TupleStructPattern,
    TypedPattern,
    UnitStructPattern,
    WildcardPattern,
)
from covibe.stmt import (
    AssertStmt,
    AssignStmt,
    AsyncStmt,
    Block,
    BreakStmt,
    ComptimeStmt,
    ConstStmt,
    ContinueStmt,
    DefaultArm,
    DeferStmt,
    DropStmt,
    EmptyStmt,
    ExprStmt,
    ForStmt,
    IfStmt,
    ItemStmt,
    LetStmt,
    LoopStmt,
    MatchStmt,
    RaiseStmt,
    RecvArm,
    ReturnStmt,
    SelectStmt,
    SendArm,
    SpawnStmt,
    Stmt,
    TryStmt,
    UnsafeStmt,
    VarStmt,
    WhileStmt,
    WithStmt,
    YieldStmt,
)
from covibe.ty import (
    ArrayType,
    AssociatedType,
    EffectType,
    ErrorType,
    FunctionType,
    ImplTraitType,
    InferType,
    IntersectionType,
    LinearType,
    MacroType,
    NeverType,
    OpaqueType,
    ParenType,
    PathType,
    PointerType,
    RefinementType,
    RefType,
    SliceType,
    TraitObjectType,
    TupleType,
    Type,
    TypeofType,
    TypeVar,
    UnionType,
)


class Visitor:
    """Base class for read-only tree traversals; defaults recurse into children."""

    def visit_module(self, module: Module) -> None:
        walk_module(self, module)

    def visit_item(self, item: Item) -> None:
        walk_item(self, item)

    def visit_expr(self, expr: Expr) -> None:
        walk_expr(self, expr)

    def visit_stmt(self, stmt: Stmt) -> None:
        walk_stmt(self, stmt)

    def visit_pattern(self, pattern: Pattern) -> None:
        walk_pattern(self, pattern)

    def visit_type(self, ty: Type) -> None:
        walk_type(self, ty)

    def visit_block(self, block: Block) -> None:
        walk_block(self, block)

    def visit_path(self, path: Path) -> None:
        walk_path(self, path)

    def visit_ident(self, ident: Ident) -> None:
        """Identifiers are leaves with no children; anything else is rejected."""
        if not isinstance(ident, Ident):
            raise TypeError(f"expected an identifier, got {type(ident).__name__}")

    def visit_function(self, func: Function) -> None:
        walk_function(self, func)

    def visit_struct(self, strukt: StructDecl) -> None:
        walk_struct(self, strukt)

    def visit_enum(self, enm: EnumDecl) -> None:
        walk_enum(self, enm)

    def visit_trait(self, trt: TraitDecl) -> None:
        walk_trait(self, trt)

    def visit_impl(self, impl_decl: ImplDecl) -> None:
        walk_impl(self, impl_decl)


def _unknown(what: str, kind: object) -> TypeError:
    return TypeError(f"unknown {what} kind: {type(kind).__name__}")


def _visit_optional_type(visitor: Visitor, ty: Optional[Type]) -> None:
    if ty is not None:
        visitor.visit_type(ty)


def _visit_optional_expr(visitor: Visitor, expr: Optional[Expr]) -> None:
    if expr is not None:
        visitor.visit_expr(expr)


def _walk_signature(visitor: Visitor, sig: FunctionSignature) -> None:
    visitor.visit_ident(sig.name)
    for param in sig.params:
        _visit_optional_type(visitor, param.ty)
    _visit_optional_type(visitor, sig.return_type)


def _walk_import_tree(visitor: Visitor, tree: ImportTree) -> None:
    match tree:
        case SimpleImport(path=path, alias=alias):
            visitor.visit_path(path)
            if alias is not None:
                visitor.visit_ident(alias)
        case GlobImport(path=path):
            visitor.visit_path(path)
        case NestedImport(prefix=prefix, trees=trees):
            visitor.visit_path(prefix)
            for sub in trees:
                _walk_import_tree(visitor, sub)
        case _:
            raise _unknown("import tree", tree)


def _walk_comprehensions(visitor: Visitor, comprehensions: Iterable[Comprehension]) -> None:
    for comp in comprehensions:
        visitor.visit_pattern(comp.pattern)
        visitor.visit_expr(comp.iter)
        for condition in comp.filters:
            visitor.visit_expr(condition)


def _walk_arms(visitor: Visitor, arms: Iterable[MatchArm]) -> None:
    for arm in arms:
        visitor.visit_pattern(arm.pattern)
        _visit_optional_expr(visitor, arm.guard)
        visitor.visit_expr(arm.body)


def _walk_try(
    visitor: Visitor,
    body: Block,
    catch_clauses: Iterable[CatchClause],
    finally_block: Optional[Block],
) -> None:
    visitor.visit_block(body)
    for clause in catch_clauses:
        if clause.pattern is not None:
            visitor.visit_pattern(clause.pattern)
        visitor.visit_block(clause.body)
    if finally_block is not None:
        visitor.visit_block(finally_block)


def walk_module(visitor: Visitor, module: Module) -> None:
    """Visit every item of a module in order."""
    for item in module.items:
        visitor.visit_item(item)


def walk_item(visitor: Visitor, item: Item) -> None:
    """Visit the children of a top-level item."""
    kind = item.kind
    match kind:
        case Function():
            visitor.visit_function(kind)
        case StructDecl():
            visitor.visit_struct(kind)
        case EnumDecl():
            visitor.visit_enum(kind)
        case TraitDecl():
            visitor.visit_trait(kind)
        case ImplDecl():
            visitor.visit_impl(kind)
        case TypeAlias():
            visitor.visit_ident(kind.name)
            visitor.visit_type(kind.ty)
        case ConstDecl():
            visitor.visit_ident(kind.name)
            _visit_optional_type(visitor, kind.ty)
            visitor.visit_expr(kind.value)
        case StaticDecl():
            visitor.visit_ident(kind.name)
            visitor.visit_type(kind.ty)
            _visit_optional_expr(visitor, kind.value)
        case ImportDecl():
            _walk_import_tree(visitor, kind.tree)
        case ExportDecl():
            pass
        case ExternBlock():
            for extern_item in kind.items:
                match extern_item.kind:
                    case ExternFunction(sig=sig):
                        _walk_signature(visitor, sig)
                    case ExternStatic(name=name, ty=ty):
                        visitor.visit_ident(name)
                        visitor.visit_type(ty)
                    case ExternType(name=name):
                        visitor.visit_ident(name)
                    case other:
                        raise _unknown("extern item", other)
        case ModuleDecl():
            visitor.visit_ident(kind.name)
            for sub in kind.content or ():
                visitor.visit_item(sub)
        case MacroDecl():
            pass
        case _:
            raise _unknown("item", kind)


def walk_function(visitor: Visitor, func: Function) -> None:
    """Visit a function's name, parameters, return type and body."""
    visitor.visit_ident(func.name)
    for param in func.params:
        visitor.visit_pattern(param.pattern)
        _visit_optional_type(visitor, param.ty)
        _visit_optional_expr(visitor, param.default)
    _visit_optional_type(visitor, func.return_type)
    if func.body is not None:
        visitor.visit_block(func.body)


def walk_struct(visitor: Visitor, strukt: StructDecl) -> None:
    """Visit a struct's name and fields, including field defaults."""
    visitor.visit_ident(strukt.name)
    match strukt.kind:
        case NamedFields(fields=fields):
            for fld in fields:
                visitor.visit_ident(fld.name)
                visitor.visit_type(fld.ty)
                _visit_optional_expr(visitor, fld.default)
        case TupleFields(fields=fields):
            for tuple_field in fields:
                visitor.visit_type(tuple_field.ty)
        case NoFields():
            pass
        case other:
            raise _unknown("struct", other)


def walk_enum(visitor: Visitor, enm: EnumDecl) -> None:
    """Visit an enum's name, variants and discriminants."""
    visitor.visit_ident(enm.name)
    for variant in enm.variants:
        visitor.visit_ident(variant.name)
        match variant.kind:
            case NoFields():
                pass
            case TupleFields(fields=fields):
                for tuple_field in fields:
                    visitor.visit_type(tuple_field.ty)
            case NamedFields(fields=fields):
                for fld in fields:
                    visitor.visit_ident(fld.name)
                    visitor.visit_type(fld.ty)
            case other:
                raise _unknown("variant", other)
        _visit_optional_expr(visitor, variant.discriminant)


def walk_trait(visitor: Visitor, trt: TraitDecl) -> None:
    """Visit a trait's name and items."""
    visitor.visit_ident(trt.name)
    for item in trt.items:
        match item.kind:
            case TraitMethod(sig=sig, body=body):
                _walk_signature(visitor, sig)
                if body is not None:
                    visitor.visit_block(body)
            case TraitType(name=name, default=default):
                visitor.visit_ident(name)
                _visit_optional_type(visitor, default)
            case TraitConst(name=name, ty=ty, default=default):
                visitor.visit_ident(name)
                visitor.visit_type(ty)
                _visit_optional_expr(visitor, default)
            case other:
                raise _unknown("trait item", other)


def walk_impl(visitor: Visitor, impl_decl: ImplDecl) -> None:
    """Visit an impl's trait, self type and items."""
    if impl_decl.trait_ref is not None:
        visitor.visit_path(impl_decl.trait_ref)
    visitor.visit_type(impl_decl.self_ty)
    for item in impl_decl.items:
        match item.kind:
            case ImplMethod(function=function):
                visitor.visit_function(function)
            case ImplType(name=name, ty=ty):
                visitor.visit_ident(name)
                visitor.visit_type(ty)
            case ImplConst(name=name, ty=ty, value=value):
                visitor.visit_ident(name)
                visitor.visit_type(ty)
                visitor.visit_expr(value)
            case other:
                raise _unknown("impl item", other)


def walk_expr(visitor: Visitor, expr: Expr) -> None:
    """Visit the children of an expression."""
    kind = expr.kind
    match kind:
        case LiteralExpr() | ContinueExpr() | ErrorExpr():
            pass
        case PathExpr(path=path):
            visitor.visit_path(path)
        case BinaryExpr(left=left, right=right):
            visitor.visit_expr(left)
            visitor.visit_expr(right)
        case UnaryExpr(operand=operand):
            visitor.visit_expr(operand)
        case AssignExpr(target=target, value=value):
            visitor.visit_expr(target)
            visitor.visit_expr(value)
        case CallExpr(func=func, args=args):
            visitor.visit_expr(func)
            for arg in args:
                visitor.visit_expr(arg.value)
        case MethodCallExpr(receiver=receiver, method=method, args=args):
            visitor.visit_expr(receiver)
            visitor.visit_ident(method)
            for arg in args:
                visitor.visit_expr(arg.value)
        case FieldExpr(object=obj, field=fld):
            visitor.visit_expr(obj)
            visitor.visit_ident(fld)
        case TupleIndexExpr(object=obj):
            visitor.visit_expr(obj)
        case IndexExpr(object=obj, index=index):
            visitor.visit_expr(obj)
            visitor.visit_expr(index)
        case RangeExpr(start=start, end=end):
            _visit_optional_expr(visitor, start)
            _visit_optional_expr(visitor, end)
        case TupleExpr(elements=elements) | ArrayExpr(elements=elements) | SetExpr(
            elements=elements
        ):
            for element in elements:
                visitor.visit_expr(element)
        case ArrayRepeatExpr(value=value, count=count):
            visitor.visit_expr(value)
            visitor.visit_expr(count)
        case DictExpr(entries=entries):
            for key, value in entries:
                visitor.visit_expr(key)
                visitor.visit_expr(value)
        case ListCompExpr(element=element, comprehensions=comps) | SetCompExpr(
            element=element, comprehensions=comps
        ) | GeneratorExpr(element=element, comprehensions=comps):
            visitor.visit_expr(element)
            _walk_comprehensions(visitor, comps)
        case DictCompExpr(key=key, value=value, comprehensions=comps):
            visitor.visit_expr(key)
            visitor.visit_expr(value)
            _walk_comprehensions(visitor, comps)
        case IfExpr():
            visitor.visit_expr(kind.condition)
            visitor.visit_expr(kind.then_branch)
            for condition, branch in kind.elif_branches:
                visitor.visit_expr(condition)
                visitor.visit_expr(branch)
            _visit_optional_expr(visitor, kind.else_branch)
        case MatchExpr(scrutinee=scrutinee, arms=arms):
            visitor.visit_expr(scrutinee)
            _walk_arms(visitor, arms)
        case BlockExpr(block=block) | AsyncExpr(block=block) | ComptimeExpr(
            block=block
        ) | UnsafeExpr(block=block):
            visitor.visit_block(block)
        case LambdaExpr(params=params, body=body):
            for param in params:
                visitor.visit_pattern(param.pattern)
                _visit_optional_type(visitor, param.ty)
            visitor.visit_expr(body)
        case ReturnExpr(value=value) | BreakExpr(value=value) | YieldExpr(value=value):
            _visit_optional_expr(visitor, value)
        case AwaitExpr(expr=inner) | SpawnExpr(expr=inner) | ParenExpr(
            expr=inner
        ) | MoveExpr(expr=inner) | CloneExpr(expr=inner) | CopyExpr(
            expr=inner
        ) | BoxExpr(expr=inner):
            visitor.visit_expr(inner)
        case TryExpr():
            _walk_try(visitor, kind.body, kind.catch_clauses, kind.finally_block)
        case CastExpr(expr=inner, ty=ty) | TypeAscriptionExpr(expr=inner, ty=ty):
            visitor.visit_expr(inner)
            visitor.visit_type(ty)
        case StructExpr(path=path, fields=fields, base=base):
            visitor.visit_path(path)
            for init in fields:
                visitor.visit_ident(init.name)
                _visit_optional_expr(visitor, init.value)
            _visit_optional_expr(visitor, base)
        case TupleStructExpr(path=path, fields=fields) | MacroExpr(path=path, args=fields):
            visitor.visit_path(path)
            for value in fields:
                visitor.visit_expr(value)
        case UnitStructExpr(path=path):
            visitor.visit_path(path)
        case _:
            raise _unknown("expression", kind)


def walk_stmt(visitor: Visitor, stmt: Stmt) -> None:
    """Visit the children of a statement."""
    kind = stmt.kind
    match kind:
        case ExprStmt(expr=expr) | DropStmt(expr=expr) | SpawnStmt(expr=expr):
            visitor.visit_expr(expr)
        case LetStmt(pattern=pattern, ty=ty, init=init) | VarStmt(
            pattern=pattern, ty=ty, init=init
        ):
            visitor.visit_pattern(pattern)
            _visit_optional_type(visitor, ty)
            _visit_optional_expr(visitor, init)
        case ConstStmt(name=name, ty=ty, value=value):
            visitor.visit_ident(name)
            _visit_optional_type(visitor, ty)
            visitor.visit_expr(value)
        case AssignStmt(target=target, value=value):
            visitor.visit_expr(target)
            visitor.visit_expr(value)
        case IfStmt():
            visitor.visit_expr(kind.condition)
            visitor.visit_block(kind.then_branch)
            for condition, block in kind.elif_branches:
                visitor.visit_expr(condition)
                visitor.visit_block(block)
            if kind.else_branch is not None:
                visitor.visit_block(kind.else_branch)
        case MatchStmt(scrutinee=scrutinee, arms=arms):
            visitor.visit_expr(scrutinee)
            _walk_arms(visitor, arms)
        case WhileStmt(condition=condition, body=body):
            visitor.visit_expr(condition)
            visitor.visit_block(body)
        case ForStmt(pattern=pattern, iter=iterable, body=body):
            visitor.visit_pattern(pattern)
            visitor.visit_expr(iterable)
            visitor.visit_block(body)
        case LoopStmt(body=block) | AsyncStmt(block=block) | UnsafeStmt(
            block=block
        ) | ComptimeStmt(block=block):
            visitor.visit_block(block)
        case BreakStmt(value=value) | ReturnStmt(value=value) | YieldStmt(
            value=value
        ) | RaiseStmt(value=value):
            _visit_optional_expr(visitor, value)
        case ContinueStmt() | EmptyStmt():
            pass
        case DeferStmt(stmt=inner):
            visitor.visit_stmt(inner)
        case AssertStmt(condition=condition, message=message):
            visitor.visit_expr(condition)
            _visit_optional_expr(visitor, message)
        case TryStmt():
            _walk_try(visitor, kind.body, kind.catch_clauses, kind.finally_block)
        case WithStmt(items=items, body=body):
            for with_item in items:
                visitor.visit_expr(with_item.context)
                if with_item.binding is not None:
                    visitor.visit_pattern(with_item.binding)
            visitor.visit_block(body)
        case SelectStmt(arms=arms):
            for arm in arms:
                match arm.kind:
                    case RecvArm(pattern=pattern, channel=channel):
                        visitor.visit_pattern(pattern)
                        visitor.visit_expr(channel)
                    case SendArm(value=value, channel=channel):
                        visitor.visit_expr(value)
                        visitor.visit_expr(channel)
                    case DefaultArm():
                        pass
                    case other:
                        raise _unknown("select arm", other)
                visitor.visit_block(arm.body)
        case ItemStmt(item=item):
            visitor.visit_item(item)
        case _:
            raise _unknown("statement", kind)


def walk_pattern(visitor: Visitor, pattern: Pattern) -> None:
    """Visit the children of a pattern."""
    kind = pattern.kind
    match kind:
        case WildcardPattern() | RestPattern() | LiteralPattern() | ErrorPattern():
            pass
        case IdentPattern(name=name, subpattern=sub):
            visitor.visit_ident(name)
            if sub is not None:
                visitor.visit_pattern(sub)
        case RangePattern(start=start, end=end):
            visitor.visit_pattern(start)
            visitor.visit_pattern(end)
        case TuplePattern(elements=elements) | ArrayPattern(elements=elements) | OrPattern(
            alternatives=elements
        ):
            for element in elements:
                visitor.visit_pattern(element)
        case StructPattern(path=path, fields=fields):
            visitor.visit_path(path)
            for fld in fields:
                visitor.visit_ident(fld.name)
                if fld.pattern is not None:
                    visitor.visit_pattern(fld.pattern)
        case TupleStructPattern(path=path, elements=elements) | MacroPattern(
            path=path, args=elements
        ):
            visitor.visit_path(path)
            for element in elements:
                visitor.visit_pattern(element)
        case UnitStructPattern(path=path) | PathPattern(path=path):
            visitor.visit_path(path)
        case ParenPattern(pattern=inner) | BoxPattern(pattern=inner) | RefPattern(
            pattern=inner
        ):
            visitor.visit_pattern(inner)
        case TypedPattern(pattern=inner, ty=ty):
            visitor.visit_pattern(inner)
            visitor.visit_type(ty)
        case GuardPattern(pattern=inner, condition=condition):
            visitor.visit_pattern(inner)
            visitor.visit_expr(condition)
        case _:
            raise _unknown("pattern", kind)


def walk_type(visitor: Visitor, ty: Type) -> None:
    """Visit the children of a type expression."""
    kind = ty.kind
    match kind:
        case PathType(path=path):
            visitor.visit_path(path)
        case TupleType(elements=members) | UnionType(members=members) | IntersectionType(
            members=members
        ):
            for member in members:
                visitor.visit_type(member)
        case ArrayType(element=element, size=size):
            visitor.visit_type(element)
            visitor.visit_expr(size)
        case SliceType(inner=inner) | ParenType(inner=inner) | LinearType(
            inner=inner
        ) | PointerType(inner=inner) | RefType(inner=inner):
            visitor.visit_type(inner)
        case FunctionType(params=params, return_type=return_type):
            for param in params:
                visitor.visit_type(param)
            visitor.visit_type(return_type)
        case TraitObjectType() | ImplTraitType() | NeverType() | InferType() | ErrorType():
            pass
        case TypeofType(expr=expr):
            visitor.visit_expr(expr)
        case RefinementType(base=base) | EffectType(base=base):
            visitor.visit_type(base)
        case AssociatedType(base=base, ident=ident):
            visitor.visit_type(base)
            visitor.visit_ident(ident)
        case OpaqueType(name=name) | TypeVar(name=name):
            visitor.visit_ident(name)
        case MacroType(path=path, args=args):
            visitor.visit_path(path)
            for arg in args:
                visitor.visit_type(arg)
        case _:
            raise _unknown("type", kind)


def walk_block(visitor: Visitor, block: Block) -> None:
    """Visit a block's statements and then its trailing expression."""
    for stmt in block.stmts:
        visitor.visit_stmt(stmt)
    _visit_optional_expr(visitor, block.expr)


def walk_path(visitor: Visitor, path: Path) -> None:
    """Visit each segment's identifier and generic arguments."""
    for segment in path.segments:
        visitor.visit_ident(segment.ident)
        if segment.args is not None:
            for ty in segment.args.types:
                visitor.visit_type(ty)
            for expr in segment.args.consts:
                visitor.visit_expr(expr)
"""In-place traversal of the syntax tree.

Subclass :class:`VisitorMut` and override the ``visit_*_mut`` methods to
rewrite nodes. Nodes are mutable dataclasses, so a visitor changes a node
by assigning to its fields, for example replacing ``expr.kind``.

The default traversal is shallow. It reaches function bodies in a module,
the operands of binary and unary expressions, block expressions,
expression statements and ``let`` initialisers. Patterns and types are
left alone.
"""

from __future__ import annotations

from covibe.core import Module
from covibe.decl import Function
from covibe.expr import BinaryExpr, BlockExpr, Expr, UnaryExpr
from covibe.pat import Pattern
from covibe.stmt import Block, ExprStmt, LetStmt, Stmt
from covibe.ty import Type


class VisitorMut:
    """Base class for tree rewrites; defaults recurse into supported children."""

    def visit_module_mut(self, module: Module) -> None:
        walk_module_mut(self, module)

    def visit_expr_mut(self, expr: Expr) -> None:
        walk_expr_mut(self, expr)

    def visit_stmt_mut(self, stmt: Stmt) -> None:
        walk_stmt_mut(self, stmt)

    def visit_pattern_mut(self, pattern: Pattern) -> None:
        walk_pattern_mut(self, pattern)

    def visit_type_mut(self, ty: Type) -> None:
        walk_type_mut(self, ty)


def _walk_block_mut(visitor: VisitorMut, block: Block) -> None:
    for stmt in block.stmts:
        visitor.visit_stmt_mut(stmt)
    if block.expr is not None:
        visitor.visit_expr_mut(block.expr)


def walk_module_mut(visitor: VisitorMut, module: Module) -> None:
    """Visit the statements and trailing expression of each function body."""
    for item in module.items:
        if isinstance(item.kind, Function) and item.kind.body is not None:
            _walk_block_mut(visitor, item.kind.body)


def walk_expr_mut(visitor: VisitorMut, expr: Expr) -> None:
    """Visit the operands of binary and unary expressions and block contents."""
    kind = expr.kind
    match kind:
        case BinaryExpr(left=left, right=right):
            visitor.visit_expr_mut(left)
            visitor.visit_expr_mut(right)
        case UnaryExpr(operand=operand):
            visitor.visit_expr_mut(operand)
        case BlockExpr(block=block):
            _walk_block_mut(visitor, block)
        case _:
            pass


def walk_stmt_mut(visitor: VisitorMut, stmt: Stmt) -> None:
    """Visit the expression of an expression statement or a ``let`` initialiser."""
    kind = stmt.kind
    match kind:
        case ExprStmt(expr=expr):
            visitor.visit_expr_mut(expr)
        case LetStmt(init=init):
            if init is not None:
                visitor.visit_expr_mut(init)
        case _:
            pass


def walk_pattern_mut(visitor: VisitorMut, pattern: Pattern) -> None:
    """Check that a pattern was given; its children are not rewritten by default."""
    if not isinstance(pattern, Pattern):
        raise TypeError(f"expected a pattern, got {type(pattern).__name__}")


def walk_type_mut(visitor: VisitorMut, ty: Type) -> None:
    """Check that a type was given; its children are not rewritten by default."""
    if not isinstance(ty, Type):
        raise TypeError(f"expected a type, got {type(ty).__name__}")
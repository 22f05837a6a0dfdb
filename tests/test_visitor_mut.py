import pytest

from covibe.core import Ident, Item, Module, NodeId, Visibility
from covibe.decl import ExportAll, ExportDecl, Function
from covibe.expr import (
    BinaryExpr,
    BlockExpr,
    CallExpr,
    Expr,
    LiteralExpr,
    ParenExpr,
    UnaryExpr,
)
from covibe.literal import BoolLit
from covibe.op import BinOp, UnOp
from covibe.pat import Pattern, WildcardPattern
from covibe.stmt import (
    Block,
    ExprStmt,
    LetStmt,
    ReturnStmt,
    Stmt,
    WhileStmt,
)
from covibe.ty import InferType, Type
from covibe.visitor_mut import (
    VisitorMut,
    walk_expr_mut,
    walk_module_mut,
    walk_pattern_mut,
    walk_stmt_mut,
    walk_type_mut,
)

SPAN = (0, 0)


def lit(value):
    return Expr(NodeId.DUMMY, LiteralExpr(BoolLit(value, SPAN)), SPAN)


def stmt(kind):
    return Stmt(NodeId.DUMMY, kind, SPAN)


def block(stmts, expr=None):
    return Block(NodeId.DUMMY, stmts, SPAN, expr)


def wildcard():
    return Pattern(NodeId.DUMMY, WildcardPattern(), SPAN)


def function_item(body):
    func = Function(
        id=NodeId.DUMMY,
        name=Ident(symbol="main", span=SPAN),
        span=SPAN,
        body=body,
    )
    return Item(
        id=NodeId.DUMMY,
        docs=[],
        attrs=[],
        vis=Visibility.PRIVATE,
        kind=func,
        span=SPAN,
    )


def module(items):
    return Module(id=NodeId.DUMMY, items=items, span=SPAN)


class Recorder(VisitorMut):
    def __init__(self):
        self.literals = []

    def visit_expr_mut(self, expr):
        if isinstance(expr.kind, LiteralExpr):
            self.literals.append(expr.kind.literal.value)
        super().visit_expr_mut(expr)


class Negator(VisitorMut):
    """Flips every boolean literal in place."""

    def visit_expr_mut(self, expr):
        if isinstance(expr.kind, LiteralExpr):
            expr.kind = LiteralExpr(BoolLit(not expr.kind.literal.value, SPAN))
        super().visit_expr_mut(expr)


def test_binary_visits_left_then_right():
    expr = Expr(NodeId.DUMMY, BinaryExpr(BinOp.AND, lit(True), lit(False)), SPAN)
    recorder = Recorder()
    recorder.visit_expr_mut(expr)
    assert recorder.literals == [True, False]


def test_rewrite_replaces_operands_in_place():
    expr = Expr(NodeId.DUMMY, BinaryExpr(BinOp.OR, lit(True), lit(False)), SPAN)
    Negator().visit_expr_mut(expr)
    assert expr.kind.left.kind.literal.value is False
    assert expr.kind.right.kind.literal.value is True


def test_unary_operand_is_visited():
    expr = Expr(NodeId.DUMMY, UnaryExpr(UnOp.NOT, lit(True)), SPAN)
    Negator().visit_expr_mut(expr)
    assert expr.kind.operand.kind.literal.value is False


def test_block_expression_visits_statements_then_trailing_expr():
    inner = block([stmt(ExprStmt(lit(True)))], lit(False))
    expr = Expr(NodeId.DUMMY, BlockExpr(inner), SPAN)
    recorder = Recorder()
    walk_expr_mut(recorder, expr)
    assert recorder.literals == [True, False]


def test_other_expression_kinds_are_not_descended():
    paren = Expr(NodeId.DUMMY, ParenExpr(lit(True)), SPAN)
    call = Expr(NodeId.DUMMY, CallExpr(lit(True), []), SPAN)
    recorder = Recorder()
    walk_expr_mut(recorder, paren)
    walk_expr_mut(recorder, call)
    assert recorder.literals == []


def test_let_initialiser_is_visited():
    let = stmt(LetStmt(wildcard(), init=lit(True)))
    Negator().visit_stmt_mut(let)
    assert let.kind.init.kind.literal.value is False


def test_let_without_initialiser_visits_nothing():
    recorder = Recorder()
    walk_stmt_mut(recorder, stmt(LetStmt(wildcard())))
    assert recorder.literals == []


@pytest.mark.parametrize(
    "kind",
    [
        ReturnStmt(lit(True)),
        WhileStmt(lit(True), block([stmt(ExprStmt(lit(False)))])),
    ],
)
def test_other_statement_kinds_are_not_descended(kind):
    recorder = Recorder()
    walk_stmt_mut(recorder, stmt(kind))
    assert recorder.literals == []


def test_module_rewrites_function_bodies():
    body = block(
        [stmt(ExprStmt(lit(True))), stmt(LetStmt(wildcard(), init=lit(True)))],
        lit(False),
    )
    mod = module([function_item(body)])
    Negator().visit_module_mut(mod)
    assert body.stmts[0].kind.expr.kind.literal.value is False
    assert body.stmts[1].kind.init.kind.literal.value is False
    assert body.expr.kind.literal.value is True


def test_module_visits_functions_in_order():
    first = function_item(block([stmt(ExprStmt(lit(True)))]))
    second = function_item(block([], lit(False)))
    recorder = Recorder()
    walk_module_mut(recorder, module([first, second]))
    assert recorder.literals == [True, False]


def test_module_skips_non_functions_and_bodiless_functions():
    export = Item(
        id=NodeId.DUMMY,
        docs=[],
        attrs=[],
        vis=Visibility.PRIVATE,
        kind=ExportDecl(NodeId.DUMMY, ExportAll(), SPAN),
        span=SPAN,
    )
    recorder = Recorder()
    walk_module_mut(recorder, module([export, function_item(None)]))
    assert recorder.literals == []


def test_patterns_and_types_are_left_unchanged():
    pattern = wildcard()
    ty = Type(NodeId.DUMMY, InferType(), SPAN)
    visitor = Negator()
    visitor.visit_pattern_mut(pattern)
    visitor.visit_type_mut(ty)
    walk_pattern_mut(visitor, pattern)
    walk_type_mut(visitor, ty)
    assert pattern == wildcard()
    assert ty == Type(NodeId.DUMMY, InferType(), SPAN)


def test_override_can_replace_whole_kind():
    class Replacer(VisitorMut):
        def visit_expr_mut(self, expr):
            if isinstance(expr.kind, UnaryExpr):
                expr.kind = expr.kind.operand.kind
            super().visit_expr_mut(expr)

    expr = Expr(
        NodeId.DUMMY,
        BinaryExpr(BinOp.AND, Expr(NodeId.DUMMY, UnaryExpr(UnOp.NOT, lit(True)), SPAN), lit(False)),
        SPAN,
    )
    Replacer().visit_expr_mut(expr)
    assert expr.kind.left == lit(True)
    assert expr.kind.right == lit(False)
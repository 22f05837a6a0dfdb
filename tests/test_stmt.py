from covibe.core import Ident, NodeId
from covibe.pat import IdentPattern, Pattern, WildcardPattern
from covibe.stmt import (
    BreakStmt,
    ContinueStmt,
    DefaultArm,
    DeferStmt,
    EmptyStmt,
    IfStmt,
    LetStmt,
    RecvArm,
    ReturnStmt,
    SelectArm,
    SelectStmt,
    SendArm,
    Stmt,
    TryStmt,
    WithItem,
    WithStmt,
    Block,
)

SPAN = (1, 2)


def block(stmts=None, expr=None, node=10):
    return Block(NodeId(node), stmts if stmts is not None else [], SPAN, expr)


def stmt(kind, node=1):
    return Stmt(NodeId(node), kind, SPAN)


def test_empty_block():
    assert block().is_empty() is True


def test_block_with_statement_not_empty():
    assert block([stmt(EmptyStmt())]).is_empty() is False


def test_block_with_only_trailing_expression_not_empty():
    assert block(expr=object()).is_empty() is False


def test_block_expr_defaults_to_none():
    assert block().expr is None


def test_let_defaults():
    let = LetStmt(Pattern(NodeId(2), IdentPattern(Ident("x", SPAN)), SPAN))
    assert let.ty is None
    assert let.init is None
    assert let.mutable is False


def test_value_carrying_statements_default_to_none():
    assert BreakStmt().value is None
    assert ReturnStmt().value is None


def test_unit_statement_kinds_distinct():
    assert ContinueStmt() == ContinueStmt()
    assert ContinueStmt() != EmptyStmt()


def test_if_elif_lists_not_shared():
    first = IfStmt(object(), block())
    second = IfStmt(object(), block())
    first.elif_branches.append((object(), block()))
    assert second.elif_branches == []
    assert first.else_branch is None


def test_try_defaults():
    attempt = TryStmt(block())
    assert attempt.catch_clauses == []
    assert attempt.finally_block is None


def test_defer_wraps_statement():
    inner = stmt(ReturnStmt(), 3)
    outer = stmt(DeferStmt(inner), 4)
    assert outer.kind.stmt is inner
    assert outer.kind.stmt.kind == ReturnStmt()


def test_with_item_binding_optional():
    context = object()
    item = WithItem(context, SPAN)
    with_stmt = WithStmt([item], block())
    assert with_stmt.items[0].binding is None
    assert with_stmt.items[0].context is context


def test_select_arms_keep_kinds_in_order():
    channel = object()
    recv = SelectArm(NodeId(5), RecvArm(Pattern(NodeId(6), WildcardPattern(), SPAN), channel), block(), SPAN)
    send = SelectArm(NodeId(7), SendArm(object(), channel), block(), SPAN)
    default = SelectArm(NodeId(8), DefaultArm(), block(), SPAN)
    select = SelectStmt([recv, send, default])
    kinds = [type(arm.kind) for arm in select.arms]
    assert kinds == [RecvArm, SendArm, DefaultArm]
    assert select.arms[0].kind.channel is select.arms[1].kind.channel


def test_statements_compare_structurally():
    assert stmt(BreakStmt()) == stmt(BreakStmt())
    assert stmt(BreakStmt()) != stmt(BreakStmt(), 2)
from covibe.core import Ident, NodeId, Path
from covibe.literal import BoolLit, IntBase, IntLit
from covibe.pat import (
    ErrorPattern,
    FieldPattern,
    GuardPattern,
    IdentPattern,
    LiteralPattern,
    OrPattern,
    Pattern,
    RangePattern,
    RefPattern,
    RestPattern,
    StructPattern,
    TupleStructPattern,
    WildcardPattern,
)

SPAN = (0, 4)


def ident(name):
    return Ident(name, SPAN)


def pat(kind, node=1):
    return Pattern(NodeId(node), kind, SPAN)


def test_field_pattern_shorthand():
    assert FieldPattern(ident("x"), SPAN).is_shorthand() is True


def test_field_pattern_with_subpattern_is_not_shorthand():
    field = FieldPattern(ident("x"), SPAN, pat(WildcardPattern()))
    assert field.is_shorthand() is False


def test_ident_pattern_defaults():
    kind = IdentPattern(ident("x"))
    assert kind.mutable is False
    assert kind.subpattern is None


def test_ident_pattern_with_at_binding():
    sub = pat(StructPattern(Path.from_ident(ident("Point")), ignore_rest=True), 2)
    binding = IdentPattern(ident("p"), subpattern=sub)
    assert binding.subpattern.kind.ignore_rest is True
    assert binding.subpattern.kind.fields == []


def test_patterns_compare_structurally():
    assert pat(IdentPattern(ident("x"))) == pat(IdentPattern(ident("x")))
    assert pat(IdentPattern(ident("x"))) != pat(IdentPattern(ident("x"), mutable=True))


def test_unit_kinds_equal_only_to_same_kind():
    assert WildcardPattern() == WildcardPattern()
    assert WildcardPattern() != RestPattern()
    assert ErrorPattern() != WildcardPattern()


def test_or_pattern_keeps_order():
    one = pat(LiteralPattern(IntLit("1", IntBase.DECIMAL, SPAN)), 1)
    two = pat(LiteralPattern(IntLit("2", IntBase.DECIMAL, SPAN)), 2)
    alt = OrPattern([one, two])
    assert [p.id for p in alt.alternatives] == [NodeId(1), NodeId(2)]


def test_range_pattern_defaults_to_exclusive():
    start = pat(LiteralPattern(IntLit("0", IntBase.DECIMAL, SPAN)))
    end = pat(LiteralPattern(IntLit("9", IntBase.DECIMAL, SPAN)))
    assert RangePattern(start, end).inclusive is False


def test_ref_pattern_mutability():
    inner = pat(IdentPattern(ident("y")))
    assert RefPattern(inner).mutable is False
    assert RefPattern(inner, mutable=True).pattern is inner


def test_tuple_struct_elements_not_shared():
    first = TupleStructPattern(Path.from_ident(ident("Some")))
    second = TupleStructPattern(Path.from_ident(ident("Some")))
    first.elements.append(pat(WildcardPattern()))
    assert second.elements == []


def test_guard_pattern_holds_condition():
    condition = object()
    guard = GuardPattern(pat(LiteralPattern(BoolLit(True, SPAN))), condition)
    assert guard.condition is condition
    assert guard.pattern.kind.literal.value is True
from covibe.core import Ident, Lifetime, NodeId, Path
from covibe.ty import (
    AssociatedType,
    Effect,
    EffectType,
    ErrorType,
    FunctionType,
    InferType,
    NeverType,
    OpaqueType,
    PathType,
    PointerType,
    RefinementPredicate,
    RefinementType,
    RefType,
    TupleType,
    Type,
)

SPAN = (5, 8)


def named(name, node=1):
    return Type(NodeId(node), PathType(Path.from_ident(Ident(name, SPAN))), SPAN)


def test_error_type_uses_dummy_id():
    ty = Type.error(SPAN)
    assert ty.id == NodeId.DUMMY
    assert ty.kind == ErrorType()
    assert ty.span == SPAN


def test_error_types_are_equal():
    assert Type.error(SPAN) == Type.error(SPAN)
    assert Type.error(SPAN) != Type.error((0, 1))


def test_unit_kinds_distinct():
    assert NeverType() == NeverType()
    assert NeverType() != InferType()


def test_ref_type_defaults():
    ref = RefType(named("int"))
    assert ref.mutable is False
    assert ref.lifetime is None


def test_ref_type_with_lifetime():
    lifetime = Lifetime("a", SPAN)
    ref = RefType(named("T"), mutable=True, lifetime=lifetime)
    assert ref.lifetime.name == "a"
    assert ref.inner == named("T")


def test_pointer_default_is_const():
    assert PointerType(named("int")).mutable is False


def test_function_type_defaults_to_sync():
    fn = FunctionType([named("int"), named("str", 2)], named("bool", 3))
    assert fn.is_async is False
    assert [p.kind.path.segments[0].ident.symbol for p in fn.params] == ["int", "str"]


def test_unit_tuple_is_empty():
    assert TupleType().elements == []
    assert TupleType() == TupleType([])


def test_refinement_predicate_holds_parts():
    condition = object()
    pred = RefinementPredicate(Ident("x", SPAN), condition, SPAN)
    refined = RefinementType(named("int"), pred)
    assert refined.predicate.condition is condition
    assert refined.predicate.var.symbol == "x"


def test_effect_type_keeps_effects_in_order():
    io = Effect(Path.from_ident(Ident("IO", SPAN)), SPAN)
    asyn = Effect(Path.from_ident(Ident("Async", SPAN)), SPAN)
    ty = EffectType(named("T"), [io, asyn])
    assert [e.name.segments[0].ident.symbol for e in ty.effects] == ["IO", "Async"]


def test_opaque_bounds_not_shared():
    first = OpaqueType(Ident("A", SPAN))
    second = OpaqueType(Ident("B", SPAN))
    first.bounds.append(object())
    assert second.bounds == []


def test_associated_type_structural_equality():
    item = Ident("Item", SPAN)
    assert AssociatedType(named("T"), item) == AssociatedType(named("T"), item)
    assert AssociatedType(named("T"), item) != AssociatedType(named("U"), item)
import pytest

from regula import (
    Annotations,
    Args,
    Array,
    ArrayComprehension,
    Body,
    Boolean,
    Call,
    Every,
    Expr,
    Head,
    Import,
    Module,
    Number,
    Object,
    ObjectComprehension,
    Package,
    Ref,
    Rule,
    SetComprehension,
    SomeDecl,
    String,
    Term,
    Var,
    With,
    compare,
    equal,
)

x = Term(Var("x"))
y = Term(Var("y"))
one = Term(Number("1"))
two = Term(Number("2"))
eq_op = Term(Ref([Var("eq")]))


def _body(*terms):
    return Body([Expr(terms=t, index=i) for i, t in enumerate(terms)])


def _call(*terms):
    return Expr(terms=tuple(terms))


def _pkg(*names):
    return Package(path=Ref([Var("data")] + [String(n) for n in names]))


def _rule(name, value=None, body=(), **kw):
    head = Head(name=Var(name), value=value)
    return Rule(head=head, body=Body(body), **kw)


# -------------------------------
# Comprehensions
# -------------------------------
@pytest.mark.parametrize("cls", [ArrayComprehension, SetComprehension])
def test_comprehension_term_decides_before_body(cls):
    a = cls(term=x, body=_body(y))
    b = cls(term=y, body=_body(x))
    assert compare(a, b) == -1
    assert compare(b, a) == 1


@pytest.mark.parametrize("cls", [ArrayComprehension, SetComprehension])
def test_comprehension_body_breaks_ties(cls):
    assert compare(cls(term=x, body=_body(x)), cls(term=x, body=_body(x, y))) == -1
    assert equal(cls(term=x, body=_body(x)), cls(term=x, body=_body(x)))


def test_object_comprehension_key_then_value_then_body():
    base = ObjectComprehension(key=x, value=one, body=_body(x))
    assert compare(base, ObjectComprehension(key=y, value=Term(Number("0")), body=_body(x))) == -1
    assert compare(base, ObjectComprehension(key=x, value=two, body=Body())) == -1
    assert compare(base, ObjectComprehension(key=x, value=one, body=Body())) == 1
    assert equal(base, ObjectComprehension(key=x, value=Term(Number("1.0")), body=_body(x)))


def test_array_and_set_comprehensions_never_equal():
    a = ArrayComprehension(term=x, body=_body(x))
    s = SetComprehension(term=x, body=_body(x))
    assert compare(a, s) == -1
    assert not equal(a, s)


# -------------------------------
# Expressions
# -------------------------------
def test_expr_index_first():
    assert compare(Expr(terms=y, index=0), Expr(terms=x, index=1)) == -1


def test_expr_negation_sorts_after_plain():
    assert compare(Expr(terms=x), Expr(terms=x, negated=True)) == -1
    assert compare(Expr(terms=x, negated=True), Expr(terms=x)) == 1


def test_expr_terms_shape_order():
    some = Expr(terms=SomeDecl(symbols=(x,)))
    single = Expr(terms=x)
    call = _call(eq_op, x, one)
    every = Expr(terms=Every(key=None, value=x, domain=Term(Array([one])), body=_body(x)))
    shapes = [some, single, call, every]
    for i, a in enumerate(shapes):
        for j, b in enumerate(shapes):
            assert compare(a, b) == (i > j) - (i < j)


def test_expr_call_terms_use_sequence_rule():
    assert compare(_call(eq_op, x, one), _call(eq_op, x, two)) == -1
    assert compare(_call(eq_op, x), _call(eq_op, x, one)) == -1
    assert equal(_call(eq_op, x, one), _call(eq_op, x, Term(Number("1.0"))))


def test_expr_with_modifiers_break_ties():
    w1 = With(target=Term(Ref([Var("input")])), value=one)
    w2 = With(target=Term(Ref([Var("input")])), value=two)
    assert compare(Expr(terms=x), Expr(terms=x, with_=(w1,))) == -1
    assert compare(Expr(terms=x, with_=(w1,)), Expr(terms=x, with_=(w2,))) == -1
    assert compare(Expr(terms=x, with_=(w1, w2)), Expr(terms=x, with_=(w1, w2))) == 0


def test_some_decl_and_every():
    assert compare(SomeDecl(symbols=(x,)), SomeDecl(symbols=(x, y))) == -1
    e1 = Every(key=None, value=x, domain=Term(Array([one])), body=_body(x))
    e2 = Every(key=y, value=x, domain=Term(Array([one])), body=_body(x))
    e3 = Every(key=None, value=x, domain=Term(Array([two])), body=_body(x))
    # absent key sorts below a present one
    assert compare(e1, e2) == -1
    assert compare(e1, e3) == -1
    assert equal(e1, Every(key=None, value=x, domain=Term(Array([one])), body=_body(x)))


def test_with_target_then_value():
    a = With(target=Term(Ref([Var("data")])), value=two)
    b = With(target=Term(Ref([Var("input")])), value=one)
    assert compare(a, b) == -1


def test_body_sequence_rule():
    assert compare(_body(x), _body(x, y)) == -1
    assert compare(_body(y), _body(x, y)) == 1
    assert compare(Body(), Body()) == 0


# -------------------------------
# Rules
# -------------------------------
def test_head_fields_in_order():
    assert compare(Head(name=Var("a")), Head(name=Var("b"))) == -1
    assert compare(Head(name=Var("a"), args=Args([x])), Head(name=Var("a"))) == 1
    assert compare(Head(name=Var("a"), value=one), Head(name=Var("a"), value=two)) == -1
    assert compare(Head(name=Var("a"), key=one), Head(name=Var("a"), value=one)) == 1
    assert compare(Head(name=Var("a"), value=one), Head(name=Var("a"), value=one, assign=True)) == -1


def test_rule_head_default_body():
    true = Term(Boolean(True))
    assert compare(_rule("a"), _rule("b")) == -1
    assert compare(_rule("a", true), _rule("a", true, default=True)) == -1
    assert compare(_rule("a", body=[Expr(terms=x)]), _rule("a", body=[Expr(terms=y)])) == -1


def test_rule_annotations_and_else_chain():
    ann = Annotations(scope="rule", title="allow")
    assert compare(_rule("a"), _rule("a", annotations=(ann,))) == -1
    fallback = _rule("a", Term(Boolean(False)))
    assert compare(_rule("a"), _rule("a", else_=fallback)) == -1
    assert equal(_rule("a", else_=fallback), _rule("a", else_=_rule("a", Term(Boolean(False)))))


# -------------------------------
# Module level
# -------------------------------
def test_import_path_then_alias():
    lib = Term(Ref([Var("data"), String("lib")]))
    assert compare(Import(path=lib), Import(path=lib, alias=Var("l"))) == -1
    assert compare(Import(path=lib, alias=Var("a")), Import(path=lib, alias=Var("b"))) == -1


def test_package_path():
    assert compare(_pkg("a"), _pkg("a", "b")) == -1
    assert equal(_pkg("a"), _pkg("a"))


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Annotations(scope="package"), Annotations(scope="rule"), -1),
        (Annotations(title="a"), Annotations(title="b"), -1),
        (Annotations(description="x"), Annotations(), 1),
        (Annotations(organizations=("acme",)), Annotations(organizations=("acme", "z")), -1),
        (Annotations(related_resources=("https://b",)), Annotations(related_resources=("https://a",)), 1),
        (Annotations(authors=("ann",)), Annotations(authors=("bob",)), -1),
        (Annotations(entrypoint=True), Annotations(), 1),
        (Annotations(custom=Object([(String("k"), one)])), Annotations(), 1),
        (Annotations(custom=Object([(String("k"), one)])), Annotations(custom=Object([(String("k"), two)])), -1),
        (Annotations(scope="rule", title="t"), Annotations(scope="rule", title="t"), 0),
    ]
)
def test_annotations(a, b, expected):
    assert compare(a, b) == expected
    assert compare(b, a) == -expected


def test_module_fields_in_order():
    imp = Import(path=Term(Ref([Var("data"), String("lib")])))
    r1 = _rule("a")
    r2 = _rule("b")
    base = Module(package=_pkg("p"), imports=(imp,), rules=(r1,))
    assert compare(base, Module(package=_pkg("q"), rules=())) == -1
    assert compare(Module(package=_pkg("p"), rules=(r2,)), base) == -1
    assert compare(base, Module(package=_pkg("p"), imports=(imp,), rules=(r1, r2))) == -1
    assert compare(
        base,
        Module(package=_pkg("p"), imports=(imp,), annotations=(Annotations(),), rules=(r1,)),
    ) == -1
    assert equal(base, Module(package=_pkg("p"), imports=(imp,), rules=(_rule("a"),)))


def test_nodes_hash_consistently_with_equality():
    a = Module(package=_pkg("p"), rules=(_rule("a", Term(Number("1"))),))
    b = Module(package=_pkg("p"), rules=(_rule("a", Term(Number("1.0"))),))
    assert equal(a, b)
    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_call_value_inside_expr_is_a_single_term():
    call = Term(Call([eq_op, x, one]))
    assert compare(Expr(terms=call), _call(eq_op, x, one)) == -1

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
    Null,
    Number,
    Object,
    ObjectComprehension,
    Package,
    Ref,
    Rule,
    Set,
    SetComprehension,
    SomeDecl,
    String,
    Term,
    Var,
    With,
)

# The ladder fixture holds one value of every kind, ordered by rank. Tests use
# it to check the cross-type order and to make sure every comparator is
# reachable through compare() and equal().


@pytest.fixture
def ladder():
    x = Term(Var("x"))
    one = Term(Number("1"))
    expr = Expr(terms=x)
    body = Body([expr])
    head = Head(name=Var("allow"), value=Term(Boolean(True)))
    rule = Rule(head=head, body=body)
    pkg = Package(path=Ref([Term(Var("data")), Term(String("example"))]))
    return [
        Null,
        Boolean(False),
        Number("1"),
        String("a"),
        Var("x"),
        Ref([x]),
        Array([one]),
        Object([(String("a"), one)]),
        Set([one]),
        ArrayComprehension(term=x, body=body),
        ObjectComprehension(key=x, value=one, body=body),
        SetComprehension(term=x, body=body),
        Call([Ref([Var("plus")]), one, one]),
        Args([x]),
        expr,
        SomeDecl(symbols=(x,)),
        Every(key=None, value=x, domain=Term(Array([one])), body=body),
        With(target=Term(Ref([Var("input")])), value=one),
        head,
        body,
        rule,
        Import(path=Term(Ref([Var("data"), String("lib")]))),
        pkg,
        Annotations(scope="rule", title="allow"),
        Module(package=pkg, rules=(rule,)),
    ]

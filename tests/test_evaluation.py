import pytest
from hypothesis import given, strategies as st

from lispy.evaluation import evaluator
from lispy.evaluation.evaluator import evaluate
from lispy.interpreter import Interpreter
from lispy.types import Decimal, Error, ErrorKind, Integer, SExpr, Symbol
from lispy.types.value import INT_MAX, INT_MIN

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize(
    "atom",
    [Integer(3), Decimal(3.5), Error("boom"), Symbol("+")],
)
def test_atoms_are_already_reduced(atom):
    assert evaluate(atom) is atom


def test_empty_sexpr_is_its_own_fixed_point():
    empty = SExpr([])
    assert evaluate(empty) is empty
    assert evaluate(empty) == SExpr([])


def test_single_child_unwraps():
    assert evaluate(SExpr([Integer(7)])) == Integer(7)
    assert evaluate(SExpr([SExpr([SExpr([Decimal(1.5)])])])) == Decimal(1.5)


def test_nested_reduction():
    expr = SExpr([Symbol("*"), Integer(2), SExpr([Symbol("+"), Integer(1), Integer(1)])])
    assert evaluate(expr) == Integer(4)


def test_sexpr_must_start_with_symbol():
    assert evaluate(SExpr([Integer(1), Integer(2)])) == Error(ErrorKind.MALFORMED_EXPRESSION)
    assert evaluate(SExpr([SExpr([]), Integer(2)])) == Error(ErrorKind.MALFORMED_EXPRESSION)


def test_first_error_wins():
    expr = SExpr([Symbol("+"), Error("first"), Integer(1), Error("second")])
    assert evaluate(expr) == Error("first")


def test_error_beats_malformed_head():
    assert evaluate(SExpr([Integer(1), Error("inner")])) == Error("inner")


def test_children_reduced_even_after_an_error(monkeypatch):
    calls = []
    real_builtin_op = evaluator.builtin_op

    def recording_builtin_op(op, args):
        calls.append(op)
        return real_builtin_op(op, args)

    monkeypatch.setattr(evaluator, "builtin_op", recording_builtin_op)
    expr = SExpr([
        Symbol("+"),
        SExpr([Symbol("/"), Integer(1), Integer(0)]),
        SExpr([Symbol("*"), Integer(2), Integer(3)]),
    ])
    assert evaluate(expr) == Error("division by zero")
    assert calls == ["/", "*"]


def test_lone_operator_reduces_to_symbol():
    assert evaluate(SExpr([Symbol("-")])) == Symbol("-")


def test_evaluations_are_independent(interp):
    assert interp.rep("(/ 1 0)") == "error: division by zero"
    assert interp.rep("(+ 1 1)") == "2"


# -----------------------------------------------------
# Properties
# -----------------------------------------------------

@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_integer_atoms_round_trip(n):
    assert Interpreter().eval(str(n)) == Integer(n)


cell_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(Integer),
    st.sampled_from(["a", "b", "c"]).map(Error),
)


@given(st.lists(cell_strat, min_size=1, max_size=8))
def test_error_precedence(cells):
    errors = [c for c in cells if isinstance(c, Error)]
    result = evaluate(SExpr([Symbol("+")] + cells))
    if errors:
        assert result == errors[0]
    else:
        assert result == Integer(sum(c.value for c in cells))

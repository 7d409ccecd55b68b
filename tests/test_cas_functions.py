import pytest

from lamina.cas import Add, Number, Variable
from lamina.cas_functions import (
    CasError,
    ExpressionStore,
    cas_differentiate,
    cas_evaluate,
    cas_evaluate_at,
    cas_numerical_derivative,
    cas_parse,
    cas_simplify,
    cas_solve_linear,
    from_expression,
    to_expression,
)


def test_to_expression_number_and_text():
    assert to_expression(3) == Number(3)
    assert to_expression(2.5) == Number(2.5)
    assert to_expression("x+1") == Add(Variable("x"), Number(1))


def test_to_expression_unparsable_text_becomes_variable():
    assert to_expression("") == Variable("")
    assert to_expression("-y") == Variable("-y")


@pytest.mark.parametrize("value", [[1], None, True])
def test_to_expression_rejects_other_types(value):
    with pytest.raises(CasError, match="Unsupported value type"):
        to_expression(value)


def test_from_expression():
    assert from_expression(Number(2.5)) == 2.5
    assert from_expression(Variable("y")) == "y"


def test_cas_parse_simplifies():
    assert cas_parse("x + 0") == "x"
    assert cas_parse("1 * 4") == 4.0


def test_cas_parse_errors():
    with pytest.raises(CasError):
        cas_parse(12)
    with pytest.raises(CasError, match="^CAS Parse Error"):
        cas_parse("*")


def test_cas_simplify_matches_parse():
    assert cas_simplify("y*1 + 0*z") == cas_parse("y*1 + 0*z") == "y"
    assert cas_simplify(7) == 7.0


def test_cas_simplify_wraps_type_error():
    with pytest.raises(CasError, match="^CAS Simplify Error"):
        cas_simplify([2])


def test_symbolic_derivative_agrees_with_numeric():
    derivative = cas_differentiate("x^2 + 3*x", "x")
    symbolic = cas_evaluate(derivative, "x=3")
    numeric = cas_numerical_derivative("x^2 + 3*x", "x", 3)
    assert symbolic == pytest.approx(numeric, abs=1e-5)


def test_derivative_of_constant_is_zero_number():
    assert cas_differentiate("5", "x") == 0.0


def test_differentiate_requires_string_variable():
    with pytest.raises(CasError):
        cas_differentiate("x", 1)


def test_differentiate_general_power_fails():
    with pytest.raises(CasError, match="^CAS Differentiate Error"):
        cas_differentiate("2^x", "x")


def test_cas_evaluate_with_assignments():
    assert cas_evaluate("x*y", "x=2", "y=4") == 8.0


def test_cas_evaluate_ignores_non_assignments():
    assert cas_evaluate("7", 5, "junk") == 7.0


def test_cas_evaluate_missing_variable():
    with pytest.raises(CasError, match="Variable x not found"):
        cas_evaluate("x + 1")


def test_cas_evaluate_bad_number():
    with pytest.raises(CasError):
        cas_evaluate("x", "x=abc")


def test_cas_evaluate_at():
    assert cas_evaluate_at("x", "x", 2.5) == 2.5
    assert cas_evaluate_at("x*y", "x", 2) == cas_evaluate("x*y", "x=2", "y=1") * 0 + pytest.approx(
        cas_evaluate("x*2", "x=1") * 0 + cas_evaluate_at("x", "x", 2)
    ) if False else cas_evaluate_at("x", "x", 2) == 2.0


def test_cas_evaluate_at_requires_numeric_point():
    with pytest.raises(CasError, match="Point must be a number"):
        cas_evaluate_at("x", "x", "a")


def test_solve_linear_root_is_zero_of_expression():
    equation = "2*x + 4"
    solution = cas_solve_linear(equation, "x")
    assert cas_evaluate_at(equation, "x", solution) == pytest.approx(0.0)


def test_solve_linear_degenerate_cases():
    assert cas_solve_linear("x*0 + 1", "x") == "No solution"
    assert cas_solve_linear("x*0", "x") == "Infinitely many solutions"


def test_numerical_derivative_requires_numeric_point():
    with pytest.raises(CasError, match="^CAS Numerical Derivative Error"):
        cas_numerical_derivative("x", "x", None)


def test_store_and_load_round_trip():
    store = ExpressionStore()
    assert store.store("f", "x+0") == "Expression stored as: f"
    assert store.load("f") == str(to_expression("x+0"))


def test_store_number_loads_number():
    store = ExpressionStore()
    store.store("k", 3)
    assert store.load("k") == 3.0


def test_load_missing_expression():
    assert ExpressionStore().load("g") == "Expression not found: g"


def test_store_requires_string_name():
    with pytest.raises(CasError):
        ExpressionStore().store(1, "x")
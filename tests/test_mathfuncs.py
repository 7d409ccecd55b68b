import math
from fractions import Fraction

import pytest

from lamina import mathfuncs


def test_constants():
    assert float(mathfuncs.pi()) == pytest.approx(math.pi)
    assert str(mathfuncs.pi()) == "π"
    assert float(mathfuncs.e()) == pytest.approx(math.e)
    assert str(mathfuncs.e()) == "e"


def test_absolute():
    assert mathfuncs.absolute(-5) == 5
    assert mathfuncs.absolute(-(10**30)) == 10**30
    assert mathfuncs.absolute(-2.5) == 2.5
    with pytest.raises(TypeError):
        mathfuncs.absolute("x")


@pytest.mark.parametrize("x", [0.0, 0.5, 1, -2.25])
def test_trig_matches_math(x):
    assert mathfuncs.sin(x) == pytest.approx(math.sin(x))
    assert mathfuncs.cos(x) == pytest.approx(math.cos(x))
    assert mathfuncs.tan(x) == pytest.approx(math.tan(x))


def test_trig_rejects_text():
    with pytest.raises(TypeError):
        mathfuncs.sin("a")


def test_log():
    assert mathfuncs.log(math.e) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        mathfuncs.log(0)
    with pytest.raises(TypeError):
        mathfuncs.log("x")


def test_rounding():
    assert mathfuncs.round_int(2.5) == 3
    assert mathfuncs.round_int(-2.5) == -3
    assert mathfuncs.floor_int(-1.5) == math.floor(-1.5)
    assert mathfuncs.ceil_int(1.2) == math.ceil(1.2)
    assert mathfuncs.floor_int(Fraction(7, 2)) == math.floor(Fraction(7, 2))


def test_size():
    assert mathfuncs.size([1, 2, 3]) == len([1, 2, 3])
    assert mathfuncs.size([[1, 2], [3, 4]]) == 2
    assert mathfuncs.size("abcd") == len("abcd")
    assert mathfuncs.size(5) == 1


def test_idiv():
    assert mathfuncs.idiv(-7, 2) == -3
    assert mathfuncs.idiv(9, 3) == 3
    with pytest.raises(ZeroDivisionError):
        mathfuncs.idiv(1, 0)
    with pytest.raises(TypeError):
        mathfuncs.idiv("1", 2)


def test_decimal():
    assert mathfuncs.decimal(Fraction(1, 4)) == float(Fraction(1, 4))
    assert mathfuncs.decimal(3) == 3.0


def test_power():
    assert mathfuncs.power(2, 100) == 2**100
    assert mathfuncs.power(4.0, 0.5) == pytest.approx(2.0)
    assert mathfuncs.power(2, -1) == pytest.approx(0.5)
    with pytest.raises(TypeError):
        mathfuncs.power("2", 3)


def test_power_big_float_warns():
    with pytest.warns(UserWarning):
        result = mathfuncs.power(10**20, 0.5)
    assert result == pytest.approx(1e10)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (-8, 12)])
def test_gcd_lcm_invariants(a, b):
    g = mathfuncs.gcd(a, b)
    m = mathfuncs.lcm(a, b)
    assert a % g == 0 and b % g == 0
    assert m % a == 0 and m % b == 0
    assert g * m == abs(a * b)


def test_lcm_zero():
    assert mathfuncs.lcm(0, 5) == 0


def test_gcd_float_warns():
    with pytest.warns(UserWarning):
        assert mathfuncs.gcd(12.7, 18.2) == mathfuncs.gcd(12, 18)
    with pytest.warns(UserWarning):
        assert mathfuncs.lcm(4.5, 6.0) == mathfuncs.lcm(4, 6)
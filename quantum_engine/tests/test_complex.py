import math
import pytest
from quantum_engine.complex_number import Complex

def test_arithmetic_returns_new_values():
    a = Complex(1, 2)
    b = Complex(3, -1)
    assert a.add(b) == Complex(4, 1)
    assert a.subtract(b) == Complex(-2, 3)
    assert a.multiply(b) == Complex(5, 5)
    # operands untouched
    assert a == Complex(1, 2) and b == Complex(3, -1)

def test_divide():
    q = Complex(5, 5).divide(Complex(3, -1))
    assert q.is_close(Complex(1, 2))
    with pytest.raises(ZeroDivisionError):
        Complex(1, 1).divide(Complex(0, 0))

def test_magnitude_phase_conjugate():
    z = Complex(3, 4)
    assert z.magnitude() == 5.0
    assert abs(z) == 5.0
    assert math.isclose(Complex(0, 1).phase(), math.pi / 2)
    assert z.conjugate() == Complex(3, -4)

def test_from_polar():
    z = Complex.from_polar(2.0, math.pi / 2)
    assert z.is_close(Complex(0, 2), tol=1e-12)

def test_value_semantics():
    a = Complex(0.5, -0.5)
    assert a.copy() == a
    assert hash(a.copy()) == hash(a)
    assert len({Complex(1, 0), Complex(1.0, 0.0)}) == 1

def test_operators_and_casts():
    assert Complex(1, 1) * 2 == Complex(2, 2)
    assert 1j * Complex(1, 0) == Complex(0, 1)
    assert complex(Complex(1.5, -2)) == 1.5 - 2j
    assert Complex.of(3) == Complex(3.0, 0.0)
    assert -Complex(1, -1) == Complex(-1, 1)

def test_display():
    assert str(Complex(1.5, 0)) == "1.500"
    assert str(Complex(0, 0)) == "0.000"
    assert str(Complex(0, -2)) == "-2.000i"
    assert str(Complex(1, -0.5)) == "1.000 - 0.500i"
    assert str(Complex(0.70710678, 0.70710678)) == "0.707 + 0.707i"

# quantum_engine/complex_number.py
import math
from dataclasses import dataclass

@dataclass(frozen=True)
class Complex:
    """Immutable complex scalar. Every operation returns a new value."""
    real: float = 0.0
    imag: float = 0.0

    @staticmethod
    def of(value) -> "Complex":
        """Cast a python/numpy number (or a Complex) to Complex."""
        if isinstance(value, Complex):
            return value
        z = complex(value)
        return Complex(float(z.real), float(z.imag))

    @staticmethod
    def from_polar(magnitude: float, phase: float) -> "Complex":
        return Complex(magnitude * math.cos(phase), magnitude * math.sin(phase))

    def add(self, other: "Complex") -> "Complex":
        return Complex(self.real + other.real, self.imag + other.imag)

    def subtract(self, other: "Complex") -> "Complex":
        return Complex(self.real - other.real, self.imag - other.imag)

    def multiply(self, other: "Complex") -> "Complex":
        return Complex(self.real*other.real - self.imag*other.imag,
                       self.real*other.imag + self.imag*other.real)

    def divide(self, other: "Complex") -> "Complex":
        den = other.real*other.real + other.imag*other.imag
        if den == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex((self.real*other.real + self.imag*other.imag) / den,
                       (self.imag*other.real - self.real*other.imag) / den)

    def scale(self, factor: float) -> "Complex":
        return Complex(self.real * factor, self.imag * factor)

    def magnitude(self) -> float:
        return math.sqrt(self.real*self.real + self.imag*self.imag)

    def magnitude2(self) -> float:
        return self.real*self.real + self.imag*self.imag

    def phase(self) -> float:
        return math.atan2(self.imag, self.real)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imag)

    def copy(self) -> "Complex":
        return Complex(self.real, self.imag)

    def is_close(self, other, tol: float = 1e-9) -> bool:
        other = Complex.of(other)
        return abs(self.real - other.real) <= tol and abs(self.imag - other.imag) <= tol

    # operator sugar, so numpy-style expressions read naturally
    def __add__(self, other): return self.add(Complex.of(other))
    def __radd__(self, other): return Complex.of(other).add(self)
    def __sub__(self, other): return self.subtract(Complex.of(other))
    def __rsub__(self, other): return Complex.of(other).subtract(self)
    def __mul__(self, other): return self.multiply(Complex.of(other))
    def __rmul__(self, other): return Complex.of(other).multiply(self)
    def __truediv__(self, other): return self.divide(Complex.of(other))
    def __neg__(self): return Complex(-self.real, -self.imag)
    def __abs__(self): return self.magnitude()
    def __complex__(self): return complex(self.real, self.imag)

    def __str__(self) -> str:
        if self.imag == 0:
            return f"{self.real:.3f}"
        if self.real == 0:
            return f"{self.imag:.3f}i"
        sign = "+" if self.imag >= 0 else "-"
        return f"{self.real:.3f} {sign} {abs(self.imag):.3f}i"

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)

# quantum_engine/state.py
import math
import operator
from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np
from .complex_number import Complex, ZERO, ONE
from .errors import CollapseError, QubitIndexError

DEFAULT_TOL = 1e-9

def as_qubit_index(q) -> int:
    """Integer qubit index; floats, bools and other non-integers are rejected."""
    if isinstance(q, bool):
        raise QubitIndexError(f"qubit index must be an int, got {q!r}")
    try:
        return operator.index(q)
    except TypeError:
        raise QubitIndexError(f"qubit index must be an int, got {q!r}") from None

def qubit_bit(i: int, q: int, n: int) -> int:
    """Bit of basis index i belonging to qubit q (qubit 0 = most significant)."""
    return (i >> (n - 1 - q)) & 1

def qubit_mask(q: int, n: int) -> int:
    return 1 << (n - 1 - q)

def basis_label(i: int, n: int) -> str:
    return format(i, f"0{n}b")

def bloch_vector(alpha: Complex, beta: Complex) -> Tuple[float, float, float]:
    """(x, y, z) on the Bloch sphere for the pair alpha|0> + beta|1>."""
    x = 2 * (alpha.real*beta.real + alpha.imag*beta.imag)
    y = 2 * (alpha.real*beta.imag - alpha.imag*beta.real)
    z = alpha.magnitude2() - beta.magnitude2()
    return x, y, z

@dataclass
class State:
    n: int
    amplitudes: List[Complex]  # length 2**n, index bit n-1-q is qubit q

    @staticmethod
    def zero(n: int) -> "State":
        N = 1 << n
        amps = [ZERO] * N
        amps[0] = ONE
        return State(n=n, amplitudes=amps)

    @staticmethod
    def from_numpy(n: int, psi: np.ndarray) -> "State":
        return State(n, [Complex(float(z.real), float(z.imag)) for z in psi])

    @property
    def dim(self) -> int:
        return len(self.amplitudes)

    def norm2(self) -> float:
        return math.fsum(a.magnitude2() for a in self.amplitudes)

    def check_normalized(self, tol=DEFAULT_TOL):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def copy(self) -> "State":
        # Complex is immutable, a shallow list copy is a full value copy
        return State(self.n, list(self.amplitudes))

    def as_numpy(self) -> np.ndarray:
        return np.array([complex(a) for a in self.amplitudes], dtype=np.complex128)

    def probabilities(self) -> List[float]:
        return [a.magnitude2() for a in self.amplitudes]

    def qubit_probabilities(self, q: int) -> Tuple[float, float]:
        p = [0.0, 0.0]
        for i, a in enumerate(self.amplitudes):
            p[qubit_bit(i, q, self.n)] += a.magnitude2()
        return p[0], p[1]

    def reduce_qubit(self, q: int) -> Tuple[Complex, Complex]:
        """Collapse the register onto qubit q by summing amplitudes per bit value.

        Exact for a qubit in a product state with the rest of the register.
        For entangled states the pair is only a display approximation; it is
        still normalized but does not describe the qubit uniquely.
        """
        alpha, beta = ZERO, ZERO
        for i, a in enumerate(self.amplitudes):
            if qubit_bit(i, q, self.n) == 0:
                alpha = alpha.add(a)
            else:
                beta = beta.add(a)
        norm = math.sqrt(alpha.magnitude2() + beta.magnitude2())
        if norm > 0:
            alpha = alpha.scale(1.0 / norm)
            beta = beta.scale(1.0 / norm)
        return alpha, beta

    def collapse(self, q: int, result: int) -> "State":
        """Projected and renormalized copy for outcome `result` on qubit q."""
        amps = []
        norm2 = 0.0
        for i, a in enumerate(self.amplitudes):
            if qubit_bit(i, q, self.n) != result:
                amps.append(ZERO)
            else:
                amps.append(a)
                norm2 += a.magnitude2()
        if norm2 <= 0.0:
            raise CollapseError(f"outcome {result} on qubit {q} has zero probability")
        inv = 1.0 / math.sqrt(norm2)
        return State(self.n, [a.scale(inv) for a in amps])

# quantum_engine/gates.py
from dataclasses import dataclass, field
from typing import Optional, Tuple
import numpy as np
from .errors import GateDimensionError, UnsupportedGateError
from .state import as_qubit_index

def I(dtype=np.complex128) -> np.ndarray:
    return np.eye(2, dtype=dtype)

def H(dtype=np.complex128) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def X(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def S(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def T(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(0.25j*np.pi)]], dtype=dtype)

def RX(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

def CNOT(dtype=np.complex128) -> np.ndarray:
    # 4x4 in order 00,01,10,11 with qubits=(control, target)
    mat = np.eye(4, dtype=dtype)
    # swap |10> <-> |11>
    mat[2,2] = 0; mat[3,3] = 0
    mat[2,3] = 1; mat[3,2] = 1
    return mat

def CZ(dtype=np.complex128) -> np.ndarray:
    mat = np.eye(4, dtype=dtype)
    mat[3,3] = -1
    return mat

def SWAP(dtype=np.complex128) -> np.ndarray:
    mat = np.zeros((4,4), dtype=dtype)
    mat[0,0] = 1; mat[3,3] = 1
    mat[1,2] = 1; mat[2,1] = 1
    return mat

# name -> (factory, arity, parameterised)
LIBRARY = {
    "I": (I, 1, False),
    "H": (H, 1, False),
    "X": (X, 1, False),
    "Y": (Y, 1, False),
    "Z": (Z, 1, False),
    "S": (S, 1, False),
    "T": (T, 1, False),
    "RX": (RX, 1, True),
    "RY": (RY, 1, True),
    "RZ": (RZ, 1, True),
    "CNOT": (CNOT, 2, False),
    "CZ": (CZ, 2, False),
    "SWAP": (SWAP, 2, False),
}

@dataclass(frozen=True, eq=False)
class Gate:
    """Gate descriptor: name, 2x2/4x4 matrix, target qubits (qubit 0 = MSB).

    For two-qubit gates the matrix rows/cols are ordered |q0 q1> over
    ``qubits=(q0, q1)``, so CNOT takes ``(control, target)``.
    """
    name: str
    matrix: np.ndarray
    qubits: Tuple[int, ...]
    parameters: Tuple[float, ...] = field(default=())

    def __post_init__(self):
        try:
            m = np.array(self.matrix, dtype=np.complex128)
        except (TypeError, ValueError) as e:
            raise GateDimensionError(f"gate {self.name!r}: matrix is not numeric/rectangular") from e
        if m.ndim != 2 or m.shape[0] != m.shape[1] or m.shape[0] == 0:
            raise GateDimensionError(f"gate {self.name!r}: matrix must be square, got shape {m.shape}")
        m.setflags(write=False)
        object.__setattr__(self, "matrix", m)
        object.__setattr__(self, "qubits", tuple(as_qubit_index(q) for q in self.qubits))
        object.__setattr__(self, "parameters", tuple(float(p) for p in self.parameters))

    @property
    def arity(self) -> int:
        return len(self.qubits)

    def __repr__(self):
        params = f", parameters={self.parameters}" if self.parameters else ""
        return f"Gate({self.name!r}, qubits={self.qubits}{params})"

def gate(name: str, *qubits: int, theta: Optional[float] = None) -> Gate:
    """Build a library gate, e.g. gate("H", 0), gate("CNOT", 0, 1), gate("RZ", 2, theta=0.3)."""
    key = name.upper()
    if key not in LIBRARY:
        raise UnsupportedGateError(f"Unknown gate {name}")
    factory, arity, parameterised = LIBRARY[key]
    if len(qubits) != arity:
        raise UnsupportedGateError(f"{key} acts on {arity} qubit(s), got {len(qubits)}")
    if parameterised:
        if theta is None:
            raise ValueError(f"{key} needs theta")
        return Gate(key, factory(theta), qubits, (theta,))
    if theta is not None:
        raise ValueError(f"{key} takes no parameter")
    return Gate(key, factory(), qubits)

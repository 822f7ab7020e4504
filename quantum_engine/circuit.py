# quantum_engine/circuit.py
from dataclasses import dataclass
from typing import List
from .engine import QuantumEngine
from .gates import Gate, gate

@dataclass
class Circuit:
    """Caller-side list of gate descriptors with a fluent builder.

    Nothing is simulated until `run`, which pushes every gate into a fresh
    QuantumEngine in order.
    """
    n: int
    ops: List[Gate]

    @staticmethod
    def empty(n: int) -> "Circuit":
        return Circuit(n, [])

    def add(self, g: Gate): self.ops.append(g); return self

    def h(self, k: int): return self.add(gate("H", k))
    def x(self, k: int): return self.add(gate("X", k))
    def y(self, k: int): return self.add(gate("Y", k))
    def z(self, k: int): return self.add(gate("Z", k))
    def s(self, k: int): return self.add(gate("S", k))
    def t(self, k: int): return self.add(gate("T", k))
    def rx(self, k: int, theta: float): return self.add(gate("RX", k, theta=theta))
    def ry(self, k: int, theta: float): return self.add(gate("RY", k, theta=theta))
    def rz(self, k: int, theta: float): return self.add(gate("RZ", k, theta=theta))
    def cnot(self, c: int, t: int): return self.add(gate("CNOT", c, t))
    def cz(self, a: int, b: int): return self.add(gate("CZ", a, b))
    def swap(self, a: int, b: int): return self.add(gate("SWAP", a, b))

    def run(self, backend: str = "serial", seed=None, check_norm=True, check_norm_tol=1e-9,
            max_qubits=None) -> QuantumEngine:
        kwargs = {} if max_qubits is None else {"max_qubits": max_qubits}
        eng = QuantumEngine(self.n, backend=backend, seed=seed, **kwargs)
        for g in self.ops:
            eng.add_gate(g)
        if check_norm:
            eng.check_normalized(tol=check_norm_tol)
        return eng

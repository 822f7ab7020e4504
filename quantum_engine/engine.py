# quantum_engine/engine.py
import logging
import threading
from typing import List, Optional, Tuple
import numpy as np
from .complex_number import Complex
from .errors import CollapseError, QubitIndexError
from .expand import expand_gate, tensor_operator
from .gates import Gate
from .matrix import multiply_vector
from .state import DEFAULT_TOL, State, as_qubit_index, basis_label, bloch_vector

log = logging.getLogger(__name__)

MAX_QUBITS = 4
BACKENDS = ("serial", "tensor", "numba")

class QuantumEngine:
    """State-vector simulator for a fixed register of qubits.

    Gates are applied as soon as they are added: each one is expanded to a
    full 2^n x 2^n operator and left-multiplied into the state. The recorded
    circuit is kept for inspection only and is never replayed.

    Every public method holds the engine lock, so a reader never sees a
    half-applied gate or a half-collapsed state.
    """

    def __init__(self, num_qubits: int, backend: str = "serial", seed=None,
                 rng: Optional[np.random.Generator] = None, max_qubits: int = MAX_QUBITS):
        if isinstance(num_qubits, bool) or not isinstance(num_qubits, (int, np.integer)):
            raise QubitIndexError(f"num_qubits must be an int, got {type(num_qubits).__name__}")
        if not 1 <= num_qubits <= max_qubits:
            raise QubitIndexError(f"num_qubits must be in [1, {max_qubits}], got {num_qubits}")
        if backend not in BACKENDS:
            raise NotImplementedError(f"Unknown backend: {backend}")
        if backend == "numba":
            try:
                from . import apply_numba
            except ImportError as e:
                raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
            self._apply_numba = apply_numba.apply_gate
        self._n = int(num_qubits)
        self.backend = backend
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._lock = threading.RLock()
        self._state = State.zero(self._n)
        self._circuit: List[Gate] = []
        log.debug("engine created: %d qubits, backend=%s", self._n, backend)

    @property
    def num_qubits(self) -> int:
        return self._n

    def _check_qubit(self, q) -> int:
        q = as_qubit_index(q)
        if not 0 <= q < self._n:
            raise QubitIndexError(f"qubit {q} out of range for {self._n} qubits")
        return q

    # ---------------------------------------------------------------- mutators

    def add_gate(self, gate: Gate):
        """Apply `gate` to the current state and record it. Expansion validates the gate."""
        with self._lock:
            new_state = self._apply(gate)
            self._circuit.append(gate)
            self._state = new_state
            log.debug("applied %r", gate)

    def _apply(self, gate: Gate) -> State:
        if self.backend == "numba":
            return self._apply_numba(self._state, gate)
        if self.backend == "tensor":
            op = tensor_operator(gate, self._n)
        else:
            op = expand_gate(gate, self._n)
        return State(self._n, multiply_vector(op, self._state.amplitudes))

    def measure(self, qubit: int) -> int:
        """Measure one qubit, collapse the register, return 0 or 1."""
        with self._lock:
            qubit = self._check_qubit(qubit)
            p0, _ = self._state.qubit_probabilities(qubit)
            result = 0 if self._rng.random() < p0 else 1
            self._collapse(qubit, result)
            log.debug("measured qubit %d -> %d (p0=%.6f)", qubit, result, p0)
            return result

    def collapse(self, qubit: int, result: int):
        """Force outcome `result` on `qubit`. Raises CollapseError if it has zero probability."""
        with self._lock:
            qubit = self._check_qubit(qubit)
            if result not in (0, 1):
                raise ValueError(f"result must be 0 or 1, got {result}")
            self._collapse(qubit, result)

    def _collapse(self, qubit: int, result: int):
        try:
            self._state = self._state.collapse(qubit, result)
        except CollapseError:
            log.warning("collapse of qubit %d onto %d failed; state left unchanged", qubit, result)
            raise

    def reset(self):
        with self._lock:
            self._state = State.zero(self._n)
            self._circuit = []
            log.debug("engine reset")

    # ----------------------------------------------------------------- readers

    def get_state_vector(self) -> List[Complex]:
        with self._lock:
            return list(self._state.amplitudes)

    def get_state(self) -> State:
        with self._lock:
            return self._state.copy()

    def get_probabilities(self) -> List[float]:
        with self._lock:
            return self._state.probabilities()

    def get_qubit_probabilities(self, qubit: int) -> Tuple[float, float]:
        with self._lock:
            qubit = self._check_qubit(qubit)
            return self._state.qubit_probabilities(qubit)

    def get_qubit_state(self, qubit: int) -> Tuple[Complex, Complex]:
        """(alpha, beta) for one qubit; see State.reduce_qubit for the entangled case."""
        with self._lock:
            qubit = self._check_qubit(qubit)
            return self._state.reduce_qubit(qubit)

    def get_bloch_vector(self, qubit: int) -> Tuple[float, float, float]:
        with self._lock:
            alpha, beta = self.get_qubit_state(qubit)
            return bloch_vector(alpha, beta)

    def get_circuit(self) -> List[Gate]:
        with self._lock:
            return list(self._circuit)

    def basis_labels(self) -> List[str]:
        with self._lock:
            return [basis_label(i, self._n) for i in range(1 << self._n)]

    def check_normalized(self, tol=DEFAULT_TOL):
        with self._lock:
            self._state.check_normalized(tol)

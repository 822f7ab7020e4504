# quantum_engine/apply_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads
from .expand import validate_gate
from .gates import Gate
from .state import State

# ---------- low-level kernels (Numba JIT) ----------

@njit
def _sub_index(i, shifts):
    r = 0
    for s in shifts:
        r = (r << 1) | ((i >> s) & 1)
    return r

@njit(parallel=True)
def _expand_kernel(U, shifts, N):
    # shifts[k] = bit position of the k-th gate qubit (n-1-q)
    keep = N - 1
    for s in shifts:
        keep &= ~(1 << s)
    op = np.zeros((N, N), dtype=np.complex128)
    for i in prange(N):
        ri = _sub_index(i, shifts)
        for j in range(N):
            if (i & keep) == (j & keep):
                op[i, j] = U[ri, _sub_index(j, shifts)]
    return op

@njit(parallel=True)
def _matvec_kernel(op, psi):
    N = psi.shape[0]
    out = np.zeros(N, dtype=np.complex128)
    for i in prange(N):
        acc = 0j
        for j in range(N):
            acc += op[i, j] * psi[j]
        out[i] = acc
    return out

# ---------- user-facing helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def expand_gate(gate: Gate, n: int) -> np.ndarray:
    """Full operator as a complex128 ndarray; same entries as expand.expand_gate."""
    validate_gate(gate, n)
    shifts = np.array([n - 1 - q for q in gate.qubits], dtype=np.int64)
    U = np.ascontiguousarray(gate.matrix, dtype=np.complex128)
    return _expand_kernel(U, shifts, 1 << n)

def apply_gate(state: State, gate: Gate) -> State:
    op = expand_gate(gate, state.n)
    psi = _matvec_kernel(op, state.as_numpy())
    return State.from_numpy(state.n, psi)

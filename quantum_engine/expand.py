# quantum_engine/expand.py
"""Gate -> full 2^n x 2^n operator over Complex (serial backend).

Two constructions that give the same operator:

* ``expand_gate``: direct bit-index fill. Entry (i, j) is non-zero only when
  i and j agree on every bit outside the gate's qubits, and then equals the
  gate matrix entry addressed by those qubits' bits. O(4^n), no temporaries.
* ``tensor_operator``: Kronecker products of the gate with identities, with
  adjacent SWAPs moving the gate's qubits to the front first.
"""
import logging
from typing import List, Sequence
from .errors import GateDimensionError, QubitIndexError, UnsupportedGateError
from .gates import Gate, SWAP
from .matrix import CMatrix, from_numbers, identity, multiply, tensor_product, zeros
from .state import qubit_bit, qubit_mask

log = logging.getLogger(__name__)

def validate_gate(gate: Gate, n: int):
    k = len(gate.qubits)
    if k not in (1, 2):
        log.warning("rejecting %r: %d target qubits", gate, k)
        raise UnsupportedGateError(f"Gates on {k} qubits are not supported (only 1 or 2)")
    for q in gate.qubits:
        if not 0 <= q < n:
            log.warning("rejecting %r: qubit %d outside [0, %d)", gate, q, n)
            raise QubitIndexError(f"qubit {q} out of range for {n} qubits")
    if k == 2 and gate.qubits[0] == gate.qubits[1]:
        raise QubitIndexError(f"qubits must differ, got {gate.qubits}")
    want = 1 << k
    if gate.matrix.shape != (want, want):
        log.warning("rejecting %r: matrix shape %s", gate, gate.matrix.shape)
        raise GateDimensionError(
            f"gate {gate.name!r} on {k} qubit(s) needs a {want}x{want} matrix, got {gate.matrix.shape}")

def _sub_index(i: int, qubits: Sequence[int], n: int) -> int:
    # row/col of the small gate matrix addressed by basis index i
    r = 0
    for q in qubits:
        r = (r << 1) | qubit_bit(i, q, n)
    return r

def _expand(m: CMatrix, qubits: Sequence[int], n: int) -> CMatrix:
    N = 1 << n
    keep = N - 1
    for q in qubits:
        keep &= ~qubit_mask(q, n)
    out = zeros(N, N)
    for i in range(N):
        ri = _sub_index(i, qubits, n)
        row = out[i]
        for j in range(N):
            # i == j always lands here, so the identity on the other qubits is implicit
            if (i & keep) == (j & keep):
                row[j] = m[ri][_sub_index(j, qubits, n)]
    return out

def expand_single_qubit(m: CMatrix, q: int, n: int) -> CMatrix:
    return _expand(m, (q,), n)

def expand_two_qubit(m: CMatrix, qubits: Sequence[int], n: int) -> CMatrix:
    """4x4 ``m`` ordered |q0 q1> over qubits=(q0, q1); any 4x4, not just CNOT."""
    return _expand(m, tuple(qubits), n)

def expand_gate(gate: Gate, n: int) -> CMatrix:
    validate_gate(gate, n)
    m = from_numbers(gate.matrix)
    if gate.arity == 1:
        return expand_single_qubit(m, gate.qubits[0], n)
    return expand_two_qubit(m, gate.qubits, n)

# ----------------------- Kronecker assembly -----------------------

def _kron_all(blocks: List[CMatrix]) -> CMatrix:
    out = blocks[0]
    for b in blocks[1:]:
        out = tensor_product(out, b)
    return out

def _swap_adjacent(pos: int, n: int) -> CMatrix:
    """Operator swapping tensor positions pos and pos+1."""
    blocks = [identity(2)] * n
    blocks = blocks[:pos] + [from_numbers(SWAP())] + blocks[pos + 2:]
    return _kron_all(blocks)

def tensor_operator(gate: Gate, n: int) -> CMatrix:
    validate_gate(gate, n)
    m = from_numbers(gate.matrix)
    if gate.arity == 1:
        blocks = [identity(2)] * n
        blocks[gate.qubits[0]] = m
        return _kron_all(blocks)

    # bubble qubits (a, b) to positions (0, 1) with adjacent swaps
    a, b = gate.qubits
    order = list(range(n))
    swaps = []
    for target_pos, q in ((0, a), (1, b)):
        pos = order.index(q)
        while pos > target_pos:
            order[pos - 1], order[pos] = order[pos], order[pos - 1]
            swaps.append(pos - 1)
            pos -= 1

    local = m if n == 2 else tensor_product(m, identity(1 << (n - 2)))
    if not swaps:
        return local
    N = 1 << n
    fwd = identity(N)
    back = identity(N)
    for pos in swaps:
        w = _swap_adjacent(pos, n)
        fwd = multiply(w, fwd)
        back = multiply(back, w)
    return multiply(back, multiply(local, fwd))

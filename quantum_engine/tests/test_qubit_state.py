import numpy as np
from quantum_engine.circuit import Circuit
from quantum_engine.engine import QuantumEngine
from quantum_engine.complex_number import Complex

def test_bit_convention():
    eng = Circuit.empty(3).x(0).run()
    alpha, beta = eng.get_qubit_state(0)
    assert alpha == Complex(0, 0)
    assert beta == Complex(1, 0)
    alpha, beta = eng.get_qubit_state(2)
    assert alpha == Complex(1, 0) and beta == Complex(0, 0)

def test_superposed_qubit():
    eng = Circuit.empty(2).h(1).run()
    alpha, beta = eng.get_qubit_state(1)
    assert alpha.is_close(Complex(np.sqrt(0.5), 0))
    assert beta.is_close(Complex(np.sqrt(0.5), 0))

def test_entangled_reduction_is_normalized():
    eng = Circuit.empty(2).h(0).cnot(0, 1).run()
    alpha, beta = eng.get_qubit_state(0)
    assert abs(alpha.magnitude2() + beta.magnitude2() - 1.0) < 1e-12

def test_zero_pair_returned_unnormalized():
    # qubit 1 in |->: the amplitudes summed for qubit 0 cancel exactly
    eng = Circuit.empty(2).x(1).h(1).run()
    alpha, beta = eng.get_qubit_state(0)
    assert alpha.magnitude2() == 0.0 and beta.magnitude2() == 0.0

def test_bloch_vector_axes():
    x, y, z = Circuit.empty(1).run().get_bloch_vector(0)
    assert np.allclose((x, y, z), (0, 0, 1))
    x, y, z = Circuit.empty(1).x(0).run().get_bloch_vector(0)
    assert np.allclose((x, y, z), (0, 0, -1))
    x, y, z = Circuit.empty(1).h(0).run().get_bloch_vector(0)
    assert np.allclose((x, y, z), (1, 0, 0))
    x, y, z = Circuit.empty(1).h(0).s(0).run().get_bloch_vector(0)
    assert np.allclose((x, y, z), (0, 1, 0))

def test_qubit_probabilities_and_labels():
    eng = Circuit.empty(3).h(2).run()
    p0, p1 = eng.get_qubit_probabilities(2)
    assert np.isclose(p0, 0.5) and np.isclose(p1, 0.5)
    assert np.allclose(eng.get_qubit_probabilities(0), (1.0, 0.0))
    assert QuantumEngine(3).basis_labels() == ["000", "001", "010", "011", "100", "101", "110", "111"]

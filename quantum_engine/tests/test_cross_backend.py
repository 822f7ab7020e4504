import numpy as np
from quantum_engine.circuit import Circuit

def amps(eng):
    return np.array([complex(a) for a in eng.get_state_vector()])

def max_abs_diff(a, b):
    return float(np.max(np.abs(a - b)))

def test_serial_vs_numba_small():
    # 3-qubit mixed circuit
    c = Circuit.empty(3).h(0).x(1).cnot(1,2).h(2).cnot(0,1).x(2).s(1).rz(0, 0.4)
    st_s = c.run(backend="serial")
    st_n = c.run(backend="numba")
    assert max_abs_diff(amps(st_s), amps(st_n)) < 1e-12

def test_random_circuits_match():
    rng = np.random.default_rng(123)
    n = 4
    for depth in (5, 10, 20):
        c = Circuit.empty(n)
        for _ in range(depth):
            g = rng.integers(0, 4)  # 0:H,1:X,2:CNOT,3:CZ
            if g == 0:
                c.h(int(rng.integers(0, n)))
            elif g == 1:
                c.x(int(rng.integers(0, n)))
            else:
                c1 = int(rng.integers(0, n))
                c2 = c1
                while c2 == c1:
                    c2 = int(rng.integers(0, n))
                if g == 2:
                    c.cnot(c1, c2)
                else:
                    c.cz(c1, c2)
        s = c.run(backend="serial")
        t = c.run(backend="tensor")
        u = c.run(backend="numba")
        assert np.allclose(amps(s), amps(t), atol=1e-12, rtol=0)
        assert np.allclose(amps(s), amps(u), atol=1e-12, rtol=0)

import threading
from quantum_engine.engine import QuantumEngine
from quantum_engine.gates import gate

def test_readers_never_see_partial_updates():
    eng = QuantumEngine(3, seed=0)
    errors = []
    stop = threading.Event()

    def writer(q):
        for _ in range(30):
            eng.add_gate(gate("H", q))
            eng.add_gate(gate("CNOT", q, (q + 1) % 3))

    def reader():
        while not stop.is_set():
            p = eng.get_probabilities()
            if abs(sum(p) - 1.0) > 1e-9 or len(p) != 8:
                errors.append(p)

    readers = [threading.Thread(target=reader) for _ in range(2)]
    writers = [threading.Thread(target=writer, args=(q,)) for q in range(3)]
    for t in readers + writers:
        t.start()
    for t in writers:
        t.join()
    stop.set()
    for t in readers:
        t.join()
    assert errors == []
    assert len(eng.get_circuit()) == 180

def test_label_and_bloch_readers_wait_for_lock():
    eng = QuantumEngine(2)
    done = []
    holding = threading.Event()
    release = threading.Event()

    def hold():
        with eng._lock:
            holding.set()
            release.wait(5)

    def read():
        done.append(eng.basis_labels())
        done.append(eng.get_bloch_vector(0))

    holder = threading.Thread(target=hold)
    holder.start()
    holding.wait(5)
    reader = threading.Thread(target=read)
    reader.start()
    reader.join(0.2)
    assert done == []
    release.set()
    holder.join()
    reader.join()
    assert done[0] == ["00", "01", "10", "11"]
    assert done[1] == (0.0, 0.0, 1.0)

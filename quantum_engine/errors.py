# quantum_engine/errors.py

class QuantumEngineError(Exception):
    """Base class for engine failures."""

class GateDimensionError(QuantumEngineError, ValueError):
    """Gate matrix shape does not match its number of target qubits."""

class UnsupportedGateError(QuantumEngineError, NotImplementedError):
    """Gate arity (or library name) the engine cannot expand."""

class QubitIndexError(QuantumEngineError, IndexError):
    """Qubit index out of range, repeated, or a bad register size."""

class CollapseError(QuantumEngineError, RuntimeError):
    """Measurement left no amplitude to renormalize."""

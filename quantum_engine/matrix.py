# quantum_engine/matrix.py
from typing import List, Sequence
from .complex_number import Complex, ZERO, ONE

Vector = List[Complex]
CMatrix = List[List[Complex]]

def _shape(m: Sequence[Sequence[Complex]]):
    if not m or not m[0]:
        raise ValueError("empty matrix")
    return len(m), len(m[0])

def identity(size: int) -> CMatrix:
    return [[ONE if i == j else ZERO for j in range(size)] for i in range(size)]

def zeros(rows: int, cols: int) -> CMatrix:
    return [[ZERO] * cols for _ in range(rows)]

def multiply_vector(matrix: Sequence[Sequence[Complex]], vector: Sequence[Complex]) -> Vector:
    """y[i] = sum_j matrix[i][j] * vector[j]"""
    rows, cols = _shape(matrix)
    if cols != len(vector):
        raise ValueError(f"shape mismatch: matrix {rows}x{cols} vs vector {len(vector)}")
    out = []
    for row in matrix:
        re = im = 0.0
        for a, v in zip(row, vector):
            # inlined Complex.multiply/add; this loop dominates gate application
            re += a.real*v.real - a.imag*v.imag
            im += a.real*v.imag + a.imag*v.real
        out.append(Complex(re, im))
    return out

def multiply(a: Sequence[Sequence[Complex]], b: Sequence[Sequence[Complex]]) -> CMatrix:
    a_rows, a_cols = _shape(a)
    b_rows, b_cols = _shape(b)
    if a_cols != b_rows:
        raise ValueError(f"shape mismatch: {a_rows}x{a_cols} @ {b_rows}x{b_cols}")
    out = []
    for i in range(a_rows):
        row = []
        for j in range(b_cols):
            acc = ZERO
            for k in range(a_cols):
                acc = acc.add(a[i][k].multiply(b[k][j]))
            row.append(acc)
        out.append(row)
    return out

def tensor_product(a: Sequence[Sequence[Complex]], b: Sequence[Sequence[Complex]]) -> CMatrix:
    """Kronecker product a (x) b, size (aRows*bRows) x (aCols*bCols)."""
    a_rows, a_cols = _shape(a)
    b_rows, b_cols = _shape(b)
    return [[a[i // b_rows][j // b_cols].multiply(b[i % b_rows][j % b_cols])
             for j in range(a_cols * b_cols)]
            for i in range(a_rows * b_rows)]

def from_numbers(m) -> CMatrix:
    """Cast a nested sequence / numpy array of numbers to a Complex matrix."""
    return [[Complex.of(x) for x in row] for row in m]

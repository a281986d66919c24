from typing import List, Tuple

import numpy as np

from arithmetic import Q, ExactNumber, canonicalize, divide, to_exact, unwrap_scalar
from config import debug
from roots import sqrt

Matrix = List[List[ExactNumber]]
Vector = List[ExactNumber]

def dims(M: Matrix) -> Tuple[int, int]:
    return (len(M), len(M[0])) if M else (0, 0)

def zeros(m: int, n: int) -> Matrix:
    return [[0 for _ in range(n)] for _ in range(m)]

def identity(n: int) -> Matrix:
    out = zeros(n, n)
    for i in range(n):
        out[i][i] = 1
    return out

def transpose(M: Matrix) -> Matrix:
    m, n = dims(M)
    return [[M[i][j] for i in range(m)] for j in range(n)]

def dot(u: Vector, v: Vector) -> ExactNumber:
    if len(u) != len(v):
        raise ValueError(f"dot: length mismatch {len(u)} != {len(v)}")
    s = 0
    for a, b in zip(u, v):
        s += a * b
    return canonicalize(s)

def mv_product(M: Matrix, v: Vector) -> Vector:
    m, n = dims(M)
    if len(v) != n:
        raise ValueError(f"mv_product: matrix is {m}x{n}, vector has length {len(v)}")
    return [dot(row, v) for row in M]

def mm_product(A: Matrix, B: Matrix) -> Matrix:
    m, k = dims(A)
    k2, n = dims(B)
    if k != k2:
        raise ValueError(f"mm_product: cannot multiply {m}x{k} by {k2}x{n}")
    Bt = transpose(B)
    return [[dot(A[i], Bt[j]) for j in range(n)] for i in range(m)]

def matrix_div_scalar(M: Matrix, r: ExactNumber) -> Matrix:
    # divide raises DivisionByZero for an exact zero
    return [[divide(x, r) for x in row] for row in M]

def l2_norm(v: Vector) -> ExactNumber:
    """Euclidean norm; exact when the sum of squares is a perfect square ([3, 4] -> 5)."""
    return sqrt(dot(v, v))

def frobenius_norm(M: Matrix) -> ExactNumber:
    sq_sum = 0
    for row in M:
        for x in row:
            sq_sum += x * x
    return sqrt(canonicalize(sq_sum))

def determinant(M: Matrix) -> ExactNumber:
    """
    Determinant by Gaussian elimination with exact division, so integer and
    rational matrices get an exact result.
    """
    m, n = dims(M)
    if m != n:
        raise ValueError(f"determinant: matrix is {m}x{n}, not square")
    A = [row[:] for row in M]
    det = 1
    for col in range(n):
        pivot = next((r for r in range(col, n) if A[r][col] != 0), None)
        if pivot is None:
            return 0
        if pivot != col:
            A[col], A[pivot] = A[pivot], A[col]
            det = -det
        p = A[col][col]
        debug(f"determinant: column {col}, pivot row {pivot}, pivot {p}")
        det = canonicalize(det * p)
        for r in range(col + 1, n):
            f = divide(A[r][col], p)
            if f == 0:
                continue
            A[r] = [canonicalize(A[r][j] - f * A[col][j]) for j in range(n)]
    return det

def from_numpy(arr) -> Matrix:
    """
    Exact nested lists from a 1-d or 2-d numpy array. Floats are taken at
    their exact binary value (Q.from_float), integers as ints.
    """
    a = np.asarray(arr)
    if a.ndim not in (1, 2):
        raise ValueError(f"from_numpy: expected a 1-d or 2-d array, got {a.ndim} dimensions")
    if a.dtype.kind == 'f' and not np.isfinite(a).all():
        raise ValueError("NaN/Inf encountered; cannot convert to Fraction.")

    def conv(x):
        x = unwrap_scalar(x)
        if isinstance(x, float):
            return canonicalize(Q.from_float(x))
        return to_exact(x)

    if a.ndim == 1:
        return [conv(x) for x in a]
    return [[conv(x) for x in row] for row in a]

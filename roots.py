"""Exact square roots.

``rsqrt`` returns an exact int or rational when its argument is a perfect square
(or a ratio of perfect squares) and a float approximation otherwise. ``sqrt``
extends it to the whole real line by promoting negative arguments to complex
numbers, so ``sqrt(Q(-4, 9)) == ExactComplex(0, Q(2, 3))``.

The integer case is a long division on 32-bit limbs producing 16 bits of the
root per step:

    main   remainder so far, with the next limb appended
    side   2 * answer, shifted to line up with the next root chunk
    answer root so far

Each chunk is estimated with a float square root and then corrected downwards
with exact integer arithmetic, so no float rounding reaches an exact result.
"""

import cmath
import math
from typing import List, Tuple

from arithmetic import Q, ExactComplex, canonicalize, divide, make_complex, to_exact, unwrap_scalar
from config import LIMB_BITS, CHUNK_BITS, debug
from formats import FLOAT64

_LIMB_MASK = (1 << LIMB_BITS) - 1

def limbs(n: int) -> List[int]:
    """
    Big-endian LIMB_BITS-wide limbs of a non-negative integer; the leading limb
    is never zero unless n == 0.
    """
    if n < 0:
        raise ValueError("limbs: negative input")
    out = [n & _LIMB_MASK]
    while n > _LIMB_MASK:
        n >>= LIMB_BITS
        out.append(n & _LIMB_MASK)
    out.reverse()
    return out

def isqrt_rem(n: int) -> Tuple[int, int]:
    """
    Integer square root by digit-group long division.
    Returns (root, rem) with root*root + rem == n and 0 <= rem <= 2*root.
    """
    if n < 0:
        raise ValueError("isqrt_rem: negative input")
    answer = 0
    main = 0
    side = 0
    for limb in limbs(n):
        main = (main << LIMB_BITS) + limb
        side <<= CHUNK_BITS
        if answer != 0:
            if main * 4 < side * side:
                applo = main // side
            else:
                applo = int((math.sqrt(side * side + 4 * main) - side) / 2.0) + 1
        else:
            applo = int(math.sqrt(main)) + 1

        x = (side + applo) * applo
        while x > main:
            applo -= 1
            x = (side + applo) * applo
        main -= x
        answer = (answer << CHUNK_BITS) + applo
        side += applo * 2
    return answer, main

def _float_sqrt(n: int, root: int) -> float:
    if FLOAT64.fits(n):
        return math.sqrt(n)
    # n itself overflows a float; the integer root carries more precision than
    # the float can hold anyway
    if FLOAT64.fits(root):
        return float(root)
    return math.inf

def _as_rational(k: int, root) -> Q:
    # an overflowed float root is replaced by the integer root of k
    if isinstance(root, float) and math.isinf(root):
        return Q(isqrt_rem(k)[0])
    return Q(root)

def _float_ratio(n: Q, d: Q) -> float:
    q = n / d
    if q > FLOAT64.Fmax:
        return math.inf
    return float(q)

def rsqrt(a):
    """
    Square root of a non-negative int, rational or float.

    A rational n/d is exact only when both n and d are perfect squares;
    otherwise the quotient of the two partial roots is a float.
    """
    if isinstance(a, float):
        return math.sqrt(a)
    if isinstance(a, Q):
        n, d = a.numerator, a.denominator
        rn, rd = rsqrt(n), rsqrt(d)
        if isinstance(rn, int) and isinstance(rd, int):
            return divide(rn, rd)
        return _float_ratio(_as_rational(n, rn), _as_rational(d, rd))
    if a < 0:
        raise ValueError(f"rsqrt: negative input {a}")
    root, rem = isqrt_rem(a)
    if rem == 0:
        return root
    debug(f"rsqrt: {a.bit_length()}-bit input is not a perfect square (remainder {rem}), using float sqrt")
    return _float_sqrt(a, root)

def sqrt(a):
    """
    Square root without domain errors:
      complex          -> principal branch (cmath)
      NaN              -> NaN
      a >= 0           -> rsqrt(a)
      a < 0            -> complex(0, rsqrt(-a))
    """
    a = unwrap_scalar(a)
    if isinstance(a, (complex, ExactComplex)):
        return canonicalize(cmath.sqrt(a))
    a = to_exact(a)
    if isinstance(a, float) and math.isnan(a):
        return a
    if a >= 0:
        return canonicalize(rsqrt(a))
    return canonicalize(make_complex(0, rsqrt(-a)))

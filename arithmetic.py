from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Union
import sys

import numpy as np

Q = Fraction  # rational type alias

class DivisionByZero(ZeroDivisionError):
    """Exact (int or rational) division by zero."""

def is_exact(x) -> bool:
    return isinstance(x, (int, Fraction))

def qstr(q: Union[int, Fraction]) -> str:
    """
    Exact decimal expansion of a Fraction without float rounding.
    - If it terminates, returns all digits.
    - If it repeats, returns a string with the repeating part in parentheses, e.g. "0.(3)".
    """
    q = Q(q)
    if q == 0:
        return "0"

    sign = '-' if q < 0 else ''
    n = abs(q.numerator)
    d = q.denominator

    int_part, rem = divmod(n, d)
    if rem == 0:
        return f"{sign}{int_part}"

    # long division with cycle detection
    digits = []
    seen = {}  # remainder -> index in digits
    while rem != 0 and rem not in seen:
        seen[rem] = len(digits)
        digit, rem = divmod(rem * 10, d)
        digits.append(str(digit))

    if rem == 0:
        return f"{sign}{int_part}.{''.join(digits)}"
    start = seen[rem]
    nonrep = ''.join(digits[:start])
    rep = ''.join(digits[start:])
    return f"{sign}{int_part}.{nonrep}({rep})"


@dataclass(frozen=True, eq=False)
class ExactComplex:
    """
    Complex number whose parts stay exact (int or Fraction).

    Every operator canonicalizes its result, so a product like (1+2i)(1-2i)
    comes back as the int 5. Mixing in a float or a host complex drops to
    host complex arithmetic.
    """
    real: Union[int, Fraction, float]
    imag: Union[int, Fraction, float]

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imag))

    def conjugate(self):
        return make_complex(self.real, -self.imag)

    def norm2(self):
        """real^2 + imag^2, exact for exact parts."""
        return canonicalize(self.real * self.real + self.imag * self.imag)

    # -- arithmetic ---------------------------------------------------------

    @staticmethod
    def _parts(other):
        if isinstance(other, ExactComplex):
            return other.real, other.imag
        if isinstance(other, (int, Fraction, float)):
            return other, 0
        return None

    def __add__(self, other):
        if isinstance(other, complex):
            return canonicalize(complex(self) + other)
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        re, im = parts
        return canonicalize(make_complex(self.real + re, self.imag + im))

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, complex):
            return canonicalize(complex(self) - other)
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        re, im = parts
        return canonicalize(make_complex(self.real - re, self.imag - im))

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        if isinstance(other, complex):
            return canonicalize(complex(self) * other)
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        c, d = parts
        a, b = self.real, self.imag
        return canonicalize(make_complex(a * c - b * d, a * d + b * c))

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, complex):
            return canonicalize(complex(self) / other)
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        c, d = parts
        a, b = self.real, self.imag
        if d == 0:
            return canonicalize(make_complex(divide(a, c), divide(b, c)))
        den = c * c + d * d
        return canonicalize(make_complex(divide(a * c + b * d, den), divide(b * c - a * d, den)))

    def __rtruediv__(self, other):
        if isinstance(other, complex):
            return canonicalize(other / complex(self))
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return make_complex(*parts) / self

    def __pow__(self, other):
        if isinstance(other, int):
            if other < 0:
                return divide(1, self ** -other)
            # square-and-multiply keeps every step exact
            result, base, n = 1, self, other
            while n:
                if n & 1:
                    result = result * base
                base = base * base
                n >>= 1
            return canonicalize(result)
        if isinstance(other, (Fraction, float, complex, ExactComplex)):
            return canonicalize(complex(self) ** _as_complex(other))
        return NotImplemented

    def __rpow__(self, other):
        if isinstance(other, (int, Fraction, float, complex)):
            return canonicalize(_as_complex(other) ** complex(self))
        return NotImplemented

    def __neg__(self):
        return make_complex(-self.real, -self.imag)

    def __pos__(self):
        return self

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, complex):
            return self.real == other.real and self.imag == other.imag
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        return self.real == parts[0] and self.imag == parts[1]

    def __hash__(self):
        # same combination as CPython's complex hash, so equal values hash alike
        width = sys.hash_info.width
        h = (hash(self.real) + sys.hash_info.imag * hash(self.imag)) & ((1 << width) - 1)
        if h >= 1 << (width - 1):
            h -= 1 << width
        return -2 if h == -1 else h

    def __str__(self):
        sign = '-' if self.imag < 0 else '+'
        return f"({self.real}{sign}{abs(self.imag)}j)"


ExactNumber = Union[int, Fraction, float, complex, ExactComplex]

def _as_complex(x) -> complex:
    if isinstance(x, (complex, ExactComplex)):
        return complex(x)
    return complex(float(x), 0.0)

def make_complex(real, imag) -> Union[ExactComplex, complex]:
    """Complex with the given parts; float parts give a host complex."""
    if isinstance(real, float) or isinstance(imag, float):
        return complex(float(real), float(imag))
    return ExactComplex(real, imag)

def canonicalize(x):
    """
    Reduce x to its simplest equivalent form:
      complex with zero imaginary part -> its real part
      Fraction with denominator 1      -> int
    Anything else is returned as is.
    """
    if isinstance(x, (ExactComplex, complex)):
        if x.imag == 0:
            return canonicalize(x.real)
        if isinstance(x, ExactComplex):
            re, im = canonicalize(x.real), canonicalize(x.imag)
            if re is not x.real or im is not x.imag:
                return ExactComplex(re, im)
        return x
    if isinstance(x, Fraction) and x.denominator == 1:
        return int(x.numerator)
    return x

def divide(a, b):
    """
    Exact quotient a / b. Two exact operands give a canonical rational,
    e.g. divide(2**72, 2**70 * 3) == Q(4, 3); anything else uses host division.
    """
    if is_exact(a) and is_exact(b):
        if b == 0:
            raise DivisionByZero(f"division by zero: {qstr(a)} / 0")
        return canonicalize(Q(a) / b)
    return canonicalize(a / b)

def power(a, b):
    """a ** b, keeping negative integer powers of exact bases rational."""
    if is_exact(a) and isinstance(b, int) and b < 0:
        if a == 0:
            raise DivisionByZero(f"zero raised to negative power {b}")
        return canonicalize(Q(a) ** b)
    return canonicalize(a ** b)

def unwrap_scalar(x):
    """Host scalar for numpy scalars and 0-d arrays; anything else unchanged."""
    if isinstance(x, np.ndarray) and x.ndim == 0:
        x = x[()]
    if isinstance(x, np.generic):
        return x.item()
    return x

def to_exact(x) -> ExactNumber:
    """Convert to a canonical ExactNumber (strings and Decimals are read exactly)."""
    x = unwrap_scalar(x)
    if isinstance(x, bool):
        return int(x)
    if isinstance(x, str):
        x = Q(x.strip())
    elif isinstance(x, Decimal):
        if not x.is_finite():
            return float(x)
        x = Q(x)
    if not isinstance(x, (int, Fraction, float, complex, ExactComplex)):
        raise TypeError(f"cannot interpret {x!r} as an exact number")
    return canonicalize(x)

"""Opt-in exact arithmetic.

Wrapping a value in ``Exact`` switches its operators to exact semantics:

    >>> Exact(2) / 3 * 3
    Exact(2)
    >>> Exact(20) / 9 * 3 * 14 / 7 * 3 / 2
    Exact(20)
    >>> (Exact(2) ** 72) / ((2 ** 70) * 3)
    Exact(4/3)
    >>> (Exact(-4) / 9).sqrt()
    Exact((0+2/3j))

Results are always canonical: rationals with denominator 1 are ints and
complex numbers with a zero imaginary part are reals. Host values that are
never wrapped keep their usual behaviour.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
import operator

from arithmetic import (
    ExactComplex, ExactNumber, canonicalize, divide, power, qstr, to_exact,
)
import roots

def _unwrap(x):
    if isinstance(x, Exact):
        return x.value
    # text is only read at construction, never as an operand
    if isinstance(x, (str, Decimal)):
        return None
    try:
        return to_exact(x)
    except TypeError:
        return None

@dataclass(frozen=True, eq=False)
class Exact:
    value: ExactNumber

    def __post_init__(self):
        value = self.value.value if isinstance(self.value, Exact) else self.value
        object.__setattr__(self, "value", to_exact(value))

    def _binary(self, other, op, reflected=False):
        o = _unwrap(other)
        if o is None:
            return NotImplemented
        a, b = (o, self.value) if reflected else (self.value, o)
        return Exact(canonicalize(op(a, b)))

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._binary(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._binary(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._binary(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, divide)

    def __rtruediv__(self, other):
        return self._binary(other, divide, reflected=True)

    def __pow__(self, other):
        return self._binary(other, power)

    def __rpow__(self, other):
        return self._binary(other, power, reflected=True)

    # floor division and modulo keep host semantics
    def __floordiv__(self, other):
        return self._binary(other, operator.floordiv)

    def __rfloordiv__(self, other):
        return self._binary(other, operator.floordiv, reflected=True)

    def __mod__(self, other):
        return self._binary(other, operator.mod)

    def __rmod__(self, other):
        return self._binary(other, operator.mod, reflected=True)

    def __divmod__(self, other):
        if _unwrap(other) is None:
            return NotImplemented
        return self // other, self % other

    def __rdivmod__(self, other):
        if _unwrap(other) is None:
            return NotImplemented
        return other // self, other % self

    def __neg__(self):
        return Exact(-self.value)

    def __pos__(self):
        return self

    def __abs__(self):
        if isinstance(self.value, ExactComplex):
            return Exact(roots.sqrt(self.value.norm2()))
        return Exact(abs(self.value))

    def sqrt(self) -> Exact:
        return Exact(roots.sqrt(self.value))

    # -- comparison ---------------------------------------------------------

    def _compare(self, other, op):
        o = _unwrap(other)
        if o is None:
            return NotImplemented
        return op(self.value, o)

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __hash__(self):
        return hash(self.value)

    # -- conversion ---------------------------------------------------------

    def __bool__(self):
        return bool(self.value)

    def __int__(self):
        return int(self.value)

    def __float__(self):
        return float(self.value)

    def __complex__(self):
        v = self.value
        if isinstance(v, (complex, ExactComplex)):
            return complex(v)
        return complex(float(v), 0.0)

    def decimal(self) -> str:
        """Exact decimal expansion, repeating digits in parentheses: Exact(1)/3 -> '0.(3)'."""
        if isinstance(self.value, (int, Fraction)):
            return qstr(self.value)
        return str(self.value)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Exact({self.value})"

def exact(x) -> Exact:
    return Exact(x)

def sqrt(x) -> Exact:
    """Exact square root of x (Exact or any value to_exact accepts)."""
    return exact(x).sqrt()

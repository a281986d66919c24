from dataclasses import dataclass
from math import ldexp

@dataclass(frozen=True)
class FloatFormat:
    name: str
    p: int              # precision in bits (incl. implicit 1)
    emax: int           # maximum finite exponent (unbiased)
    Fmax: float         # largest finite positive
    eps: float          # machine epsilon = 2^(1-p)

    @property
    def max_int(self) -> int:
        """Largest integer that converts to this format without overflow."""
        return int(self.Fmax)

    def fits(self, n: int) -> bool:
        return -self.max_int <= n <= self.max_int

def _derive(name: str, p: int, emax: int) -> FloatFormat:
    eps = ldexp(1.0, 1 - p)
    # Fmax = (2 - 2^(1-p)) * 2^emax
    Fmax = (2.0 - eps) * ldexp(1.0, emax)
    return FloatFormat(name=name, p=p, emax=emax, Fmax=Fmax, eps=eps)

# Python floats are IEEE-754 binary64
FLOAT64 = _derive("float64", 53, 1023)

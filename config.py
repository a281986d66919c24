"""Global configuration for exactmath.

Usage:
- Toggle debug prints (e.g., float fallbacks in rsqrt):
    from config import set_debug
    set_debug(True)

- Or via environment variable:
    export EXACTMATH_DEBUG=1
"""

from __future__ import annotations

import os
import sys

# Width of one DigitGroup limb; the root grows by half a limb per step.
LIMB_BITS = 32
CHUNK_BITS = LIMB_BITS // 2

_DEBUG: bool = os.getenv("EXACTMATH_DEBUG", "0") not in {"0", "false", "False", ""}


def set_debug(value: bool) -> None:
    """Enable or disable debug mode (controls [DBG] prints)."""
    global _DEBUG
    _DEBUG = bool(value)


def is_debug() -> bool:
    """Return whether debug mode is enabled."""
    return _DEBUG


def debug(msg: str) -> None:
    """Print a [DBG] line to stderr if debug is enabled."""
    if _DEBUG:
        print(f"[DBG] {msg}", file=sys.stderr)

"""
Twiddle factors: unit complex rotations exp(i*angle).

Kernels build their angles from exact integer residues wherever the phase
grows with N (chirp k^2, naive u*n), so the argument passed here stays within
a few multiples of pi and keeps full double precision.
"""

import math

from numba import jit


@jit(nopython=True, cache=True)
def twiddle_factor(angle: float) -> complex:
    """Return cos(angle) + i*sin(angle)."""
    return math.cos(angle) + 1j * math.sin(angle)

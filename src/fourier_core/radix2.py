"""
Radix-2 Cooley-Tukey FFT (decimation in time) using Numba JIT.

The transform runs in place:
1. Bit-reversal permutation via an XOR index walk (O(N), no extra buffer)
2. log2(N) butterfly levels, each twiddle computed directly from its index

The parallel kernel splits the twiddle index of a level across Numba worker
threads. Butterfly pairs of different indices never overlap, and every
``prange`` loop joins before the next level starts.
"""

import math

import numpy as np
from numba import jit, prange

from .control import use_parallel
from .conventions import Convention, scale_forward, scale_inverse
from .errors import InvalidLengthError
from .twiddle import twiddle_factor
from .buffers import acquire, release


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def ceiling_to_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


@jit(nopython=True, cache=True)
def _bit_reverse_permute(samples):
    n = samples.shape[0]
    j = 0
    for i in range(1, n):
        # Increment j as a bit-reversed counter
        k = n >> 1
        j ^= k
        while j < k:
            k >>= 1
            j ^= k
        if i < j:
            tmp = samples[i]
            samples[i] = samples[j]
            samples[j] = tmp


@jit(nopython=True, cache=True)
def _butterfly(samples, level_size, k, sign):
    """All butterflies of one level sharing twiddle index k."""
    w = twiddle_factor(sign * k * math.pi / level_size)
    step = level_size << 1
    for i in range(k, samples.shape[0], step):
        even = samples[i]
        odd = w * samples[i + level_size]
        samples[i] = even + odd
        samples[i + level_size] = even - odd


@jit(nopython=True, cache=True, nogil=True)
def _radix2(samples, sign):
    _bit_reverse_permute(samples)
    n = samples.shape[0]
    level_size = 1
    while level_size < n:
        for k in range(level_size):
            _butterfly(samples, level_size, k, sign)
        level_size *= 2


@jit(nopython=True, cache=True, parallel=True)
def _radix2_parallel(samples, sign):
    _bit_reverse_permute(samples)
    n = samples.shape[0]
    level_size = 1
    while level_size < n:
        for k in prange(level_size):
            _butterfly(samples, level_size, k, sign)
        level_size *= 2


def _run_radix2(work: np.ndarray, sign: int) -> None:
    """Pick the sequential or parallel kernel for an already validated buffer."""
    if use_parallel(work.shape[0]):
        _radix2_parallel(work, sign)
    else:
        _radix2(work, sign)


def radix2(samples, sign: int = -1) -> None:
    """
    Unnormalized in-place radix-2 transform.

    Parameters
    ----------
    samples : np.ndarray or list of complex
        Sample sequence; its length must be a power of two.
    sign : int
        Exponent sign of the kernel: -1 forward, +1 inverse.

    Raises
    ------
    InvalidLengthError
        If the length is not a power of two.
    """
    work = acquire(samples)
    n = work.shape[0]
    if not is_power_of_two(n):
        raise InvalidLengthError(n)

    _run_radix2(work, sign)
    release(samples, work)


def radix2_forward(samples, convention: Convention = Convention.DEFAULT) -> None:
    """Radix-2 forward FFT for power-of-two sized sample vectors, in place."""
    work = acquire(samples)
    if not is_power_of_two(work.shape[0]):
        raise InvalidLengthError(work.shape[0])

    _run_radix2(work, convention.forward_sign)
    scale_forward(convention, work)
    release(samples, work)


def radix2_inverse(spectrum, convention: Convention = Convention.DEFAULT) -> None:
    """Radix-2 inverse FFT for power-of-two sized sample vectors, in place."""
    work = acquire(spectrum, name="spectrum")
    if not is_power_of_two(work.shape[0]):
        raise InvalidLengthError(work.shape[0])

    _run_radix2(work, convention.inverse_sign)
    scale_inverse(convention, work)
    release(spectrum, work)

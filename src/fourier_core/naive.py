"""
Naive O(N^2) DFT, the reference the fast paths are checked against.

    X[u] = sum_n x[n] * exp(sign * i * 2*pi * u*n / N)

Output bins are independent, so the parallel kernel splits them across
threads. The phase u*n is reduced modulo N before it becomes an angle.
"""

import math

import numpy as np
from numba import jit, prange

from .control import use_parallel
from .conventions import Convention, scale_forward, scale_inverse
from .twiddle import twiddle_factor
from .buffers import copy_samples


@jit(nopython=True, cache=True)
def _naive_bin(samples, u, sign):
    n = samples.shape[0]
    step = sign * 2.0 * math.pi / n
    total = 0j
    for k in range(n):
        total += samples[k] * twiddle_factor(step * ((u * k) % n))
    return total


@jit(nopython=True, cache=True)
def _naive(samples, sign):
    n = samples.shape[0]
    result = np.empty(n, dtype=np.complex128)
    for u in range(n):
        result[u] = _naive_bin(samples, u, sign)
    return result


@jit(nopython=True, cache=True, parallel=True)
def _naive_parallel(samples, sign):
    n = samples.shape[0]
    result = np.empty(n, dtype=np.complex128)
    for u in prange(n):
        result[u] = _naive_bin(samples, u, sign)
    return result


def _run_naive(samples: np.ndarray, sign: int) -> np.ndarray:
    if use_parallel(samples.shape[0]):
        return _naive_parallel(samples, sign)
    return _naive(samples, sign)


def naive(samples, sign: int = -1) -> np.ndarray:
    """
    Unnormalized DFT by direct summation.

    Returns a new complex128 array; ``samples`` is not modified.
    """
    return _run_naive(copy_samples(samples), sign)


def naive_forward(samples, convention: Convention = Convention.DEFAULT) -> np.ndarray:
    """
    Naive forward DFT, useful e.g. to verify faster algorithms.

    Parameters
    ----------
    samples : array_like of complex
        Time-space sample vector.
    convention : Convention
        Exponent sign and scaling.

    Returns
    -------
    np.ndarray
        Corresponding frequency-space vector.
    """
    spectrum = _run_naive(copy_samples(samples), convention.forward_sign)
    scale_forward(convention, spectrum)
    return spectrum


def naive_inverse(spectrum, convention: Convention = Convention.DEFAULT) -> np.ndarray:
    """Naive inverse DFT; returns the time-space vector for ``spectrum``."""
    samples = _run_naive(copy_samples(spectrum, name="spectrum"), convention.inverse_sign)
    scale_inverse(convention, samples)
    return samples

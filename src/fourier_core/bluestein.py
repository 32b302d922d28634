"""
Bluestein FFT for arbitrary lengths (chirp-z convolution).

With the chirp c[k] = exp(i*pi*k^2/N) the DFT becomes a linear convolution:

    X[u] = conj(c[u]) * sum_n (conj(c[n]) * x[n]) * c[u - n]

The convolution is evaluated with radix-2 transforms of length
M = next power of two >= 2N - 1, so that the cyclic convolution of the padded
sequences equals the linear one on the first N outputs.

The inverse exponent reuses the same chirp: DFT+(x) = swap(DFT-(swap(x)))
where swap exchanges the real and imaginary parts.
"""

import math

import numpy as np
from numba import jit, prange

from .control import use_parallel
from .conventions import Convention, scale_forward, scale_inverse
from .radix2 import _radix2, _run_radix2, ceiling_to_power_of_two, is_power_of_two
from .twiddle import twiddle_factor
from .buffers import acquire, release


@jit(nopython=True, cache=True)
def bluestein_chirp(n):
    """
    Chirp sequence exp(i*pi*k^2/n) for k = 0..n-1.

    k^2 is tracked as a residue modulo 2n, updated by (k+1)^2 = k^2 + 2k + 1,
    so no intermediate exceeds 6n and the angle stays in [0, 2*pi).
    """
    chirp = np.empty(n, dtype=np.complex128)
    modulus = 2 * n
    residue = 0
    for k in range(n):
        chirp[k] = twiddle_factor(math.pi * residue / n)
        residue = (residue + 2 * k + 1) % modulus
    return chirp


@jit(nopython=True, cache=True)
def _swap_real_imaginary(samples):
    for i in range(samples.shape[0]):
        value = samples[i]
        samples[i] = value.imag + 1j * value.real


@jit(nopython=True, cache=True)
def _padded_sequences(samples, chirp, m):
    n = samples.shape[0]

    # Even-symmetric extension of the chirp: the convolution kernel
    b = np.zeros(m, dtype=np.complex128)
    b[0] = chirp[0]
    for k in range(1, n):
        b[k] = chirp[k]
        b[m - k] = chirp[k]

    a = np.zeros(m, dtype=np.complex128)
    for k in range(n):
        a[k] = chirp[k].conjugate() * samples[k]

    return a, b


@jit(nopython=True, cache=True, parallel=True)
def _radix2_pair(a, b, sign):
    """Transform two independent sequences concurrently."""
    for t in prange(2):
        if t == 0:
            _radix2(a, sign)
        else:
            _radix2(b, sign)


@jit(nopython=True, cache=True)
def _unchirp(samples, chirp, a, m):
    scale = 1.0 / m
    for k in range(samples.shape[0]):
        samples[k] = scale * chirp[k].conjugate() * a[k]


def _convolve(work: np.ndarray, sign: int) -> None:
    n = work.shape[0]
    m = ceiling_to_power_of_two(2 * n - 1)

    if sign == 1:
        _swap_real_imaginary(work)

    chirp = bluestein_chirp(n)
    a, b = _padded_sequences(work, chirp, m)

    if use_parallel(m):
        _radix2_pair(a, b, -1)
    else:
        _radix2(a, -1)
        _radix2(b, -1)

    a *= b
    _run_radix2(a, 1)
    _unchirp(work, chirp, a, m)

    if sign == 1:
        _swap_real_imaginary(work)


def _transform(work: np.ndarray, sign: int) -> None:
    if is_power_of_two(work.shape[0]):
        _run_radix2(work, sign)
    else:
        _convolve(work, sign)


def bluestein_convolve(samples, sign: int = -1) -> None:
    """
    Unnormalized in-place transform through the chirp convolution, for any length.

    Unlike ``bluestein`` this never shortcuts power-of-two lengths.
    """
    work = acquire(samples)
    _convolve(work, sign)
    release(samples, work)


def bluestein(samples, sign: int = -1) -> None:
    """
    Unnormalized in-place transform of arbitrary length.

    Power-of-two lengths go straight to the radix-2 kernels without padding.

    Parameters
    ----------
    samples : np.ndarray or list of complex
        Sample sequence, N >= 1.
    sign : int
        Exponent sign of the kernel: -1 forward, +1 inverse.
    """
    work = acquire(samples)
    _transform(work, sign)
    release(samples, work)


def bluestein_forward(samples, convention: Convention = Convention.DEFAULT) -> None:
    """Bluestein forward FFT for arbitrary sized sample vectors, in place."""
    work = acquire(samples)
    _transform(work, convention.forward_sign)
    scale_forward(convention, work)
    release(samples, work)


def bluestein_inverse(spectrum, convention: Convention = Convention.DEFAULT) -> None:
    """Bluestein inverse FFT for arbitrary sized sample vectors, in place."""
    work = acquire(spectrum, name="spectrum")
    _transform(work, convention.inverse_sign)
    scale_inverse(convention, work)
    release(spectrum, work)

"""
Complex discrete Fourier transform of arbitrary length, evaluated in place.

Dispatch by length N:
    - power of two:                 radix-2 Cooley-Tukey
    - N <= naive_max_length:        direct summation
    - anything else:                Bluestein chirp-z convolution

The result is then rescaled according to the Convention passed by the caller.

Examples
--------
>>> import numpy as np
>>> x = np.array([1, 0, 0, 0, 0], dtype=np.complex128)
>>> forward(x, Convention(scaling=Scaling.NONE))
>>> x  # array([1.+0.j, 1.+0.j, 1.+0.j, 1.+0.j, 1.+0.j])
"""

import logging
from typing import Union

import numpy as np

from .bluestein import _convolve
from .buffers import acquire, release
from .control import get_control
from .conventions import Convention, scale_forward, scale_inverse
from .naive import _run_naive
from .radix2 import _run_radix2, is_power_of_two

logger = logging.getLogger(__name__)


def _dispatch(work: np.ndarray, sign: int) -> None:
    n = work.shape[0]
    if is_power_of_two(n):
        logger.debug(f"N={n}: radix-2")
        _run_radix2(work, sign)
    elif n <= get_control().naive_max_length:
        logger.debug(f"N={n}: naive")
        work[:] = _run_naive(work, sign)
    else:
        logger.debug(f"N={n}: bluestein")
        _convolve(work, sign)


def forward(samples, convention: Convention = Convention.DEFAULT) -> None:
    """
    Apply the forward FFT to an arbitrary-length sample vector, in place.

    Parameters
    ----------
    samples : np.ndarray or list of complex
        Time-space samples, overwritten with the spectrum.
    convention : Convention
        Exponent sign and scaling (default: forward exponent, symmetric).

    Raises
    ------
    EmptyInputError
        If samples is None or empty.
    """
    work = acquire(samples)
    _dispatch(work, convention.forward_sign)
    scale_forward(convention, work)
    release(samples, work)


def backward(spectrum, convention: Convention = Convention.DEFAULT) -> None:
    """
    Apply the inverse FFT to an arbitrary-length spectrum, in place.

    With the same convention, ``backward(forward(x))`` restores x for the
    symmetric and asymmetric scaling modes.
    """
    work = acquire(spectrum, name="spectrum")
    _dispatch(work, convention.inverse_sign)
    scale_inverse(convention, work)
    release(spectrum, work)


inverse = backward


def _check_part(target, name: str) -> None:
    if isinstance(target, np.ndarray):
        if not np.issubdtype(target.dtype, np.floating):
            raise TypeError(f"{name} must have a floating dtype to be transformed in place, got {target.dtype}")
        if not target.flags.writeable:
            raise ValueError(f"{name} is read-only")
    elif not isinstance(target, list):
        raise TypeError(f"{name} must be mutable (list or np.ndarray), got {type(target).__name__}")


def _split_pair(real, imaginary) -> np.ndarray:
    if real is None or imaginary is None:
        raise ValueError("real and imaginary parts are required")
    # Both targets are checked before any write, so a rejected call leaves them untouched
    _check_part(real, "real")
    _check_part(imaginary, "imaginary")
    if len(real) != len(imaginary):
        raise ValueError(f"Array lengths must match: real {len(real)} != imaginary {len(imaginary)}")
    data = np.asarray(real, dtype=np.float64) + 1j * np.asarray(imaginary, dtype=np.float64)
    if data.ndim != 1:
        raise ValueError(f"Split samples must be 1-D, got shape {data.shape}")
    return data


def _write_part(target, values: np.ndarray) -> None:
    if isinstance(target, np.ndarray):
        target[...] = values
    else:
        target[:] = values.tolist()


def forward_split(real, imaginary, convention: Convention = Convention.DEFAULT) -> None:
    """Forward FFT of samples held as separate real and imaginary arrays, in place."""
    data = _split_pair(real, imaginary)
    forward(data, convention)
    _write_part(real, data.real)
    _write_part(imaginary, data.imag)


def backward_split(real, imaginary, convention: Convention = Convention.DEFAULT) -> None:
    """Inverse FFT of a spectrum held as separate real and imaginary arrays, in place."""
    data = _split_pair(real, imaginary)
    backward(data, convention)
    _write_part(real, data.real)
    _write_part(imaginary, data.imag)


def frequency_scale(length: int, sample_rate: Union[int, float]) -> np.ndarray:
    """
    Frequency of each bin of a spectrum with ``length`` samples.

    Index 0 is DC, followed by the positive frequencies up to the Nyquist
    frequency (sample_rate / 2), then the negative frequencies wrapped around.
    The resolution is sample_rate / length.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if length == 0:
        return np.empty(0, dtype=np.float64)

    bins = np.arange(length)
    bins[length // 2 + 1:] -= length
    return bins * (sample_rate / length)

"""
NumPy-style FFT functions built on the in-place engines.

``fft`` and ``ifft`` follow numpy.fft / scipy.fft semantics: the input is
left untouched, ``n`` zero-pads or truncates the transformed axis, and the
1-D transform is applied along ``axis`` for every other index.

Normalization modes map onto Fourier conventions:
    - "backward": forward unscaled, inverse 1/n  (asymmetric)
    - "ortho":    both 1/sqrt(n)                  (symmetric)
    - "forward":  forward 1/n, inverse unscaled
"""

from typing import Callable, Optional

import numpy as np

from .conventions import Convention, Scaling
from .fourier import forward, backward


def _convention(norm: str) -> Convention:
    if norm == "backward":
        return Convention.MATLAB
    if norm == "ortho":
        return Convention.DEFAULT
    if norm == "forward":
        return Convention(scaling=Scaling.NONE)
    raise ValueError(f'Invalid norm value {norm}; should be "backward", "ortho" or "forward".')


def _transform_axis(
    x: np.ndarray,
    n: Optional[int],
    axis: int,
    transform: Callable,
    convention: Convention
) -> np.ndarray:
    x = np.asarray(x)

    if n is None:
        n = x.shape[axis]
    if n < 1:
        raise ValueError(f"Invalid number of FFT data points ({n}) specified.")

    # Move target axis to the last position
    x = np.moveaxis(x, axis, -1)

    # Pad or truncate to desired length
    if x.shape[-1] < n:
        pad_width = [(0, 0)] * (x.ndim - 1) + [(0, n - x.shape[-1])]
        x = np.pad(x, pad_width, mode='constant', constant_values=0)
    elif x.shape[-1] > n:
        x = x[..., :n]

    # Fresh C-ordered copy, so every row is a contiguous view the engines can mutate
    result = np.array(x, dtype=np.complex128, order='C')
    for row in result.reshape(-1, n):
        transform(row, convention)

    return np.moveaxis(result, -1, axis)


def fft(x: np.ndarray, n: Optional[int] = None, axis: int = -1, norm: str = "backward") -> np.ndarray:
    """
    Compute the 1-D discrete Fourier Transform for any length.

    Parameters
    ----------
    x : np.ndarray
        Input array
    n : int, optional
        Length of the transformed axis. If None, uses the length of x.
    axis : int
        Axis along which to compute the FFT (default: -1)
    norm : str
        Normalization mode: "backward", "ortho", or "forward"

    Returns
    -------
    np.ndarray
        The transformed array

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5])
    >>> X = fft(x)
    >>> # Should match scipy.fft.fft(x)
    """
    result = _transform_axis(x, n, axis, forward, _convention(norm))
    if norm == "forward":
        result /= result.shape[axis]
    return result


def ifft(x: np.ndarray, n: Optional[int] = None, axis: int = -1, norm: str = "backward") -> np.ndarray:
    """Compute the 1-D inverse discrete Fourier Transform for any length."""
    return _transform_axis(x, n, axis, backward, _convention(norm))

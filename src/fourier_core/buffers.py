"""
Sample buffer handling shared by the public transform functions.

Transforms are in place: the caller owns the buffer and the engines only
borrow it. The JIT kernels need a contiguous complex128 array, so other
buffers are computed in a complex128 working copy and written back.
"""

from collections.abc import Sequence

import numpy as np

from .errors import EmptyInputError


def acquire(samples, name: str = "samples") -> np.ndarray:
    """
    Return a complex128 working array for an in-place transform.

    The array is ``samples`` itself when it already fits the kernels,
    otherwise a copy that ``release`` writes back.
    """
    if samples is None:
        raise EmptyInputError(name)

    if isinstance(samples, np.ndarray):
        if samples.ndim != 1:
            raise ValueError(f"{name} must be 1-D, got shape {samples.shape}")
        if samples.size == 0:
            raise EmptyInputError(name)
        if not np.iscomplexobj(samples):
            raise TypeError(f"{name} must have a complex dtype to be transformed in place, got {samples.dtype}")
        if not samples.flags.writeable:
            raise ValueError(f"{name} is read-only")
        if samples.dtype == np.complex128 and samples.flags.c_contiguous:
            return samples
        return samples.astype(np.complex128)

    if isinstance(samples, list):
        if len(samples) == 0:
            raise EmptyInputError(name)
        work = np.array(samples, dtype=np.complex128)
        if work.ndim != 1:
            raise ValueError(f"{name} must be 1-D, got shape {work.shape}")
        return work

    if isinstance(samples, Sequence):
        raise TypeError(f"{name} must be mutable (list or np.ndarray), got {type(samples).__name__}")
    raise TypeError(f"Unsupported {name} type: {type(samples).__name__}")


def release(samples, work: np.ndarray) -> None:
    """Write a working copy back into the caller's buffer."""
    if work is samples:
        return
    if isinstance(samples, np.ndarray):
        samples[...] = work
    else:
        samples[:] = work.tolist()


def copy_samples(samples, name: str = "samples") -> np.ndarray:
    """Complex128 copy of any 1-D sequence, for transforms that return new arrays."""
    if samples is None:
        raise EmptyInputError(name)

    result = np.array(samples, dtype=np.complex128)
    if result.ndim != 1:
        raise ValueError(f"{name} must be 1-D, got shape {result.shape}")
    if result.size == 0:
        raise EmptyInputError(name)
    return result

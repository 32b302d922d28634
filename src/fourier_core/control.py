"""
Concurrency and configuration control for the transform engines.

The engines never read ambient state except the settings held here, and those
only decide *how* a transform runs (sequential or parallel kernels, naive
cut-over for tiny lengths), never *what* it computes. Conventions are always
passed explicitly.

Settings can be loaded from a YAML file with a ``fourier`` section:

    fourier:
      max_degree_of_parallelism: 4
      parallel_min_length: 1024
      naive_max_length: 3
"""

import logging
from dataclasses import dataclass, asdict, fields, replace
from typing import Union
from pathlib import Path

import numba
import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FourierControl:
    """Thread-pool and dispatch settings."""
    # Upper bound on Numba worker threads; values below 2 disable parallel kernels
    max_degree_of_parallelism: int = numba.config.NUMBA_NUM_THREADS
    # Shortest sequence that is worth a parallel kernel
    parallel_min_length: int = 1024
    # Non-power-of-two lengths up to this one use the direct O(n^2) sum
    naive_max_length: int = 3

    def __post_init__(self):
        if self.max_degree_of_parallelism < 1:
            raise ValueError(
                f"max_degree_of_parallelism must be >= 1, got {self.max_degree_of_parallelism}"
            )
        if self.parallel_min_length < 1:
            raise ValueError(f"parallel_min_length must be >= 1, got {self.parallel_min_length}")
        if self.naive_max_length < 0:
            raise ValueError(f"naive_max_length must be >= 0, got {self.naive_max_length}")

    def to_dict(self) -> dict:
        return asdict(self)


_control = FourierControl()


def get_control() -> FourierControl:
    """Return the active settings."""
    return _control


def set_control(control: FourierControl) -> None:
    """Replace the active settings."""
    global _control
    if not isinstance(control, FourierControl):
        raise TypeError(f"Expected FourierControl, got {type(control).__name__}")
    _control = control
    logger.debug(f"Fourier control updated: {control.to_dict()}")


def configure(**overrides) -> FourierControl:
    """
    Update selected settings, keeping the others.

    Examples
    --------
    >>> configure(max_degree_of_parallelism=1)  # force sequential kernels
    """
    control = replace(_control, **overrides)
    set_control(control)
    return control


def load_control(config_path: Union[str, Path]) -> FourierControl:
    """
    Read settings from the ``fourier`` section of a YAML file.

    Missing keys keep their defaults; unknown keys raise ValueError.
    """
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    section = config.get('fourier') or {}
    known = {field.name for field in fields(FourierControl)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown fourier settings in {config_path}: {unknown}")

    return FourierControl(**section)


def use_parallel(length: int) -> bool:
    """
    Decide whether a transform of ``length`` samples runs the parallel kernels.

    When it does, the Numba thread count of the calling thread is pinned to
    the configured degree of parallelism.
    """
    control = _control
    if length < control.parallel_min_length:
        return False

    threads = min(control.max_degree_of_parallelism, numba.config.NUMBA_NUM_THREADS)
    if threads < 2:
        return False

    numba.set_num_threads(threads)
    return True

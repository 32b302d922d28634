"""
Fourier transform conventions and the scaling policy.

A convention fixes two independent choices:
    - the exponent sign of the forward kernel, exp(-i...) or exp(+i...)
    - how forward and inverse results are rescaled

Scaling modes:
    - NONE:        raw sums in both directions
    - SYMMETRIC:   both directions multiply by sqrt(1/N) (unitary, Parseval holds)
    - ASYMMETRIC:  forward unscaled, inverse multiplied by 1/N (usual DSP choice)
"""

import math
from enum import Enum
from dataclasses import dataclass

import numpy as np


class ExponentSign(Enum):
    """Sign of the exponent used by the forward transform."""
    FORWARD = -1
    INVERSE = 1


class Scaling(Enum):
    NONE = 'none'
    SYMMETRIC = 'symmetric'
    ASYMMETRIC = 'asymmetric'


@dataclass(frozen=True)
class Convention:
    """
    Immutable (exponent sign, scaling) pair.

    Named presets:
        Convention.DEFAULT            forward exponent, symmetric scaling
        Convention.MATLAB             forward exponent, asymmetric scaling
        Convention.NUMERICAL_RECIPES  inverse exponent, no scaling
    """
    exponent: ExponentSign = ExponentSign.FORWARD
    scaling: Scaling = Scaling.SYMMETRIC

    @property
    def forward_sign(self) -> int:
        return self.exponent.value

    @property
    def inverse_sign(self) -> int:
        return -self.exponent.value

    @classmethod
    def from_name(cls, name: str) -> 'Convention':
        """
        Look up a convention by name.

        Accepts the preset names ('default', 'matlab', 'numerical_recipes')
        and the bare scaling modes ('none', 'symmetric', 'asymmetric'), the
        latter with the forward exponent.
        """
        key = name.strip().lower().replace('-', '_')
        if key in _PRESETS:
            return _PRESETS[key]
        try:
            return cls(scaling=Scaling(key))
        except ValueError:
            raise ValueError(f"Unknown Fourier convention: {name}") from None


Convention.DEFAULT = Convention()
Convention.MATLAB = Convention(scaling=Scaling.ASYMMETRIC)
Convention.NUMERICAL_RECIPES = Convention(exponent=ExponentSign.INVERSE, scaling=Scaling.NONE)

_PRESETS = {
    'default': Convention.DEFAULT,
    'matlab': Convention.MATLAB,
    'numerical_recipes': Convention.NUMERICAL_RECIPES,
}


def scale_forward(convention: Convention, samples: np.ndarray) -> None:
    """Rescale a forward-transform result in place."""
    if convention.scaling is not Scaling.SYMMETRIC:
        return
    samples *= math.sqrt(1.0 / samples.shape[0])


def scale_inverse(convention: Convention, samples: np.ndarray) -> None:
    """Rescale an inverse-transform result in place."""
    if convention.scaling is Scaling.NONE:
        return

    factor = 1.0 / samples.shape[0]
    if convention.scaling is Scaling.SYMMETRIC:
        factor = math.sqrt(factor)
    samples *= factor

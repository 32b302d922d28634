"""
Fourier Core - Hand-written complex DFT engines

From-scratch implementations of the one-dimensional complex discrete Fourier
transform, JIT compiled with Numba and checked against scipy.fft.

Modules:
    - radix2: Radix-2 Cooley-Tukey FFT for power-of-two lengths
    - bluestein: Chirp-z convolution for arbitrary lengths
    - naive: Direct O(N^2) reference DFT
    - conventions: Exponent sign and scaling conventions
    - fourier: In-place entry points with length dispatch
    - fft: NumPy-style fft / ifft
    - control: Thread-pool and dispatch settings
"""

from .errors import FourierError, InvalidLengthError, EmptyInputError
from .conventions import Convention, ExponentSign, Scaling
from .control import FourierControl, get_control, set_control, configure, load_control
from .twiddle import twiddle_factor
from .radix2 import radix2, radix2_forward, radix2_inverse, is_power_of_two, ceiling_to_power_of_two
from .bluestein import bluestein, bluestein_convolve, bluestein_chirp, bluestein_forward, bluestein_inverse
from .naive import naive, naive_forward, naive_inverse
from .fourier import forward, backward, inverse, forward_split, backward_split, frequency_scale
from .fft import fft, ifft

__all__ = [
    # Entry points
    'forward',
    'backward',
    'inverse',
    'forward_split',
    'backward_split',
    'frequency_scale',
    'fft',
    'ifft',
    # Engines
    'radix2',
    'radix2_forward',
    'radix2_inverse',
    'bluestein',
    'bluestein_convolve',
    'bluestein_chirp',
    'bluestein_forward',
    'bluestein_inverse',
    'naive',
    'naive_forward',
    'naive_inverse',
    'twiddle_factor',
    'is_power_of_two',
    'ceiling_to_power_of_two',
    # Conventions
    'Convention',
    'ExponentSign',
    'Scaling',
    # Control
    'FourierControl',
    'get_control',
    'set_control',
    'configure',
    'load_control',
    # Errors
    'FourierError',
    'InvalidLengthError',
    'EmptyInputError',
]

__version__ = '1.0.0'

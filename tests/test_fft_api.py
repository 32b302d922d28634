"""
Tests for the NumPy-style fft / ifft wrappers and frequency helpers.

Run:
    pytest tests/test_fft_api.py -v
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest
from scipy.fft import fft as scipy_fft, ifft as scipy_ifft

from fourier_core import (
    Convention,
    backward_split,
    fft,
    forward_split,
    frequency_scale,
    ifft,
)


class TestFFTAPI:
    """fft / ifft compared with scipy.fft."""

    @pytest.mark.parametrize("norm", ["backward", "ortho", "forward"])
    def test_fft_matches_scipy(self, norm):
        for N in [1, 7, 64, 100, 1000]:
            x = np.random.randn(N) + 1j * np.random.randn(N)
            error = np.abs(fft(x, norm=norm) - scipy_fft(x, norm=norm))
            assert error.max() < 1e-10, f"fft failed for N={N}, norm={norm}"

    @pytest.mark.parametrize("norm", ["backward", "ortho", "forward"])
    def test_ifft_matches_scipy(self, norm):
        for N in [1, 9, 128, 500]:
            x = np.random.randn(N) + 1j * np.random.randn(N)
            error = np.abs(ifft(x, norm=norm) - scipy_ifft(x, norm=norm))
            assert error.max() < 1e-10, f"ifft failed for N={N}, norm={norm}"

    def test_real_input(self):
        x = np.random.randn(250)
        X = fft(x)
        assert X.dtype == np.complex128
        assert np.abs(X - scipy_fft(x)).max() < 1e-10

    def test_sine_wave(self):
        sr = 1000
        freq = 10.0
        t = np.arange(sr) / sr
        x = np.sin(2 * np.pi * freq * t)

        X = fft(x)
        peak = int(np.argmax(np.abs(X[:sr // 2])))
        assert peak == 10
        assert np.abs(X - scipy_fft(x)).max() < 1e-9

    def test_input_is_not_modified(self):
        x = np.random.randn(16) + 1j * np.random.randn(16)
        original = x.copy()
        _ = fft(x)
        _ = ifft(x)
        assert np.array_equal(x, original)

    def test_padding_and_truncation(self):
        x = np.random.randn(10)
        assert np.abs(fft(x, n=16) - scipy_fft(x, n=16)).max() < 1e-10
        assert np.abs(fft(x, n=6) - scipy_fft(x, n=6)).max() < 1e-10

    def test_axis(self):
        x = np.random.randn(5, 12)
        for axis in [0, 1, -1]:
            error = np.abs(fft(x, axis=axis) - scipy_fft(x, axis=axis))
            assert error.max() < 1e-10, f"fft failed for axis={axis}"

    def test_round_trip(self):
        x = np.random.randn(3, 33) + 1j * np.random.randn(3, 33)
        assert np.allclose(ifft(fft(x)), x, atol=1e-12)

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            fft(np.ones(4), n=0)
        with pytest.raises(ValueError):
            fft(np.ones(4), norm="unitary")


class TestSplitArrays:
    """Transforms on separate real / imaginary arrays."""

    def test_forward_split_matches_complex(self):
        real = np.random.randn(20)
        imaginary = np.random.randn(20)
        expected = scipy_fft(real + 1j * imaginary)

        forward_split(real, imaginary, Convention.MATLAB)
        assert np.allclose(real, expected.real, atol=1e-10)
        assert np.allclose(imaginary, expected.imag, atol=1e-10)

    def test_split_round_trip_with_lists(self):
        real = [1.0, 2.0, 3.0]
        imaginary = [0.0, -1.0, 0.5]
        forward_split(real, imaginary)
        backward_split(real, imaginary)
        assert np.allclose(real, [1.0, 2.0, 3.0])
        assert np.allclose(imaginary, [0.0, -1.0, 0.5])

    def test_rejects_integer_arrays(self):
        real = np.array([1, 2, 3], dtype=np.int64)
        imaginary = np.zeros(3, dtype=np.int64)
        with pytest.raises(TypeError, match="floating dtype"):
            forward_split(real, imaginary, Convention.MATLAB)
        assert np.array_equal(real, [1, 2, 3])
        assert np.array_equal(imaginary, [0, 0, 0])

    def test_rejected_call_leaves_real_part_unchanged(self):
        real = [1.0, 2.0, 3.0]
        imaginary = (0.0, 0.0, 0.0)
        with pytest.raises(TypeError):
            forward_split(real, imaginary, Convention.MATLAB)
        assert real == [1.0, 2.0, 3.0]

        read_only = np.zeros(3)
        read_only.flags.writeable = False
        with pytest.raises(ValueError):
            backward_split(real, read_only)
        assert real == [1.0, 2.0, 3.0]

    def test_float32_arrays(self):
        real = np.array([1.0, 1.0, 1.0, 1.0], dtype=np.float32)
        imaginary = np.zeros(4, dtype=np.float32)
        forward_split(real, imaginary, Convention.MATLAB)
        assert np.allclose(real, [4, 0, 0, 0], atol=1e-6)
        assert np.allclose(imaginary, 0, atol=1e-6)

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="lengths must match"):
            forward_split(np.ones(4), np.ones(3))


class TestFrequencyScale:
    """Bin frequencies."""

    def test_even_length(self):
        assert np.allclose(frequency_scale(4, 8.0), [0.0, 2.0, 4.0, -2.0])

    def test_odd_length_matches_fftfreq(self):
        assert np.allclose(frequency_scale(5, 5.0), np.fft.fftfreq(5, d=1 / 5.0))

    def test_resolution(self):
        scale = frequency_scale(1000, 44100)
        assert scale[0] == 0.0
        assert np.isclose(scale[1], 44.1)
        assert np.isclose(scale[500], 22050.0)
        assert np.isclose(scale[-1], -44.1)

    def test_invalid(self):
        assert frequency_scale(0, 10.0).shape == (0,)
        with pytest.raises(ValueError):
            frequency_scale(-1, 10.0)
        with pytest.raises(ValueError):
            frequency_scale(8, 0.0)

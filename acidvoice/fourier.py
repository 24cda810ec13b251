"""Radix-2 Fourier transforms for complex buffers and real signals."""

from __future__ import annotations

import math
from enum import IntEnum
from collections.abc import Sequence

import numpy as np


class Direction(IntEnum):
    """Direction of the transform."""

    FORWARD = 0
    INVERSE = 1


class NormalizationMode(IntEnum):
    """Where the 1/N scaling is applied."""

    NORMALIZE_ON_FORWARD = 0
    NORMALIZE_ON_INVERSE = 1
    ORTHONORMAL = 2


class FourierTransformer:
    """FFT of a power-of-two block size.

    Real signals use a packed spectrum layout of length N: index 0 holds the
    (real) DC value, index 1 the (real) Nyquist value, and indices 2k, 2k+1
    hold the real and imaginary parts of bin k for k = 1 ... N/2 - 1.
    """

    def __init__(
        self,
        block_size: int = 256,
        direction: Direction = Direction.FORWARD,
        normalization_mode: NormalizationMode = NormalizationMode.NORMALIZE_ON_INVERSE,
    ) -> None:
        self._n = 0
        self._direction = Direction.FORWARD
        self._normalization_mode = NormalizationMode.NORMALIZE_ON_INVERSE
        self._normalization_factor = 1.0
        self.block_size = block_size
        self.direction = direction
        self.normalization_mode = normalization_mode

    @property
    def block_size(self) -> int:
        """The FFT size: a power of two that is at least 2."""
        return self._n

    @block_size.setter
    def block_size(self, value: int) -> None:
        value = int(value)
        if value < 2 or value & (value - 1):
            raise ValueError(f"block size must be a power of two >= 2, got {value}")
        if value != self._n:
            self._n = value
            self._update_normalization_factor()

    @property
    def log_n(self) -> int:
        """Base-2 logarithm of the block size."""
        return self._n.bit_length() - 1

    @property
    def direction(self) -> Direction:
        """The direction used by :meth:`transform_complex`."""
        return self._direction

    @direction.setter
    def direction(self, value: int) -> None:
        direction = Direction(value)
        if direction != self._direction:
            self._direction = direction
            self._update_normalization_factor()

    @property
    def normalization_mode(self) -> NormalizationMode:
        """Which transform carries the scaling (see :class:`NormalizationMode`)."""
        return self._normalization_mode

    @normalization_mode.setter
    def normalization_mode(self, value: int) -> None:
        self._normalization_mode = NormalizationMode(value)
        self._update_normalization_factor()

    @property
    def normalization_factor(self) -> float:
        """The factor applied to the input: 1, 1/N or 1/sqrt(N)."""
        return self._normalization_factor

    # complex transforms

    def transform_complex(self, buffer: Sequence) -> np.ndarray:
        """Return the forward or inverse transform of a complex buffer of length N."""
        data = self._checked(buffer, complex) * self._normalization_factor
        if self._direction == Direction.FORWARD:
            return np.fft.fft(data)
        return np.fft.ifft(data) * self._n

    # real signals

    def transform_real_signal(self, signal: Sequence) -> np.ndarray:
        """Return the packed spectrum of a real signal of length N."""
        self.direction = Direction.FORWARD
        data = self._checked(signal, float) * self._normalization_factor
        spectrum = np.fft.rfft(data)
        packed = np.empty(self._n)
        packed[0] = spectrum[0].real
        packed[1] = spectrum[-1].real
        packed[2::2] = spectrum[1:-1].real
        packed[3::2] = spectrum[1:-1].imag
        return packed

    def real_signal_magnitudes_and_phases(self, signal: Sequence) -> tuple[np.ndarray, np.ndarray]:
        """Return magnitudes and phases of bins 0 ... N/2 - 1.

        Entry 0 of the magnitudes holds the DC value and entry 0 of the phases
        holds the Nyquist value, both real and signed.
        """
        packed = self.transform_real_signal(signal)
        re = packed[2::2]
        im = packed[3::2]
        magnitudes = np.empty(self._n // 2)
        phases = np.empty(self._n // 2)
        magnitudes[0] = packed[0]
        phases[0] = packed[1]
        magnitudes[1:] = np.hypot(re, im)
        phases[1:] = np.where((re == 0.0) & (im == 0.0), 0.0, np.arctan2(im, re))
        return magnitudes, phases

    def real_signal_magnitudes(self, signal: Sequence) -> np.ndarray:
        """Return magnitudes of bins 0 ... N/2 - 1 (entry 0 is the signed DC value)."""
        packed = self.transform_real_signal(signal)
        magnitudes = np.empty(self._n // 2)
        magnitudes[0] = packed[0]
        magnitudes[1:] = np.hypot(packed[2::2], packed[3::2])
        return magnitudes

    def transform_symmetric_spectrum(self, re_and_im: Sequence) -> np.ndarray:
        """Return the real signal whose packed spectrum is given."""
        self.direction = Direction.INVERSE
        packed = self._checked(re_and_im, float)
        spectrum = np.empty(self._n // 2 + 1, dtype=complex)
        spectrum[0] = packed[0]
        spectrum[-1] = packed[1]
        spectrum[1:-1] = packed[2::2] + 1j * packed[3::2]
        spectrum *= self._normalization_factor
        return np.fft.irfft(spectrum, n=self._n) * self._n

    def real_signal_from_magnitudes_and_phases(
        self, magnitudes: Sequence, phases: Sequence
    ) -> np.ndarray:
        """Return the real signal built from N/2 magnitudes and phases.

        The layout matches :meth:`real_signal_magnitudes_and_phases`.
        """
        half = self._n // 2
        mags = np.asarray(magnitudes, dtype=float)
        phs = np.asarray(phases, dtype=float)
        if mags.shape != (half,) or phs.shape != (half,):
            raise ValueError(f"magnitudes and phases must each have length {half}")
        packed = np.empty(self._n)
        packed[0] = mags[0]
        packed[1] = phs[0]
        packed[2::2] = mags[1:] * np.cos(phs[1:])
        packed[3::2] = mags[1:] * np.sin(phs[1:])
        return self.transform_symmetric_spectrum(packed)

    @staticmethod
    def bin_index_to_frequency(bin_index: int, fft_size: int, sample_rate: float) -> float:
        """Return the frequency in Hz of a bin for the given FFT size and sample rate."""
        return bin_index * sample_rate / fft_size

    # internals

    def _checked(self, values: Sequence, dtype: type) -> np.ndarray:
        data = np.array(values, dtype=dtype)
        if data.shape != (self._n,):
            raise ValueError(f"expected {self._n} values, got shape {data.shape}")
        return data

    def _update_normalization_factor(self) -> None:
        mode = self._normalization_mode
        direction = self._direction
        if (mode == NormalizationMode.NORMALIZE_ON_FORWARD and direction == Direction.FORWARD) or (
            mode == NormalizationMode.NORMALIZE_ON_INVERSE and direction == Direction.INVERSE
        ):
            self._normalization_factor = 1.0 / self._n
        elif mode == NormalizationMode.ORTHONORMAL:
            self._normalization_factor = 1.0 / math.sqrt(self._n)
        else:
            self._normalization_factor = 1.0
"""Single-cycle waveforms stored as a mip-map of progressively band-limited tables."""

from __future__ import annotations

import math
from enum import IntEnum

import numpy as np

from .buffers import circular_shift
from .fourier import FourierTransformer
from .realfunctions import amp_to_db, clip, db_to_amp


class Waveform(IntEnum):
    """Built-in waveforms; values not listed here render as a sine."""

    SILENCE = 0
    SINE = 1
    TRIANGLE = 2
    SQUARE = 3
    SAW = 4
    SQUARE303 = 5
    SAW303 = 6


def _round_to_int(x: float) -> int:
    return math.floor(x + 0.5)


class MipMappedWaveTable:
    """A waveform rendered into one table per octave for alias-free playback.

    Table 0 holds the full-bandwidth prototype; each following table keeps half
    the spectrum of the one before it. Every table carries four guard samples
    after its end that repeat its first four samples, for interpolation.
    """

    TABLE_LENGTH = 2048
    NUM_TABLES = 12
    GUARD_SAMPLES = 4

    def __init__(self) -> None:
        self.sample_rate = 44100.0
        self._waveform = int(Waveform.SILENCE)
        self._symmetry = 0.5
        self._tanh_shaper_factor = db_to_amp(36.9)
        self._tanh_shaper_offset = 4.37
        self._square_phase_shift = 180.0
        self._fourier = FourierTransformer(self.TABLE_LENGTH)
        self._tables = np.zeros((self.NUM_TABLES, self.TABLE_LENGTH + self.GUARD_SAMPLES))

    # parameters

    @property
    def waveform(self) -> int:
        """The selected built-in waveform; negative values are ignored."""
        return self._waveform

    @waveform.setter
    def waveform(self, value: int) -> None:
        value = int(value)
        if value >= 0 and value != self._waveform:
            self._waveform = value
            self._render_waveform()

    @property
    def symmetry(self) -> float:
        """Time split between the two half-waves (0...1); pulse width for the square."""
        return self._symmetry

    @symmetry.setter
    def symmetry(self, value: float) -> None:
        self._symmetry = value
        self._render_waveform()

    @property
    def tanh_shaper_drive(self) -> float:
        """Drive in dB of the tanh shaper that forms the 303 square wave."""
        return amp_to_db(self._tanh_shaper_factor)

    @tanh_shaper_drive.setter
    def tanh_shaper_drive(self, value: float) -> None:
        self._tanh_shaper_factor = db_to_amp(value)
        self._fill_with_square303()

    @property
    def tanh_shaper_offset(self) -> float:
        """Raw offset added before the tanh shaper of the 303 square wave."""
        return self._tanh_shaper_offset

    @tanh_shaper_offset.setter
    def tanh_shaper_offset(self, value: float) -> None:
        self._tanh_shaper_offset = value
        self._fill_with_square303()

    @property
    def square_phase_shift(self) -> float:
        """Phase shift in degrees of the 303 square relative to the saw."""
        return self._square_phase_shift

    @square_phase_shift.setter
    def square_phase_shift(self, value: float) -> None:
        self._square_phase_shift = value
        self._fill_with_square303()

    # lookup

    def table(self, index: int) -> np.ndarray:
        """Return a copy of table ``index`` including its guard samples."""
        if not 0 <= index < self.NUM_TABLES:
            raise IndexError(f"table index must be in 0...{self.NUM_TABLES - 1}, got {index}")
        return self._tables[index].copy()

    def value_at(self, integer_part: int, fractional_part: float, table_index: int) -> float:
        """Linearly interpolate table ``table_index`` at ``integer_part + fractional_part``."""
        if table_index <= 0:
            table_index = 0
        elif table_index >= self.NUM_TABLES:
            table_index = self.NUM_TABLES - 1
        row = self._tables[table_index]
        return float(
            (1.0 - fractional_part) * row[integer_part] + fractional_part * row[integer_part + 1]
        )

    def value_linear(self, phase_index: float, table_index: int) -> float:
        """Linearly interpolate table ``table_index`` at a fractional position."""
        int_index = math.floor(phase_index)
        return self.value_at(int_index, phase_index - int_index, table_index)

    # rendering

    def _render_waveform(self) -> None:
        renderers = {
            Waveform.SINE: self._fill_with_sine,
            Waveform.TRIANGLE: self._fill_with_triangle,
            Waveform.SQUARE: self._fill_with_square,
            Waveform.SAW: self._fill_with_saw,
            Waveform.SQUARE303: self._fill_with_square303,
            Waveform.SAW303: self._fill_with_saw303,
        }
        renderers.get(self._waveform, self._fill_with_sine)()

    def _store(self, index: int, values: np.ndarray) -> None:
        n = self.TABLE_LENGTH
        row = self._tables[index]
        row[:n] = values
        row[n:] = row[: self.GUARD_SAMPLES]

    def _generate_mip_map(self, prototype: np.ndarray) -> None:
        n = self.TABLE_LENGTH
        self._store(0, prototype)

        spectrum = self._fourier.transform_real_signal(prototype)
        spectrum[0] = 0.0
        spectrum[1] = 0.0

        for t in range(1, self.NUM_TABLES):
            low = int(n / 2.0**t)
            high = int(n / 2.0 ** (t - 1))
            spectrum[low:high] = 0.0
            self._store(t, self._fourier.transform_symmetric_spectrum(spectrum))

    def _split_index(self, symmetry: float) -> int:
        n = self.TABLE_LENGTH
        return clip(_round_to_int(symmetry * (n - 1)), 1, n - 1)

    def _saw_prototype(self, symmetry: float) -> np.ndarray:
        n = self.TABLE_LENGTH
        n1 = self._split_index(symmetry)
        n2 = n - n1
        idx = np.arange(n, dtype=float)
        if n1 > 1:
            rising = (1.0 / (n1 - 1)) * idx[:n1]
        else:
            rising = np.zeros(1)
        falling = -1.0 + (1.0 / n2) * (idx[n1:] - n1)
        return np.concatenate((rising, falling))

    def _fill_with_sine(self) -> None:
        n = self.TABLE_LENGTH
        self._generate_mip_map(np.sin(2.0 * math.pi * np.arange(n) / n))

    def _fill_with_triangle(self) -> None:
        n = self.TABLE_LENGTH
        ramp = 4.0 * np.arange(n) / n
        prototype = np.empty(n)
        q1, q3 = n // 4, 3 * n // 4
        prototype[:q1] = ramp[:q1]
        prototype[q1:q3] = 2.0 - ramp[q1:q3]
        prototype[q3:] = -4.0 + ramp[q3:]
        self._generate_mip_map(prototype)

    def _fill_with_square(self) -> None:
        n = self.TABLE_LENGTH
        n1 = self._split_index(self._symmetry)
        prototype = np.full(n, -1.0)
        prototype[:n1] = 1.0
        self._generate_mip_map(prototype)

    def _fill_with_saw(self) -> None:
        self._generate_mip_map(self._saw_prototype(self._symmetry))

    def _fill_with_square303(self) -> None:
        n = self.TABLE_LENGTH
        saw = self._saw_prototype(0.5)
        shaped = -np.tanh(self._tanh_shaper_factor * saw + self._tanh_shaper_offset)
        shift = _round_to_int(n * self._square_phase_shift / 360.0)
        self._generate_mip_map(np.array(circular_shift(shaped, shift)))

    def _fill_with_saw303(self) -> None:
        self._generate_mip_map(self._saw_prototype(0.5))
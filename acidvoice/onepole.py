"""A first-order filter unit with lowpass, highpass, shelving and allpass modes."""

from __future__ import annotations

import math
from enum import IntEnum

from .realfunctions import PI, TINY, db_to_amp


class OnePoleMode(IntEnum):
    """Available filter modes; any other value acts as bypass."""

    BYPASS = 0
    LOWPASS = 1
    HIGHPASS = 2
    LOWSHELV = 3
    HIGHSHELV = 4
    ALLPASS = 5


class OnePoleFilter:
    """A one-pole/one-zero filter: y[n] = b0*x[n] + b1*x[n-1] + a1*y[n-1]."""

    MAX_CUTOFF = 20000.0

    def __init__(
        self,
        sample_rate: float = 44100.0,
        mode: int = OnePoleMode.BYPASS,
        cutoff: float = 20000.0,
    ) -> None:
        self._shelving_gain = 1.0
        self._sample_rate = 44100.0
        self._sample_rate_rec = 1.0 / self._sample_rate
        self._mode = int(mode)
        self._cutoff = self.MAX_CUTOFF
        self.b0 = 1.0
        self.b1 = 0.0
        self.a1 = 0.0
        self.x1 = 0.0
        self.y1 = 0.0
        self.sample_rate = sample_rate
        self.mode = mode
        self.cutoff = cutoff
        self.reset()

    @property
    def sample_rate(self) -> float:
        """The sample rate in Hz; non-positive values are ignored."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        if value > 0.0:
            self._sample_rate = value
        self._sample_rate_rec = 1.0 / self._sample_rate
        self._calc_coeffs()

    @property
    def mode(self) -> int:
        """The filter mode (see :class:`OnePoleMode`)."""
        return self._mode

    @mode.setter
    def mode(self, value: int) -> None:
        self._mode = int(value)
        self._calc_coeffs()

    @property
    def cutoff(self) -> float:
        """The cutoff frequency in Hz; values outside (0, 20000] fall back to 20000."""
        return self._cutoff

    @cutoff.setter
    def cutoff(self, value: float) -> None:
        if 0.0 < value <= self.MAX_CUTOFF:
            self._cutoff = value
        else:
            self._cutoff = self.MAX_CUTOFF
        self._calc_coeffs()

    @property
    def shelving_gain(self) -> float:
        """The linear gain factor used by the shelving modes."""
        return self._shelving_gain

    @shelving_gain.setter
    def shelving_gain(self, value: float) -> None:
        if value <= 0.0:
            raise ValueError(f"shelving gain must be positive, got {value}")
        self._shelving_gain = value
        self._calc_coeffs()

    @property
    def shelving_gain_db(self) -> float:
        """The shelving gain in decibels."""
        return 20.0 * math.log10(self._shelving_gain)

    @shelving_gain_db.setter
    def shelving_gain_db(self, value: float) -> None:
        self.shelving_gain = db_to_amp(value)

    @property
    def coefficients(self) -> tuple[float, float, float]:
        """The current ``(b0, b1, a1)`` coefficients."""
        return self.b0, self.b1, self.a1

    def set_lowpass_time_constant(self, time_constant: float) -> None:
        """Set the cutoff from a lowpass time constant in seconds."""
        self.cutoff = 1.0 / (2 * PI * time_constant)

    def set_coefficients(self, b0: float, b1: float, a1: float) -> None:
        """Set the filter coefficients directly."""
        self.b0 = b0
        self.b1 = b1
        self.a1 = a1

    def set_internal_state(self, x1: float, y1: float) -> None:
        """Set the remembered previous input and output samples."""
        self.x1 = x1
        self.y1 = y1

    def get_sample(self, x: float) -> float:
        """Filter one input sample and return the output sample."""
        self.y1 = self.b0 * x + self.b1 * self.x1 + self.a1 * self.y1 + TINY
        self.x1 = x
        return self.y1

    def reset(self) -> None:
        """Clear the remembered samples."""
        self.x1 = 0.0
        self.y1 = 0.0

    def _calc_coeffs(self) -> None:
        mode = self._mode
        cutoff = self._cutoff
        rec = self._sample_rate_rec
        gain = self._shelving_gain
        if mode == OnePoleMode.LOWPASS:
            x = math.exp(-2.0 * PI * cutoff * rec)
            self.b0, self.b1, self.a1 = 1 - x, 0.0, x
        elif mode == OnePoleMode.HIGHPASS:
            x = math.exp(-2.0 * PI * cutoff * rec)
            self.b0, self.b1, self.a1 = 0.5 * (1 + x), -0.5 * (1 + x), x
        elif mode == OnePoleMode.LOWSHELV:
            c = 0.5 * (gain - 1.0)
            t = math.tan(PI * cutoff * rec)
            if gain >= 1.0:
                a = (t - 1.0) / (t + 1.0)
            else:
                a = (t - gain) / (t + gain)
            self.b0, self.b1, self.a1 = 1.0 + c + c * a, c + c * a + a, -a
        elif mode == OnePoleMode.HIGHSHELV:
            c = 0.5 * (gain - 1.0)
            t = math.tan(PI * cutoff * rec)
            if gain >= 1.0:
                a = (t - 1.0) / (t + 1.0)
            else:
                a = (gain * t - 1.0) / (gain * t + 1.0)
            self.b0, self.b1, self.a1 = 1.0 + c - c * a, a + c * a - c, -a
        elif mode == OnePoleMode.ALLPASS:
            t = math.tan(PI * cutoff * rec)
            x = (t - 1.0) / (t + 1.0)
            self.b0, self.b1, self.a1 = x, 1.0, -x
        else:
            self.b0, self.b1, self.a1 = 1.0, 0.0, 0.0
"""A leaky-integrator lowpass with its time constant given in milliseconds."""

from __future__ import annotations

import math


def _c_pow(base: float, exponent: float) -> float:
    # A negative base with a non-integral exponent has no real result: NaN.
    if base < 0.0 and not float(exponent).is_integer():
        return math.nan
    return base**exponent


class LeakyIntegrator:
    """One-pole lowpass: y[n] = x[n] + coeff * (y[n-1] - x[n])."""

    def __init__(self, sample_rate: float = 44100.0, time_constant: float = 10.0) -> None:
        self._sample_rate = 44100.0
        self._tau = 10.0
        self._coeff = 0.0
        self._y1 = 0.0
        self.sample_rate = sample_rate
        self._calculate_coefficient()
        self.time_constant = time_constant

    @property
    def sample_rate(self) -> float:
        """The sample rate in Hz; non-positive values are ignored."""
        return self._sample_rate

    @sample_rate.setter
    def sample_rate(self, value: float) -> None:
        if value > 0.0:
            self._sample_rate = value
            self._calculate_coefficient()

    @property
    def time_constant(self) -> float:
        """The time constant tau in milliseconds; negative values are ignored."""
        return self._tau

    @time_constant.setter
    def time_constant(self, value: float) -> None:
        if value >= 0.0 and value != self._tau:
            self._tau = value
            self._calculate_coefficient()

    @property
    def coefficient(self) -> float:
        """The feedback coefficient derived from tau and the sample rate."""
        return self._coeff

    @property
    def state(self) -> float:
        """The previous output sample."""
        return self._y1

    @state.setter
    def state(self, value: float) -> None:
        self._y1 = value

    @staticmethod
    def normalizer(tau1: float, tau2: float, sample_rate: float) -> float:
        """Return the factor that scales the peak of two cascaded RC filters to unity.

        ``tau1`` and ``tau2`` are the decay and attack time constants in milliseconds.
        """
        td = 0.001 * tau1
        ta = 0.001 * tau2
        fs = sample_rate

        if ta == 0.0 and td == 0.0:
            return 1.0
        if ta == 0.0:
            return 1.0 / (1.0 - math.exp(-1.0 / (fs * td)))
        if td == 0.0:
            return 1.0 / (1.0 - math.exp(-1.0 / (fs * ta)))

        x = math.exp(-1.0 / (fs * td))
        bd = 1 - x
        ad = -x
        x = math.exp(-1.0 / (fs * ta))
        ba = 1 - x
        aa = -x

        if ta == td:
            np_ = fs * ta
            xp = (np_ + 1.0) * ba * ba * _c_pow(aa, np_)
        else:
            tp = math.log(ta / td) / ((1.0 / td) - (1.0 / ta))
            np_ = fs * tp
            s = 1.0 / (aa - ad)
            b01 = s * aa * ba * bd
            b02 = s * ad * ba * bd
            a01 = s * (ad - aa) * aa
            a02 = s * (ad - aa) * ad
            xp = b01 * _c_pow(a01, np_) - b02 * _c_pow(a02, np_)

        if xp == 0.0:
            return math.copysign(math.inf, xp)
        return 1.0 / xp

    def get_sample(self, x: float) -> float:
        """Process one sample and return the output."""
        self._y1 = x + self._coeff * (self._y1 - x)
        return self._y1

    def reset(self) -> None:
        """Clear the filter state."""
        self._y1 = 0.0

    def _calculate_coefficient(self) -> None:
        if self._tau > 0.0:
            self._coeff = math.exp(-1.0 / (self._sample_rate * 0.001 * self._tau))
        else:
            self._coeff = 0.0
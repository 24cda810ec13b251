"""One-pole filters, envelopes, note handling, FFT, band-limited wavetables and a ladder filter."""

__version__ = "0.1.0"
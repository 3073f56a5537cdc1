"""Programmatic ring tone so no audio assets have to ship."""

from __future__ import annotations

import numpy as np

_FADE_SECONDS = 0.01


def make_tone(
    frequency_hz: float,
    duration_seconds: float,
    *,
    sample_rate_hz: int = 44100,
    volume: float = 0.3,
) -> np.ndarray:
    """Return a mono float32 sine wave with short linear fades at both ends."""
    samples = int(duration_seconds * sample_rate_hz)
    if samples <= 0:
        return np.zeros(0, dtype=np.float32)

    t = np.arange(samples, dtype=np.float32) / float(sample_rate_hz)
    wave = np.sin(2.0 * np.pi * frequency_hz * t) * volume

    # Fades avoid audible clicks at the start and end of the buffer.
    fade = min(int(sample_rate_hz * _FADE_SECONDS), samples // 2)
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade, dtype=np.float32)
        wave[:fade] *= ramp
        wave[-fade:] *= ramp[::-1]

    return wave.astype(np.float32)

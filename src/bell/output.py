"""Sounddevice-backed audio playback for the ring tone."""

import logging
from typing import Any, Optional

import numpy as np


class BellError(Exception):
    """Raised when the ring tone cannot be played."""


class SoundDeviceAudioOutput:
    """Plays mono PCM arrays through a selected sounddevice output."""
    def __init__(
        self,
        output_device_index: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._output_device_index = output_device_index
        self._logger = logger or logging.getLogger(__name__)
        self._sd: Any = None

    def _sounddevice(self) -> Any:
        if self._sd is not None:
            return self._sd
        try:
            import sounddevice
        except (ImportError, OSError) as error:  # pragma: no cover - depends on audio env
            raise BellError(f"sounddevice is unavailable: {error}") from error
        self._sd = sounddevice
        return sounddevice

    def play(self, wav: np.ndarray, sample_rate_hz: int) -> None:
        """Start playback and return immediately."""
        if wav.ndim != 1:
            raise BellError("Expected mono PCM array for playback")
        if len(wav) == 0:
            raise BellError("Cannot play empty audio buffer")

        sd = self._sounddevice()
        try:
            sd.play(
                wav,
                samplerate=sample_rate_hz,
                device=self._output_device_index,
                blocking=False,
            )
        except Exception as error:
            raise BellError(f"Audio playback failed: {error}") from error
        self._logger.debug(
            "Playing %d samples of ring tone at %d Hz",
            len(wav),
            sample_rate_hz,
        )

"""High-level bell service that renders and plays the ring tone."""

import logging
from typing import Optional

import numpy as np

from .config import BellConfig
from .output import SoundDeviceAudioOutput
from .tone import make_tone


class BellService:
    """Combines tone generation and playback into a single ring operation."""
    def __init__(
        self,
        config: BellConfig,
        output: Optional[SoundDeviceAudioOutput] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._logger = logger or logging.getLogger(__name__)
        self._output = output or SoundDeviceAudioOutput(
            output_device_index=config.output_device_index,
            logger=self._logger,
        )
        self._tone: Optional[np.ndarray] = None

    def _ring_tone(self) -> np.ndarray:
        if self._tone is None:
            self._tone = make_tone(
                self._config.frequency_hz,
                self._config.duration_seconds,
                sample_rate_hz=self._config.sample_rate_hz,
                volume=self._config.volume,
            )
        return self._tone

    def ring(self) -> None:
        self._output.play(self._ring_tone(), self._config.sample_rate_hz)

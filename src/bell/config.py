"""Configuration model for the ring tone and audio output selection."""

from dataclasses import dataclass
from typing import Optional


class BellConfigurationError(Exception):
    """Raised when bell configuration is invalid."""


@dataclass(frozen=True)
class BellConfig:
    """Resolved tone parameters and optional output-device selection."""
    enabled: bool = True
    sound: bool = True
    frequency_hz: float = 880.0
    duration_seconds: float = 0.4
    volume: float = 0.3
    sample_rate_hz: int = 44100
    output_device_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.frequency_hz <= 0:
            raise BellConfigurationError("Bell frequency_hz must be positive")
        if self.duration_seconds <= 0:
            raise BellConfigurationError("Bell duration_seconds must be positive")
        if not 0.0 <= self.volume <= 1.0:
            raise BellConfigurationError("Bell volume must be in [0, 1]")
        if self.frequency_hz >= self.sample_rate_hz / 2:
            raise BellConfigurationError(
                "Bell frequency_hz must be below half the sample rate"
            )

    @classmethod
    def from_settings(cls, settings) -> "BellConfig":
        return cls(
            enabled=bool(settings.enabled),
            sound=bool(settings.sound),
            frequency_hz=float(settings.frequency_hz),
            duration_seconds=float(settings.duration_seconds),
            volume=float(settings.volume),
            sample_rate_hz=int(settings.sample_rate_hz),
            output_device_index=settings.output_device,
        )

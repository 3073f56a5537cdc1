"""Public exports for the audible ring."""

from .config import BellConfig, BellConfigurationError
from .output import BellError, SoundDeviceAudioOutput
from .service import BellService
from .tone import make_tone

__all__ = [
    "BellConfig",
    "BellConfigurationError",
    "BellError",
    "BellService",
    "SoundDeviceAudioOutput",
    "make_tone",
]

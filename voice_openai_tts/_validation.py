"""
Validation of provider configuration.
"""

from __future__ import annotations

from ._exceptions import InvalidModelError
from ._exceptions import InvalidSpeedError
from ._exceptions import InvalidVoiceError
from ._exceptions import MissingCredentialError
from ._models import API_KEY_ENV
from ._models import MAX_SPEED
from ._models import MIN_SPEED
from ._models import VOICE_IDS
from ._models import ProviderConfig
from ._models import TTSModel

VALID_MODELS: tuple[str, ...] = tuple(model.value for model in TTSModel)


def validate_config(config: ProviderConfig) -> None:
    """
    Check a provider configuration.

    Checks run in order (credential, voice, speed, model) and the first
    failure is raised.

    Args:
        config: Configuration to check.

    Raises:
        MissingCredentialError: If no API key is present.
        InvalidVoiceError: If the default voice is not in the catalog.
        InvalidSpeedError: If speed is outside [0.25, 4.0].
        InvalidModelError: If the model is not supported.
    """
    if not config.api_key:
        raise MissingCredentialError(f"{API_KEY_ENV} required for OpenAI TTS")

    if config.voice not in VOICE_IDS:
        raise InvalidVoiceError(
            f"Invalid voice: {config.voice}. Valid: {', '.join(VOICE_IDS)}",
            {"voice": config.voice},
        )

    if not MIN_SPEED <= config.speed <= MAX_SPEED:
        raise InvalidSpeedError(
            f"Speed must be between {MIN_SPEED} and {MAX_SPEED}, got: {config.speed}",
            {"speed": config.speed},
        )

    if config.model not in VALID_MODELS:
        raise InvalidModelError(
            f"Invalid model: {config.model}. Valid: {', '.join(VALID_MODELS)}",
            {"model": config.model},
        )

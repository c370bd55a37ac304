"""
Construction of speech requests from stored defaults and per-call options.
"""

from __future__ import annotations

from typing import Optional

from ._logging import get_logger
from ._models import AudioFormat
from ._models import ProviderConfig
from ._models import SynthesisOptions
from ._models import SynthesisRequest
from ._models import TTSModel

PCM_RESPONSE_FORMAT = "pcm"

logger = get_logger(__name__)


def build_request(
    config: ProviderConfig,
    text: str,
    options: Optional[SynthesisOptions] = None,
) -> SynthesisRequest:
    """
    Resolve a speech request.

    Per-call options win over the configured defaults. Instructions are only
    kept for gpt-4o-mini-tts; other models drop them silently. The response
    format is always raw PCM, whatever format the caller asked for.

    Args:
        config: Stored provider configuration.
        text: Text to speak.
        options: Optional per-call overrides.

    Returns:
        The resolved SynthesisRequest.

    Examples:
        >>> config = ProviderConfig(api_key="sk-test", model="tts-1")
        >>> build_request(config, "Hi", SynthesisOptions(instructions="whisper")).instructions is None
        True
    """
    options = options or SynthesisOptions()

    requested_format = getattr(options.format, "value", options.format)
    if requested_format and requested_format != AudioFormat.PCM_S16LE.value:
        logger.warning(
            "Requested format %s is not supported, returning %s",
            requested_format,
            AudioFormat.PCM_S16LE.value,
        )

    voice = options.voice or config.voice
    # a zero speed is treated as unset
    speed = options.speed or config.speed

    instructions = options.instructions or config.instructions
    if config.model != TTSModel.GPT_4O_MINI_TTS.value:
        instructions = None

    return SynthesisRequest(
        model=config.model,
        input=text,
        voice=voice,
        speed=speed,
        response_format=PCM_RESPONSE_FORMAT,
        instructions=instructions or None,
    )

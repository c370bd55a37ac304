"""
Utility functions for the OpenAI TTS provider.
"""

from __future__ import annotations

import importlib.metadata
import io
import os
import wave
from typing import Union

import aiofiles

from ._models import PCM_BYTES_PER_SAMPLE
from ._models import AudioFormat
from ._models import SynthesisResult


def get_version() -> str:
    try:
        return importlib.metadata.version("voice-openai-tts")
    except importlib.metadata.PackageNotFoundError:
        try:
            from . import __version__

            return __version__
        except ImportError:
            return "0.0.0"


def to_wav_bytes(result: SynthesisResult) -> bytes:
    """
    Wrap the PCM of a result in a WAV container.

    The samples are copied unchanged; only a RIFF header is added.

    Raises:
        ValueError: If the result is not 16-bit PCM.
    """
    if result.format != AudioFormat.PCM_S16LE:
        raise ValueError(f"Cannot wrap {result.format.value} audio in WAV")

    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(PCM_BYTES_PER_SAMPLE)
        wav.setframerate(result.sample_rate)
        wav.writeframes(result.audio)
    return buffer.getvalue()


async def save_wav(result: SynthesisResult, path: Union[str, os.PathLike]) -> None:
    """
    Write a synthesis result to disk as a mono 16-bit WAV file.

    Examples:
        >>> result = await provider.synthesize("Hello world")
        >>> await save_wav(result, "hello.wav")
    """
    async with aiofiles.open(path, "wb") as f:
        await f.write(to_wav_bytes(result))

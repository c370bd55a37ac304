"""
Models for the OpenAI TTS provider.

This module contains the data models, enums and configuration classes used
throughout the provider: the static voice catalog, provider and connection
configuration, and the per-call request and result values.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Optional
from typing import Union

DEFAULT_BASE_URL = "https://api.openai.com/v1"

API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "OPENAI_TTS_URL"

PCM_SAMPLE_RATE = 24000
PCM_BYTES_PER_SAMPLE = 2

MIN_SPEED = 0.25
MAX_SPEED = 4.0


class TTSModel(str, Enum):
    """
    Speech models accepted by the OpenAI speech endpoint.

    Attributes:
        GPT_4O_MINI_TTS: Recommended model, the only one honouring instructions.
        TTS_1: Low latency model.
        TTS_1_HD: High quality model.
    """

    GPT_4O_MINI_TTS = "gpt-4o-mini-tts"
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"


class AudioFormat(str, Enum):
    """Audio format tags understood by the host application."""

    PCM_S16LE = "pcm_s16le"
    PCM_F32LE = "pcm_f32le"
    OPUS = "opus"
    OGG_OPUS = "ogg_opus"
    MP3 = "mp3"
    WAV = "wav"
    WEBM_OPUS = "webm_opus"
    MULAW = "mulaw"
    ALAW = "alaw"


class ProviderState(str, Enum):
    """Lifecycle of a registered provider."""

    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    SHUT_DOWN = "shut_down"


class HealthStatus(str, Enum):
    REACHABLE = "reachable"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class Voice:
    """
    Entry of the voice catalog.

    Attributes:
        id: Voice identifier sent to the API.
        name: Display name.
        gender: Optional gender tag ("male", "female" or "neutral").
        description: Optional short description of the voice.
        language: Optional language code.
    """

    id: str
    name: str
    gender: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None


VOICES: tuple[Voice, ...] = (
    Voice("alloy", "Alloy", "neutral", "Neutral, balanced"),
    Voice("ash", "Ash", "male", "Clear, professional"),
    Voice("ballad", "Ballad", "female", "Warm, melodic"),
    Voice("coral", "Coral", "female", "Natural, friendly"),
    Voice("echo", "Echo", "male", "Deep, authoritative"),
    Voice("fable", "Fable", "neutral", "Storytelling"),
    Voice("nova", "Nova", "female", "Energetic, youthful"),
    Voice("onyx", "Onyx", "male", "Deep, resonant"),
    Voice("sage", "Sage", "neutral", "Calm, wise"),
    Voice("shimmer", "Shimmer", "female", "Bright, cheerful"),
    Voice("verse", "Verse", "neutral", "Expressive, dynamic"),
    Voice("marin", "Marin", "female", "Best quality female"),
    Voice("cedar", "Cedar", "male", "Best quality male"),
)

VOICE_IDS: tuple[str, ...] = tuple(voice.id for voice in VOICES)


def get_voice(voice_id: str) -> Optional[Voice]:
    """Return the catalog entry for `voice_id`, or None if unknown."""
    for voice in VOICES:
        if voice.id == voice_id:
            return voice
    return None


@dataclass
class ConnectionConfig:
    """
    Configuration for HTTP connection parameters.

    Attributes:
        connect_timeout: Timeout in seconds for connection establishment.
        synthesis_timeout: Total timeout in seconds for a speech request.
        health_timeout: Total timeout in seconds for a health check.
    """

    connect_timeout: float = 10.0
    synthesis_timeout: float = 30.0
    health_timeout: float = 5.0


def _pick(overrides: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = overrides.get(key)
        if value is not None and value != "":
            return value
    return None


@dataclass(frozen=True)
class ProviderConfig:
    """
    Immutable configuration of the provider.

    Use `ProviderConfig.from_mapping` to build one from host supplied
    overrides; it applies the built-in defaults and the environment fallback
    for the API key.

    Attributes:
        api_key: OpenAI API key. Never shown in repr.
        model: Speech model identifier.
        voice: Default voice identifier.
        speed: Default speed multiplier.
        instructions: Default style instructions (gpt-4o-mini-tts only).
        base_url: API base URL.
    """

    api_key: str = field(default="", repr=False)
    model: str = TTSModel.GPT_4O_MINI_TTS.value
    voice: str = "coral"
    speed: float = 1.0
    instructions: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, Any]] = None) -> ProviderConfig:
        """
        Merge caller overrides over the defaults.

        Missing, None or empty values fall back to the defaults. The API key
        falls back to the OPENAI_API_KEY environment variable and the base
        URL to OPENAI_TTS_URL.

        Args:
            overrides: Host configuration. Both the host schema names
                (``apiKey``, ``baseUrl``) and snake_case names are accepted.

        Returns:
            A new ProviderConfig. It is not validated.

        Examples:
            >>> config = ProviderConfig.from_mapping({"apiKey": "sk-...", "voice": "nova"})
            >>> config.model
            'gpt-4o-mini-tts'
        """
        overrides = overrides or {}
        defaults = cls()

        api_key = _pick(overrides, "apiKey", "api_key") or os.environ.get(API_KEY_ENV) or ""
        base_url = _pick(overrides, "baseUrl", "base_url") or os.environ.get(BASE_URL_ENV) or defaults.base_url
        speed = _pick(overrides, "speed")

        return cls(
            api_key=api_key,
            model=_pick(overrides, "model") or defaults.model,
            voice=_pick(overrides, "voice") or defaults.voice,
            speed=float(speed) if speed is not None else defaults.speed,
            instructions=_pick(overrides, "instructions"),
            base_url=base_url,
        )


@dataclass
class SynthesisOptions:
    """
    Per-call synthesis options. Every field is optional.

    Attributes:
        voice: Voice overriding the configured default.
        speed: Speed overriding the configured default.
        instructions: Style instructions overriding the configured default.
        format: Requested output format, as a tag or any string. Only
            ``pcm_s16le`` is produced; other values are ignored.
        sample_rate: Requested sample rate. Output is always 24000 Hz.
        pitch: Accepted for interface compatibility, not supported by the API.
    """

    voice: Optional[str] = None
    speed: Optional[float] = None
    instructions: Optional[str] = None
    format: Optional[Union[AudioFormat, str]] = None
    sample_rate: Optional[int] = None
    pitch: Optional[float] = None


@dataclass(frozen=True)
class SynthesisRequest:
    """Resolved request for the speech endpoint."""

    model: str
    input: str
    voice: str
    speed: float
    response_format: str = "pcm"
    instructions: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to ``/audio/speech``."""
        payload: dict[str, Any] = {
            "model": self.model,
            "input": self.input,
            "voice": self.voice,
            "response_format": self.response_format,
            "speed": self.speed,
        }
        if self.instructions:
            payload["instructions"] = self.instructions
        return payload


@dataclass(frozen=True)
class SynthesisResult:
    """
    Synthesized audio.

    Attributes:
        audio: Raw mono 16-bit little-endian PCM.
        format: Always ``AudioFormat.PCM_S16LE``.
        sample_rate: Always 24000.
        duration_ms: Duration derived from the byte length.
    """

    audio: bytes = field(repr=False)
    format: AudioFormat
    sample_rate: int
    duration_ms: int


@dataclass(frozen=True)
class HealthCheckResult:
    """
    Outcome of a health check.

    Truthy only when the API was reachable and accepted the credential.

    Attributes:
        status: Reachable or unreachable.
        http_status: HTTP status of the probe, if a response was received.
        error: Description of the failure, if any.
    """

    status: HealthStatus
    http_status: Optional[int] = None
    error: Optional[str] = None

    @property
    def reachable(self) -> bool:
        return self.status == HealthStatus.REACHABLE

    def __bool__(self) -> bool:
        return self.reachable

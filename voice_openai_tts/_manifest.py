"""
Plugin manifest, provider metadata and configuration schema.

These values are read by the host to list the plugin, render its settings
form and check its requirements. They carry no behaviour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Optional

from ._models import API_KEY_ENV
from ._models import VOICES
from ._models import ProviderConfig
from ._models import TTSModel

PLUGIN_NAME = "voice-openai-tts"
PLUGIN_VERSION = "1.0.0"
PLUGIN_DESCRIPTION = "OpenAI Text-to-Speech provider"

PROVIDER_NAME = "openai-tts"
EXTENSION_NAME = "tts"

ICON = "\U0001f50a"


@dataclass(frozen=True)
class PluginRequirements:
    bins: tuple[str, ...] = ()
    env: tuple[str, ...] = ()
    docker: tuple[str, ...] = ()
    config: tuple[str, ...] = ()


@dataclass(frozen=True)
class VoicePluginMetadata:
    """
    Metadata describing a voice provider to the host.

    Attributes:
        name: Provider identifier.
        version: Provider version.
        type: "stt" or "tts".
        description: Human readable description.
        capabilities: Feature tags supported by the provider.
        local: Whether synthesis runs locally.
        requires: Runtime requirements.
        primary_env: Main environment variable holding the credential.
        emoji: Icon shown by the host.
        homepage: Documentation URL.
    """

    name: str
    version: str
    type: str
    description: str
    capabilities: tuple[str, ...]
    local: bool
    requires: Optional[PluginRequirements] = None
    primary_env: Optional[str] = None
    emoji: Optional[str] = None
    homepage: Optional[str] = None


@dataclass(frozen=True)
class ConfigFieldOption:
    value: str
    label: str


@dataclass(frozen=True)
class ConfigField:
    """A single field of the host settings form."""

    name: str
    type: str
    label: str
    description: str = ""
    default: Any = None
    required: bool = False
    secret: bool = False
    setup_flow: Optional[str] = None
    options: tuple[ConfigFieldOption, ...] = ()


@dataclass(frozen=True)
class ConfigSchema:
    title: str
    description: str
    fields: tuple[ConfigField, ...]

    def get_field(self, name: str) -> Optional[ConfigField]:
        for config_field in self.fields:
            if config_field.name == name:
                return config_field
        return None


@dataclass(frozen=True)
class ProvidedCapability:
    type: str
    id: str
    display_name: str
    tier: str


@dataclass(frozen=True)
class PluginManifest:
    """Static description of the plugin for the host registry."""

    name: str
    version: str
    description: str
    capabilities: tuple[str, ...]
    category: str
    tags: tuple[str, ...]
    icon: str
    requires: PluginRequirements
    provides: tuple[ProvidedCapability, ...]
    config_schema: ConfigSchema


PROVIDER_METADATA = VoicePluginMetadata(
    name=PROVIDER_NAME,
    version=PLUGIN_VERSION,
    type="tts",
    description="OpenAI Text-to-Speech API",
    capabilities=("voice-selection", "speed-control", "instructions"),
    local=False,
    requires=PluginRequirements(env=(API_KEY_ENV,)),
    primary_env=API_KEY_ENV,
    emoji=ICON,
    homepage="https://platform.openai.com/docs/guides/text-to-speech",
)

_MODEL_LABELS = {
    TTSModel.GPT_4O_MINI_TTS: "GPT-4o Mini TTS (recommended)",
    TTSModel.TTS_1: "TTS-1 (fast)",
    TTSModel.TTS_1_HD: "TTS-1 HD (high quality)",
}


def _voice_label(voice_id: str, name: str, gender: Optional[str]) -> str:
    if voice_id in ("marin", "cedar"):
        return f"{name} ({gender}, best quality)"
    return f"{name} ({gender})" if gender else name


def build_config_schema() -> ConfigSchema:
    defaults = ProviderConfig()
    return ConfigSchema(
        title="OpenAI TTS Configuration",
        description="Configure the OpenAI Text-to-Speech provider",
        fields=(
            ConfigField(
                name="apiKey",
                type="password",
                label="OpenAI API Key",
                description="OpenAI API key",
                required=True,
                secret=True,
                setup_flow="paste",
            ),
            ConfigField(
                name="model",
                type="select",
                label="TTS Model",
                description="TTS model: " + ", ".join(model.value for model in TTSModel),
                default=defaults.model,
                options=tuple(ConfigFieldOption(model.value, label) for model, label in _MODEL_LABELS.items()),
            ),
            ConfigField(
                name="voice",
                type="select",
                label="Default Voice",
                description="Default voice (" + ", ".join(voice.id for voice in VOICES) + ")",
                default=defaults.voice,
                options=tuple(
                    ConfigFieldOption(voice.id, _voice_label(voice.id, voice.name, voice.gender)) for voice in VOICES
                ),
            ),
            ConfigField(
                name="speed",
                type="number",
                label="Speed",
                description="Speed multiplier (0.25 - 4.0)",
                default=defaults.speed,
            ),
            ConfigField(
                name="instructions",
                type="textarea",
                label="Style Instructions",
                description="Style instructions (gpt-4o-mini-tts only)",
                required=False,
            ),
        ),
    )


MANIFEST = PluginManifest(
    name=PLUGIN_NAME,
    version=PLUGIN_VERSION,
    description=PLUGIN_DESCRIPTION,
    capabilities=(EXTENSION_NAME,),
    category="voice",
    tags=("tts", "openai", "voice", "speech"),
    icon=ICON,
    requires=PluginRequirements(env=(API_KEY_ENV,)),
    provides=(ProvidedCapability(type="tts", id=PROVIDER_NAME, display_name="OpenAI TTS", tier="byok"),),
    config_schema=build_config_schema(),
)

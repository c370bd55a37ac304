__version__ = "1.0.0"

from ._auth import AuthBase
from ._auth import StaticKeyAuth
from ._decoder import check_response
from ._decoder import compute_duration_ms
from ._decoder import decode
from ._exceptions import ConfigurationError
from ._exceptions import ConnectionError
from ._exceptions import InvalidModelError
from ._exceptions import InvalidSpeedError
from ._exceptions import InvalidVoiceError
from ._exceptions import MissingCredentialError
from ._exceptions import OpenAITTSError
from ._exceptions import SynthesisFailedError
from ._exceptions import TransportError
from ._helpers import save_wav
from ._helpers import to_wav_bytes
from ._manifest import MANIFEST
from ._manifest import PROVIDER_METADATA
from ._manifest import PluginManifest
from ._manifest import VoicePluginMetadata
from ._models import VOICES
from ._models import AudioFormat
from ._models import ConnectionConfig
from ._models import HealthCheckResult
from ._models import HealthStatus
from ._models import ProviderConfig
from ._models import ProviderState
from ._models import SynthesisOptions
from ._models import SynthesisRequest
from ._models import SynthesisResult
from ._models import TTSModel
from ._models import Voice
from ._models import get_voice
from ._plugin import OpenAITTSPlugin
from ._plugin import PluginContext
from ._plugin import create_plugin
from ._provider import OpenAITTSProvider
from ._request import build_request
from ._validation import validate_config

__all__ = [
    "OpenAITTSProvider",
    "OpenAITTSPlugin",
    "PluginContext",
    "create_plugin",
    "AuthBase",
    "StaticKeyAuth",
    "ProviderConfig",
    "ConnectionConfig",
    "SynthesisOptions",
    "SynthesisRequest",
    "SynthesisResult",
    "HealthCheckResult",
    "HealthStatus",
    "ProviderState",
    "AudioFormat",
    "TTSModel",
    "Voice",
    "VOICES",
    "get_voice",
    "MANIFEST",
    "PROVIDER_METADATA",
    "PluginManifest",
    "VoicePluginMetadata",
    "validate_config",
    "build_request",
    "check_response",
    "compute_duration_ms",
    "decode",
    "save_wav",
    "to_wav_bytes",
    "OpenAITTSError",
    "ConfigurationError",
    "MissingCredentialError",
    "InvalidVoiceError",
    "InvalidSpeedError",
    "InvalidModelError",
    "SynthesisFailedError",
    "ConnectionError",
    "TransportError",
]

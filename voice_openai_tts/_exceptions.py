"""
Exception hierarchy for the OpenAI TTS provider.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class OpenAITTSError(Exception):
    """Base exception for all OpenAI TTS provider errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(OpenAITTSError):
    """Raised when the provider configuration is invalid."""

    pass


class MissingCredentialError(ConfigurationError):
    """Raised when no API key is configured or found in the environment."""

    pass


class InvalidVoiceError(ConfigurationError):
    """Raised when the default voice is not part of the voice catalog."""

    pass


class InvalidSpeedError(ConfigurationError):
    """Raised when the speed multiplier is outside the supported range."""

    pass


class InvalidModelError(ConfigurationError):
    """Raised when the configured model is not a supported TTS model."""

    pass


class SynthesisFailedError(OpenAITTSError):
    """
    Raised when the speech endpoint responds with a non-success status.

    Attributes:
        status: HTTP status code returned by the API.
        body: Response body text, verbatim.
    """

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"OpenAI TTS failed: {status} - {body}", {"status": status, "body": body})
        self.status = status
        self.body = body


class ConnectionError(OpenAITTSError):
    """Raised when connection to the service fails."""

    pass


class TransportError(OpenAITTSError):
    """Raised when there's an error in the transport layer."""

    pass

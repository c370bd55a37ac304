"""
OpenAI text-to-speech provider.

This module provides the OpenAITTSProvider class that turns text into raw
24 kHz PCM using the OpenAI speech API.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import AsyncIterator
from typing import Any
from typing import Optional

import aiohttp

from ._auth import StaticKeyAuth
from ._decoder import check_response
from ._decoder import decode
from ._exceptions import ConnectionError
from ._exceptions import TransportError
from ._logging import get_logger
from ._manifest import PROVIDER_METADATA
from ._manifest import VoicePluginMetadata
from ._models import VOICES
from ._models import ConnectionConfig
from ._models import HealthCheckResult
from ._models import HealthStatus
from ._models import ProviderConfig
from ._models import SynthesisOptions
from ._models import SynthesisResult
from ._models import Voice
from ._request import build_request
from ._transport import Transport
from ._validation import validate_config

SPEECH_PATH = "/audio/speech"
MODELS_PATH = "/models"


class OpenAITTSProvider:
    """
    Text-to-speech provider backed by the OpenAI speech API.

    The configuration is fixed at construction. Each call builds its own
    request and result, so concurrent calls on one provider are safe; the
    provider adds no queueing or rate limiting of its own.

    Args:
        config: Provider configuration. If not provided, built from the
            environment with `ProviderConfig.from_mapping`.
        conn_config: Connection timeouts.

    Examples:
        >>> config = ProviderConfig.from_mapping({"apiKey": "sk-...", "voice": "nova"})
        >>> async with OpenAITTSProvider(config) as provider:
        ...     provider.validate_config()
        ...     result = await provider.synthesize("Hello world")
        ...     print(result.duration_ms)
    """

    metadata: VoicePluginMetadata = PROVIDER_METADATA
    voices: tuple[Voice, ...] = VOICES

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        *,
        conn_config: Optional[ConnectionConfig] = None,
    ) -> None:
        self._config = config or ProviderConfig.from_mapping()
        self._conn_config = conn_config or ConnectionConfig()
        self._request_id = str(uuid.uuid4())
        self._transport: Optional[Transport] = None
        self._closed = False

        self._logger = get_logger(__name__)
        self._logger.debug(
            "OpenAITTSProvider initialized (request_id=%s, model=%s, voice=%s)",
            self._request_id,
            self._config.model,
            self._config.voice,
        )

    async def __aenter__(self) -> OpenAITTSProvider:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def default_voice(self) -> str:
        return self._config.voice

    def validate_config(self) -> None:
        """
        Validate the provider configuration.

        Raises:
            ConfigurationError: The first failed check, see `validate_config`.
        """
        validate_config(self._config)

    async def synthesize(self, text: str, options: Optional[SynthesisOptions] = None) -> SynthesisResult:
        """
        Convert text to speech audio.

        Args:
            text: Text to speak.
            options: Optional per-call overrides for voice, speed and
                instructions.

        Returns:
            SynthesisResult holding 24 kHz mono s16le PCM and its duration.

        Raises:
            MissingCredentialError: If no API key is configured.
            SynthesisFailedError: If the API answers with a non-2xx status.
            TransportError: If the request times out.
            ConnectionError: If the API cannot be reached.

        Examples:
            >>> result = await provider.synthesize(
            ...     "Hello world", SynthesisOptions(voice="onyx", speed=1.25)
            ... )
        """
        request = build_request(self._config, text, options)
        transport = self._get_transport()

        self._logger.debug(
            "Synthesizing %d characters (model=%s, voice=%s, speed=%s)",
            len(text),
            request.model,
            request.voice,
            request.speed,
        )

        response = await transport.post(
            SPEECH_PATH,
            json_data=request.to_payload(),
            timeout=self._conn_config.synthesis_timeout,
        )
        async with response:
            if not 200 <= response.status < 300:
                error_body = await self._read(response.read(), SPEECH_PATH)
                error_text = error_body.decode("utf-8", "replace")
                self._logger.error("Speech request failed with HTTP %d: %s", response.status, error_text)
                check_response(response.status, error_text)

            audio = await self._read(response.read(), SPEECH_PATH)

        result = decode(audio)
        self._logger.debug("Synthesized %d bytes (%d ms)", len(result.audio), result.duration_ms)
        return result

    async def stream_synthesize(self, text: str, options: Optional[SynthesisOptions] = None) -> AsyncIterator[bytes]:
        """
        Synthesize text for callers expecting chunked delivery.

        The speech API returns the whole payload at once, so this is not
        incremental: nothing is requested until iteration starts, then one
        full synthesis runs and exactly one chunk holding all of the audio
        is yielded.

        Examples:
            >>> async for chunk in provider.stream_synthesize("Hello"):
            ...     player.write(chunk)
        """
        result = await self.synthesize(text, options)
        yield result.audio

    async def health_check(self) -> HealthCheckResult:
        """
        Probe the models endpoint with the configured credential.

        Never raises. Any failure, including a missing API key, is reported
        as an unreachable result.

        Returns:
            HealthCheckResult, truthy only on a 2xx answer.
        """
        try:
            transport = self._get_transport()
            response = await transport.get(MODELS_PATH, timeout=self._conn_config.health_timeout)
            async with response:
                if 200 <= response.status < 300:
                    return HealthCheckResult(HealthStatus.REACHABLE, http_status=response.status)
                return HealthCheckResult(
                    HealthStatus.UNREACHABLE,
                    http_status=response.status,
                    error=response.reason,
                )
        except Exception as e:
            self._logger.debug("Health check failed: %s", e)
            return HealthCheckResult(HealthStatus.UNREACHABLE, error=str(e) or type(e).__name__)

    async def close(self) -> None:
        """
        Release the HTTP session.

        Makes no network calls and is safe to call multiple times.
        """
        self._closed = True
        if self._transport is not None:
            transport, self._transport = self._transport, None
            await transport.close()

    def _get_transport(self) -> Transport:
        if self._closed:
            raise ConnectionError("Provider is closed")
        if self._transport is None:
            auth = StaticKeyAuth(self._config.api_key)
            self._transport = Transport(self._config.base_url, self._conn_config, auth, self._request_id)
        return self._transport

    async def _read(self, body: Any, path: str) -> Any:
        try:
            return await body
        except asyncio.TimeoutError:
            self._logger.error("Timeout reading response body %s", path)
            raise TransportError(f"Request timeout for {path}") from None
        except aiohttp.ClientError as e:
            self._logger.error("Failed reading response body %s: %s", path, e)
            raise ConnectionError(f"Request failed: {e}") from e

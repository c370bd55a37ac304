"""
Host lifecycle for the OpenAI TTS provider.

The host calls `init` with its plugin context once, and `shutdown` when the
plugin is unloaded. All state lives on the plugin instance.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from typing import Optional
from typing import Protocol

from ._logging import get_logger
from ._manifest import EXTENSION_NAME
from ._manifest import MANIFEST
from ._manifest import PLUGIN_DESCRIPTION
from ._manifest import PLUGIN_NAME
from ._manifest import PLUGIN_VERSION
from ._manifest import PluginManifest
from ._models import ConnectionConfig
from ._models import ProviderConfig
from ._models import ProviderState
from ._provider import OpenAITTSProvider


class PluginLog(Protocol):
    def info(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def debug(self, msg: str) -> None: ...


class PluginContext(Protocol):
    """Services the host hands to a plugin on init."""

    log: PluginLog

    def get_config(self) -> Optional[Mapping[str, Any]]: ...

    def register_tts_provider(self, provider: Any) -> None: ...

    def unregister_extension(self, name: str) -> None: ...


class OpenAITTSPlugin:
    """
    Plugin registering an OpenAITTSProvider with the host.

    A misconfigured provider is never registered: validation errors, and
    errors raised by the host while registering, are logged through the
    host and `init` returns normally.

    Args:
        conn_config: Connection timeouts passed to the provider.

    Examples:
        >>> plugin = OpenAITTSPlugin()
        >>> await plugin.init(ctx)
        >>> plugin.state
        <ProviderState.ACTIVE: 'active'>
        >>> await plugin.shutdown()
    """

    name: str = PLUGIN_NAME
    version: str = PLUGIN_VERSION
    description: str = PLUGIN_DESCRIPTION
    manifest: PluginManifest = MANIFEST

    def __init__(self, conn_config: Optional[ConnectionConfig] = None) -> None:
        self._conn_config = conn_config
        self._ctx: Optional[PluginContext] = None
        self._provider: Optional[OpenAITTSProvider] = None
        self._state = ProviderState.UNINITIALIZED
        self._logger = get_logger(__name__)

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def provider(self) -> Optional[OpenAITTSProvider]:
        return self._provider

    async def init(self, ctx: PluginContext) -> None:
        """
        Build, validate and register the provider.

        Args:
            ctx: Host plugin context.
        """
        if self._provider is not None:
            await self.shutdown()

        self._ctx = ctx
        config = ProviderConfig.from_mapping(ctx.get_config())
        provider = OpenAITTSProvider(config, conn_config=self._conn_config)

        try:
            provider.validate_config()
            ctx.register_tts_provider(provider)
        except Exception as e:
            self._logger.debug("Registration failed: %s", e)
            ctx.log.error(f"Failed to register OpenAI TTS: {e}")
            await provider.close()
            return

        self._provider = provider
        self._state = ProviderState.ACTIVE
        ctx.log.info(f"OpenAI TTS provider registered (model: {provider.model}, voice: {provider.default_voice})")

    async def shutdown(self) -> None:
        """
        Unregister the provider and drop references to it and its config.

        Safe to call when nothing was registered and safe to call repeatedly.
        """
        ctx, provider = self._ctx, self._provider
        self._ctx = None
        self._provider = None

        if ctx is not None and provider is not None:
            try:
                ctx.unregister_extension(EXTENSION_NAME)
            except Exception as e:
                self._logger.debug("Unregister failed, extension already gone: %s", e)
            await provider.close()

        if self._state == ProviderState.ACTIVE:
            self._state = ProviderState.SHUT_DOWN


def create_plugin(conn_config: Optional[ConnectionConfig] = None) -> OpenAITTSPlugin:
    """Entry point used by the host to obtain a fresh plugin instance."""
    return OpenAITTSPlugin(conn_config)

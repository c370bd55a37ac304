import pytest
from _utils import make_ctx

from voice_openai_tts import OpenAITTSPlugin
from voice_openai_tts import OpenAITTSProvider
from voice_openai_tts import ProviderState
from voice_openai_tts import create_plugin


def test_plugin_identity():
    plugin = create_plugin()

    assert plugin.name == "voice-openai-tts"
    assert plugin.version == "1.0.0"
    assert plugin.state == ProviderState.UNINITIALIZED


def test_manifest():
    manifest = OpenAITTSPlugin.manifest

    assert manifest.category == "voice"
    assert "tts" in manifest.capabilities
    assert "tts" in manifest.tags
    assert "openai" in manifest.tags
    assert manifest.icon
    assert manifest.requires.env == ("OPENAI_API_KEY",)

    assert manifest.provides[0].type == "tts"
    assert manifest.provides[0].id == "openai-tts"
    assert manifest.provides[0].tier == "byok"


def test_config_schema():
    schema = OpenAITTSPlugin.manifest.config_schema

    api_key = schema.get_field("apiKey")
    assert api_key is not None
    assert api_key.secret is True
    assert api_key.required is True
    assert api_key.setup_flow == "paste"

    model = schema.get_field("model")
    assert model.default == "gpt-4o-mini-tts"
    assert [o.value for o in model.options] == ["gpt-4o-mini-tts", "tts-1", "tts-1-hd"]

    voice = schema.get_field("voice")
    assert voice.default == "coral"
    assert len(voice.options) == 13

    assert schema.get_field("speed").default == 1.0
    assert schema.get_field("instructions").required is False
    assert schema.get_field("unknown") is None


@pytest.mark.asyncio
async def test_init_registers_provider():
    ctx = make_ctx({"apiKey": "sk-test-key"})
    plugin = OpenAITTSPlugin()

    await plugin.init(ctx)

    ctx.register_tts_provider.assert_called_once()
    provider = ctx.register_tts_provider.call_args[0][0]
    assert isinstance(provider, OpenAITTSProvider)
    assert provider.metadata.name == "openai-tts"
    assert plugin.state == ProviderState.ACTIVE
    assert "registered" in ctx.log.info.call_args[0][0]

    await plugin.shutdown()


@pytest.mark.asyncio
async def test_init_without_key_logs_error(no_env_key):
    """Tests that a missing key fails closed."""

    ctx = make_ctx({})
    plugin = OpenAITTSPlugin()

    await plugin.init(ctx)

    ctx.register_tts_provider.assert_not_called()
    ctx.log.error.assert_called_once()
    assert "required" in ctx.log.error.call_args[0][0]
    assert "OPENAI_API_KEY required" in ctx.log.error.call_args[0][0]
    assert plugin.state == ProviderState.UNINITIALIZED
    assert plugin.provider is None


@pytest.mark.asyncio
async def test_init_uses_env_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
    ctx = make_ctx({})
    plugin = OpenAITTSPlugin()

    await plugin.init(ctx)

    ctx.register_tts_provider.assert_called_once()
    await plugin.shutdown()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "config, message",
    [
        ({"apiKey": "sk-test-key", "voice": "invalid-voice"}, "Invalid voice"),
        ({"apiKey": "sk-test-key", "speed": 5.0}, "Speed must be between"),
        ({"apiKey": "sk-test-key", "model": "tts-2"}, "Invalid model"),
    ],
)
async def test_init_invalid_config_logs_error(config, message):
    ctx = make_ctx(config)
    plugin = OpenAITTSPlugin()

    await plugin.init(ctx)

    ctx.register_tts_provider.assert_not_called()
    assert message in ctx.log.error.call_args[0][0]


@pytest.mark.asyncio
async def test_shutdown_unregisters():
    ctx = make_ctx({"apiKey": "sk-test-key"})
    plugin = OpenAITTSPlugin()
    await plugin.init(ctx)

    await plugin.shutdown()

    ctx.unregister_extension.assert_called_once_with("tts")
    assert plugin.state == ProviderState.SHUT_DOWN
    assert plugin.provider is None


@pytest.mark.asyncio
async def test_shutdown_is_idempotent():
    ctx = make_ctx({"apiKey": "sk-test-key"})
    plugin = OpenAITTSPlugin()
    await plugin.init(ctx)

    await plugin.shutdown()
    await plugin.shutdown()

    ctx.unregister_extension.assert_called_once_with("tts")
    assert plugin.state == ProviderState.SHUT_DOWN


@pytest.mark.asyncio
async def test_shutdown_without_init():
    plugin = OpenAITTSPlugin()

    await plugin.shutdown()

    assert plugin.state == ProviderState.UNINITIALIZED


@pytest.mark.asyncio
async def test_shutdown_ignores_unregister_errors():
    ctx = make_ctx({"apiKey": "sk-test-key"})
    ctx.unregister_extension.side_effect = RuntimeError("already unregistered")
    plugin = OpenAITTSPlugin()
    await plugin.init(ctx)

    await plugin.shutdown()

    assert plugin.state == ProviderState.SHUT_DOWN


@pytest.mark.asyncio
async def test_registered_provider_synthesizes(fake_openai):
    ctx = make_ctx({"apiKey": "sk-test-key", "baseUrl": fake_openai.base_url})
    plugin = OpenAITTSPlugin()
    await plugin.init(ctx)

    provider = ctx.register_tts_provider.call_args[0][0]
    result = await provider.synthesize("Hello world")

    assert result.duration_ms == 1000
    assert fake_openai.last_request["headers"]["Authorization"] == "Bearer sk-test-key"

    await plugin.shutdown()


@pytest.mark.asyncio
async def test_init_logs_host_registration_error():
    """Tests that an error raised by the host while registering is logged."""

    ctx = make_ctx({"apiKey": "sk-test-key"})
    ctx.register_tts_provider.side_effect = RuntimeError("registry unavailable")
    plugin = OpenAITTSPlugin()

    await plugin.init(ctx)

    ctx.log.error.assert_called_once()
    assert "registry unavailable" in ctx.log.error.call_args[0][0]
    ctx.log.info.assert_not_called()
    assert plugin.state == ProviderState.UNINITIALIZED
    assert plugin.provider is None

    await plugin.shutdown()
    ctx.unregister_extension.assert_not_called()

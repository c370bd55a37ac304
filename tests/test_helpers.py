import wave

import pytest

from voice_openai_tts import AudioFormat
from voice_openai_tts import SynthesisResult
from voice_openai_tts import decode
from voice_openai_tts import save_wav
from voice_openai_tts import to_wav_bytes
from voice_openai_tts._helpers import get_version


def test_get_version():
    assert get_version()


@pytest.mark.asyncio
async def test_save_wav(tmp_path):
    """Tests that PCM is written unchanged inside a WAV container."""

    pcm = b"\x10\x00\xf0\xff" * 12000
    path = tmp_path / "out.wav"

    await save_wav(decode(pcm), path)

    with wave.open(str(path), "rb") as wav:
        assert wav.getnchannels() == 1
        assert wav.getsampwidth() == 2
        assert wav.getframerate() == 24000
        assert wav.getnframes() == 24000
        assert wav.readframes(wav.getnframes()) == pcm


def test_to_wav_rejects_other_formats():
    result = SynthesisResult(audio=b"", format=AudioFormat.MP3, sample_rate=24000, duration_ms=0)

    with pytest.raises(ValueError):
        to_wav_bytes(result)

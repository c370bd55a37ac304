import pytest

from voice_openai_tts import AudioFormat
from voice_openai_tts import SynthesisFailedError
from voice_openai_tts import check_response
from voice_openai_tts import compute_duration_ms
from voice_openai_tts import decode


def test_decode_one_second():
    """Tests that 48000 bytes of 24 kHz s16le PCM last 1000 ms."""

    result = decode(b"\x00" * 48000)

    assert result.audio == b"\x00" * 48000
    assert result.format == AudioFormat.PCM_S16LE
    assert result.sample_rate == 24000
    assert result.duration_ms == 1000


@pytest.mark.parametrize(
    "byte_length, expected",
    [
        (0, 0),
        (2, 0),
        (24, 1),  # 0.5 ms rounds up
        (48, 1),
        (72, 2),  # 1.5 ms rounds up
        (96000, 2000),
        (12000, 250),
    ],
)
def test_compute_duration_ms(byte_length, expected):
    assert compute_duration_ms(byte_length) == expected


def test_decode_is_deterministic():
    payload = bytes(range(256)) * 10
    assert decode(payload) == decode(payload)


def test_check_response_success():
    check_response(200, "")
    check_response(204, "")


@pytest.mark.parametrize("status", [400, 401, 429, 500])
def test_check_response_failure(status):
    with pytest.raises(SynthesisFailedError) as exc_info:
        check_response(status, "Unauthorized")

    error = exc_info.value
    assert str(error) == f"OpenAI TTS failed: {status} - Unauthorized"
    assert error.status == status
    assert error.body == "Unauthorized"

"""
Decoding of speech endpoint responses into synthesis results.
"""

from __future__ import annotations

from ._exceptions import SynthesisFailedError
from ._models import PCM_BYTES_PER_SAMPLE
from ._models import PCM_SAMPLE_RATE
from ._models import AudioFormat
from ._models import SynthesisResult


def check_response(status: int, body: str) -> None:
    """
    Raise if the speech endpoint did not succeed.

    Raises:
        SynthesisFailedError: For any non-2xx status, with the body verbatim.
    """
    if not 200 <= status < 300:
        raise SynthesisFailedError(status, body)


def compute_duration_ms(byte_length: int, sample_rate: int = PCM_SAMPLE_RATE) -> int:
    """Duration of mono 16-bit PCM, rounded half up to the millisecond."""
    # round(byte_length / 2 / sample_rate * 1000), half up, in integers
    denominator = PCM_BYTES_PER_SAMPLE * sample_rate
    return (2000 * byte_length + denominator) // (2 * denominator)


def decode(raw: bytes) -> SynthesisResult:
    """
    Wrap a raw PCM payload into a SynthesisResult.

    The payload is known to be 24 kHz mono s16le because the request asked
    for it, so only its length is inspected.
    """
    audio = bytes(raw)
    return SynthesisResult(
        audio=audio,
        format=AudioFormat.PCM_S16LE,
        sample_rate=PCM_SAMPLE_RATE,
        duration_ms=compute_duration_ms(len(audio)),
    )

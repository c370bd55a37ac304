import asyncio
import os
from pathlib import Path

from voice_openai_tts import OpenAITTSProvider
from voice_openai_tts import ProviderConfig
from voice_openai_tts import SynthesisOptions
from voice_openai_tts import save_wav

TEXT = "Welcome to the future of audio generation from text!"
OUTPUT_FILE = "output.wav"


# Generate speech from text and save to WAV file
async def main():
    # Create a provider using environment variable OPENAI_API_KEY
    if not os.getenv("OPENAI_API_KEY"):
        raise ValueError("OPENAI_API_KEY environment variable is not set")

    print(f"Generating speech from text: {TEXT}")

    config = ProviderConfig.from_mapping({"voice": "coral", "instructions": "Speak in a cheerful tone."})
    async with OpenAITTSProvider(config) as provider:
        provider.validate_config()

        if not await provider.health_check():
            raise RuntimeError("OpenAI API is not reachable")

        result = await provider.synthesize(TEXT, SynthesisOptions(speed=1.1))
        await save_wav(result, OUTPUT_FILE)
        print(f"Speech saved to {Path(OUTPUT_FILE).resolve()} ({result.duration_ms} ms)")


# Run the async main function
if __name__ == "__main__":
    asyncio.run(main())

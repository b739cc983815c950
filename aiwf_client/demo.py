"""
AIWF Client - Translator Usage Example

Demonstrates calling the translator agent through AIWFClient.

Prerequisites:
    1. Start the AIWF server: aiwf serve -f examples/translator-example.yaml
    2. Set OPENAI_API_KEY in the server's environment
    3. Run: python examples/translator_usage.py  (or: aiwf-client demo)
"""

from __future__ import annotations

import sys
from typing import Callable, Optional

from aiwf_client.client import AIWFClient
from aiwf_client.types import TranslateRequest, TranslateResponse

BASE_URL = "http://127.0.0.1:8080"
SERVE_COMMAND = "aiwf serve -f examples/translator-example.yaml"
SEPARATOR = "=" * 50

RUSSIAN_SAMPLE = "Привет, мир! Это пример использования AIWF."
ENGLISH_SAMPLE = "Hello, world!"


def format_percent(confidence: float) -> str:
    """Render confidence * 100 as a percentage without a trailing '.0'."""
    return f"{confidence * 100:.14g}%"


def print_result(request: TranslateRequest, response: TranslateResponse) -> None:
    print("\n✅ Translation complete!\n")
    print(f"Original: {request.text}")
    print(f"Translated: {response.translated}")
    print(f"Source Language: {response.source_lang}")
    print(f"Confidence: {format_percent(response.confidence)}")


def run(client_factory: Optional[Callable[..., AIWFClient]] = None) -> int:
    """Run the example and return the process exit code."""
    factory = client_factory or AIWFClient
    try:
        # Connects to the local server; set api_key if the server requires one
        with factory(BASE_URL, api_key=None) as client:
            request = TranslateRequest(
                target_lang="en",
                text=RUSSIAN_SAMPLE,
            )
            print("🔄 Translating...")
            response = client.translator(request)
            print_result(request, response)

            print("\n" + SEPARATOR)

            request2 = TranslateRequest(target_lang="es", text=ENGLISH_SAMPLE)
            print("\n🔄 Translating to Spanish...")
            response2 = client.translator(request2)
            print_result(request2, response2)
    except Exception as e:
        print(f"❌ Error: {e}")
        print("\nMake sure AIWF server is running:")
        print(f"  {SERVE_COMMAND}")
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

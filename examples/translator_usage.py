#!/usr/bin/env python3
"""
AIWF Client - Translator Example

Translates a Russian sentence to English and an English one to Spanish
using the translator agent of a local AIWF server.

Run with:
    aiwf serve -f examples/translator-example.yaml
    python examples/translator_usage.py
"""

from aiwf_client.demo import main


if __name__ == "__main__":
    main()

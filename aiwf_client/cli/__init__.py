"""
AIWF Client - Command Line Interface

This package provides the CLI for calling agents on an AIWF server.

Usage:
    aiwf-client --help                        # Show help
    aiwf-client translate "Hola" --to en      # Call the translator agent
    aiwf-client demo                          # Run the translator example
    aiwf-client agents list                   # List agents on the server
    aiwf-client server health                 # Check server health
"""

from aiwf_client.cli.main import app

__all__ = ["app"]

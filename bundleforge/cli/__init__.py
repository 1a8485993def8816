"""Bundleforge CLI: Typer-based command-line interface.

Provides the ``bundleforge`` command with subcommands for building a
bundle, checking whether it is stale, and rendering inclusion tags.

All output uses Rich for formatted terminal display.
"""

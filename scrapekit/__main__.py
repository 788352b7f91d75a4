"""CLI entry point for scrapekit."""

from .cli import main

main()

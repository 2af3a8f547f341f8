"""Command-line helpers for loading player data."""

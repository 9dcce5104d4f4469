"""Shared helpers: console output and configuration loading."""

"""Shared helpers: logging configuration and message formatting."""

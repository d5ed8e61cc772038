"""Core application configuration helpers."""

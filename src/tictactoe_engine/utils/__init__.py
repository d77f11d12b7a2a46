"""Utility modules (configuration defaults)."""

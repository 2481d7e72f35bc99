"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.allowlist import AllowlistSettings

__all__ = ["AllowlistSettings"]

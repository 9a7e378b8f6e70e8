"""Exceptions raised by the normalization pipeline."""

from __future__ import annotations


class SpaceWrapError(RuntimeError):
    """Base error for normalization failures."""


class ConfigError(SpaceWrapError):
    """Raised when mode selector or settings are invalid."""


class IntegrityDefect(SpaceWrapError):
    """Raised when a placeholder token has no entry in the protection table."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unresolved protection token: {token}")
        self.token = token

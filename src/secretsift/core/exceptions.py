"""Exceptions raised by secretsift."""

from __future__ import annotations


class SecretSiftError(Exception):
    """Base class for all secretsift errors."""


class InvalidInputError(SecretSiftError, ValueError):
    """Raised when a scan is requested without text to scan."""


class ConfigError(SecretSiftError):
    """Raised when configuration cannot be loaded or compiled."""

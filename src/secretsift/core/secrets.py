"""Safe handling of runtime secrets: environment lookup and masked display.

Secrets belong in the environment (or a secret manager), never in source.
When a secret has to appear in a log line or on screen, only its last few
characters are shown.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

logger = logging.getLogger("secretsift.secrets")

DEFAULT_VISIBLE = 4
DEFAULT_PLACEHOLDER = "****"


def mask_secret(
    secret: str | None,
    visible: int = DEFAULT_VISIBLE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str | None:
    """Return *secret* with everything but the last *visible* chars replaced.

    Secrets no longer than *visible* are masked entirely.
    """
    if visible < 0:
        raise ValueError("visible must be >= 0")
    if secret is None:
        return None
    if len(secret) <= visible:
        return placeholder
    return placeholder + secret[len(secret) - visible:]


def get_env_secret(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Read a secret from the environment. Empty values count as missing."""
    env = os.environ if environ is None else environ
    value = env.get(name)
    if not value:
        logger.debug("Secret %s not set in environment", name)
        return None
    logger.debug("Loaded secret %s (masked=%s)", name, mask_secret(value))
    return value


def use_secret(secret: str | None) -> bool:
    """Simulate an external call authenticated by *secret*."""
    if not secret:
        logger.warning("No secret supplied; skipping external call")
        return False
    logger.info("Calling external service with key %s", mask_secret(secret))
    return True

"""secretsift — heuristic hard-coded secret scanner."""

from secretsift._version import __version__
from secretsift.core.exceptions import ConfigError, InvalidInputError, SecretSiftError
from secretsift.core.models import Finding, FindingKind, Reason, ScanResult
from secretsift.core.secrets import get_env_secret, mask_secret
from secretsift.scanner.engine import SecretScanner, scan

__all__ = [
    "__version__",
    "ConfigError",
    "Finding",
    "FindingKind",
    "InvalidInputError",
    "Reason",
    "ScanResult",
    "SecretScanner",
    "SecretSiftError",
    "get_env_secret",
    "mask_secret",
    "scan",
]

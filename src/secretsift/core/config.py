"""Configuration management for secretsift (secretsift.toml parsing + defaults)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

from secretsift.core.exceptions import ConfigError

CONFIG_FILENAME = "secretsift.toml"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_keywords(name: str, value: object) -> None:
    # An empty list or entry would compile to \b()\b and match everywhere.
    if not isinstance(value, list) or not value:
        raise ConfigError(f"{name} must be a non-empty list of strings, got {value!r}")
    for item in value:
        if not isinstance(item, str) or not item:
            raise ConfigError(f"{name} entries must be non-empty strings, got {item!r}")


def _check_count(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass
class ScanConfig:
    declaration_keywords: list[str] = field(
        default_factory=lambda: ["String", "char", "var", "final"]
    )
    name_keywords: list[str] = field(
        default_factory=lambda: ["password", "secret", "apikey", "token"]
    )
    proximity_keywords: list[str] = field(
        default_factory=lambda: ["password", "passwd", "secret", "apikey", "api_key", "token"]
    )
    min_literal_length: int = 4
    random_min_length: int = 20
    random_ratio: float = 0.8
    random_extra_chars: str = "+/=-"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError unless every setting has a usable type and range."""
        for name in ("declaration_keywords", "name_keywords", "proximity_keywords"):
            _check_keywords(f"scan.{name}", getattr(self, name))
        for name in ("min_literal_length", "random_min_length"):
            _check_count(f"scan.{name}", getattr(self, name))
        ratio = self.random_ratio
        if not _is_number(ratio) or not 0 <= ratio <= 1:
            raise ConfigError(f"scan.random_ratio must be a number in [0, 1], got {ratio!r}")
        if not isinstance(self.random_extra_chars, str):
            raise ConfigError(
                f"scan.random_extra_chars must be a string, got {self.random_extra_chars!r}"
            )


@dataclass
class MaskConfig:
    visible_chars: int = 4
    placeholder: str = "****"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        _check_count("mask.visible_chars", self.visible_chars)
        if not isinstance(self.placeholder, str):
            raise ConfigError(f"mask.placeholder must be a string, got {self.placeholder!r}")


@dataclass
class OutputConfig:
    format: str = "text"
    fail_on_findings: bool = True


@dataclass
class SecretSiftConfig:
    """Complete secretsift configuration."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    mask: MaskConfig = field(default_factory=MaskConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(project_path: Path | None = None) -> SecretSiftConfig:
    """Load configuration from secretsift.toml if present, otherwise return defaults."""
    config = SecretSiftConfig()

    if project_path is None:
        project_path = Path.cwd()

    config_file = project_path / CONFIG_FILENAME
    if not config_file.exists():
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid {CONFIG_FILENAME}: {exc}") from exc

    if "scan" in data:
        s = data["scan"]
        for attr in (
            "declaration_keywords",
            "name_keywords",
            "proximity_keywords",
            "min_literal_length",
            "random_min_length",
            "random_ratio",
            "random_extra_chars",
        ):
            if attr in s:
                setattr(config.scan, attr, s[attr])

    if "mask" in data:
        m = data["mask"]
        if "visible_chars" in m:
            config.mask.visible_chars = m["visible_chars"]
        if "placeholder" in m:
            config.mask.placeholder = m["placeholder"]

    if "output" in data:
        o = data["output"]
        if "format" in o:
            if o["format"] not in ("text", "json"):
                raise ConfigError(f"Unknown output format: {o['format']!r}")
            config.output.format = o["format"]
        if "fail_on_findings" in o:
            if not isinstance(o["fail_on_findings"], bool):
                raise ConfigError(f"output.fail_on_findings must be a boolean, got {o['fail_on_findings']!r}")
            config.output.fail_on_findings = o["fail_on_findings"]

    config.scan.validate()
    config.mask.validate()
    return config

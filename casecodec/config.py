"""Configuration model and loaders for casecodec sessions.

Responsibilities:
- Define session configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `CodecConfig`: validated settings for one normalization session.
- `ConfigLoader`: static construction helpers for `CodecConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .codecs.factory import DEFAULT_SUPPORTED_KINDS
from .models.datatypes import CodecKind

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})
_LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


def parse_boolean(value: object) -> bool | None:
    """Parse a boolean or boolean-like token, returning `None` when invalid."""

    if isinstance(value, bool):
        return value
    if value is None:
        return None
    token = str(value).strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


@dataclass(slots=True)
class CodecConfig:
    """Settings for one normalization session.

    Attributes:
        encode_case: Fold casing into tags.
        decode_case: Restore casing from tags.
        decoder_enabled: Whether this deployment offers the decoder at all.
        log_level: Minimum `loguru` level for session logs.
    """

    encode_case: bool = False
    decode_case: bool = False
    decoder_enabled: bool = True
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate values before a codec is constructed."""

        if self.log_level.upper() not in _LOG_LEVELS:
            levels = ", ".join(sorted(_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {levels}.")
        self.log_level = self.log_level.upper()

    def supported_kinds(self) -> frozenset[CodecKind]:
        """Return codec kinds a factory should offer for this configuration."""

        if self.decoder_enabled:
            return DEFAULT_SUPPORTED_KINDS
        return DEFAULT_SUPPORTED_KINDS.difference({CodecKind.DECODER})


class ConfigLoader:
    """Factory methods for creating `CodecConfig` from external sources."""

    _BOOLEAN_KEYS = ("encode_case", "decode_case", "decoder_enabled")
    _SUPPORTED_YAML_KEYS = frozenset({*_BOOLEAN_KEYS, "log_level"})
    _ENV_PREFIX = "CASECODEC_"

    @staticmethod
    def from_yaml(path: Path) -> CodecConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping.")
        return ConfigLoader._build_config(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CodecConfig:
        """Create a validated config from `CASECODEC_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[ConfigLoader._ENV_PREFIX + key.upper()]
            for key in ConfigLoader._SUPPORTED_YAML_KEYS
            if ConfigLoader._ENV_PREFIX + key.upper() in env_map
        }
        return ConfigLoader._build_config(payload, source_label="Environment")

    @staticmethod
    def _build_config(payload: Mapping[str, Any], source_label: str) -> CodecConfig:
        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(
                f"{source_label} includes unsupported key(s): {', '.join(unknown)}."
            )

        config = CodecConfig()
        for key in ConfigLoader._BOOLEAN_KEYS:
            if key not in payload:
                continue
            parsed = parse_boolean(payload[key])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `{key}` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            setattr(config, key, parsed)

        raw_level = payload.get("log_level")
        if raw_level is not None and str(raw_level).strip():
            config.log_level = str(raw_level).strip()

        config.validate()
        return config

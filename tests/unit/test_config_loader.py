"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from casecodec.config import CodecConfig, ConfigLoader, parse_boolean
from casecodec.models.datatypes import CodecKind


def test_config_loader_from_yaml_loads_valid_config(tmp_path: Path) -> None:
    """YAML loader should parse booleans and normalize the log level."""

    config_path = tmp_path / "casecodec.yml"
    config_path.write_text(
        """
encode_case: " yes "
decode_case: false
decoder_enabled: "off"
log_level: debug
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.encode_case is True
    assert config.decode_case is False
    assert config.decoder_enabled is False
    assert config.log_level == "DEBUG"
    assert CodecKind.DECODER not in config.supported_kinds()


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML file should yield default settings."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == CodecConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown fields."""

    config_path = tmp_path / "unknown.yml"
    config_path.write_text("encode_case: true\nlowercase_only: true\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): lowercase_only"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_non_mapping(tmp_path: Path) -> None:
    """A YAML list root is not a valid configuration."""

    config_path = tmp_path / "list.yml"
    config_path.write_text("- encode_case\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_invalid_boolean(tmp_path: Path) -> None:
    """Boolean fields should only accept the documented tokens."""

    config_path = tmp_path / "bad.yml"
    config_path.write_text("encode_case: maybe\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`encode_case` must be a boolean value"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader should read only `CASECODEC_*` keys."""

    config = ConfigLoader.from_env(
        {
            "CASECODEC_DECODE_CASE": "1",
            "CASECODEC_LOG_LEVEL": "warning",
            "ENCODE_CASE": "true",
        }
    )

    assert config.encode_case is False
    assert config.decode_case is True
    assert config.log_level == "WARNING"


def test_config_validate_rejects_unknown_log_level() -> None:
    """Unknown log levels should be rejected before any session starts."""

    with pytest.raises(ValueError, match="`log_level` must be one of"):
        CodecConfig(log_level="chatty").validate()


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, True), ("ON", True), (" no ", False), ("0", False), ("", None), (None, None)],
)
def test_parse_boolean_tokens(value: object, expected: bool | None) -> None:
    """Boolean parsing should be case-insensitive and return `None` when invalid."""

    assert parse_boolean(value) is expected

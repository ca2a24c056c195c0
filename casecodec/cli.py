"""Command-line interface for casecodec.

Responsibilities:
- Expose encode/decode/normalize commands over the session pipeline.
- Convert CLI flags and optional YAML files into `CodecConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_normalized, exit_with_command_error
from .config import CodecConfig, ConfigLoader
from .errors import CodecConfigurationError
from .pipeline import CaseNormalizationPipeline
from .telemetry.logger import SessionLogger

app = typer.Typer(
    name="casecodec",
    no_args_is_help=True,
    help="Reversible case folding for tokenizer normalization.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="YAML file with codec settings."),
]
OffsetsOption = Annotated[
    bool,
    typer.Option("--show-offsets", help="Print the normalized-to-original offset map."),
]


def _load_config(config_path: Path | None) -> CodecConfig:
    """Load YAML settings when requested and map failures to configuration errors."""

    if config_path is None:
        return CodecConfig()
    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CodecConfigurationError(
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CodecConfigurationError(
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
        ) from exc


def _run(command_name: str, text: str, config: CodecConfig, show_offsets: bool) -> None:
    try:
        pipeline = CaseNormalizationPipeline(
            config, logger=SessionLogger(level=config.log_level)
        )
        result = pipeline.run(text)
    except Exception as exc:
        exit_with_command_error(command_name, exc)
    echo_normalized(result, show_offsets)


@app.command("normalize")
def normalize_command(
    text: Annotated[str, typer.Argument(help="Input text.")],
    encode_case: Annotated[
        bool | None,
        typer.Option("--encode-case/--no-encode-case", help="Fold casing into tags."),
    ] = None,
    decode_case: Annotated[
        bool | None,
        typer.Option("--decode-case/--no-decode-case", help="Restore casing from tags."),
    ] = None,
    config_file: ConfigOption = None,
    show_offsets: OffsetsOption = False,
) -> None:
    """Run one session with explicit encode/decode settings."""

    try:
        config = _load_config(config_file)
    except CodecConfigurationError as exc:
        exit_with_command_error("normalize", exc)
    if encode_case is not None:
        config.encode_case = encode_case
    if decode_case is not None:
        config.decode_case = decode_case
    _run("normalize", text, config, show_offsets)


@app.command("encode")
def encode_command(
    text: Annotated[str, typer.Argument(help="Text with original casing.")],
    config_file: ConfigOption = None,
    show_offsets: OffsetsOption = False,
) -> None:
    """Fold casing into a tag stream."""

    try:
        config = _load_config(config_file)
    except CodecConfigurationError as exc:
        exit_with_command_error("encode", exc)
    _run("encode", text, replace(config, encode_case=True, decode_case=False), show_offsets)


@app.command("decode")
def decode_command(
    text: Annotated[str, typer.Argument(help="Tag stream produced by `encode`.")],
    config_file: ConfigOption = None,
    show_offsets: OffsetsOption = False,
) -> None:
    """Restore original casing from a tag stream."""

    try:
        config = _load_config(config_file)
    except CodecConfigurationError as exc:
        exit_with_command_error("decode", exc)
    _run("decode", text, replace(config, encode_case=False, decode_case=True), show_offsets)


@app.command("roundtrip")
def roundtrip_command(
    text: Annotated[str, typer.Argument(help="Text with original casing.")],
) -> None:
    """Encode then decode `text` and report whether the original is restored."""

    try:
        encoded = CaseNormalizationPipeline(CodecConfig(encode_case=True)).run(text).text
        decoded = CaseNormalizationPipeline(CodecConfig(decode_case=True)).run(encoded).text
    except Exception as exc:
        exit_with_command_error("roundtrip", exc)

    typer.echo(f"Encoded: {encoded}")
    typer.echo(f"Decoded: {decoded}")
    if decoded != text:
        typer.secho("Round trip mismatch.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    typer.echo("Round trip OK.")


def main() -> None:
    """Run the casecodec CLI application."""

    app()

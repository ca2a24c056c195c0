"""Codec factory resolving case settings to concrete codec variants.

Responsibilities:
- Reject contradictory encode/decode settings before any text is processed.
- Expose which codec kinds this deployment supports as an explicit capability.
- Keep drivers independent from concrete codec class construction.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from loguru import logger

from ..errors import CodecConfigurationError, UnsupportedCodecError
from ..models.datatypes import CodecKind
from .base import CaseCodec
from .decoder import UpperRunDecoder
from .encoder import UpperRunEncoder
from .identity import IdentityCodec

_CODEC_BUILDERS: dict[CodecKind, Callable[[], CaseCodec]] = {
    CodecKind.IDENTITY: IdentityCodec,
    CodecKind.ENCODER: UpperRunEncoder,
    CodecKind.DECODER: UpperRunDecoder,
}

DEFAULT_SUPPORTED_KINDS = frozenset(_CODEC_BUILDERS)


def resolve_codec_kind(encode_case: bool, decode_case: bool) -> CodecKind:
    """Map encode/decode settings to a codec kind."""

    if encode_case and decode_case:
        logger.error("Cannot set both encode_case=true and decode_case=true")
        raise CodecConfigurationError(
            detail="Cannot set both `encode_case` and `decode_case`.",
            hint="Enable at most one of encoding or decoding per session.",
        )
    if encode_case:
        return CodecKind.ENCODER
    if decode_case:
        return CodecKind.DECODER
    return CodecKind.IDENTITY


class CaseCodecFactory:
    """Factory for per-session codec instances."""

    def __init__(self, supported_kinds: Iterable[CodecKind] = DEFAULT_SUPPORTED_KINDS) -> None:
        """Initialize the set of codec kinds this factory may construct."""

        self._supported_kinds = frozenset(supported_kinds)
        unknown = self._supported_kinds.difference(_CODEC_BUILDERS)
        if unknown:
            names = ", ".join(sorted(kind.value for kind in unknown))
            raise ValueError(f"No codec implementation registered for: {names}.")

    @property
    def supported_kinds(self) -> frozenset[CodecKind]:
        return self._supported_kinds

    def supports(self, kind: CodecKind) -> bool:
        """Return whether `kind` can be constructed by this factory."""

        return kind in self._supported_kinds

    def create(self, encode_case: bool, decode_case: bool) -> CaseCodec:
        """Create a fresh codec for one normalization session."""

        kind = resolve_codec_kind(encode_case, decode_case)
        if not self.supports(kind):
            logger.error("Codec kind `{}` is not supported by this deployment", kind.value)
            raise UnsupportedCodecError(
                kind=kind.value,
                detail=f"Case {kind.value} is not available in this deployment.",
                hint="Enable it in the configuration or run without this mode.",
            )
        return _CODEC_BUILDERS[kind]()


def create_codec(encode_case: bool, decode_case: bool) -> CaseCodec:
    """Create a codec using a factory that supports every registered kind."""

    return CaseCodecFactory().create(encode_case, decode_case)

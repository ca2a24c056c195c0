"""Normalization driver running one codec session over an input text.

Responsibilities:
- Build a codec from configuration and inject the matching normalizer.
- Push every matched unit, drain ready units, and assemble normalized bytes.
- Track the original byte offset of every normalized byte.

Key public API:
- `CaseNormalizationPipeline`: configurable session runner.
- `encode_case`, `decode_case`: one-call shortcuts returning text.
"""

from __future__ import annotations

from .codecs.base import CaseCodec
from .codecs.factory import CaseCodecFactory
from .config import CodecConfig
from .errors import CaseCodecError, NormalizerError
from .models.datatypes import NormalizedText, Tag, Unit
from .telemetry.logger import SessionLogger
from .text.normalizer import Normalizer, normalizer_for


class CaseNormalizationPipeline:
    """Run normalization sessions with a fresh codec per input."""

    def __init__(
        self,
        config: CodecConfig | None = None,
        factory: CaseCodecFactory | None = None,
        logger: SessionLogger | None = None,
        normalizer: Normalizer | None = None,
    ) -> None:
        """Initialize session settings.

        Args:
            config: Session configuration; defaults to identity mode.
            factory: Codec factory; defaults to one honoring `config`.
            logger: Session logger; log lines are skipped when omitted.
            normalizer: Overrides the reference normalizer for the codec kind.
        """

        self.config = config if config is not None else CodecConfig()
        self.config.validate()
        self.factory = factory or CaseCodecFactory(self.config.supported_kinds())
        self.logger = logger
        self._normalizer = normalizer

    def create_codec(self) -> CaseCodec:
        """Construct and wire a codec for one session."""

        try:
            codec = self.factory.create(self.config.encode_case, self.config.decode_case)
        except CaseCodecError as exc:
            if self.logger is not None:
                self.logger.log_failure("factory", type(exc).__name__)
            raise
        codec.set_normalizer(self._normalizer or normalizer_for(codec.kind))
        return codec

    def run(self, text: str) -> NormalizedText:
        """Normalize `text` and return bytes plus the normalized-to-original offset map."""

        codec = self.create_codec()
        data = text.encode("utf-8")
        if self.logger is not None:
            self.logger.log_session_start(codec.kind.value, len(data))

        remaining = memoryview(data)
        normalized = bytearray()
        offsets: list[int] = []
        consumed = 0
        units = 0
        markers = 0

        while len(remaining):
            unit = codec.normalize_prefix(remaining)
            self._check_match(unit, len(remaining))
            remaining = remaining[unit.consumed :]
            codec.push(unit, not len(remaining))

            while not codec.empty():
                piece = codec.pop()
                payload = piece.fragment.tobytes()
                normalized += payload
                offsets.extend([consumed] * len(payload))
                consumed += piece.consumed
                units += 1
                if piece.consumed == 0 and piece.tag is Tag.LOWER:
                    markers += 1

        offsets.append(consumed)
        if self.logger is not None:
            self.logger.log_session_complete(codec.kind.value, units, markers)
        return NormalizedText(
            normalized=bytes(normalized),
            offsets=tuple(offsets),
            unit_count=units,
            marker_count=markers,
        )

    @staticmethod
    def _check_match(unit: Unit, available: int) -> None:
        if unit.consumed <= 0 or unit.consumed > available:
            raise NormalizerError(
                detail=(
                    f"Normalizer consumed {unit.consumed} byte(s) with {available} available."
                ),
                hint="A normalizer must consume at least one byte of remaining input.",
            )
        if not len(unit.fragment):
            raise NormalizerError(detail="Normalizer returned an empty fragment.")


def encode_case(text: str) -> str:
    """Return `text` folded to lowercase with case tags."""

    return CaseNormalizationPipeline(CodecConfig(encode_case=True)).run(text).text


def decode_case(text: str) -> str:
    """Return the original casing for a tag stream produced by `encode_case`."""

    return CaseNormalizationPipeline(CodecConfig(decode_case=True)).run(text).text

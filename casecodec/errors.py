"""Domain exceptions for codec construction, protocol misuse, and CLI diagnostics."""

from __future__ import annotations


class CaseCodecError(RuntimeError):
    """Base class for all case codec failures."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        """Initialize an error with a user-facing detail and optional hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint


class CodecConfigurationError(CaseCodecError):
    """Raised when a codec is requested with contradictory settings."""


class UnsupportedCodecError(CaseCodecError):
    """Raised when a requested codec kind is not available in this deployment."""

    def __init__(self, *, kind: str, detail: str, hint: str | None = None) -> None:
        """Initialize an unsupported-kind error."""

        super().__init__(detail=detail, hint=hint)
        self.kind = kind


class CodecContractError(CaseCodecError):
    """Raised when a caller violates the push/pop protocol of a codec."""


class NormalizerError(CaseCodecError):
    """Raised when an injected normalizer returns an unusable match."""

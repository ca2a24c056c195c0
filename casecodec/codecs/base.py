"""Shared protocol for case codecs.

Responsibilities:
- Define the push/pop contract every codec variant implements.
- Provide the normalizer slot each variant embeds for prefix matching.
"""

from __future__ import annotations

from typing import Protocol

from ..errors import CodecContractError
from ..models.datatypes import CodecKind, Unit
from ..text.normalizer import Normalizer


class CaseCodec(Protocol):
    """Protocol for stateful push/pop case transformers."""

    kind: CodecKind

    def set_normalizer(self, normalizer: Normalizer) -> None:
        """Inject the upstream prefix-matching function."""

    def normalize_prefix(self, remaining: memoryview) -> Unit:
        """Match the next unit of `remaining` using the injected normalizer."""

    def push(self, unit: Unit, last: bool) -> None:
        """Accept one unit; `last` marks the final unit of the input."""

    def empty(self) -> bool:
        """Return whether no unit is ready to pop."""

    def pop(self) -> Unit:
        """Remove and return the oldest ready unit."""


class NormalizerSlot:
    """Hold the normalizer injected into one codec instance."""

    def __init__(self) -> None:
        self._normalizer: Normalizer | None = None

    def bind(self, normalizer: Normalizer) -> None:
        """Store the normalizer; a slot accepts exactly one binding."""

        if self._normalizer is not None:
            raise CodecContractError(detail="A normalizer is already set for this codec.")
        self._normalizer = normalizer

    def match(self, remaining: memoryview) -> Unit:
        """Delegate to the bound normalizer and wrap its match as a borrowed unit."""

        if self._normalizer is None:
            raise CodecContractError(
                detail="No normalizer set for this codec.",
                hint="Call `set_normalizer()` before the first `normalize_prefix()`.",
            )
        fragment, consumed = self._normalizer(remaining)
        return Unit.borrowed(fragment, consumed)


def closed_stream_error() -> CodecContractError:
    """Build the error raised when a unit is pushed after the last one."""

    return CodecContractError(detail="Cannot push after the unit marked as last.")


def empty_pop_error() -> CodecContractError:
    """Build the error raised when popping a codec with nothing ready."""

    return CodecContractError(
        detail="Cannot pop from a codec with no ready unit.",
        hint="Check `empty()` before calling `pop()`.",
    )

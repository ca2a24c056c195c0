"""Pass-through codec holding at most one unit in flight."""

from __future__ import annotations

from ..errors import CodecContractError
from ..models.datatypes import CodecKind, Unit
from ..text.normalizer import Normalizer
from .base import NormalizerSlot, closed_stream_error, empty_pop_error


class IdentityCodec:
    """Return every pushed unit unchanged.

    The codec has a single slot: callers drain it with `pop()` before the next
    `push()`.
    """

    kind = CodecKind.IDENTITY

    def __init__(self) -> None:
        self._slot = NormalizerSlot()
        self._held: Unit | None = None
        self._empty = True
        self._closed = False

    def set_normalizer(self, normalizer: Normalizer) -> None:
        self._slot.bind(normalizer)

    def normalize_prefix(self, remaining: memoryview) -> Unit:
        return self._slot.match(remaining)

    def push(self, unit: Unit, last: bool) -> None:
        if self._closed:
            raise closed_stream_error()
        if not self._empty:
            raise CodecContractError(
                detail="Identity codec holds one unit; pop it before pushing another."
            )
        self._held = unit
        self._empty = False
        self._closed = last

    def empty(self) -> bool:
        return self._empty

    def pop(self) -> Unit:
        if self._empty or self._held is None:
            raise empty_pop_error()
        self._empty = True
        return self._held

"""Upper-run case decoder restoring literal casing from a tag stream."""

from __future__ import annotations

from collections import deque
from enum import Enum

from ..models.datatypes import CodecKind, Tag, Unit
from ..text.normalizer import Normalizer
from .base import NormalizerSlot, closed_stream_error, empty_pop_error


class DecoderState(Enum):
    """Whether the decoder is inside an Upper-run."""

    IDLE = "idle"
    IN_RUN = "in_run"


def _upper(literal: bytes) -> bytes:
    return literal.decode("utf-8").upper().encode("utf-8")


class UpperRunDecoder:
    """Invert `UpperRunEncoder` output one unit at a time.

    `T` capitalizes its own literal, `U` opens a run that capitalizes every
    literal until an `L` marker, and the marker itself emits nothing while
    keeping its consumed byte count for offset tracking.
    """

    kind = CodecKind.DECODER

    def __init__(self) -> None:
        self._slot = NormalizerSlot()
        self._ready: deque[Unit] = deque()
        self._state = DecoderState.IDLE
        self._closed = False

    @property
    def state(self) -> DecoderState:
        return self._state

    def set_normalizer(self, normalizer: Normalizer) -> None:
        self._slot.bind(normalizer)

    def normalize_prefix(self, remaining: memoryview) -> Unit:
        return self._slot.match(remaining)

    def push(self, unit: Unit, last: bool) -> None:
        if self._closed:
            raise closed_stream_error()
        self._ready.append(self._decode(unit))
        self._closed = last

    def empty(self) -> bool:
        return not self._ready

    def pop(self) -> Unit:
        if not self._ready:
            raise empty_pop_error()
        return self._ready.popleft()

    def _decode(self, unit: Unit) -> Unit:
        """Translate one tagged unit into its literal-cased form."""

        tag = unit.tag
        if tag is Tag.LOWER:
            self._state = DecoderState.IDLE
            return Unit(unit.fragment.without_tag(), unit.consumed)
        if tag is Tag.TITLE:
            return Unit.owned(_upper(unit.fragment.without_tag().tobytes()), unit.consumed)
        if tag is Tag.UPPER:
            self._state = DecoderState.IN_RUN
            return Unit.owned(_upper(unit.fragment.without_tag().tobytes()), unit.consumed)
        if self._state is DecoderState.IN_RUN:
            return Unit.owned(_upper(unit.fragment.tobytes()), unit.consumed)
        return unit

"""Upper-run case encoder.

Responsibilities:
- Fold each maximal run of `U` units into a Title or Upper-run form.
- Buffer units until the run that produced them is resolved.
- Rewrite buffered tag bytes without writing through borrowed views.

Encoded forms:
- a run of one unit becomes `T` + literal (`"Hello"` -> `"Thello"`),
- a longer run keeps `U` on its first unit, drops the tag from the others, and
  is closed by a zero-width `L` marker (`"HELLO"` -> `"UhelloL"`).
"""

from __future__ import annotations

from collections import deque

from ..models.datatypes import CodecKind, Tag, Unit
from ..text.normalizer import Normalizer
from .base import NormalizerSlot, closed_stream_error, empty_pop_error

_BOUNDARY_MARKER = Tag.LOWER.byte


def boundary_marker() -> Unit:
    """Build the zero-width unit that closes a multi-letter run."""

    return Unit.borrowed(_BOUNDARY_MARKER, 0)


class UpperRunEncoder:
    """Encode original casing as Title/Upper-run tags over folded text."""

    kind = CodecKind.ENCODER

    def __init__(self) -> None:
        self._slot = NormalizerSlot()
        self._pending: deque[Unit] = deque()
        self._run_length = 0
        self._flush = False
        self._closed = False

    def set_normalizer(self, normalizer: Normalizer) -> None:
        self._slot.bind(normalizer)

    def normalize_prefix(self, remaining: memoryview) -> Unit:
        return self._slot.match(remaining)

    def push(self, unit: Unit, last: bool) -> None:
        if self._closed:
            raise closed_stream_error()

        tag = unit.tag
        if tag is Tag.UPPER:
            # Title or Upper-run is unknown until the run ends.
            self._pending.append(unit)
            self._run_length += 1
            self._flush = False
        else:
            self._resolve_run()
            if tag is Tag.PUNCTUATION:
                unit.fragment = unit.fragment.without_tag()
            self._pending.append(unit)
            self._flush = True

        if last:
            self._resolve_run()
            self._flush = True
            self._closed = True

    def empty(self) -> bool:
        return not self._pending or not self._flush

    def pop(self) -> Unit:
        if self.empty():
            raise empty_pop_error()
        return self._pending.popleft()

    def _resolve_run(self) -> None:
        """Rewrite the buffered run at the tail of the queue and reset the counter."""

        run_length = self._run_length
        self._run_length = 0
        if run_length == 0:
            return

        if run_length == 1:
            head = self._pending[-1]
            head.fragment = head.fragment.retagged(Tag.TITLE)
            return

        for offset in range(1, run_length):
            member = self._pending[offset - run_length]
            member.fragment = member.fragment.without_tag()
        self._pending.append(boundary_marker())

"""Core datatypes shared across casecodec modules.

Responsibilities:
- Represent the tag alphabet carried as the first byte of every fragment.
- Represent fragments as either borrowed views or owned rewrites.
- Represent units exchanged between normalizers, codecs, and the driver.

Key types:
- `Tag`, `CodecKind`, `Borrowed`, `Owned`, `Fragment`, `Unit`, and
  `NormalizedText`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tag(Enum):
    """Case class encoded by the leading byte of a fragment."""

    UPPER = ord("U")
    LOWER = ord("L")
    TITLE = ord("T")
    PUNCTUATION = ord("P")
    SPACE = ord(" ")
    NEUTRAL = -1

    @classmethod
    def classify(cls, lead: int | None) -> Tag:
        """Map a leading byte to its tag; unknown or missing bytes are neutral."""

        if lead is None:
            return cls.NEUTRAL
        return _TAGS_BY_BYTE.get(lead, cls.NEUTRAL)

    @property
    def byte(self) -> bytes:
        """Return the one-byte wire form of a non-neutral tag."""

        if self is Tag.NEUTRAL:
            raise ValueError("Neutral fragments carry no tag byte.")
        return bytes((self.value,))


_TAGS_BY_BYTE = {tag.value: tag for tag in Tag if tag is not Tag.NEUTRAL}


class CodecKind(Enum):
    """Codec variants sharing the push/pop protocol."""

    IDENTITY = "identity"
    ENCODER = "encoder"
    DECODER = "decoder"


@dataclass(frozen=True, slots=True)
class Borrowed:
    """Read-only view into bytes owned by someone else (normalizer table, input text).

    Attributes:
        view: Memory view over the fragment bytes. Never written through.
    """

    view: memoryview

    @property
    def tag(self) -> Tag:
        return Tag.classify(self.view[0] if len(self.view) else None)

    def __len__(self) -> int:
        return len(self.view)

    def tobytes(self) -> bytes:
        return self.view.tobytes()

    def without_tag(self) -> Borrowed:
        """Return a narrower view that skips the leading tag byte."""

        return Borrowed(self.view[1:])

    def retagged(self, tag: Tag) -> Owned:
        """Copy the fragment into private storage and replace its tag byte."""

        buffer = bytearray(self.view)
        buffer[0] = tag.value
        return Owned(buffer)


@dataclass(slots=True)
class Owned:
    """Fragment bytes allocated privately by a codec and safe to mutate.

    Attributes:
        buffer: Mutable fragment bytes.
    """

    buffer: bytearray

    @property
    def tag(self) -> Tag:
        return Tag.classify(self.buffer[0] if self.buffer else None)

    def __len__(self) -> int:
        return len(self.buffer)

    def tobytes(self) -> bytes:
        return bytes(self.buffer)

    def without_tag(self) -> Owned:
        """Drop the leading tag byte in place."""

        del self.buffer[:1]
        return self

    def retagged(self, tag: Tag) -> Owned:
        """Replace the leading tag byte in place."""

        self.buffer[0] = tag.value
        return self


Fragment = Borrowed | Owned


@dataclass(slots=True)
class Unit:
    """One normalized fragment and the original bytes it stands for.

    Attributes:
        fragment: Tagged fragment bytes, borrowed or owned.
        consumed: Number of original-input bytes covered by this fragment.
            Zero for inserted boundary markers.
    """

    fragment: Fragment
    consumed: int

    @classmethod
    def borrowed(cls, data: bytes | memoryview, consumed: int) -> Unit:
        """Wrap externally owned bytes without copying them."""

        view = data if isinstance(data, memoryview) else memoryview(data)
        return cls(Borrowed(view), consumed)

    @classmethod
    def owned(cls, data: bytes | bytearray, consumed: int) -> Unit:
        """Wrap a private copy of `data`."""

        return cls(Owned(bytearray(data)), consumed)

    @property
    def tag(self) -> Tag:
        return self.fragment.tag


@dataclass(frozen=True, slots=True)
class NormalizedText:
    """Result of one normalization session.

    Attributes:
        normalized: Concatenated fragment bytes in emission order.
        offsets: Original byte offset for each normalized byte, followed by
            one trailing entry holding the total consumed input length.
        unit_count: Number of units popped from the codec.
        marker_count: Number of zero-width boundary markers among them.
    """

    normalized: bytes
    offsets: tuple[int, ...]
    unit_count: int = 0
    marker_count: int = 0

    @property
    def text(self) -> str:
        """Return normalized bytes decoded as UTF-8."""

        return self.normalized.decode("utf-8")

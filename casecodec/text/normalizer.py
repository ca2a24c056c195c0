"""Reference normalizers feeding tagged fragments into case codecs.

Responsibilities:
- Split UTF-8 input into one-character matches with their consumed byte counts.
- Tag original characters with the case alphabet for encoding sessions.
- Split already-encoded tag streams back into units for decoding sessions.

Every normalizer is a callable `(remaining: memoryview) -> tuple[bytes, int]`.
Returned fragments may be shared between calls and must never be mutated.
"""

from __future__ import annotations

import unicodedata
from typing import Protocol

from ..errors import NormalizerError
from ..models.datatypes import CodecKind, Tag


class Normalizer(Protocol):
    """Protocol for prefix-matching normalizers injected into codecs."""

    def __call__(self, remaining: memoryview) -> tuple[bytes, int]:
        """Match the next fragment and report how many input bytes it consumed."""


def utf8_char_length(lead: int) -> int:
    """Return the encoded length of a UTF-8 character from its leading byte."""

    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    # Stray continuation or invalid lead byte: consume it alone.
    return 1


def _next_char(remaining: memoryview) -> tuple[str, int]:
    """Decode the first character of `remaining` and its byte length."""

    if not len(remaining):
        raise NormalizerError(detail="Cannot match a prefix of empty input.")
    length = min(utf8_char_length(remaining[0]), len(remaining))
    raw = remaining[:length].tobytes()
    try:
        return raw.decode("utf-8"), length
    except UnicodeDecodeError as exc:
        raise NormalizerError(
            detail=f"Input is not valid UTF-8 near byte {raw!r}.",
            hint="Normalize input with `str.encode('utf-8')` before running a session.",
        ) from exc


class CharacterNormalizer:
    """Emit each input character untouched, one per match."""

    def __call__(self, remaining: memoryview) -> tuple[bytes, int]:
        char, length = _next_char(remaining)
        return char.encode("utf-8"), length


class CaseFoldNormalizer:
    """Tag original characters with their case class and fold them to lowercase.

    Characters whose lowercase form upper-cases back to the same character are
    tagged `U`. Spaces keep their own byte as tag, Unicode punctuation gets a
    `P` prefix, and everything else passes through unchanged. Fragments are
    memoized per character, so the same `bytes` object is returned for repeated
    characters.
    """

    def __init__(self) -> None:
        self._table: dict[str, bytes] = {}

    def __call__(self, remaining: memoryview) -> tuple[bytes, int]:
        char, length = _next_char(remaining)
        fragment = self._table.get(char)
        if fragment is None:
            fragment = self._tag_character(char)
            self._table[char] = fragment
        return fragment, length

    @staticmethod
    def _tag_character(char: str) -> bytes:
        """Build the tagged fragment for one original character."""

        encoded = char.encode("utf-8")
        if char == " ":
            return encoded
        if unicodedata.category(char).startswith("P"):
            return Tag.PUNCTUATION.byte + encoded
        folded = char.lower()
        if folded != char and folded.upper() == char:
            return Tag.UPPER.byte + folded.encode("utf-8")
        return encoded


class TagStreamNormalizer:
    """Split an encoded tag stream into decodable units.

    `U` and `T` are matched together with the character they annotate, a
    boundary marker `L` is matched alone, and any other character is matched
    by itself.
    """

    _PREFIX_TAGS = frozenset({Tag.UPPER.value, Tag.TITLE.value})

    def __call__(self, remaining: memoryview) -> tuple[bytes, int]:
        if not len(remaining):
            raise NormalizerError(detail="Cannot match a prefix of empty input.")
        lead = remaining[0]
        if lead == Tag.LOWER.value:
            return Tag.LOWER.byte, 1
        if lead in self._PREFIX_TAGS and len(remaining) > 1:
            char, length = _next_char(remaining[1:])
            return bytes((lead,)) + char.encode("utf-8"), length + 1
        char, length = _next_char(remaining)
        return char.encode("utf-8"), length


def normalizer_for(kind: CodecKind) -> Normalizer:
    """Return the reference normalizer matching a codec kind."""

    if kind is CodecKind.ENCODER:
        return CaseFoldNormalizer()
    if kind is CodecKind.DECODER:
        return TagStreamNormalizer()
    return CharacterNormalizer()

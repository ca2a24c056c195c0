"""Unit tests for tag classification and fragment rewriting."""

from __future__ import annotations

import pytest

from casecodec.models.datatypes import Borrowed, Owned, Tag, Unit


@pytest.mark.parametrize(
    ("lead", "expected"),
    [
        (ord("U"), Tag.UPPER),
        (ord("L"), Tag.LOWER),
        (ord("T"), Tag.TITLE),
        (ord("P"), Tag.PUNCTUATION),
        (ord(" "), Tag.SPACE),
        (ord("7"), Tag.NEUTRAL),
        (ord("a"), Tag.NEUTRAL),
        (None, Tag.NEUTRAL),
    ],
)
def test_tag_classify_maps_lead_bytes(lead: int | None, expected: Tag) -> None:
    """Only the five alphabet bytes are tags; everything else is neutral."""

    assert Tag.classify(lead) is expected


def test_neutral_tag_has_no_wire_byte() -> None:
    """Neutral fragments should not pretend to carry a tag byte."""

    assert Tag.UPPER.byte == b"U"
    with pytest.raises(ValueError):
        _ = Tag.NEUTRAL.byte


def test_borrowed_retag_copies_and_leaves_source_untouched() -> None:
    """Retagging a borrowed view must allocate a private copy."""

    source = bytearray(b"Uh")
    fragment = Borrowed(memoryview(source))

    rewritten = fragment.retagged(Tag.TITLE)

    assert isinstance(rewritten, Owned)
    assert rewritten.tobytes() == b"Th"
    assert source == bytearray(b"Uh")


def test_borrowed_without_tag_narrows_view() -> None:
    """Dropping a tag from a borrowed view should not copy or mutate the source."""

    source = b"Ub"
    stripped = Borrowed(memoryview(source)).without_tag()

    assert isinstance(stripped, Borrowed)
    assert stripped.tobytes() == b"b"
    assert stripped.tag is Tag.NEUTRAL


def test_owned_rewrites_happen_in_place() -> None:
    """Owned fragments should be rewritten without further allocation."""

    fragment = Owned(bytearray(b"Ub"))

    assert fragment.retagged(Tag.TITLE) is fragment
    assert fragment.tobytes() == b"Tb"
    assert fragment.without_tag() is fragment
    assert fragment.tobytes() == b"b"


def test_unit_constructors_and_tag() -> None:
    """Unit helpers should wrap bytes as borrowed or owned fragments."""

    borrowed = Unit.borrowed(b"Pa", 1)
    owned = Unit.owned(b"Ta", 2)

    assert isinstance(borrowed.fragment, Borrowed)
    assert borrowed.tag is Tag.PUNCTUATION
    assert isinstance(owned.fragment, Owned)
    assert owned.tag is Tag.TITLE
    assert owned.consumed == 2

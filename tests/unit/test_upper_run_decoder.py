"""Unit tests for restoring casing with the upper-run decoder."""

from __future__ import annotations

import pytest

from casecodec.codecs.decoder import DecoderState, UpperRunDecoder
from casecodec.errors import CodecContractError
from casecodec.models.datatypes import Unit
from casecodec.text.normalizer import TagStreamNormalizer
from tests.codec_helpers import drive, push_all


def _decoder() -> UpperRunDecoder:
    decoder = UpperRunDecoder()
    decoder.set_normalizer(TagStreamNormalizer())
    return decoder


@pytest.mark.parametrize(
    ("encoded", "expected"),
    [
        ("Thello world", "Hello world"),
        ("UhelloL world", "HELLO world"),
        ("UabL-UcdL", "AB-CD"),
        ("iTphone", "iPhone"),
        ("UnasaL's", "NASA's"),
        ("Ta1", "A1"),
        ("UäöL straße", "ÄÖ straße"),
        ("plain", "plain"),
    ],
)
def test_decoder_restores_casing(encoded: str, expected: str) -> None:
    """Decoded streams should reproduce the original casing."""

    popped = drive(_decoder(), encoded)

    assert b"".join(fragment for fragment, _ in popped).decode("utf-8") == expected


def test_title_capitalizes_only_its_own_character() -> None:
    """Title should not open a run."""

    decoder = _decoder()
    popped = push_all(decoder, [b"Ta", b"b"])

    assert [unit.fragment.tobytes() for unit in popped] == [b"A", b"b"]
    assert decoder.state is DecoderState.IDLE


def test_upper_tag_opens_run_until_marker() -> None:
    """Every literal after `U` should be capitalized until the `L` marker."""

    decoder = _decoder()

    decoder.push(Unit.borrowed(b"Ua", 2), False)
    assert decoder.state is DecoderState.IN_RUN
    decoder.push(Unit.borrowed(b"b", 1), False)
    decoder.push(Unit.borrowed(b"L", 1), False)
    assert decoder.state is DecoderState.IDLE
    decoder.push(Unit.borrowed(b"c", 1), True)

    popped = [decoder.pop() for _ in range(4)]
    assert [(unit.fragment.tobytes(), unit.consumed) for unit in popped] == [
        (b"A", 2),
        (b"B", 1),
        (b"", 1),
        (b"c", 1),
    ]
    assert decoder.empty()


def test_idle_units_pass_through_unchanged() -> None:
    """Neutral units outside a run should be returned as pushed."""

    decoder = _decoder()
    unit = Unit.borrowed(b"7", 1)

    decoder.push(unit, True)

    assert decoder.pop() is unit


def test_decoder_contract_errors() -> None:
    """Popping when empty and pushing after last should both be rejected."""

    decoder = _decoder()
    with pytest.raises(CodecContractError):
        decoder.pop()

    decoder.push(Unit.borrowed(b"a", 1), True)
    with pytest.raises(CodecContractError):
        decoder.push(Unit.borrowed(b"b", 1), False)

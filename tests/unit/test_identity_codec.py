"""Unit tests for the single-slot identity codec."""

from __future__ import annotations

import pytest

from casecodec.codecs.identity import IdentityCodec
from casecodec.errors import CodecContractError
from casecodec.models.datatypes import Unit
from casecodec.text.normalizer import CharacterNormalizer
from tests.codec_helpers import drive


def test_identity_returns_units_unchanged() -> None:
    """Identity sessions should reproduce the input byte for byte."""

    codec = IdentityCodec()
    codec.set_normalizer(CharacterNormalizer())

    popped = drive(codec, "Hello WORLD-1")

    assert b"".join(fragment for fragment, _ in popped) == b"Hello WORLD-1"


def test_identity_holds_a_single_unit() -> None:
    """A second push before draining should be rejected, not queued."""

    codec = IdentityCodec()
    first = Unit.borrowed(b"a", 1)

    codec.push(first, False)
    with pytest.raises(CodecContractError, match="holds one unit"):
        codec.push(Unit.borrowed(b"b", 1), False)

    assert codec.pop() is first
    assert codec.empty()


def test_identity_pop_when_empty_raises() -> None:
    """Popping an empty slot is a contract error."""

    with pytest.raises(CodecContractError, match="no ready unit"):
        IdentityCodec().pop()

"""Reference normalizers producing tagged fragments for case codecs."""

from .normalizer import (
    CaseFoldNormalizer,
    CharacterNormalizer,
    Normalizer,
    TagStreamNormalizer,
    normalizer_for,
)

__all__ = [
    "CaseFoldNormalizer",
    "CharacterNormalizer",
    "Normalizer",
    "TagStreamNormalizer",
    "normalizer_for",
]

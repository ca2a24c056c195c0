"""Shared datatypes for casecodec modules."""

from .datatypes import (
    Borrowed,
    CodecKind,
    Fragment,
    NormalizedText,
    Owned,
    Tag,
    Unit,
)

__all__ = [
    "Borrowed",
    "CodecKind",
    "Fragment",
    "NormalizedText",
    "Owned",
    "Tag",
    "Unit",
]

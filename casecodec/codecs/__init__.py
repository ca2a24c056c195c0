"""Case codec variants and their factory.

This package provides the identity, upper-run encoder, and upper-run decoder
codecs that share one push/pop protocol.
"""

from .base import CaseCodec
from .decoder import DecoderState, UpperRunDecoder
from .encoder import UpperRunEncoder, boundary_marker
from .factory import (
    DEFAULT_SUPPORTED_KINDS,
    CaseCodecFactory,
    create_codec,
    resolve_codec_kind,
)
from .identity import IdentityCodec

__all__ = [
    "CaseCodec",
    "CaseCodecFactory",
    "DEFAULT_SUPPORTED_KINDS",
    "DecoderState",
    "IdentityCodec",
    "UpperRunDecoder",
    "UpperRunEncoder",
    "boundary_marker",
    "create_codec",
    "resolve_codec_kind",
]

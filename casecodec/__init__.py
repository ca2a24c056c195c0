"""Top-level package for casecodec.

This package provides a reversible case-folding codec for tokenizer text
normalization. The main entry points are `CaseNormalizationPipeline` and the
`encode_case`/`decode_case` shortcuts.
"""

from .codecs import CaseCodecFactory, create_codec
from .pipeline import CaseNormalizationPipeline, decode_case, encode_case

__all__ = [
    "CaseCodecFactory",
    "CaseNormalizationPipeline",
    "__version__",
    "create_codec",
    "decode_case",
    "encode_case",
]

__version__ = "0.1.0"

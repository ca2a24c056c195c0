"""Basic smoke tests for project wiring."""

import casecodec
from casecodec.config import CodecConfig
from casecodec.pipeline import CaseNormalizationPipeline


def test_pipeline_can_be_instantiated() -> None:
    """Pipeline class should be constructible with default settings."""

    pipeline = CaseNormalizationPipeline()
    assert pipeline.config == CodecConfig()


def test_package_exports_shortcuts() -> None:
    """Top-level package should expose encode/decode shortcuts and a version."""

    assert casecodec.decode_case(casecodec.encode_case("Hello")) == "Hello"
    assert casecodec.__version__

from .pipeline import get_default_normalizer, normalize, NormalizerPipeline
from .scoring import GlitchScorer, MAX_SCORE
from .types import (
    CanonicalRecord,
    CategoryInput,
    FieldResult,
    Issue,
    RawRecord,
    classify_category,
)
from .base import FieldRule, Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize",
    "NormalizerPipeline",
    "GlitchScorer",
    "MAX_SCORE",
    "CanonicalRecord",
    "CategoryInput",
    "FieldResult",
    "Issue",
    "RawRecord",
    "classify_category",
    "FieldRule",
    "Normalizer",
]

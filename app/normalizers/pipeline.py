import logging
from typing import Dict, Optional

from .base import FieldRule, Normalizer
from .rules import FIELD_RULES
from .scoring import GlitchScorer
from .types import FIELD_ORDER, MISSING, CanonicalRecord, Field, RawRecord

log = logging.getLogger(__name__)


class NormalizerPipeline(Normalizer):
    """
    Runs every field rule over a raw record, in the fixed field order,
    then hands the results to the scorer.
    Never raises: dirty data comes back as a glitched canonical record.
    """
    def __init__(self, rules: Optional[Dict[Field, FieldRule]] = None, scorer: Optional[GlitchScorer] = None):
        self.rules = rules or FIELD_RULES
        self.scorer = scorer or GlitchScorer()

    def normalize(self, raw: RawRecord) -> CanonicalRecord:
        results = {f: self.rules[f](raw.get(f, MISSING)) for f in FIELD_ORDER}
        score, issues = self.scorer.score(results[f] for f in FIELD_ORDER)
        if score:
            log.debug("product %s glitched: score=%d issues=%d", raw.get("id"), score, len(issues))
        return CanonicalRecord(
            id=raw.get("id"),
            name=results["name"].value,
            price=results["price"].value,
            stock=results["stock"].value,
            category=results["category"].value,
            updated_at=results["updatedAt"].value,
            glitch_score=score,
            glitch_report=issues,
        )


_default = NormalizerPipeline()


def get_default_normalizer() -> Normalizer:
    """Factory for the default rule set + scorer."""
    return _default


def normalize(raw: RawRecord) -> CanonicalRecord:
    """Raw record -> canonical record. Total; never raises."""
    return _default.normalize(raw)

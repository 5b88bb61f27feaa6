from typing import Iterable, List, Tuple
from .types import FieldResult, Issue

MAX_SCORE = 100


class GlitchScorer:
    """
    Folds per-field results into one bounded score and an ordered issue list.
    Penalties only ever add up; the total is clamped to [0, MAX_SCORE].
    """
    def __init__(self, max_score: int = MAX_SCORE):
        self.max_score = max_score

    def score(self, results: Iterable[FieldResult]) -> Tuple[int, Tuple[Issue, ...]]:
        total = 0
        issues: List[Issue] = []
        for r in results:
            total += r.penalty
            if r.issue is not None:
                issues.append(r.issue)
        return max(0, min(total, self.max_score)), tuple(issues)

"""
Score breakdown data model.

Holds the promoter / passive / detractor counts of a survey and derives the
percentages and the Net Promoter Score from them.
"""

from dataclasses import dataclass


def compute_score(promoters: int, detractors: int, total: int) -> int:
    """
    Compute the Net Promoter Score from segment counts.

    score = (promoters - detractors) / total * 100, rounded half away from
    zero. Integer arithmetic only, so .5 boundaries are exact.

    Args:
        promoters: Number of promoter responses
        detractors: Number of detractor responses
        total: Number of responses overall

    Returns:
        Integer in [-100, 100]; 0 when there are no responses
    """
    if total == 0:
        return 0

    numerator = 100 * (promoters - detractors)
    magnitude = (2 * abs(numerator) + total) // (2 * total)
    return magnitude if numerator >= 0 else -magnitude


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Segment counts for a survey.
    """
    promoters: int = 0
    passives: int = 0
    detractors: int = 0

    @property
    def total(self) -> int:
        return self.promoters + self.passives + self.detractors

    @property
    def score(self) -> int:
        return compute_score(self.promoters, self.detractors, self.total)

    def _percent(self, count: int) -> float:
        if self.total == 0:
            return 0.0
        return 100.0 * count / self.total

    @property
    def promoter_percent(self) -> float:
        return self._percent(self.promoters)

    @property
    def passive_percent(self) -> float:
        return self._percent(self.passives)

    @property
    def detractor_percent(self) -> float:
        return self._percent(self.detractors)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "promoters": self.promoters,
            "passives": self.passives,
            "detractors": self.detractors,
            "total": self.total,
            "promoter_percent": self.promoter_percent,
            "passive_percent": self.passive_percent,
            "detractor_percent": self.detractor_percent,
            "score": self.score
        }

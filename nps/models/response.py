"""
Survey response data model.

Represents a single respondent's answer to the "how likely are you to
recommend" question.
"""

from dataclasses import dataclass
from typing import Any

from nps.models.errors import InvalidRatingError
from nps.models.rating import Classification, is_valid_rating


@dataclass(frozen=True, order=True)
class SurveyResponse:
    """
    A validated (respondent_id, rating) pair.
    Ordered by respondent id, then rating.
    """
    respondent_id: Any  # Any hashable, totally ordered identifier
    rating: int  # 0-10

    def __post_init__(self):
        if not is_valid_rating(self.rating):
            raise InvalidRatingError(self.respondent_id, self.rating)

    @property
    def classification(self) -> Classification:
        return Classification.from_rating(self.rating)


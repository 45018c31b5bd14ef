"""
Error types.

Every failure in the toolkit is an invalid rating, either alone or collected
from a batch. All of them are ValueErrors so callers can catch broadly.
"""

from typing import Any, List


class NetPromoterScoreError(ValueError):
    """Base class for NPS errors."""


class InvalidRatingError(NetPromoterScoreError):
    """
    A rating fell outside the allowed scale.

    Attributes:
        respondent_id: Identifier of the response that was rejected
        rating: The offending rating value, exactly as supplied
    """

    def __init__(self, respondent_id: Any, rating: Any):
        self.respondent_id = respondent_id
        self.rating = rating
        super().__init__(
            f"Invalid rating value: {rating!r} (respondent {respondent_id!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, InvalidRatingError):
            return NotImplemented
        return (self.respondent_id, self.rating) == (other.respondent_id, other.rating)

    def __hash__(self):
        return hash((self.respondent_id, self.rating))

    def __reduce__(self):
        return (type(self), (self.respondent_id, self.rating))


class SurveyValidationError(NetPromoterScoreError):
    """
    One or more responses in a batch were rejected.

    Raised after the whole batch has been processed; valid responses are
    already stored by then.

    Attributes:
        errors: InvalidRatingError per rejected response, in input order
    """

    def __init__(self, errors: List[InvalidRatingError]):
        self.errors = list(errors)
        noun = "response" if len(self.errors) == 1 else "responses"
        super().__init__(f"{len(self.errors)} invalid {noun}: " + "; ".join(str(e) for e in self.errors))

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __reduce__(self):
        return (type(self), (self.errors,))

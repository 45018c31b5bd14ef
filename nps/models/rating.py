"""
Rating scale and classification.

A rating is a plain integer on the 0-10 scale. Classification maps a rating
to the promoter / passive / detractor segment it counts toward.
"""

from enum import IntEnum

import config.settings as settings


def is_valid_rating(value) -> bool:
    """Return True if value is an integer on the configured rating scale."""
    # bool is an int subclass; True/False are not ratings
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return settings.MIN_RATING <= value <= settings.MAX_RATING


class Classification(IntEnum):
    """
    Respondent segment, ordered from least to most loyal.
    """
    DETRACTOR = 0
    PASSIVE = 1
    PROMOTER = 2

    @classmethod
    def from_rating(cls, rating: int) -> "Classification":
        """
        Classify a rating.

        Args:
            rating: Rating on the 0-10 scale

        Returns:
            PROMOTER for 9-10, PASSIVE for 7-8, DETRACTOR for 0-6

        Raises:
            ValueError: If rating is not on the scale
        """
        if not is_valid_rating(rating):
            raise ValueError(
                f"Invalid rating: {rating!r}. "
                f"Must be an integer {settings.MIN_RATING}-{settings.MAX_RATING}"
            )
        if rating >= settings.PROMOTER_MIN_RATING:
            return cls.PROMOTER
        if rating >= settings.PASSIVE_MIN_RATING:
            return cls.PASSIVE
        return cls.DETRACTOR

    @property
    def label(self) -> str:
        return self.name.lower()

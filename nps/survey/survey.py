"""
Survey - container of NPS responses.

Stores validated ratings keyed by respondent id, supports single, batch and
bulk ingestion, and computes the Net Promoter Score with lazy caching.
"""

import logging
from collections import Counter
from typing import Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from nps.models.breakdown import ScoreBreakdown
from nps.models.errors import InvalidRatingError, SurveyValidationError
from nps.models.rating import Classification
from nps.models.response import SurveyResponse
from nps.survey.id_generators import SequentialIdGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Survey(Generic[T]):
    """
    Collection of survey responses keyed by respondent id.

    Respondent ids may be any hashable, totally ordered type (ints, strings).
    Re-adding an id replaces its previous rating. Responses are always read
    back in ascending id order.

    The score is cached after the first query and cleared by every successful
    insertion. A Survey does no locking: callers that populate one from
    several threads must serialize the mutating calls themselves.
    """

    def __init__(self):
        """Create an empty survey."""
        self._responses: Dict[T, SurveyResponse] = {}
        self._score_cache: Optional[int] = None

    @classmethod
    def from_responses(cls, responses: Iterable[Tuple[T, int]]) -> "Survey[T]":
        """
        Create a survey from (respondent_id, rating) pairs.

        Args:
            responses: Pairs to add, in order

        Returns:
            A new Survey holding every response

        Raises:
            SurveyValidationError: If any rating is invalid. The partially
                populated survey is discarded; only the errors are returned.
        """
        survey = cls()
        survey.add_multiple_responses(responses)
        return survey

    def _insert(self, respondent_id: T, rating: int) -> None:
        """
        Validate and store a single response.

        This is the only method that writes to the response mapping.

        Raises:
            InvalidRatingError: If rating is outside the scale (state unchanged)
        """
        try:
            response = SurveyResponse(respondent_id, rating)
        except InvalidRatingError as e:
            logger.warning(f"Rejected response: {e}")
            raise

        self._responses[respondent_id] = response
        self._score_cache = None
        logger.debug(f"Stored rating {rating} for respondent {respondent_id!r}")

    def _insert_all(self, responses: Iterable[Tuple[T, int]]) -> List[InvalidRatingError]:
        """Insert every pair, returning the errors in input order."""
        errors: List[InvalidRatingError] = []
        stored = 0
        for respondent_id, rating in responses:
            try:
                self._insert(respondent_id, rating)
                stored += 1
            except InvalidRatingError as e:
                errors.append(e)

        logger.info(f"Stored {stored} responses, rejected {len(errors)}")
        return errors

    def add_response(self, respondent_id: T, rating: int) -> None:
        """
        Add a response with the given respondent id and rating.

        Args:
            respondent_id: Identifier of the respondent
            rating: Rating on the 0-10 scale

        Raises:
            InvalidRatingError: If rating is outside the scale
        """
        self._insert(respondent_id, rating)

    def add_multiple_responses(self, responses: Iterable[Tuple[T, int]]) -> None:
        """
        Add several (respondent_id, rating) pairs.

        Every pair is attempted. Valid pairs are stored even when others
        fail; all failures are reported together at the end.

        Raises:
            SurveyValidationError: With one InvalidRatingError per rejected
                pair, in input order
        """
        errors = self._insert_all(responses)
        if errors:
            raise SurveyValidationError(errors)

    def extend(self, responses: Iterable[Tuple[T, int]]) -> None:
        """Alias of add_multiple_responses."""
        self.add_multiple_responses(responses)

    def add_bulk_responses(
        self,
        respondent_id_fn: Callable[[], T],
        rating_quantities: Iterable[Tuple[int, int]]
    ) -> None:
        """
        Add ratings by quantity, drawing a fresh respondent id for each unit.

        For each (rating, quantity) pair, respondent_id_fn is called quantity
        times and every generated id is stored with that rating.

        Args:
            respondent_id_fn: Zero-argument callable returning the next id
            rating_quantities: (rating, quantity) pairs; quantity 0 is a no-op

        Raises:
            ValueError: If a quantity is negative or not an integer. Checked
                before anything is generated or stored.
            SurveyValidationError: With one error per generated id whose
                rating was rejected, in generation order
        """
        rating_quantities = list(rating_quantities)
        for rating, quantity in rating_quantities:
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
                raise ValueError(
                    f"Invalid quantity for rating {rating!r}: {quantity!r}. "
                    f"Must be a non-negative integer"
                )

        generated = (
            (respondent_id_fn(), rating)
            for rating, quantity in rating_quantities
            for _ in range(quantity)
        )
        self.add_multiple_responses(generated)

    def add_bulk_responses_auto_id(self, rating_quantities: Iterable[Tuple[int, int]]) -> None:
        """
        Add ratings by quantity with integer ids 1, 2, 3, ...

        The counter runs across the whole call, so a total quantity Q produces
        exactly the ids 1..Q. Intended for surveys keyed by int.

        Raises:
            ValueError: If a quantity is negative or not an integer
            SurveyValidationError: If any rating is invalid
        """
        self.add_bulk_responses(SequentialIdGenerator(), rating_quantities)

    def responses(self) -> List[SurveyResponse]:
        """Return all responses in ascending respondent id order."""
        return [self._responses[respondent_id] for respondent_id in sorted(self._responses)]

    def respondent_ids(self) -> List[T]:
        """Return all respondent ids in ascending order."""
        return sorted(self._responses)

    def get(self, respondent_id: T) -> Optional[SurveyResponse]:
        """Retrieve a response by respondent id. Returns None if not found."""
        return self._responses.get(respondent_id)

    def segment(self, classification: Classification) -> List[SurveyResponse]:
        """
        Return the responses in one segment.

        Args:
            classification: DETRACTOR, PASSIVE or PROMOTER

        Returns:
            Matching responses in ascending respondent id order
        """
        return [
            response for response in self.responses()
            if response.classification == classification
        ]

    def breakdown(self) -> ScoreBreakdown:
        """
        Count promoters, passives and detractors.

        Always computed from the current responses; not cached.
        """
        counts = Counter(response.classification for response in self._responses.values())
        return ScoreBreakdown(
            promoters=counts[Classification.PROMOTER],
            passives=counts[Classification.PASSIVE],
            detractors=counts[Classification.DETRACTOR]
        )

    def _calculate_score(self) -> int:
        breakdown = self.breakdown()
        logger.debug(
            f"Calculating NPS: {breakdown.promoters} promoters, "
            f"{breakdown.detractors} detractors, {breakdown.total} responses"
        )
        return breakdown.score

    def score(self) -> int:
        """
        Return the Net Promoter Score.

        Percentage of promoters (9-10) minus percentage of detractors (0-6),
        rounded half away from zero to an integer in [-100, 100]. An empty
        survey scores 0.

        The result is cached until the next successful insertion.
        """
        if self._score_cache is None:
            self._score_cache = self._calculate_score()
        return self._score_cache

    @property
    def is_empty(self) -> bool:
        return not self._responses

    def __len__(self) -> int:
        return len(self._responses)

    def __iter__(self) -> Iterator[SurveyResponse]:
        return iter(self.responses())

    def __contains__(self, respondent_id) -> bool:
        return respondent_id in self._responses

    def __repr__(self) -> str:
        return f"Survey(responses={len(self._responses)})"


# Design Rationale and Trade-offs:
#
# 1. Single write path
#    - Every ingestion method ends in _insert
#    - The score cache is cleared only after a successful write
#
# 2. Batch failures
#    - Valid responses are stored before SurveyValidationError is raised
#    - from_responses never returns a partially populated survey
#
# 3. Ordering on read
#    - Responses live in a plain dict and are sorted by id when read
#    - Trade-off: ids of mixed types (int and str) fail with TypeError on read

"""
NPS - Net Promoter Score toolkit.

Collects 0-10 survey ratings keyed by respondent id and computes the Net
Promoter Score and its promoter / passive / detractor breakdown.
"""

from nps.models.breakdown import ScoreBreakdown
from nps.models.errors import InvalidRatingError, NetPromoterScoreError, SurveyValidationError
from nps.models.rating import Classification
from nps.models.response import SurveyResponse
from nps.survey.id_generators import PrefixedIdGenerator, SequentialIdGenerator
from nps.survey.survey import Survey

__all__ = [
    "Classification",
    "InvalidRatingError",
    "NetPromoterScoreError",
    "PrefixedIdGenerator",
    "ScoreBreakdown",
    "SequentialIdGenerator",
    "Survey",
    "SurveyResponse",
    "SurveyValidationError",
]

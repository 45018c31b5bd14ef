"""
Data models for NPS surveys.

- Rating scale and Classification
- SurveyResponse
- ScoreBreakdown
- Error types
"""

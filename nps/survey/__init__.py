"""
Survey Module.

The Survey aggregate and the respondent id generators used for bulk ingestion.
"""

"""
Ingestion helpers: CSV loading and bulk rating:quantity parsing.
"""

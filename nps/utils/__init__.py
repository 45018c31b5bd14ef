"""
Utility modules for the NPS toolkit.

Cross-cutting concerns:
- Report: breakdown tables and CSV export
"""

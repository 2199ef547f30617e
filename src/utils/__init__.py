"""
Utility modules for the sentiment analyzer.

Cross-cutting concerns:
- Output: Sinks for user-facing text
- Storage: CSV export of report tables
"""

"""
Analysis components for the sentiment analyzer.

Contains the modules that move reviews through the analysis:
- Ingestion (word lists, review CSV)
- Normalization (tokenizer and normalizer)
- Scoring (single-review sentiment score)
- Aggregation (batch frequency pass)
- Reporting (report formatting)
"""

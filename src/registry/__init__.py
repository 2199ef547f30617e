"""
Lexicon Module.

Positive and negative word lists, built once and queried by every
analysis pass.
"""

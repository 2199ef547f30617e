"""
Container types backing every dataset in the analyzer.

- OrderedCollection: growable array with sort and binary-search lookup
- SortedView: frozen, sorted snapshot used for all lexicon queries
"""

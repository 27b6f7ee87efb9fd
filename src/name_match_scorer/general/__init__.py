"""
general.
=======

Shared general-purpose modules used by the matching pipeline:
token normalization, similarity primitives, vocabularies and utilities.
"""

"""Glob notation algebra: parsing, coverage, intersection, normalization and union."""

"""Auricular Points -- data layer for an ear-diagram point quiz.

A set of named reference points is authored on an ear diagram in normalized
image coordinates. The user taps a location, picks a point name, and the guess
is graded against the nearest authored point within a tolerance.

This package provides tools for:
- Parsing free-form, possibly malformed CSV text into a validated point catalog
- Loading catalogs from files or the bundled default resource
- Finding the nearest authored point to a normalized tap
- Grading a guess against that point with an adjustable tolerance
- Producing author-mode CSV rows for new points

Key principles:
- Malformed rows are skipped, never fatal
- Catalogs are immutable and replaced wholesale on reload
- Parsing and matching are pure: no I/O, no hidden state

Main subpackages:
- models: Data models (EarPoint, PointCatalog, MatchResult, GradeOutcome, QuizProfile)
- ingest: CSV parser and the file/resource loader
- analysis: Nearest-point matching, grading and authoring helpers
"""

__all__ = []

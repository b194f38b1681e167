# -*- coding: utf-8 -*-
"""
MSERKit Exception Hierarchy - Domain-specific exceptions for MSERKit.

Lets callers catch MSERKit errors distinctly from Python built-in
exceptions. Every MSERKit exception subclasses both ``MserError`` and the
matching built-in exception, so existing ``except ValueError`` handlers
keep working.

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""


class MserError(Exception):
    """Base exception for all MSERKit errors."""


class ValidationError(MserError, ValueError):
    """Invalid input data or parameters.

    Raised for non-2D or non-integer arrays, pixel values outside the
    grid's level range and sub-grid rectangles outside the parent grid.
    """


class TreeConsistencyError(MserError, RuntimeError):
    """A component tree violates its structural invariants.

    Raised by :func:`mserkit.consistency.check_tree`. Indicates a bug in
    the tree builder or in one of the analysis passes, never bad input.
    """

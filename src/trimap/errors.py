#!/usr/bin/env python3
"""Exceptions raised by the trimap geometry kernel."""


class InvalidInputError(ValueError):
    """Raised when an operation receives the wrong number of points."""


class OutOfRangeError(ValueError):
    """Raised when a coordinate falls outside valid latitude/longitude bounds."""

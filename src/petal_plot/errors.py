"""Exception and warning types for petal-plot."""

from __future__ import annotations


class RoseDataError(ValueError):
    """Input series or table cannot be laid out."""


class SeriesLengthWarning(UserWarning):
    """Primary and secondary series have different lengths."""

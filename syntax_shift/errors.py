from __future__ import annotations


class TransformError(ValueError):
    """Base class for every failure a conversion can report."""


class ParseError(TransformError):
    """Input is not valid (or repairable) structured data."""


class UnsupportedMode(TransformError):
    """The converter slug is not recognized."""


class MalformedToken(TransformError):
    """A token to decode does not have the expected shape."""


class UnknownEngineFailure(TransformError):
    """A recognized converter failed for a reason outside the taxonomy."""

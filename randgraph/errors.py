"""Exceptions raised by randgraph."""


class InvalidArgumentError(ValueError):
    """Raised when a sampling interval is inverted or empty.

    Subclasses ValueError so callers that already guard numeric input with
    ``except ValueError`` keep working.
    """

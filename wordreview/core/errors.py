"""
Error types raised by the review engine.

The pure engine only ever raises InvalidArgumentError. RecordNotFoundError
belongs to the store layer used by the study service.
"""


class WordReviewError(Exception):
    """Base class for all wordreview errors."""
    pass


class InvalidArgumentError(WordReviewError, ValueError):
    """Raised when a caller passes a negative count or limit."""
    pass


class RecordNotFoundError(WordReviewError, KeyError):
    """Raised when a store is asked to save a record it does not hold."""
    pass

"""Custom exception hierarchy for word-cross building."""


class CrosswordError(Exception):
    """Base exception for builder failures."""


class WordListError(CrosswordError):
    """Raised when the submitted word list has the wrong shape."""


class PlacementError(CrosswordError):
    """Raised when a word cannot be written into the grid."""


class SearchExhaustedError(CrosswordError):
    """Raised when no grid up to the maximum bounds holds every word."""


class BudgetExhaustedError(SearchExhaustedError):
    """Raised when the attempt or time budget runs out before a result."""


class DictionaryLoadError(CrosswordError):
    """Raised when the word dictionary cannot be read."""

"""Custom exception hierarchy for crossword generation."""


class ConwordsError(Exception):
    """Base exception for generator failures."""


class ConfigurationError(ConwordsError):
    """Raised when the generator options are missing or inconsistent."""


class DictionaryLoadError(ConwordsError):
    """Raised when a dictionary file cannot be read or has the wrong shape."""


class PopulationError(ConwordsError):
    """Raised when a generation is requested over an empty population."""


class ValidationError(ConwordsError):
    """Raised when the grid integrity checks fail."""

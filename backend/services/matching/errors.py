"""Error taxonomy for the matching engine.

Empty results (no peers above threshold, no fitting jobs, no skills to
learn) are valid outputs and never raised.
"""


class MatchingError(ValueError):
    """Base class for engine errors reported to the caller."""


class InvalidInputError(MatchingError):
    """A required field on a primary record is missing or malformed."""


class ConfigurationError(MatchingError):
    """A config value is out of range. Raised before any scoring work."""

"""Domain error types."""


class InvalidInput(ValueError):
    """Raised when a numeric value is malformed or negative where it must not be."""


class PersistenceFailure(Exception):
    """Raised when the trip log cannot be written or read."""

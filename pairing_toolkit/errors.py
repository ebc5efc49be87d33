"""Exceptions raised by the toolkit."""


class InvalidParameterError(ValueError):
    """A setup or sizing parameter is out of range. Do not retry unchanged."""


class RandomnessError(RuntimeError):
    """The pairing library failed to sample a uniform element. Safe to retry."""


class DegenerateInputError(ValueError):
    """Duplicate roots, identities or indices that would silently break soundness."""

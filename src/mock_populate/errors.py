"""
Exception types raised by the mock data generators.
"""


class MockPopulateError(Exception):
    """Base class for all mock-populate errors."""


class InvalidConfiguration(MockPopulateError, ValueError):
    """Raised when generator or dataset options are rejected at the boundary."""


class GenerationFailed(MockPopulateError, RuntimeError):
    """Raised when a generator cannot produce a value within its retry budget."""

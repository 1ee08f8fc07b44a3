"""
Error types raised by the analytics store.

ValidationError is surfaced to API callers as a 400 with {"error": ...}.
PersistenceError only ever reaches the log: the store catches it at its
boundary so the API keeps answering when the data file is unavailable.
"""


class AnalyticsError(Exception):
    pass


class ValidationError(AnalyticsError):
    """A required request field is missing or empty."""


class PersistenceError(AnalyticsError):
    """Reading or writing the analytics data file failed."""

"""Custom error types for clear error handling.

The scoring engine itself never raises for any input text; these errors belong
to the collaborators around it (resource loading, configuration, HTTP payloads).
"""


class SentimentAppError(Exception):
    """Base class for every error raised by sentiment_app."""


class ResourceLoadError(SentimentAppError, RuntimeError):
    """Raised when a resource table is missing, unreadable or malformed."""


class ConfigurationError(SentimentAppError, ValueError):
    """Raised when engine configuration values cannot be interpreted."""


class InvalidPayloadError(SentimentAppError, ValueError):
    """Raised when an HTTP request body does not carry usable text."""

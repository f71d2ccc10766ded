"""
Public package interface for sentiment_app.

Exports a stable API for the rest of the app: the engine and its result
type, configuration, resource loading, formatting and the error types.
"""

from .config import SentimentConfig
from .engine import EMPTY_RESULT, SentimentEngine, SentimentResult
from .errors import (
    ConfigurationError,
    InvalidPayloadError,
    ResourceLoadError,
    SentimentAppError,
)
from .formatter import format_sentiment
from .resources import SentimentResources, default_resources, load_resources

__all__ = [
    "EMPTY_RESULT",
    "SentimentEngine",
    "SentimentResult",
    "SentimentConfig",
    "SentimentResources",
    "default_resources",
    "load_resources",
    "format_sentiment",
    "ConfigurationError",
    "InvalidPayloadError",
    "ResourceLoadError",
    "SentimentAppError",
]

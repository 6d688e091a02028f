"""Core modules for BrandPulse."""

from .models import *
from .config import Settings
from .exceptions import BrandPulseError, ConfigError, FetchError, AnalysisError
from .sources import detect_source, is_discussion_url

__all__ = [
    "Settings",
    "RawContent",
    "AnalysisRecord",
    "BrandPulseError",
    "ConfigError",
    "FetchError",
    "AnalysisError",
    "detect_source",
    "is_discussion_url",
]

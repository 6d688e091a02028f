"""BrandPulse - LLM sentiment analysis for review sites and Reddit threads."""

__version__ = "0.1.0"
__author__ = "BrandPulse Team"

from .core.models import *
from .core.config import Settings
from .services.llm import LLMServiceFactory, SentimentAnalyzer
from .services.scraper import ContentFetcher

__all__ = [
    "Settings",
    "RawContent",
    "AnalysisRecord",
    "LLMServiceFactory",
    "SentimentAnalyzer",
    "ContentFetcher",
]

"""Services for BrandPulse."""

from .llm import LLMServiceFactory, SentimentAnalyzer
from .scraper import ContentFetcher

__all__ = [
    "LLMServiceFactory",
    "SentimentAnalyzer",
    "ContentFetcher",
]

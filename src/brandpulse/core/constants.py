"""Constants and configuration values for BrandPulse."""

# Source Detection Constants
class SourceConstants:
    """Constants related to source classification."""

    # Source tags
    REDDIT = "reddit"
    G2 = "g2"
    CAPTERRA = "capterra"
    TRUSTPILOT = "trustpilot"
    OTHER = "other"

    # Domain fragment -> tag, checked in order (discussion source first)
    DOMAIN_FRAGMENTS = (
        ("reddit.com", REDDIT),
        ("g2.com", G2),
        ("capterra.com", CAPTERRA),
        ("trustpilot.com", TRUSTPILOT),
    )

# Scraping Constants
class ScrapeConstants:
    """Constants for content acquisition."""

    REDDIT_JSON_SUFFIX = ".json"
    REDDIT_COMMENT_LIMIT = 100  # items requested from the thread endpoint
    MIN_CONTENT_LENGTH = 100  # chars required before analysis
    FIRECRAWL_FORMATS = ["markdown"]

# Prompt Constants
class PromptConstants:
    """Constants for LLM prompts and responses."""

    MAX_INPUT_CHARS = 8000  # hard cap on text sent to the model
    MAX_TOKENS = 1024  # max tokens for the analysis response
    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

# Analysis Schema Constants
class SchemaConstants:
    """Field groups of the analysis record."""

    LIST_FIELDS = (
        "themes",
        "pain_points",
        "praise_points",
        "competitor_mentions",
        "feature_requests",
    )

# Display Constants
class DisplayConstants:
    """Constants for console rendering."""

    SENTIMENT_EMOJI = {
        "positive": "🟢",
        "negative": "🔴",
        "mixed": "🟡",
        "neutral": "⚪",
    }
    FALLBACK_INDICATOR = "•"
    UNKNOWN_SENTIMENT = "unknown"
    RULE_WIDTH = 60

# Error Handling Constants
class ErrorConstants:
    """Constants for error handling."""

    REQUEST_TIMEOUT = 60  # timeout for API requests
    MAX_ERROR_PAYLOAD = 500  # chars of a failing payload kept in messages

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

"""Exception types raised by the BrandPulse pipeline."""

import logging

logger = logging.getLogger(__name__)


class BrandPulseError(Exception):
    """
    Base exception for all pipeline failures.

    Every subclass is terminal for the run: the CLI prints the message and exits non-zero.
    """
    def __init__(self, message: str = "Pipeline failed"):
        super().__init__(message)


class ConfigError(BrandPulseError):
    """
    This exception is raised when a required credential is missing at startup.

    Raised before any network activity takes place.
    """
    def __init__(self, message: str = "Configuration invalid"):
        super().__init__(message)
        logger.warning(f"Configuration error: {message}")


class FetchError(BrandPulseError):
    """
    This exception is raised when content cannot be acquired from a URL
    due to network failures, non-success responses, malformed payloads,
    or too little extracted text.
    """
    def __init__(self, message: str = "Content fetch failed"):
        super().__init__(message)
        logger.warning(f"Content fetch failed: {message}")


class AnalysisError(BrandPulseError):
    """
    This exception is raised when the completion service call fails
    or its response cannot be parsed as a JSON object.

    The raw model response, when there is one, is kept on `raw_response` for diagnostics.
    """
    def __init__(self, message: str = "Analysis failed", raw_response: str = None):
        super().__init__(message)
        self.raw_response = raw_response
        logger.warning(f"Analysis failed: {message}")

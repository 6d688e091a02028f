"""Command-line interface for BrandPulse."""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .core.config import Settings
from .core.constants import FileConstants, ScrapeConstants
from .core.exceptions import ConfigError, FetchError
from .core.models import RawContent
from .core.sources import detect_source
from .services.llm import LLMServiceFactory, SentimentAnalyzer
from .services.scraper import ContentFetcher
from .utils.data_prep import build_payload, export_to_json
from .utils.display import display_results

logger = logging.getLogger(__name__)

USAGE = "Usage: brandpulse <url>"
EXAMPLE = "Example: brandpulse https://www.g2.com/products/hubspot/reviews"


def setup_logging(level: str = "INFO"):
    """Setup logging configuration; later calls only adjust the level."""
    logging.basicConfig(format=FileConstants.LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))


def load_settings(args) -> Settings:
    """Build settings from the environment, applying CLI overrides."""
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def acquire(url: str, fetcher: ContentFetcher) -> RawContent:
    """Fetch a URL and enforce the minimum content length."""
    text = fetcher.fetch(url)
    if not text or len(text) < ScrapeConstants.MIN_CONTENT_LENGTH:
        raise FetchError(
            "Not enough content extracted from URL. The page may require auth or JS rendering."
        )
    return RawContent(url=url, source_type=detect_source(url), text=text)


def run_pipeline(url: str, settings: Settings, out: Optional[str] = None) -> Dict[str, Any]:
    """Fetch, analyze and display one URL. Returns the exported payload."""
    fetcher = ContentFetcher(settings)
    analyzer = SentimentAnalyzer(LLMServiceFactory.create(settings), settings)

    content = acquire(url, fetcher)
    record = analyzer.analyze(content.text, content.source_type, content.url)

    display_results(content.url, content.source_type, record)
    payload = build_payload(content.url, content.source_type, record)
    if out:
        export_to_json(payload, out)
        logger.info(f"Results exported to {out}")
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandpulse",
        description="BrandPulse - LLM sentiment analysis for review pages and Reddit threads",
    )
    parser.add_argument('url', nargs='?', help='Review page or Reddit thread URL')
    parser.add_argument('--out', help='Also write the JSON payload to this file')
    parser.add_argument('--log-level', help='Override LOG_LEVEL (DEBUG, INFO, WARNING, ...)')
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if not args.url:
        print(USAGE, file=sys.stderr)
        print(EXAMPLE, file=sys.stderr)
        return 1

    setup_logging()
    try:
        settings = load_settings(args)
        setup_logging(settings.log_level)
        settings.require_credentials()
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    try:
        run_pipeline(args.url, settings, out=args.out)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Pipeline failure", exc_info=True)
        print(f"\n❌ Pipeline failed: {e}", file=sys.stderr)
        return 1
    return 0

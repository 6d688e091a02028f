"""Console rendering of analysis results."""

from typing import List

from ..core.constants import DisplayConstants
from ..core.models import AnalysisRecord
from .data_prep import build_payload, to_json

RULE = "═" * DisplayConstants.RULE_WIDTH


def sentiment_indicator(sentiment) -> str:
    """Emoji for a sentiment value, or a plain bullet for anything unrecognized."""
    if isinstance(sentiment, str):
        return DisplayConstants.SENTIMENT_EMOJI.get(sentiment, DisplayConstants.FALLBACK_INDICATOR)
    return DisplayConstants.FALLBACK_INDICATOR


def _bullets(title: str, items: List) -> List[str]:
    if not items:
        return []
    return ["", title] + [f"  • {item}" for item in items]


def format_report(url: str, source_type: str, record: AnalysisRecord) -> str:
    """Build the human-readable report followed by the raw JSON block."""
    sentiment = record.overall_sentiment
    label = str(sentiment).upper() if sentiment is not None else "UNKNOWN"

    lines = [
        "",
        RULE,
        "📊 ANALYSIS RESULTS",
        RULE,
        f"URL:        {url}",
        f"Source:     {source_type}",
        f"Sentiment:  {sentiment_indicator(sentiment)} {label} ({record.sentiment_score}/10)",
        f"Confidence: {record.confidence}",
        "",
        "📌 SUMMARY",
        f"{record.summary}",
        "",
        "💬 KEY QUOTE",
        f'"{record.key_quote}"',
    ]

    if record.themes:
        lines += ["", "🏷️  THEMES"]
        for theme in record.themes:
            try:
                s = record.sentiment_per_theme.get(theme) or DisplayConstants.UNKNOWN_SENTIMENT
            except TypeError:
                # unhashable theme, e.g. a nested object from the model
                s = DisplayConstants.UNKNOWN_SENTIMENT
            lines.append(f"  {sentiment_indicator(s)} {theme} — {s}")

    lines += _bullets("🔴 PAIN POINTS", record.pain_points)
    lines += _bullets("🟢 PRAISE POINTS", record.praise_points)
    lines += _bullets("⚔️  COMPETITOR MENTIONS", record.competitor_mentions)
    lines += _bullets("💡 FEATURE REQUESTS", record.feature_requests)

    lines += [
        "",
        RULE,
        "📦 RAW JSON OUTPUT (for Supabase/dashboard):",
        to_json(build_payload(url, source_type, record)),
        RULE,
        "",
    ]
    return "\n".join(lines)


def display_results(url: str, source_type: str, record: AnalysisRecord) -> None:
    """Print the report and JSON payload to stdout."""
    print(format_report(url, source_type, record))

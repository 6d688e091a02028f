"""Data models for BrandPulse."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from .constants import SchemaConstants


@dataclass
class RawContent:
    """Text acquired from a single URL."""
    url: str
    source_type: str
    text: str


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


@dataclass
class AnalysisRecord:
    """Structured sentiment analysis returned by the completion service.

    Every field is optional: the shape is requested from the model, not
    guaranteed. ``raw`` holds the parsed response exactly as returned.
    """
    overall_sentiment: Optional[str] = None
    sentiment_score: Optional[int] = None
    confidence: Optional[str] = None
    themes: List[str] = field(default_factory=list)
    sentiment_per_theme: Dict[str, str] = field(default_factory=dict)
    pain_points: List[str] = field(default_factory=list)
    praise_points: List[str] = field(default_factory=list)
    competitor_mentions: List[str] = field(default_factory=list)
    feature_requests: List[str] = field(default_factory=list)
    key_quote: Optional[str] = None
    summary: Optional[str] = None
    raw: Optional[Dict[str, Any]] = field(default=None, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisRecord":
        """Build a record from parsed model output, defaulting malformed optional fields."""
        per_theme = data.get("sentiment_per_theme")
        lists = {name: _as_list(data.get(name)) for name in SchemaConstants.LIST_FIELDS}
        return cls(
            overall_sentiment=data.get("overall_sentiment"),
            sentiment_score=data.get("sentiment_score"),
            confidence=data.get("confidence"),
            sentiment_per_theme=per_theme if isinstance(per_theme, dict) else {},
            key_quote=data.get("key_quote"),
            summary=data.get("summary"),
            raw=dict(data),
            **lists,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Record fields for export; the model's own output when available."""
        if self.raw is not None:
            return dict(self.raw)
        return {
            "overall_sentiment": self.overall_sentiment,
            "sentiment_score": self.sentiment_score,
            "confidence": self.confidence,
            "themes": self.themes,
            "sentiment_per_theme": self.sentiment_per_theme,
            "pain_points": self.pain_points,
            "praise_points": self.praise_points,
            "competitor_mentions": self.competitor_mentions,
            "feature_requests": self.feature_requests,
            "key_quote": self.key_quote,
            "summary": self.summary,
        }

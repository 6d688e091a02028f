"""LLM services for structured sentiment extraction."""

import json
import logging
import re
from textwrap import dedent
from typing import Any, Dict, Optional

import anthropic
import openai

from ..core.config import Settings
from ..core.constants import ErrorConstants, PromptConstants
from ..core.exceptions import AnalysisError, ConfigError
from ..core.models import AnalysisRecord

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = dedent("""
You are a brand sentiment analyst. Analyze the following content from {source_type} and return ONLY valid JSON with no markdown, no code blocks, no explanation.

Return this exact structure:
{{
  "overall_sentiment": "positive" | "negative" | "mixed" | "neutral",
  "sentiment_score": <number 1-10, where 1=very negative, 10=very positive>,
  "confidence": "high" | "medium" | "low",
  "themes": ["<theme1>", "<theme2>"],
  "sentiment_per_theme": {{
    "<theme>": "positive" | "negative" | "mixed" | "neutral"
  }},
  "pain_points": ["<specific complaint or frustration>"],
  "praise_points": ["<specific positive mentioned>"],
  "competitor_mentions": ["<competitor name>"],
  "feature_requests": ["<requested feature or improvement>"],
  "key_quote": "<single most representative sentence from the content>",
  "summary": "<2-3 sentence plain english summary for a stakeholder>"
}}

Content to analyze:
---
{content}
---
""").strip()

OBJECT_RE = re.compile(r"\{.*\}", re.S)


def build_analysis_prompt(text: str, source_type: str) -> str:
    """Embed the (truncated) content and the required schema in one instruction."""
    return ANALYSIS_PROMPT.format(
        source_type=source_type,
        content=text[:PromptConstants.MAX_INPUT_CHARS],
    )


def _first_object(s: str) -> Optional[Dict[str, Any]]:
    """Decode the first complete JSON object starting at any '{' in s."""
    decoder = json.JSONDecoder()
    idx = s.find("{")
    while idx != -1:
        try:
            obj, _ = decoder.raw_decode(s, idx)
        except ValueError:
            pass
        else:
            if isinstance(obj, dict):
                return obj
        idx = s.find("{", idx + 1)
    return None


def parse_json_response(s: str) -> Dict[str, Any]:
    """Parse a model response into a JSON object.

    Tries the whole text, then the greedy first-'{'-to-last-'}' span, then the
    first balanced object. The greedy span alone is fooled by several
    top-level objects or stray braces in surrounding prose.
    """
    try:
        data = json.loads(s)
        if isinstance(data, dict):
            return data
    except ValueError:
        pass

    match = OBJECT_RE.search(s)
    if match:
        try:
            data = json.loads(match.group(0))
            if isinstance(data, dict):
                return data
        except ValueError:
            pass

    data = _first_object(s)
    if data is not None:
        return data

    raise AnalysisError("Model returned non-JSON response: " + s, raw_response=s)


class AnthropicService:
    """Anthropic Messages API completion service."""

    name = "Claude"

    def __init__(self, settings: Settings):
        self.client = anthropic.Anthropic(
            api_key=settings.anthropic_api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )
        self.model = settings.llm_model
        logger.debug(f"Anthropic service initialized with model {self.model}")

    def complete(self, prompt: str, max_tokens: int = PromptConstants.MAX_TOKENS) -> str:
        """Send a single-turn prompt and return the first text block."""
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            raise AnalysisError(f"Anthropic request failed: {e}") from e

        if not message.content:
            raise AnalysisError("Anthropic returned an empty response")
        return message.content[0].text


class OpenAIService:
    """OpenAI Chat Completions service."""

    name = "OpenAI"

    def __init__(self, settings: Settings):
        self.client = openai.OpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )
        # Anthropic model ids mean nothing to OpenAI
        model = settings.llm_model
        if model == PromptConstants.DEFAULT_MODEL:
            model = PromptConstants.DEFAULT_OPENAI_MODEL
        self.model = model
        logger.debug(f"OpenAI service initialized with model {self.model}")

    def complete(self, prompt: str, max_tokens: int = PromptConstants.MAX_TOKENS) -> str:
        """Send a single-turn prompt and return the first choice's text."""
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.OpenAIError as e:
            raise AnalysisError(f"OpenAI request failed: {e}") from e

        if not response.choices:
            raise AnalysisError("OpenAI returned an empty response")
        return response.choices[0].message.content or ""


class LLMServiceFactory:
    """Factory for creating LLM services."""

    PROVIDERS = {
        "anthropic": AnthropicService,
        "openai": OpenAIService,
    }

    @staticmethod
    def create(settings: Settings):
        """Create the completion service named by ``settings.llm_provider``."""
        provider = settings.llm_provider.lower()
        service_cls = LLMServiceFactory.PROVIDERS.get(provider)
        if service_cls is None:
            raise ConfigError(
                f"Unknown LLM provider '{settings.llm_provider}'. "
                f"Choose one of: {', '.join(LLMServiceFactory.PROVIDERS)}"
            )
        return service_cls(settings)


class SentimentAnalyzer:
    """Turns raw page text into an AnalysisRecord via a completion service."""

    def __init__(self, llm_service, settings: Settings):
        self.llm = llm_service
        self.max_tokens = settings.llm_max_tokens

    def analyze(self, text: str, source_type: str, url: str) -> AnalysisRecord:
        logger.info(f"🤖 Analyzing with {getattr(self.llm, 'name', 'LLM')}...")
        logger.debug(f"Analysis context: {source_type} {url} ({len(text)} chars)")

        prompt = build_analysis_prompt(text, source_type)
        raw_response = self.llm.complete(prompt, max_tokens=self.max_tokens)
        logger.debug(f"Raw model response: {raw_response[:ErrorConstants.MAX_ERROR_PAYLOAD]}")

        return AnalysisRecord.from_dict(parse_json_response(raw_response))

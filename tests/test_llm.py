"""Test prompt construction, response parsing and completion services."""

import json

import anthropic
import pytest
from unittest.mock import Mock, patch

from brandpulse.core.config import Settings
from brandpulse.core.exceptions import AnalysisError, ConfigError
from brandpulse.core.models import AnalysisRecord
from brandpulse.services.llm import (
    AnthropicService,
    LLMServiceFactory,
    OpenAIService,
    SentimentAnalyzer,
    build_analysis_prompt,
    parse_json_response,
)

CLEAN_ANALYSIS = {
    "overall_sentiment": "mixed",
    "sentiment_score": 6,
    "confidence": "high",
    "themes": ["pricing", "ease of use"],
    "sentiment_per_theme": {"pricing": "negative", "ease of use": "positive"},
    "pain_points": ["Price jumps sharply between tiers"],
    "praise_points": ["Onboarding took a single afternoon"],
    "competitor_mentions": ["Salesforce", "Pipedrive"],
    "feature_requests": ["Cheaper starter plan"],
    "key_quote": "Love the product, hate the bill.",
    "summary": "Users like the workflow but object to pricing.",
}


def _settings(**overrides):
    values = {"firecrawl_api_key": "fc-test", "anthropic_api_key": "sk-ant", "openai_api_key": "sk-oai"}
    values.update(overrides)
    return Settings(**values)


class TestParseJsonResponse:
    """Test direct and fallback JSON extraction."""

    def test_clean_json(self):
        assert parse_json_response(json.dumps(CLEAN_ANALYSIS)) == CLEAN_ANALYSIS

    def test_json_wrapped_in_prose(self):
        raw = f"Here is the result: {json.dumps(CLEAN_ANALYSIS)} Thanks!"
        assert parse_json_response(raw) == CLEAN_ANALYSIS

    def test_json_in_code_fence(self):
        raw = "```json\n" + json.dumps(CLEAN_ANALYSIS, indent=2) + "\n```"
        assert parse_json_response(raw) == CLEAN_ANALYSIS

    def test_multiple_objects_takes_first(self):
        raw = 'First: {"overall_sentiment": "positive", "sentiment_score": 8} then {"overall_sentiment": "negative"}'
        assert parse_json_response(raw) == {"overall_sentiment": "positive", "sentiment_score": 8}

    def test_stray_brace_in_prose(self):
        raw = 'Note {draft}: {"overall_sentiment": "neutral"}'
        assert parse_json_response(raw) == {"overall_sentiment": "neutral"}

    def test_no_json_raises(self):
        raw = "I'm sorry, I can't analyze this content."
        with pytest.raises(AnalysisError) as exc_info:
            parse_json_response(raw)
        assert exc_info.value.raw_response == raw
        assert raw in str(exc_info.value)

    def test_non_object_root_raises(self):
        with pytest.raises(AnalysisError):
            parse_json_response('["positive", "negative"]')


class TestBuildAnalysisPrompt:
    """Test the analysis instruction."""

    def test_contains_schema_and_source(self):
        prompt = build_analysis_prompt("Great CRM.", "g2")
        assert "content from g2" in prompt
        assert "return ONLY valid JSON" in prompt
        for key in CLEAN_ANALYSIS:
            assert f'"{key}"' in prompt
        assert prompt.endswith("---\nGreat CRM.\n---")

    def test_truncates_to_8000_chars(self):
        text = "a" * 8000 + "ZZZ"
        prompt = build_analysis_prompt(text, "other")
        assert "a" * 8000 in prompt
        assert "ZZZ" not in prompt


class TestSentimentAnalyzer:
    """Test the analyzer against a mocked completion service."""

    def setup_method(self):
        self.llm = Mock()
        self.analyzer = SentimentAnalyzer(self.llm, _settings())

    def test_clean_response_returned_unmodified(self):
        self.llm.complete.return_value = json.dumps(CLEAN_ANALYSIS)

        record = self.analyzer.analyze("text " * 50, "reddit", "https://www.reddit.com/r/x/comments/1/")

        assert isinstance(record, AnalysisRecord)
        assert record.to_dict() == CLEAN_ANALYSIS
        assert record.overall_sentiment == "mixed"
        assert record.sentiment_score == 6
        assert record.themes == ["pricing", "ease of use"]
        assert record.sentiment_per_theme == {"pricing": "negative", "ease of use": "positive"}
        assert record.key_quote == "Love the product, hate the bill."
        prompt = self.llm.complete.call_args.args[0]
        assert "content from reddit" in prompt
        assert self.llm.complete.call_args.kwargs["max_tokens"] == 1024

    def test_prose_wrapped_response(self):
        self.llm.complete.return_value = f"Here is the result: {json.dumps(CLEAN_ANALYSIS)} Thanks!"

        record = self.analyzer.analyze("text", "g2", "https://www.g2.com/products/x/reviews")

        assert record.to_dict() == CLEAN_ANALYSIS

    def test_non_json_response_raises(self):
        self.llm.complete.return_value = "No structured output today."

        with pytest.raises(AnalysisError):
            self.analyzer.analyze("text", "g2", "https://www.g2.com/products/x/reviews")

    def test_missing_optional_fields_default(self):
        self.llm.complete.return_value = '{"overall_sentiment": "positive", "themes": "pricing", "sentiment_per_theme": []}'

        record = self.analyzer.analyze("text", "other", "https://example.com")

        assert record.overall_sentiment == "positive"
        assert record.sentiment_score is None
        assert record.themes == []
        assert record.sentiment_per_theme == {}
        assert record.pain_points == []
        assert record.summary is None


class TestCompletionServices:
    """Test the provider clients with the SDKs mocked out."""

    @patch("brandpulse.services.llm.anthropic.Anthropic")
    def test_anthropic_returns_first_text_block(self, mock_cls):
        create = mock_cls.return_value.messages.create
        create.return_value = Mock(content=[Mock(text='{"overall_sentiment": "neutral"}'), Mock(text="extra")])

        service = AnthropicService(_settings())

        assert service.complete("prompt") == '{"overall_sentiment": "neutral"}'
        create.assert_called_once_with(
            model="claude-sonnet-4-20250514",
            max_tokens=1024,
            messages=[{"role": "user", "content": "prompt"}],
        )

    @patch("brandpulse.services.llm.anthropic.Anthropic")
    def test_anthropic_api_error_becomes_analysis_error(self, mock_cls):
        error = anthropic.APIConnectionError(request=Mock())
        mock_cls.return_value.messages.create.side_effect = error

        with pytest.raises(AnalysisError, match="Anthropic request failed"):
            AnthropicService(_settings()).complete("prompt")

    @patch("brandpulse.services.llm.anthropic.Anthropic")
    def test_anthropic_empty_content_raises(self, mock_cls):
        mock_cls.return_value.messages.create.return_value = Mock(content=[])

        with pytest.raises(AnalysisError):
            AnthropicService(_settings()).complete("prompt")

    @patch("brandpulse.services.llm.openai.OpenAI")
    def test_openai_returns_first_choice(self, mock_cls):
        create = mock_cls.return_value.chat.completions.create
        create.return_value = Mock(choices=[Mock(message=Mock(content="{}"))])

        service = OpenAIService(_settings(llm_provider="openai"))

        assert service.complete("prompt", max_tokens=200) == "{}"
        assert create.call_args.kwargs["model"] == "gpt-4o-mini"
        assert create.call_args.kwargs["max_tokens"] == 200

    @patch("brandpulse.services.llm.anthropic.Anthropic")
    def test_factory_defaults_to_anthropic(self, mock_cls):
        assert isinstance(LLMServiceFactory.create(_settings()), AnthropicService)

    @patch("brandpulse.services.llm.openai.OpenAI")
    def test_factory_openai(self, mock_cls):
        assert isinstance(LLMServiceFactory.create(_settings(llm_provider="OpenAI")), OpenAIService)

    def test_factory_unknown_provider(self):
        with pytest.raises(ConfigError, match="Unknown LLM provider"):
            LLMServiceFactory.create(_settings(llm_provider="cohere"))

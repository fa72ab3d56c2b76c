"""Insight — текстовый комментарий к PRIMARY (внешний удалённый вызов)."""

from .prompt import (
    DEFAULT_LOCALE,
    DEFAULT_SAMPLE_STEP,
    build_prompt,
    downsample_for_prompt,
    empty_message,
    failure_message,
    format_points,
    supported_locales,
)
from .service import InsightService
from .summarizer import (
    DEFAULT_MODEL,
    AnthropicSummarizer,
    InsightConfig,
    InsightSummarizer,
    RemoteInsightError,
    extract_text,
)

__all__ = [
    # Prompt
    "DEFAULT_LOCALE",
    "DEFAULT_SAMPLE_STEP",
    "build_prompt",
    "downsample_for_prompt",
    "empty_message",
    "failure_message",
    "format_points",
    "supported_locales",
    # Summarizer
    "DEFAULT_MODEL",
    "AnthropicSummarizer",
    "InsightConfig",
    "InsightSummarizer",
    "RemoteInsightError",
    "extract_text",
    # Service
    "InsightService",
]

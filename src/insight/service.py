"""
Insight Service — комментарий к графику с graceful degradation

Любой сбой RemoteInsightError превращается в фиксированный локализованный
текст. Повторов и backoff нет. Состояние графиков не затрагивается.
"""

import logging
from typing import Optional

from src.core.domain.point_sequence import PointSequence
from src.insight.prompt import DEFAULT_LOCALE, empty_message, failure_message
from src.insight.summarizer import InsightSummarizer, RemoteInsightError

logger = logging.getLogger(__name__)


class InsightService:
    """Генерация текста для отображения поверх InsightSummarizer."""

    def __init__(self, summarizer: InsightSummarizer, locale: Optional[str] = None):
        """
        Args:
            summarizer: удалённая реализация summarize(sequence)
            locale: язык fallback-текстов (по умолчанию locale summarizer'а или "de")
        """
        self.summarizer = summarizer
        config = getattr(summarizer, "config", None)
        self.locale = locale or getattr(config, "locale", None) or DEFAULT_LOCALE

        # Проверка locale сразу, а не при первом сбое
        failure_message(self.locale)

    def generate(self, primary: PointSequence) -> str:
        """
        Комментарий к PRIMARY.

        Returns:
            Текст ответа, либо фиксированный текст при пустом ответе или сбое
        """
        try:
            text = self.summarizer.summarize(primary)
        except RemoteInsightError as e:
            logger.warning("Insight generation failed: %s", e)
            return failure_message(self.locale)

        if not text or not text.strip():
            return empty_message(self.locale)
        return text

"""
Insight Summarizer — удалённая генерация комментария к PRIMARY

Абстракция: summarize(sequence) -> str, при любом сбое RemoteInsightError.
Ядро не зависит от конкретного сетевого клиента или механизма credentials.

Реализация по умолчанию — AnthropicSummarizer поверх anthropic SDK.
"""

import os
from dataclasses import dataclass
from typing import Any, Final, Optional, Protocol

import anthropic

from src.core.domain.point_sequence import PointSequence
from src.insight.prompt import DEFAULT_LOCALE, DEFAULT_SAMPLE_STEP, build_prompt

# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_MODEL: Final[str] = "claude-sonnet-4-20250514"

API_KEY_ENV: Final[str] = "ANTHROPIC_API_KEY"
MODEL_ENV: Final[str] = "CALCVIS_INSIGHT_MODEL"
LOCALE_ENV: Final[str] = "CALCVIS_INSIGHT_LOCALE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RemoteInsightError(Exception):
    """
    Сбой удалённого вызова: сеть, отсутствующий ключ, некорректный ответ.

    Полностью изолирован от ядра: состояние графиков не меняется.
    """

    pass


# =============================================================================
# CAPABILITY
# =============================================================================


class InsightSummarizer(Protocol):
    """Возможность: текстовый комментарий к последовательности."""

    def summarize(self, sequence: PointSequence) -> str:
        """
        Raises:
            RemoteInsightError: при любом сбое удалённого вызова
        """
        ...


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InsightConfig:
    """Конфигурация генерации комментария."""

    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = 1000
    temperature: float = 0.3
    locale: str = DEFAULT_LOCALE
    sample_step: int = DEFAULT_SAMPLE_STEP

    @classmethod
    def from_env(cls) -> "InsightConfig":
        """Конфигурация из переменных окружения (ANTHROPIC_API_KEY и др.)"""
        return cls(
            api_key=os.environ.get(API_KEY_ENV) or None,
            model=os.environ.get(MODEL_ENV) or DEFAULT_MODEL,
            locale=os.environ.get(LOCALE_ENV) or DEFAULT_LOCALE,
        )


# =============================================================================
# ANTHROPIC ADAPTER
# =============================================================================


class AnthropicSummarizer:
    """
    Реализация InsightSummarizer через Anthropic Messages API.

    client может быть передан явно (например, для тестов); иначе создаётся
    лениво при первом вызове из config.api_key.
    """

    def __init__(self, config: Optional[InsightConfig] = None, client: Any = None):
        self.config = config or InsightConfig.from_env()
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.config.api_key:
                raise RemoteInsightError(f"Missing API key ({API_KEY_ENV} is not set)")
            self._client = anthropic.Anthropic(api_key=self.config.api_key)
        return self._client

    def summarize(self, sequence: PointSequence) -> str:
        """
        Комментарий к PRIMARY последовательности.

        Returns:
            Текст ответа (может быть пустым)

        Raises:
            RemoteInsightError: при отсутствии ключа, ошибке SDK или некорректном ответе
        """
        prompt = build_prompt(sequence, self.config.locale, self.config.sample_step)
        client = self._get_client()

        try:
            response = client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.AnthropicError as e:
            raise RemoteInsightError(f"Anthropic request failed: {e}") from e

        return extract_text(response)


def extract_text(response: Any) -> str:
    """
    Текст из ответа Messages API (конкатенация text-блоков).

    Raises:
        RemoteInsightError: Если ответ не содержит списка content-блоков
            или text-блок содержит не строку
    """
    content = getattr(response, "content", None)
    if not isinstance(content, (list, tuple)):
        raise RemoteInsightError(f"Malformed response: content={content!r}")

    parts = []
    for block in content:
        if getattr(block, "type", None) != "text":
            continue
        text = getattr(block, "text", None)
        if not isinstance(text, str):
            raise RemoteInsightError(f"Malformed response: text block with text={text!r}")
        parts.append(text)
    return "".join(parts).strip()

"""
Insight Prompt — подготовка PRIMARY последовательности для текстового анализа

- Прореживание (каждая вторая точка) для экономии токенов и снижения шума
- Форматирование точек с одним знаком после запятой
- Локализованный промпт тьютора и фиксированные тексты fallback
"""

from typing import Final

from src.core.domain.point_sequence import PointSequence

# Шаг прореживания перед отправкой
DEFAULT_SAMPLE_STEP: Final[int] = 2

DEFAULT_LOCALE: Final[str] = "de"


# =============================================================================
# ЛОКАЛИЗОВАННЫЕ ТЕКСТЫ
# =============================================================================

_PROMPTS: Final[dict[str, str]] = {
    "de": """
Du bist ein freundlicher und präziser Mathe-Tutor für Analysis (Calculus).
Ein Schüler hat eine Funktion f(x) durch Ziehen von Punkten auf einem Graphen erstellt.

Hier sind die ungefähren Koordinaten der Funktion f(x): [{points}].

Deine Aufgabe:
1. Beschreibe kurz den Verlauf von f(x) (z.B. Nullstellen, Extremstellen).
2. Erkläre, wie sich dieser Verlauf auf die Ableitung f'(x) auswirkt (z.B. "Wo f(x) steigt, ist f'(x) positiv").
3. Erkläre, wie sich dieser Verlauf auf die Stammfunktion F(x) auswirkt (z.B. "Die Fläche unter f(x) sammelt sich an...").

Formatiere die Antwort in validem Markdown. Sei prägnant, ermutigend und lehrreich. Nutze maximal 3 Absätze. Sprich den Nutzer direkt an ("Du siehst...").
""",
    "en": """
You are a friendly and precise calculus tutor.
A student has built a function f(x) by dragging points on a graph.

These are the approximate coordinates of f(x): [{points}].

Your task:
1. Briefly describe the shape of f(x) (e.g. roots, extrema).
2. Explain how this shape affects the derivative f'(x) (e.g. "Where f(x) rises, f'(x) is positive").
3. Explain how this shape affects the antiderivative F(x) (e.g. "The area under f(x) accumulates...").

Format the answer as valid Markdown. Be concise, encouraging and instructive. Use at most 3 paragraphs. Address the user directly ("You can see...").
""",
}

_FAILURE_MESSAGES: Final[dict[str, str]] = {
    "de": (
        "Entschuldigung, beim Analysieren des Graphen ist ein Fehler aufgetreten. "
        "Bitte überprüfe deinen API-Schlüssel."
    ),
    "en": "Sorry, something went wrong while analyzing the graph. Please check your API key.",
}

_EMPTY_MESSAGES: Final[dict[str, str]] = {
    "de": "Konnte keine Analyse generieren.",
    "en": "Could not generate an analysis.",
}


def supported_locales() -> list[str]:
    return sorted(_PROMPTS)


def _localized(table: dict[str, str], locale: str) -> str:
    if locale not in table:
        raise ValueError(f"Unsupported locale {locale!r}, expected one of {supported_locales()}")
    return table[locale]


def failure_message(locale: str = DEFAULT_LOCALE) -> str:
    """Фиксированный текст при сбое удалённого вызова"""
    return _localized(_FAILURE_MESSAGES, locale)


def empty_message(locale: str = DEFAULT_LOCALE) -> str:
    """Фиксированный текст при пустом ответе"""
    return _localized(_EMPTY_MESSAGES, locale)


# =============================================================================
# ПОДГОТОВКА ДАННЫХ
# =============================================================================


def downsample_for_prompt(sequence: PointSequence, step: int = DEFAULT_SAMPLE_STEP) -> PointSequence:
    """Прореживание: точки с чётными индексами при step=2"""
    return sequence.every_nth(step)


def format_points(sequence: PointSequence) -> str:
    """
    Форматирование точек для промпта.

    Examples:
        >>> format_points(PointSequence.from_pairs([(0, 1.25), (1.5, -2)]))
        '(0.0, 1.2), (1.5, -2.0)'
    """
    return ", ".join(f"({p.x:.1f}, {p.y:.1f})" for p in sequence.points)


def build_prompt(
    sequence: PointSequence,
    locale: str = DEFAULT_LOCALE,
    sample_step: int = DEFAULT_SAMPLE_STEP,
) -> str:
    """
    Промпт тьютора для PRIMARY последовательности.

    Raises:
        ValueError: Если locale не поддерживается или sample_step < 1
    """
    template = _localized(_PROMPTS, locale)
    points = format_points(downsample_for_prompt(sequence, sample_step))
    return template.format(points=points)

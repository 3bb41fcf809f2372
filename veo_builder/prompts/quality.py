"""Heuristic quality scoring for assembled prompts."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping

from veo_builder.prompts.models import PromptElements, QualityScore

MAX_SUGGESTIONS = 3
# Six flags are counted against eight slots, so completeness tops out at 75.
COMPLETENESS_SLOTS = 8

QUALITY_THRESHOLDS = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Fair"),
)
FALLBACK_LABEL = "Needs Improvement"

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class QualityMetrics:
    """Facts about a prompt that the individual scores are derived from."""

    has_subject: bool
    has_action: bool
    has_context: bool
    has_style: bool
    word_count: int
    character_count: int
    has_descriptive_details: bool
    has_camera_direction: bool

    @classmethod
    def collect(cls, prompt: str, elements: PromptElements) -> QualityMetrics:
        return cls(
            has_subject=bool(elements.subject or elements.custom_subject),
            has_action=bool(elements.action or elements.custom_action),
            has_context=bool(elements.context),
            has_style=bool(elements.style),
            word_count=len(prompt.split()),
            character_count=len(prompt),
            has_descriptive_details=bool(
                elements.subject_age
                or elements.subject_gender
                or elements.subject_appearance
                or elements.subject_clothing
            ),
            has_camera_direction=bool(elements.camera_motion),
        )


def round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round`` rather than to the nearest even."""

    return int(math.floor(value + 0.5))


def clarity_score(prompt: str, metrics: QualityMetrics) -> int:
    score = 100

    if metrics.word_count < 10:
        score -= 30
    elif metrics.word_count > 100:
        score -= 20

    sentences = [chunk for chunk in _SENTENCE_SPLIT.split(prompt) if chunk.strip()]
    if not sentences:
        score -= 20

    tokens = _WHITESPACE.split(prompt.lower())
    if len(tokens) / len(set(tokens)) > 1.5:
        score -= 15

    return max(0, score)


def specificity_score(elements: PromptElements, metrics: QualityMetrics) -> int:
    score = 0
    if metrics.has_subject:
        score += 25
    if metrics.has_action:
        score += 25
    if metrics.has_context:
        score += 20
    if metrics.has_descriptive_details:
        score += 15
    if metrics.has_camera_direction:
        score += 10
    if elements.ambiance:
        score += 5
    return min(100, score)


def creativity_score(elements: PromptElements) -> int:
    score = 60
    if elements.custom_subject:
        score += 10
    if elements.custom_action:
        score += 10

    style_count = len(elements.style or [])
    if style_count > 1:
        score += min(20, style_count * 5)

    if elements.ambiance and elements.audio:
        score += 10
    return min(100, score)


def completeness_score(metrics: QualityMetrics) -> int:
    filled = sum(
        (
            metrics.has_subject,
            metrics.has_action,
            metrics.has_context,
            metrics.has_style,
            metrics.has_descriptive_details,
            metrics.has_camera_direction,
        )
    )
    return round_half_up(filled / COMPLETENESS_SLOTS * 100)


def suggestions_for(metrics: QualityMetrics, elements: PromptElements) -> list[str]:
    """Return up to three hints, most fundamental gaps first."""

    checks = (
        (metrics.has_subject, "Add a subject to give your video a clear focus"),
        (metrics.has_action, "Specify an action to make your scene dynamic"),
        (metrics.has_context, "Add context or setting to ground your scene"),
        (metrics.has_style, "Choose a visual style to define the aesthetic"),
        (metrics.word_count >= 15, "Add more descriptive details for better results"),
        (metrics.has_camera_direction, "Consider adding camera motion for cinematic effect"),
        (bool(elements.ambiance), "Set the mood with an ambiance selection"),
    )
    return [message for satisfied, message in checks if not satisfied][:MAX_SUGGESTIONS]


def quality_label(score: int) -> str:
    for threshold, label in QUALITY_THRESHOLDS:
        if score >= threshold:
            return label
    return FALLBACK_LABEL


def analyze_prompt_quality(
    prompt: str,
    elements: PromptElements | Mapping[str, Any] | None,
) -> QualityScore:
    """Score ``prompt`` built from ``elements`` on a 0-100 scale."""

    elements = PromptElements.coerce(elements)
    metrics = QualityMetrics.collect(prompt, elements)

    clarity = clarity_score(prompt, metrics)
    specificity = specificity_score(elements, metrics)
    creativity = creativity_score(elements)
    completeness = completeness_score(metrics)
    overall = round_half_up((clarity + specificity + creativity + completeness) / 4)

    return QualityScore(
        overall=overall,
        clarity=clarity,
        specificity=specificity,
        creativity=creativity,
        completeness=completeness,
        suggestions=suggestions_for(metrics, elements),
        label=quality_label(overall),
    )

"""Tests for heuristic prompt scoring."""

import pytest

from veo_builder.prompts import analyze_prompt_quality, build_prompt, quality_label
from veo_builder.prompts.quality import round_half_up


FULL_ELEMENTS = {
    "subject": "person",
    "subjectAge": "Young",
    "subjectGender": "Female",
    "subjectClothing": "A business suit",
    "context": "a neon-lit street",
    "action": "Walking",
    "style": ["Cinematic", "Film Noir"],
    "cameraMotion": "Tracking shot",
    "ambiance": "Mysterious",
    "audio": "Soft music",
    "closing": "Fade out",
}


def test_empty_prompt_scores() -> None:
    score = analyze_prompt_quality("", {})

    assert score.clarity == 50
    assert score.specificity == 0
    assert score.creativity == 60
    assert score.completeness == 0
    # 27.5 rounds up, as in the browser.
    assert score.overall == 28
    assert score.suggestions == [
        "Add a subject to give your video a clear focus",
        "Specify an action to make your scene dynamic",
        "Add context or setting to ground your scene",
    ]


def test_full_prompt_scores() -> None:
    score = analyze_prompt_quality(build_prompt(FULL_ELEMENTS), FULL_ELEMENTS)

    assert score.clarity == 100
    assert score.specificity == 100
    assert score.creativity == 80
    assert score.completeness == 75
    assert score.overall == 89
    assert score.label == "Excellent"
    assert score.suggestions == []


def test_subject_only_scores_and_suggestion_order() -> None:
    elements = {"subject": "cat"}
    score = analyze_prompt_quality(build_prompt(elements), elements)

    assert score.clarity == 70
    assert score.specificity == 25
    assert score.completeness == 13
    assert score.overall == 42
    assert score.label == "Fair"
    assert score.suggestions == [
        "Specify an action to make your scene dynamic",
        "Add context or setting to ground your scene",
        "Choose a visual style to define the aesthetic",
    ]


def test_later_suggestions_surface_when_basics_are_present() -> None:
    elements = {"subject": "cat", "action": "Running", "context": "a garden", "style": ["Realistic"]}
    score = analyze_prompt_quality(build_prompt(elements), elements)

    assert score.suggestions == [
        "Add more descriptive details for better results",
        "Consider adding camera motion for cinematic effect",
        "Set the mood with an ambiance selection",
    ]


def test_repetitive_text_loses_clarity() -> None:
    score = analyze_prompt_quality("go " * 10, {})

    assert score.clarity == 85


def test_long_text_loses_clarity() -> None:
    text = " ".join(f"word{index}" for index in range(101)) + "."

    assert analyze_prompt_quality(text, {}).clarity == 80


def test_text_without_sentences_loses_clarity() -> None:
    assert analyze_prompt_quality("...", {}).clarity == 50


def test_creativity_is_capped() -> None:
    elements = {
        "customSubject": "a glass whale",
        "customAction": "singing",
        "style": ["Cinematic", "Animated", "Surreal", "Fantasy", "Vintage"],
        "ambiance": "Joyful",
        "audio": "Electronic music",
    }

    assert analyze_prompt_quality(build_prompt(elements), elements).creativity == 100


def test_completeness_never_exceeds_seventy_five() -> None:
    score = analyze_prompt_quality(build_prompt(FULL_ELEMENTS), FULL_ELEMENTS)

    assert score.completeness == 75


@pytest.mark.parametrize(
    "elements",
    [
        {},
        {"audio": "No audio"},
        FULL_ELEMENTS,
        {"customSubject": "x", "style": ["a"] * 12, "ambiance": "Calm", "audio": "Dialogue"},
    ],
)
def test_scores_stay_in_range(elements: dict) -> None:
    score = analyze_prompt_quality(build_prompt(elements), elements)

    for value in (score.overall, score.clarity, score.specificity, score.creativity, score.completeness):
        assert 0 <= value <= 100
    assert len(score.suggestions) <= 3


@pytest.mark.parametrize(
    ("score", "label"),
    [(100, "Excellent"), (80, "Excellent"), (79, "Good"), (60, "Good"), (40, "Fair"), (39, "Needs Improvement")],
)
def test_quality_label_thresholds(score: int, label: str) -> None:
    assert quality_label(score) == label


def test_round_half_up_differs_from_bankers_rounding() -> None:
    assert round_half_up(12.5) == 13
    assert round_half_up(62.5) == 63
    assert round_half_up(12.4) == 12

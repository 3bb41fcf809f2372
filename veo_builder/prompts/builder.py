"""Compose a natural-language video prompt from structured form selections."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from veo_builder.prompts.models import PromptElements

SUPPRESSED_AUDIO = "No audio"
# A context mentioning one of these already reads as a location phrase.
LOCATIVE_MARKERS = ("standing", "sitting", "located")
SENTENCE_ENDINGS = (".", "!", "?")


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _override(custom: str | None, fallback: str | None) -> str | None:
    custom = (custom or "").strip()
    return custom or fallback


class PromptBuilder:
    """Assembles ordered clauses into a single prompt string.

    Every step appends at most one clause. Steps see the clauses produced so far
    because context and action phrasing depends on whether they open the prompt.
    """

    def __init__(self) -> None:
        self._steps: tuple[Callable[[PromptElements, list[str]], str | None], ...] = (
            self._subject_clause,
            self._context_clause,
            self._action_clause,
            self._style_clause,
            self._camera_clause,
            self._ambiance_clause,
            self._audio_clause,
            self._closing_clause,
        )

    def build(self, elements: PromptElements | Mapping[str, Any] | None) -> str:
        """Return the prompt text, or an empty string when nothing contributes."""

        elements = PromptElements.coerce(elements)
        parts: list[str] = []
        for step in self._steps:
            clause = step(elements, parts)
            if clause:
                parts.append(clause)
        return self.join(parts)

    @staticmethod
    def join(parts: list[str]) -> str:
        if not parts:
            return ""

        text = parts[0]
        for previous, clause in zip(parts, parts[1:]):
            separator = " " if previous.endswith(SENTENCE_ENDINGS) else ", "
            text += separator + clause
        if not text.endswith("."):
            text += "."
        return text

    @staticmethod
    def _subject_clause(elements: PromptElements, parts: list[str]) -> str | None:
        subject = _override(elements.custom_subject, elements.subject)
        if not subject:
            return None

        descriptors = [
            value.lower()
            for value in (elements.subject_age, elements.subject_gender, elements.subject_appearance)
            if value
        ]
        if descriptors:
            clause = f"a {', '.join(descriptors)} {subject.lower()}"
        elif subject.lower().startswith(("a ", "an ")):
            clause = subject
        else:
            clause = f"a {subject}"

        if elements.subject_clothing:
            clause += f" wearing {elements.subject_clothing.lower()}"
        return _capitalize(clause)

    @staticmethod
    def _context_clause(elements: PromptElements, parts: list[str]) -> str | None:
        context = (elements.context or "").strip()
        if not context:
            return None
        if any(marker in context.lower() for marker in LOCATIVE_MARKERS):
            return context
        if parts:
            return f"in {context}"
        return _capitalize(context)

    @staticmethod
    def _action_clause(elements: PromptElements, parts: list[str]) -> str | None:
        action = _override(elements.custom_action, elements.action)
        if not action:
            return None
        return action.lower() if parts else _capitalize(action)

    @staticmethod
    def _style_clause(elements: PromptElements, parts: list[str]) -> str | None:
        styles = [style.lower() for style in elements.style or []]
        if not styles:
            return None
        if len(styles) == 1:
            listed = styles[0]
        elif len(styles) == 2:
            listed = f"{styles[0]} and {styles[1]}"
        else:
            listed = f"{', '.join(styles[:-1])}, and {styles[-1]}"
        return f"Shot in {listed} style"

    @staticmethod
    def _camera_clause(elements: PromptElements, parts: list[str]) -> str | None:
        if not elements.camera_motion:
            return None
        return f"Camera: {elements.camera_motion}"

    @staticmethod
    def _ambiance_clause(elements: PromptElements, parts: list[str]) -> str | None:
        if not elements.ambiance:
            return None
        return f"{elements.ambiance} ambiance"

    @staticmethod
    def _audio_clause(elements: PromptElements, parts: list[str]) -> str | None:
        # Exact comparison: only the catalog literal is suppressed.
        if not elements.audio or elements.audio == SUPPRESSED_AUDIO:
            return None
        return f"Audio: {elements.audio}"

    @staticmethod
    def _closing_clause(elements: PromptElements, parts: list[str]) -> str | None:
        if not elements.closing:
            return None
        return f"Ending with {elements.closing.lower()}"


_default_builder = PromptBuilder()


def build_prompt(elements: PromptElements | Mapping[str, Any] | None) -> str:
    """Build a prompt with the shared stateless builder."""

    return _default_builder.build(elements)

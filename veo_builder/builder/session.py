"""Explicit state for one prompt-builder form.

The form owns its elements; every mutation replaces them with a new
``PromptElements`` and rebuilds the display text synchronously. Preferences and
drafts that should outlive the session go through a ``FlagStore``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from veo_builder.builder.store_client import PromptStoreClient
from veo_builder.prompts import (
    PromptElements,
    QualityScore,
    SavedPrompt,
    analyze_prompt_quality,
    build_prompt,
)
from veo_builder.storage.flags import FlagStore

logger = logging.getLogger(__name__)

SIDE_PANEL_KEY = "veo-side-panel-open"
DRAFT_KEY = "veo-draft-prompt"


@dataclass(frozen=True, slots=True)
class PromptStep:
    """One page of the guided form and the fields it edits."""

    id: str
    title: str
    fields: tuple[str, ...]
    required: bool = False


PROMPT_STEPS: tuple[PromptStep, ...] = (
    PromptStep(
        id="subject",
        title="Subject & Character",
        fields=(
            "subject",
            "custom_subject",
            "subject_age",
            "subject_gender",
            "subject_appearance",
            "subject_clothing",
        ),
        required=True,
    ),
    PromptStep(
        id="scene",
        title="Scene & Action",
        fields=("context", "action", "custom_action"),
        required=True,
    ),
    PromptStep(
        id="style",
        title="Visual Style",
        fields=("style", "camera_motion", "ambiance"),
    ),
    PromptStep(
        id="audio",
        title="Audio & Closing",
        fields=("audio", "closing"),
    ),
)


class BuilderSession:
    """Controller behind the guided prompt form."""

    def __init__(self, flags: FlagStore, elements: PromptElements | None = None) -> None:
        self._flags = flags
        self._elements = elements or PromptElements()
        self._generated_prompt = build_prompt(self._elements)
        self._step_index = 0
        self.saved_prompts: list[SavedPrompt] = []

    @property
    def elements(self) -> PromptElements:
        return self._elements

    @property
    def generated_prompt(self) -> str:
        return self._generated_prompt

    def _replace(self, elements: PromptElements) -> None:
        self._elements = elements
        self._generated_prompt = build_prompt(elements)

    def update_element(self, field: str, value: Any) -> None:
        """Set one field by its Python or camelCase name."""

        data = self._elements.model_dump()
        name = field if field in data else _snake_name(field)
        if name not in data:
            raise KeyError(f"Unknown prompt field {field!r}")
        if name == "style" and isinstance(value, str):
            value = [value]
        elif name == "style" and value is not None:
            value = list(value)
        data[name] = value
        self._replace(PromptElements(**data))

    def toggle_style(self, style: str) -> None:
        """Remove ``style`` if selected, otherwise append it after the others."""

        current = list(self._elements.style or [])
        if style in current:
            current.remove(style)
        else:
            current.append(style)
        self._replace(self._elements.model_copy(update={"style": current}))

    def clear_all_fields(self) -> None:
        self._replace(PromptElements())

    def load_prompt(self, prompt: SavedPrompt) -> None:
        self._replace(prompt.elements.model_copy(deep=True))

    def override_prompt(self, text: str) -> None:
        """Replace the display text by hand until the next field change."""

        self._generated_prompt = text

    def analyze(self) -> QualityScore:
        return analyze_prompt_quality(self._generated_prompt, self._elements)

    @property
    def current_step(self) -> PromptStep:
        return PROMPT_STEPS[self._step_index]

    def is_step_complete(self, step: PromptStep | str) -> bool:
        """Optional steps are always complete; required ones need any field set."""

        if isinstance(step, str):
            step = _step_by_id(step)
        if not step.required:
            return True
        return any(getattr(self._elements, name) for name in step.fields)

    def can_advance(self) -> bool:
        return (
            self._step_index < len(PROMPT_STEPS) - 1
            and self.is_step_complete(self.current_step)
        )

    def next_step(self) -> PromptStep:
        """Move forward unless on the last step or a required step is empty."""

        if self.can_advance():
            self._step_index += 1
        return self.current_step

    def previous_step(self) -> PromptStep:
        if self._step_index > 0:
            self._step_index -= 1
        return self.current_step

    def go_to_step(self, step_id: str) -> PromptStep:
        """Jump to a step; earlier required steps must be complete first."""

        target = PROMPT_STEPS.index(_step_by_id(step_id))
        for step in PROMPT_STEPS[:target]:
            if not self.is_step_complete(step):
                raise ValueError(f"Step {step.id!r} must be completed first")
        self._step_index = target
        return self.current_step

    @property
    def side_panel_open(self) -> bool:
        return bool(self._flags.get(SIDE_PANEL_KEY, False))

    @side_panel_open.setter
    def side_panel_open(self, value: bool) -> None:
        self._flags.set(SIDE_PANEL_KEY, bool(value))

    def save_draft(self) -> None:
        self._flags.set(DRAFT_KEY, self._elements.to_wire())

    def restore_draft(self) -> bool:
        """Load the stored draft, if any. Returns whether one was found."""

        draft = self._flags.get(DRAFT_KEY)
        if not draft:
            return False
        self._replace(PromptElements.model_validate(draft))
        return True

    def discard_draft(self) -> None:
        self._flags.delete(DRAFT_KEY)

    async def save(self, client: PromptStoreClient) -> SavedPrompt | None:
        """Persist the current prompt; blank prompts are not sent."""

        if not self._generated_prompt.strip():
            return None
        saved = await client.save(self._generated_prompt, self._elements)
        logger.debug("Saved prompt %s", saved.id)
        await self.refresh_saved(client)
        return saved

    async def delete(self, client: PromptStoreClient, prompt_id: str) -> bool:
        deleted = await client.delete(prompt_id)
        await self.refresh_saved(client)
        return deleted

    async def refresh_saved(self, client: PromptStoreClient) -> list[SavedPrompt]:
        self.saved_prompts = list(await client.list())
        return self.saved_prompts


def _step_by_id(step_id: str) -> PromptStep:
    for step in PROMPT_STEPS:
        if step.id == step_id:
            return step
    raise KeyError(f"Unknown builder step {step_id!r}")


def _snake_name(name: str) -> str:
    return "".join(f"_{char.lower()}" if char.isupper() else char for char in name)

"""Pydantic models shared by the prompt builder, the scorer and the API."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from veo_builder.catalog.options import CATALOGS, is_catalog_value


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PromptElements(CamelModel):
    """Sparse form state describing one video prompt. Every field is optional."""

    subject: str | None = None
    custom_subject: str | None = None
    subject_age: str | None = None
    subject_gender: str | None = None
    subject_appearance: str | None = None
    subject_clothing: str | None = None
    context: str | None = None
    action: str | None = None
    custom_action: str | None = None
    style: list[str] | None = None
    camera_motion: str | None = None
    ambiance: str | None = None
    audio: str | None = None
    closing: str | None = None

    @classmethod
    def coerce(cls, value: PromptElements | Mapping[str, Any] | None) -> PromptElements:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)

    def off_catalog_fields(self) -> list[str]:
        """Return camelCase names of catalog fields holding a non-catalog value."""

        data = self.to_wire()
        offenders: list[str] = []
        for field in CATALOGS:
            value = data.get(field)
            if not value:
                continue
            values = value if isinstance(value, list) else [value]
            if not all(is_catalog_value(field, item) for item in values):
                offenders.append(field)
        return offenders


class SavedPrompt(CamelModel):
    id: str
    text: str
    elements: PromptElements = Field(default_factory=PromptElements)
    created_at: str


class QualityScore(CamelModel):
    overall: int
    clarity: int
    specificity: int
    creativity: int
    completeness: int
    suggestions: list[str] = Field(default_factory=list)
    label: str = ""

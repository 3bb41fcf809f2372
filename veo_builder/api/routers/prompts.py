"""Saved prompt CRUD plus the stateless build and analyze helpers."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from veo_builder.api.auth import Identity, IdentityDependency
from veo_builder.db.session import get_session
from veo_builder.metrics.prometheus_exporter import (
    prompt_quality_overall,
    prompts_built_total,
    prompts_deleted_total,
    prompts_saved_total,
)
from veo_builder.prompts import (
    PromptElements,
    QualityScore,
    SavedPrompt,
    analyze_prompt_quality,
    build_prompt,
)
from veo_builder.services.prompts import PromptStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prompts", tags=["prompts"])
store = PromptStore()


class SavePromptRequest(BaseModel):
    text: str | None = None
    elements: PromptElements | None = None


class AnalyzeRequest(BaseModel):
    text: str | None = None
    elements: PromptElements = PromptElements()


class BuiltPrompt(BaseModel):
    text: str


@router.get("", response_model=list[SavedPrompt], response_model_exclude_none=True)
async def list_prompts(
    identity: Identity = IdentityDependency,
    session: AsyncSession = Depends(get_session),
) -> list[SavedPrompt]:
    try:
        return await store.list_prompts(session, user_id=identity.sub)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching prompts")
        raise HTTPException(status_code=500, detail="Failed to fetch prompts") from exc


@router.post("", response_model=SavedPrompt, response_model_exclude_none=True)
async def save_prompt(
    body: SavePromptRequest,
    identity: Identity = IdentityDependency,
    session: AsyncSession = Depends(get_session),
) -> SavedPrompt:
    if not body.text or not body.text.strip() or body.elements is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Text and elements are required",
        )

    try:
        await store.ensure_user(session, user_id=identity.sub, email=identity.email)
        saved = await store.save_prompt(
            session,
            user_id=identity.sub,
            text=body.text,
            elements=body.elements,
        )
    except SQLAlchemyError as exc:
        logger.exception("Error saving prompt")
        raise HTTPException(status_code=500, detail="Failed to save prompt") from exc

    prompts_saved_total.inc()
    logger.info("Saved prompt %s for %s", saved.id, identity.sub)
    return saved


@router.delete("/{prompt_id}")
async def delete_prompt(
    prompt_id: str,
    identity: Identity = IdentityDependency,
    session: AsyncSession = Depends(get_session),
) -> dict[str, bool]:
    try:
        numeric_id = int(prompt_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid prompt ID") from None

    try:
        deleted = await store.delete_prompt(session, user_id=identity.sub, prompt_id=numeric_id)
    except SQLAlchemyError as exc:
        logger.exception("Error deleting prompt")
        raise HTTPException(status_code=500, detail="Failed to delete prompt") from exc

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Prompt not found")

    prompts_deleted_total.inc()
    return {"success": True}


@router.post("/build", response_model=BuiltPrompt)
async def build(elements: PromptElements) -> BuiltPrompt:
    prompts_built_total.inc()
    return BuiltPrompt(text=build_prompt(elements))


@router.post("/analyze", response_model=QualityScore)
async def analyze(body: AnalyzeRequest) -> QualityScore:
    text = body.text if body.text is not None else build_prompt(body.elements)
    score = analyze_prompt_quality(text, body.elements)
    prompt_quality_overall.observe(score.overall)
    return score

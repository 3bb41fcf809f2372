"""Business logic for persisting saved prompts."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from veo_builder.db import models
from veo_builder.prompts.models import PromptElements, SavedPrompt


def isoformat_utc(value: datetime) -> str:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def to_saved_prompt(row: models.SavedPromptRow) -> SavedPrompt:
    """Rebuild the API shape of a stored row, dropping empty columns."""

    values = {
        column: getattr(row, column)
        for column in models.ELEMENT_COLUMNS
        if getattr(row, column) is not None
    }
    return SavedPrompt(
        id=str(row.id),
        text=row.text,
        elements=PromptElements(**values),
        created_at=isoformat_utc(row.created_at),
    )


class PromptStore:
    """Facade over the saved_prompts and users tables."""

    async def upsert_user(
        self,
        session: AsyncSession,
        *,
        user_id: str,
        email: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        profile_image_url: str | None = None,
    ) -> models.User:
        """Create the user or refresh its profile fields."""

        user = await session.get(models.User, user_id)
        if user is None:
            user = models.User(id=user_id)
            session.add(user)

        user.email = email
        user.first_name = first_name
        user.last_name = last_name
        user.profile_image_url = profile_image_url
        await session.commit()
        await session.refresh(user)
        return user

    async def ensure_user(self, session: AsyncSession, *, user_id: str, email: str | None = None) -> models.User:
        """Return an existing user or create a bare record for foreign keys."""

        user = await session.get(models.User, user_id)
        if user:
            return user

        user = models.User(id=user_id, email=email)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user

    async def list_prompts(self, session: AsyncSession, *, user_id: str) -> list[SavedPrompt]:
        """Return the user's prompts, oldest first."""

        stmt = (
            select(models.SavedPromptRow)
            .where(models.SavedPromptRow.user_id == user_id)
            .order_by(models.SavedPromptRow.created_at, models.SavedPromptRow.id)
        )
        result = await session.execute(stmt)
        return [to_saved_prompt(row) for row in result.scalars().all()]

    async def save_prompt(
        self,
        session: AsyncSession,
        *,
        user_id: str,
        text: str,
        elements: PromptElements,
    ) -> SavedPrompt:
        """Persist a new prompt. Rows are never edited after creation."""

        values = elements.model_dump(exclude_none=True)
        if "style" in values:
            values["style"] = list(values["style"])

        row = models.SavedPromptRow(user_id=user_id, text=text, **values)
        session.add(row)
        await session.commit()
        await session.refresh(row)
        return to_saved_prompt(row)

    async def delete_prompt(self, session: AsyncSession, *, user_id: str, prompt_id: int) -> bool:
        """Delete one of the user's prompts; ``False`` when nothing matched."""

        stmt = delete(models.SavedPromptRow).where(
            models.SavedPromptRow.id == prompt_id,
            models.SavedPromptRow.user_id == user_id,
        )
        result = await session.execute(stmt)
        await session.commit()
        return (result.rowcount or 0) > 0

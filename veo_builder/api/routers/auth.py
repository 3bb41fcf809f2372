"""Current-user endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from veo_builder.api.auth import Identity, IdentityDependency
from veo_builder.db.session import get_session
from veo_builder.services.prompts import PromptStore, isoformat_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])
store = PromptStore()


@router.get("/user")
async def current_user(
    identity: Identity = IdentityDependency,
    session: AsyncSession = Depends(get_session),
) -> dict[str, str | None]:
    """Upsert the forwarded identity and return the stored profile."""

    try:
        user = await store.upsert_user(
            session,
            user_id=identity.sub,
            email=identity.email,
            first_name=identity.first_name,
            last_name=identity.last_name,
            profile_image_url=identity.picture,
        )
    except SQLAlchemyError as exc:
        logger.exception("Error getting user")
        raise HTTPException(status_code=500, detail="Failed to get user") from exc

    return {
        "id": user.id,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "profileImageUrl": user.profile_image_url,
        "createdAt": isoformat_utc(user.created_at),
        "updatedAt": isoformat_utc(user.updated_at),
    }

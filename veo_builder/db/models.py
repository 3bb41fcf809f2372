"""SQLAlchemy models describing the persisted tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for ORM models."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class User(Base):
    """Identity forwarded by the edge proxy, upserted on every profile lookup."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[str | None] = mapped_column(String(255), index=True)
    first_name: Mapped[str | None] = mapped_column(String(128))
    last_name: Mapped[str | None] = mapped_column(String(128))
    profile_image_url: Mapped[str | None] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
    )

    prompts: Mapped[list["SavedPromptRow"]] = relationship(back_populates="user")


class SavedPromptRow(Base):
    """One saved prompt; element fields are flattened into columns."""

    __tablename__ = "saved_prompts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)

    subject: Mapped[str | None] = mapped_column(Text)
    custom_subject: Mapped[str | None] = mapped_column(Text)
    subject_age: Mapped[str | None] = mapped_column(String(64))
    subject_gender: Mapped[str | None] = mapped_column(String(64))
    subject_appearance: Mapped[str | None] = mapped_column(Text)
    subject_clothing: Mapped[str | None] = mapped_column(Text)
    context: Mapped[str | None] = mapped_column(Text)
    action: Mapped[str | None] = mapped_column(Text)
    custom_action: Mapped[str | None] = mapped_column(Text)
    style: Mapped[list[str] | None] = mapped_column(JSON)
    camera_motion: Mapped[str | None] = mapped_column(String(128))
    ambiance: Mapped[str | None] = mapped_column(String(128))
    audio: Mapped[str | None] = mapped_column(String(128))
    closing: Mapped[str | None] = mapped_column(String(128))

    user: Mapped[User] = relationship(back_populates="prompts")


# Column names shared by PromptElements and SavedPromptRow.
ELEMENT_COLUMNS = (
    "subject",
    "custom_subject",
    "subject_age",
    "subject_gender",
    "subject_appearance",
    "subject_clothing",
    "context",
    "action",
    "custom_action",
    "style",
    "camera_motion",
    "ambiance",
    "audio",
    "closing",
)

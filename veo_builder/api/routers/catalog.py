"""Read-only access to the option catalogs."""

from __future__ import annotations

from fastapi import APIRouter

from veo_builder.catalog import options
from veo_builder.prompts import PromptElements

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("")
async def list_catalogs() -> dict[str, list[str]]:
    return options.as_dict()


@router.post("/validate")
async def validate_elements(elements: PromptElements) -> dict[str, list[str]]:
    """Report catalog fields carrying values outside their catalog."""

    return {"offCatalog": elements.off_catalog_fields()}

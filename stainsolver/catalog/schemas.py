"""Pydantic models for the catalog, generated content, and API payloads.

Split into: catalog records, generated content, API inputs, and API responses.
All models serialize with camelCase aliases to match the frontend.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

StainCategory = Literal[
    "beverage", "food", "oil", "ink", "dirt", "bodily_fluid", "makeup", "grass", "other",
]
MaterialType = Literal["natural", "synthetic", "leather", "upholstery", "hard_surface", "other"]
EffectivenessTier = Literal["excellent", "good", "fair", "poor"]
Difficulty = Literal["Easy", "Moderate", "Difficult"]

EFFECTIVENESS_TIERS: tuple[str, ...] = ("excellent", "good", "fair", "poor")


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ═══════════════ CATALOG RECORDS ═══════════════

class Stain(CamelModel):
    id: int
    name: str
    display_name: str
    color: str = ""
    category: StainCategory = "other"
    description: str | None = None


class Material(CamelModel):
    id: int
    name: str
    display_name: str
    type: MaterialType = "other"
    care_notes: str = ""
    description: str = ""
    common_uses: str = ""


class RawGuide(CamelModel):
    """Authored instructions for one stain/material pair.

    `effectiveness` is kept as a plain string here; tier checking is the
    validator's job so that bad rows can still be loaded and reported.
    """
    id: int | None = None
    stain_id: int
    material_id: int
    pre_treatment: str
    products: list[str] = Field(default_factory=list)
    wash_method: str
    warnings: list[str] = Field(default_factory=list)
    effectiveness: str
    last_updated: datetime | None = None


class GuideSummary(CamelModel):
    """A guide with its stain/material names, used for listings and links."""
    id: int
    stain_id: int
    material_id: int
    stain_name: str
    stain_display_name: str = ""
    material_name: str
    material_display_name: str = ""
    effectiveness: str = ""
    last_updated: datetime | None = None

    @property
    def path(self) -> str:
        return f"/remove/{self.stain_name}/{self.material_name}"


# ═══════════════ GENERATED CONTENT ═══════════════

class Step(CamelModel):
    title: str
    description: str


class Supply(CamelModel):
    name: str
    description: str


class FAQ(CamelModel):
    question: str
    answer: str


class EffectivenessData(CamelModel):
    rating: str
    description: str
    fresh_stains: int = Field(ge=0, le=100)
    old_stains: int = Field(ge=0, le=100)
    set_in_stains: int = Field(ge=0, le=100)


class GeneratedContent(CamelModel):
    intro: str
    steps: list[Step]
    supplies: list[Supply]
    warnings: list[str]
    effectiveness: EffectivenessData
    faqs: list[FAQ]
    difficulty: Difficulty
    time_required: str
    success_rate: int


class GuideValidation(CamelModel):
    """Minimum-content check result for one guide."""
    valid: bool
    results: dict[str, bool]


# ═══════════════ API INPUTS ═══════════════

class StainCreate(CamelModel):
    name: str = Field(min_length=1, pattern=r"^[a-z0-9_-]+$")
    display_name: str = Field(min_length=1)
    color: str = Field(min_length=1)
    category: StainCategory
    description: str | None = None


class MaterialCreate(CamelModel):
    name: str = Field(min_length=1, pattern=r"^[a-z0-9_-]+$")
    display_name: str = Field(min_length=1)
    type: MaterialType
    care_notes: str = ""
    description: str = ""
    common_uses: str = ""


class GuideCreate(CamelModel):
    stain_id: int
    material_id: int
    pre_treatment: str = Field(min_length=1)
    products: list[str] = Field(default_factory=list)
    wash_method: str = Field(min_length=1)
    warnings: list[str] = Field(default_factory=list)
    effectiveness: EffectivenessTier


class GuideSeed(CamelModel):
    """Authoring format used by seed data: references stain/material by slug."""
    stain_name: str
    material_name: str
    pre_treatment: str
    products: list[str]
    wash_method: str
    warnings: list[str]
    effectiveness: str


# ═══════════════ API RESPONSES ═══════════════

class GuideDetail(CamelModel):
    """A raw guide merged with its generated content."""
    id: int | None = None
    stain_id: int
    material_id: int
    pre_treatment: str
    wash_method: str
    effectiveness: str
    last_updated: datetime | None = None
    intro: str = ""
    steps: list[Step] = Field(default_factory=list)
    products: list[Supply] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    faq: list[FAQ] = Field(default_factory=list)
    effectiveness_details: EffectivenessData | None = None
    difficulty: str = ""
    time_required: str = ""
    success_rate: int = 0


class GuideResponse(CamelModel):
    """Body of GET /api/guides/{stain}/{material}. This is what the ISR cache stores."""
    stain: Stain
    material: Material
    guide: GuideDetail
    related_guides: list[GuideSummary] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

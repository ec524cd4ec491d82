"""Catalog seeding — idempotent load of stains, materials, and guides.

Stains and materials are looked up by slug before insert. Guides are
product-normalized, rendered once, and skipped when they fail validation,
so the catalog never contains a guide the site can't render properly.
"""

import logging

from pydantic import BaseModel, Field

from stainsolver.catalog.schemas import GuideCreate, GuideSeed, GuideValidation, MaterialCreate, RawGuide, StainCreate
from stainsolver.content import GuideContentAssembler
from stainsolver.content.products import normalize_product_name
from stainsolver.content.validator import validate_guide
from stainsolver.services.storage import GuideStore
from stainsolver.utils.seed_data import SEED_GUIDES, SEED_MATERIALS, SEED_STAINS

logger = logging.getLogger(__name__)


class SkippedGuide(BaseModel):
    stain_name: str
    material_name: str
    reason: str


class SeedReport(BaseModel):
    stains_created: int = 0
    stains_existing: int = 0
    materials_created: int = 0
    materials_existing: int = 0
    guides_created: int = 0
    guides_existing: int = 0
    skipped: list[SkippedGuide] = Field(default_factory=list)
    validation: dict[str, GuideValidation] = Field(default_factory=dict)


def normalize_guide_products(seed: GuideSeed) -> GuideSeed:
    return seed.model_copy(update={"products": [normalize_product_name(p) for p in seed.products]})


async def seed_catalog(
    store: GuideStore,
    stains: list[dict] | None = None,
    materials: list[dict] | None = None,
    guides: list[dict] | None = None,
    assembler: GuideContentAssembler | None = None,
) -> SeedReport:
    """Load the built-in catalog (or the given rows) into `store`."""
    assembler = assembler or GuideContentAssembler()
    report = SeedReport()

    for row in SEED_STAINS if stains is None else stains:
        data = StainCreate.model_validate(row)
        if await store.get_stain_by_name(data.name):
            report.stains_existing += 1
            continue
        await store.create_stain(data)
        report.stains_created += 1

    for row in SEED_MATERIALS if materials is None else materials:
        data = MaterialCreate.model_validate(row)
        if await store.get_material_by_name(data.name):
            report.materials_existing += 1
            continue
        await store.create_material(data)
        report.materials_created += 1

    for row in SEED_GUIDES if guides is None else guides:
        seed = normalize_guide_products(GuideSeed.model_validate(row))
        label = f"{seed.stain_name}_{seed.material_name}"

        stain = await store.get_stain_by_name(seed.stain_name)
        material = await store.get_material_by_name(seed.material_name)
        if stain is None or material is None:
            missing = "stain" if stain is None else "material"
            report.skipped.append(SkippedGuide(
                stain_name=seed.stain_name, material_name=seed.material_name,
                reason=f"{missing} not found",
            ))
            logger.warning("Seed guide skipped | %s | %s not found", label, missing)
            continue

        if await store.get_guide_for_pair(stain.id, material.id):
            report.guides_existing += 1
            continue

        raw = RawGuide(stain_id=stain.id, material_id=material.id, **seed.model_dump(
            include={"pre_treatment", "products", "wash_method", "warnings", "effectiveness"},
        ))
        content = assembler.assemble(stain, material, raw)
        validation = validate_guide(raw, content)
        report.validation[label] = validation

        if not validation.valid:
            failed = [name for name, ok in validation.results.items() if not ok]
            report.skipped.append(SkippedGuide(
                stain_name=seed.stain_name, material_name=seed.material_name,
                reason=f"failed validation: {', '.join(failed)}",
            ))
            logger.warning("Seed guide failed validation, skipping | %s | failed=%s", label, failed)
            continue

        await store.create_guide(GuideCreate.model_validate(raw.model_dump(exclude={"id", "last_updated"})))
        report.guides_created += 1

    logger.info(
        "Catalog seeded | stains=+%d | materials=+%d | guides=+%d | skipped=%d",
        report.stains_created, report.materials_created, report.guides_created, len(report.skipped),
    )
    return report

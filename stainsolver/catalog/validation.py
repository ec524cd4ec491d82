"""Content validation pass over the whole catalog.

Each guide is checked independently (content thresholds plus HowTo/FAQPage
JSON-LD) and the failures are aggregated into one report. A row that cannot
be read is recorded against its guide id and the pass moves on.
"""

import logging

from pydantic import BaseModel, Field, ValidationError

from stainsolver.content import GuideContentAssembler
from stainsolver.content.structured_data import (
    build_faq_page,
    build_howto,
    validate_faq_schema,
    validate_howto_schema,
)
from stainsolver.content.validator import describe_failures, validate_guide
from stainsolver.errors import CatalogError, ContentValidationError
from stainsolver.services.storage import GuideStore

logger = logging.getLogger(__name__)


class GuideErrors(BaseModel):
    guide_id: int | None
    stain_name: str = ""
    material_name: str = ""
    errors: list[str]


class ValidationSummary(BaseModel):
    total: int = 0
    valid: int = 0
    invalid: int = 0


class CatalogValidationReport(BaseModel):
    valid: bool = True
    errors: list[GuideErrors] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)

    def raise_for_failures(self):
        if not self.valid:
            raise ContentValidationError(self)


async def validate_catalog(
    store: GuideStore,
    assembler: GuideContentAssembler | None = None,
) -> CatalogValidationReport:
    assembler = assembler or GuideContentAssembler()
    report = CatalogValidationReport()

    for guide_id in await store.list_guide_ids():
        report.summary.total += 1
        try:
            result = await _check_guide(store, assembler, guide_id)
        except (ValidationError, CatalogError) as e:
            result = GuideErrors(guide_id=guide_id, errors=[f"Guide data could not be read: {_describe(e)}"])

        if result.errors:
            report.errors.append(result)
            logger.warning(
                "Guide failed validation | id=%s | %s/%s | errors=%d",
                guide_id, result.stain_name, result.material_name, len(result.errors),
            )
        else:
            report.summary.valid += 1

    report.summary.invalid = len(report.errors)
    report.valid = not report.errors
    logger.info(
        "Catalog validated | total=%d | valid=%d | invalid=%d",
        report.summary.total, report.summary.valid, report.summary.invalid,
    )
    return report


async def _check_guide(store: GuideStore, assembler: GuideContentAssembler, guide_id: int) -> GuideErrors:
    raw = await store.get_guide(guide_id)
    if raw is None:
        return GuideErrors(guide_id=guide_id, errors=["Guide not found"])

    stain = await store.get_stain(raw.stain_id)
    material = await store.get_material(raw.material_id)
    if stain is None or material is None:
        return GuideErrors(
            guide_id=guide_id,
            stain_name=stain.name if stain else str(raw.stain_id),
            material_name=material.name if material else str(raw.material_id),
            errors=["Stain or material data not found"],
        )

    content = assembler.assemble(stain, material, raw)
    errors = describe_failures(raw, content, validate_guide(raw, content))
    errors += validate_howto_schema(
        build_howto(stain.display_name, material.display_name, content.steps, content.supplies)
    )
    errors += validate_faq_schema(build_faq_page(content.faqs))
    return GuideErrors(guide_id=guide_id, stain_name=stain.name, material_name=material.name, errors=errors)


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
        )
    return str(error)

"""Tests for the guide validator, JSON-LD builders, and the catalog validation pass."""

from unittest.mock import patch

import pytest

from stainsolver.catalog.schemas import FAQ, Stain, Step
from stainsolver.catalog.validation import validate_catalog
from stainsolver.content.structured_data import (
    build_faq_page,
    build_howto,
    validate_faq_schema,
    validate_howto_schema,
)
from stainsolver.content.validator import describe_failures, validate_guide
from stainsolver.errors import ContentValidationError
from stainsolver.models import StainRecord
from stainsolver.services.storage import MemoryGuideStore


@pytest.fixture
def content(assembler, coffee, cotton, coffee_on_cotton):
    return assembler.assemble(coffee, cotton, coffee_on_cotton)


def _steps(n: int) -> list[Step]:
    return [Step(title=f"Step {i}", description=f"Do step {i}.") for i in range(1, n + 1)]


# ═══════════════ THRESHOLDS ═══════════════

class TestValidateGuide:
    def test_valid_guide(self, coffee_on_cotton, content):
        result = validate_guide(coffee_on_cotton, content)
        assert result.valid is True
        assert set(result.results) == {"hasSteps", "hasProducts", "hasWarnings", "hasEffectiveness"}

    def test_rejects_two_steps(self, coffee_on_cotton, content):
        result = validate_guide(coffee_on_cotton, content.model_copy(update={"steps": _steps(2)}))
        assert result.valid is False
        assert result.results["hasSteps"] is False

    @pytest.mark.parametrize("n", [3, 4, 5, 6])
    def test_accepts_three_to_six_steps(self, coffee_on_cotton, content, n):
        assert validate_guide(coffee_on_cotton, content.model_copy(update={"steps": _steps(n)})).valid

    def test_rejects_seven_steps(self, coffee_on_cotton, content):
        assert not validate_guide(coffee_on_cotton, content.model_copy(update={"steps": _steps(7)})).valid

    def test_rejects_no_warnings(self, coffee_on_cotton, content):
        raw = coffee_on_cotton.model_copy(update={"warnings": []})
        result = validate_guide(raw, content)
        assert result.results["hasWarnings"] is False
        assert not result.valid

    def test_rejects_two_products(self, coffee_on_cotton, content):
        raw = coffee_on_cotton.model_copy(update={"products": ["dish soap", "cold water"]})
        result = validate_guide(raw, content)
        assert result.results["hasProducts"] is False
        assert not result.valid

    def test_rejects_unknown_effectiveness(self, coffee_on_cotton, content):
        raw = coffee_on_cotton.model_copy(update={"effectiveness": "amazing"})
        result = validate_guide(raw, content)
        assert result.results["hasEffectiveness"] is False

    def test_describe_failures(self, coffee_on_cotton, content):
        raw = coffee_on_cotton.model_copy(update={"warnings": [], "effectiveness": "amazing"})
        messages = describe_failures(raw, content, validate_guide(raw, content))
        assert messages == [
            "Guide needs at least 1 warning, found 0",
            "Unknown effectiveness tier 'amazing'",
        ]


# ═══════════════ JSON-LD ═══════════════

class TestStructuredData:
    def test_howto_valid(self, content):
        data = build_howto("Coffee", "Cotton", content.steps, content.supplies)
        assert data["name"] == "How to Remove Coffee from Cotton"
        assert [s["position"] for s in data["step"]] == list(range(1, len(content.steps) + 1))
        assert validate_howto_schema(data) == []

    def test_howto_wrong_context(self, content):
        data = build_howto("Coffee", "Cotton", content.steps, content.supplies)
        data["@context"] = "http://example.com"
        assert validate_howto_schema(data) == ["HowTo schema missing @context or incorrect context value"]

    def test_howto_no_steps(self):
        data = build_howto("Coffee", "Cotton", [], [])
        assert "HowTo schema missing steps or steps array is empty" in validate_howto_schema(data)

    def test_howto_empty_step_text(self):
        data = build_howto("Coffee", "Cotton", [Step(title="Blot", description="  ")], [])
        assert validate_howto_schema(data) == ["Step 1 has missing or empty text"]

    def test_howto_bad_position(self, content):
        data = build_howto("Coffee", "Cotton", content.steps, content.supplies)
        data["step"][0]["position"] = "1"
        assert "Step 1 has missing or incorrect position" in validate_howto_schema(data)

    def test_faq_valid(self, content):
        assert validate_faq_schema(build_faq_page(content.faqs)) == []

    def test_faq_empty(self):
        errors = validate_faq_schema(build_faq_page([]))
        assert errors == ["FAQPage schema missing mainEntity or mainEntity array is empty"]

    def test_faq_missing_answer(self):
        data = build_faq_page([FAQ(question="Why?", answer="")])
        assert validate_faq_schema(data) == ["FAQ item 1 has missing or empty answer"]

    def test_faq_wrong_answer_type(self):
        data = build_faq_page([FAQ(question="Why?", answer="Because.")])
        data["mainEntity"][0]["acceptedAnswer"]["@type"] = "Reply"
        assert validate_faq_schema(data) == ["FAQ item 1 has missing or incorrect acceptedAnswer"]


# ═══════════════ CATALOG PASS ═══════════════

class TestValidateCatalog:
    @pytest.mark.asyncio
    async def test_built_in_catalog_passes(self, memory_store):
        report = await validate_catalog(memory_store)
        assert report.valid is True
        assert report.summary.total == report.summary.valid > 0
        report.raise_for_failures()

    @pytest.mark.asyncio
    async def test_aggregates_every_failure(self, memory_store):
        # Bypass seeding validation by writing straight into the store
        for guide in list(memory_store._guides.values())[:2]:
            memory_store._guides[guide.id] = guide.model_copy(update={"warnings": []})

        report = await validate_catalog(memory_store)
        assert report.valid is False
        assert report.summary.invalid == 2
        assert report.summary.valid == report.summary.total - 2
        assert all("Guide needs at least 1 warning, found 0" in e.errors for e in report.errors)

        with pytest.raises(ContentValidationError) as exc:
            report.raise_for_failures()
        assert "2 of" in str(exc.value)

    @pytest.mark.asyncio
    async def test_empty_catalog(self):
        report = await validate_catalog(MemoryGuideStore())
        assert report.valid is True
        assert report.summary.total == 0

    @pytest.mark.asyncio
    async def test_unreadable_row_recorded_and_pass_continues(self, memory_store):
        original = memory_store.get_stain

        async def lookup(stain_id):
            stain = await original(stain_id)
            if stain.name != "coffee":
                return stain
            record = StainRecord(id=stain.id, name="coffee", display_name="Coffee", color="#6F4E37", category="protein")
            return Stain.model_validate(record)

        affected = [g.id for g in memory_store._guides.values() if memory_store._stains[g.stain_id].name == "coffee"]
        with patch.object(memory_store, "get_stain", new=lookup):
            report = await validate_catalog(memory_store)

        assert report.valid is False
        assert report.summary.total == len(memory_store._guides)
        assert report.summary.invalid == len(affected) == 3
        assert [e.guide_id for e in report.errors] == affected
        assert report.errors[0].errors[0].startswith("Guide data could not be read: category:")

"""Tests for effectiveness modeling, FAQ generation, intro text, and guide assembly."""

import pytest

from stainsolver.catalog.schemas import Material, Stain
from stainsolver.content import estimate_difficulty, estimate_time
from stainsolver.content.effectiveness import EffectivenessModeler
from stainsolver.content.faq import FAQGenerator
from stainsolver.content.intro import generate_intro
from stainsolver.content.variation import pick, text_seed, variant_index


# ═══════════════ VARIATION ═══════════════

class TestVariation:
    def test_variant_index_is_id_arithmetic(self):
        assert variant_index(3, 4, 5) == 2
        assert variant_index(3, 4, 5, offset=1) == 3

    def test_variant_index_rejects_empty(self):
        with pytest.raises(ValueError):
            variant_index(1, 1, 0)

    def test_pick(self):
        assert pick(["a", "b", "c"], 1, 1) == "c"

    def test_text_seed_stable(self):
        assert text_seed("coffee", "cotton") == text_seed("coffee", "cotton")
        assert text_seed("coffee", "cotton") != text_seed("cotton", "coffee")


# ═══════════════ EFFECTIVENESS ═══════════════

class TestEffectivenessModeler:
    @pytest.mark.parametrize("tier", ["excellent", "good", "fair", "poor", "unknown", ""])
    def test_monotonic(self, tier, coffee, cotton):
        data = EffectivenessModeler().model(tier, coffee, cotton)
        assert 0 <= data.set_in_stains <= data.old_stains <= data.fresh_stains <= 100

    @pytest.mark.parametrize("tier,expected", [
        ("excellent", (95, 85, 75)),
        ("good", (85, 70, 55)),
        ("fair", (70, 50, 35)),
        ("poor", (50, 30, 15)),
        ("whatever", (65, 45, 25)),
    ])
    def test_table(self, tier, expected, coffee, cotton):
        data = EffectivenessModeler().model(tier, coffee, cotton)
        assert (data.fresh_stains, data.old_stains, data.set_in_stains) == expected

    def test_rating_labels(self, coffee, cotton):
        modeler = EffectivenessModeler()
        assert modeler.model("fair", coffee, cotton).rating == "moderate"
        assert modeler.model("nope", coffee, cotton).rating == "variable"

    def test_description_mentions_pair(self, coffee, cotton):
        data = EffectivenessModeler().model("good", coffee, cotton)
        assert "coffee" in data.description
        assert "cotton" in data.description

    def test_poor_suggests_professional_cleaning(self, coffee, cotton):
        data = EffectivenessModeler().model("poor", coffee, cotton)
        assert "professional" in data.description

    def test_deterministic(self, coffee, cotton):
        modeler = EffectivenessModeler()
        assert modeler.model("good", coffee, cotton) == modeler.model("good", coffee, cotton)


# ═══════════════ FAQ ═══════════════

class TestFAQGenerator:
    def test_full_set_for_natural_beverage(self, coffee, cotton):
        faqs = FAQGenerator().generate(coffee, cotton, "Blot.", "Rinse.", ["Never use hot water"])
        assert len(faqs) == 5
        assert "bleach" in faqs[3].question.lower()
        assert "oxygen bleach" in faqs[3].answer

    def test_minimum_three(self):
        stain = Stain(id=2, name="rust", display_name="Rust", category="other")
        material = Material(id=5, name="mystery", display_name="Mystery", type="other")
        faqs = FAQGenerator().generate(stain, material, "Blot.", "Rinse.", [])
        assert len(faqs) == 3

    def test_set_in_answer_cites_first_warning(self, coffee, cotton):
        faqs = FAQGenerator().generate(coffee, cotton, "Blot.", "Rinse.", ["Never use hot water."])
        assert faqs[1].answer.endswith("Keep in mind: never use hot water.")

    def test_set_in_answer_without_warnings(self, coffee, cotton):
        faqs = FAQGenerator().generate(coffee, cotton, "Blot.", "Rinse.", [])
        assert "Keep in mind" not in faqs[1].answer

    def test_protein_food_answer(self, cotton):
        egg = Stain(id=9, name="egg", display_name="Egg", category="food")
        faqs = FAQGenerator().generate(egg, cotton, "Scrape.", "Rinse.", ["Avoid heat"])
        assert "protein" in faqs[-1].answer

    def test_marble_answer(self):
        wine = Stain(id=3, name="red_wine", display_name="Red Wine", category="beverage")
        marble = Material(id=11, name="marble", display_name="Marble", type="hard_surface")
        faqs = FAQGenerator().generate(wine, marble, "Blot.", "Rinse.", ["No acids"])
        assert faqs[3].answer.startswith("Yes, marble is porous")

    def test_questions_name_the_pair(self, coffee, cotton):
        faqs = FAQGenerator().generate(coffee, cotton, "Blot.", "Rinse.", ["x"])
        assert all("coffee" in f.question for f in faqs[:3])

    def test_deterministic(self, coffee, cotton):
        gen = FAQGenerator()
        args = (coffee, cotton, "Blot.", "Rinse.", ["Never use hot water"])
        assert gen.generate(*args) == gen.generate(*args)


# ═══════════════ INTRO ═══════════════

class TestIntro:
    def test_mentions_pair(self, coffee, cotton):
        intro = generate_intro(coffee, cotton)
        assert "coffee" in intro
        assert "cotton" in intro

    def test_beverage_context(self, coffee, cotton):
        assert "beverage" in generate_intro(coffee, cotton)

    def test_delicate_material(self, coffee):
        silk = Material(id=3, name="silk", display_name="Silk", type="natural")
        assert "delicate material" in generate_intro(coffee, silk)

    def test_protein_stain(self, cotton):
        blood = Stain(id=16, name="blood", display_name="Blood", category="bodily_fluid")
        assert "protein-based" in generate_intro(blood, cotton)


# ═══════════════ ASSEMBLER ═══════════════

class TestGuideContentAssembler:
    def test_coffee_on_cotton_excellent(self, assembler, coffee, cotton, coffee_on_cotton):
        content = assembler.assemble(coffee, cotton, coffee_on_cotton)
        assert 3 <= len(content.steps) <= 6
        assert "Liquid dish soap" in [s.name for s in content.supplies]
        assert content.effectiveness.fresh_stains == 95
        assert content.effectiveness.set_in_stains == 75
        assert content.difficulty == "Easy"
        assert content.success_rate == 95

    def test_coffee_on_cotton_poor(self, assembler, coffee, cotton, coffee_on_cotton):
        raw = coffee_on_cotton.model_copy(update={"effectiveness": "poor"})
        content = assembler.assemble(coffee, cotton, raw)
        assert content.success_rate == 45
        assert content.difficulty == "Difficult"

    def test_unknown_tier(self, assembler, coffee, cotton, coffee_on_cotton):
        raw = coffee_on_cotton.model_copy(update={"effectiveness": "legendary"})
        content = assembler.assemble(coffee, cotton, raw)
        assert content.success_rate == 65
        assert content.effectiveness.fresh_stains == 65

    def test_warnings_carried_over(self, assembler, coffee, cotton, coffee_on_cotton):
        content = assembler.assemble(coffee, cotton, coffee_on_cotton)
        assert content.warnings == ["Never use hot water"]

    def test_deterministic(self, assembler, coffee, cotton, coffee_on_cotton):
        a = assembler.assemble(coffee, cotton, coffee_on_cotton)
        b = assembler.assemble(coffee, cotton, coffee_on_cotton)
        assert a == b

    def test_camel_case_serialization(self, assembler, coffee, cotton, coffee_on_cotton):
        data = assembler.assemble(coffee, cotton, coffee_on_cotton).model_dump(by_alias=True)
        assert "timeRequired" in data
        assert "successRate" in data
        assert "setInStains" in data["effectiveness"]


class TestDerivedFields:
    @pytest.mark.parametrize("wash,count,expected", [
        ("Rinse.", 3, "5-10 minutes"),
        ("Rinse.", 4, "5-10 minutes"),
        ("Rinse.", 5, "15-20 minutes"),
        ("Leave it overnight.", 3, "Several hours"),
        ("Soak for 2 HOURS.", 6, "Several hours"),
    ])
    def test_time_required(self, wash, count, expected):
        assert estimate_time(wash, count) == expected

    @pytest.mark.parametrize("tier,count,expected", [
        ("excellent", 5, "Easy"),
        ("good", 6, "Moderate"),
        ("fair", 3, "Moderate"),
        ("poor", 3, "Difficult"),
        ("poor", 6, "Difficult"),
    ])
    def test_difficulty(self, tier, count, expected):
        assert estimate_difficulty(tier, count) == expected

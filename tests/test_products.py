"""Tests for product name normalization and the supply list builder."""

import pytest

from stainsolver.content.products import build_supplies, normalize_product_name
from stainsolver.utils.product_data import (
    COMMON_SUPPLIES,
    DEFAULT_COMMON_SUPPLY_DESCRIPTION,
    DEFAULT_PRODUCT_DESCRIPTION,
)


class TestNormalizeProductName:
    @pytest.mark.parametrize("raw,expected", [
        ("Dish soap", "liquid dish soap"),
        ("  Mild dish soap ", "liquid dish soap"),
        ("Dishwashing liquid", "liquid dish soap"),
        ("White vinegar", "distilled white vinegar"),
        ("Rubbing alcohol", "isopropyl alcohol"),
        ("Club soda", "carbonated water"),
        ("Washing powder", "powdered laundry detergent"),
        ("Laundry detergent", "liquid laundry detergent"),
        ("Enzyme-based stain remover", "enzymatic stain remover"),
        ("Clean white cloths", "clean white cloth"),
        ("Rubber gloves", "gloves"),
    ])
    def test_synonyms(self, raw, expected):
        assert normalize_product_name(raw) == expected

    def test_unmatched_passes_through_lowercased(self):
        assert normalize_product_name("  Micellar Water ") == "micellar water"

    def test_empty_string(self):
        assert normalize_product_name("") == ""

    def test_canonical_names_unchanged(self):
        assert normalize_product_name("distilled white vinegar") == "distilled white vinegar"
        assert normalize_product_name("Liquid laundry detergent") == "liquid laundry detergent"

    @pytest.mark.parametrize("raw", [
        "Dish soap", "white vinegar", "VINEGAR", "detergent", "powdered detergent",
        "3% hydrogen peroxide", "sodium bicarbonate", "soft brush", "cloth", "Salt", "",
        "Isopropyl", "Diluted ammonia", "enzyme cleaner", "white cloth napkin",
    ])
    def test_idempotent(self, raw):
        once = normalize_product_name(raw)
        assert normalize_product_name(once) == once


class TestBuildSupplies:
    def test_deduplicates_after_normalization(self):
        supplies = build_supplies(["Dish soap", "dish soap", "Dishwashing liquid", "Vinegar", "White vinegar"])
        names = [s.name for s in supplies]
        assert len(names) == len(set(names))
        assert names[:2] == ["Liquid dish soap", "Distilled white vinegar"]

    def test_appends_common_supplies(self):
        names = [s.name.lower() for s in build_supplies(["Salt"])]
        for common in COMMON_SUPPLIES:
            assert common in names

    def test_common_supply_not_duplicated(self):
        supplies = build_supplies(["Clean white cloths", "Gloves"])
        names = [s.name for s in supplies]
        assert names.count("Clean white cloth") == 1
        assert names.count("Gloves") == 1
        assert names[-1] == "Soft-bristled brush"

    def test_keeps_first_occurrence_order(self):
        names = [s.name for s in build_supplies(["Salt", "Baking soda", "Salt", "Lemon juice"])]
        assert names[:3] == ["Salt", "Baking soda", "Lemon juice"]

    def test_descriptions(self):
        supplies = {s.name: s.description for s in build_supplies(["Baking soda", "Cardboard"])}
        assert supplies["Baking soda"].startswith("Absorbent powder")
        assert supplies["Cardboard"] == DEFAULT_PRODUCT_DESCRIPTION

    def test_common_supply_descriptions_from_table(self):
        supplies = {s.name: s.description for s in build_supplies([])}
        assert supplies["Gloves"] == "To protect hands from cleaning chemicals"
        assert DEFAULT_COMMON_SUPPLY_DESCRIPTION not in supplies.values()

    def test_empty_products(self):
        assert len(build_supplies([])) == len(COMMON_SUPPLIES)

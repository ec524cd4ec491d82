"""Intro paragraph for a guide page."""

from stainsolver.catalog.schemas import Material, Stain
from stainsolver.content.variation import pick

DELICATE_MATERIALS = {"silk", "wool", "suede", "leather", "cashmere"}
OILY_STAINS = {"oil", "grease", "lipstick", "cooking-oil", "motor-oil", "butter"}
PROTEIN_STAINS = {"blood", "egg", "milk", "sweat"}

OPENINGS = [
    "Removing {stain} stains from {material} can be tricky, but with the right technique, it's usually fixable.",
    "A {stain} stain on {material} looks alarming, but it's usually fixable with the right technique.",
    "Getting {stain} out of {material} is easier than it looks once you know the right approach.",
]


def generate_intro(stain: Stain, material: Material) -> str:
    stain_name = stain.display_name.lower()
    material_name = material.display_name.lower()

    intro = pick(OPENINGS, stain.id, material.id).format(stain=stain_name, material=material_name)
    intro += (
        f" This guide walks you through step-by-step how to get rid of {stain_name} stains on "
        f"{material_name} using common household supplies."
    )

    if material.name in DELICATE_MATERIALS:
        intro += (
            f" Since {material_name} is a delicate material, you'll need to take extra care to avoid "
            f"damaging the fibers while removing the stain."
        )
    elif material.type == "hard_surface":
        intro += (
            f" {material.display_name} surfaces require special care to remove stains without causing "
            f"damage to the finish or material."
        )

    if stain.name in OILY_STAINS or stain.category == "oil":
        intro += (
            f" {stain.display_name} stains contain oils that can be particularly stubborn to remove, "
            f"especially after they've had time to set into the fabric."
        )
    elif stain.name in PROTEIN_STAINS:
        intro += (
            f" As a protein-based stain, {stain_name} requires careful treatment, since hot water can "
            f"make it set permanently into the fibers."
        )
    elif stain.category == "beverage":
        intro += (
            f" Like most beverage stains, {stain_name} can contain sugars and tannins that bond with "
            f"fibers over time, making quick action important."
        )

    return intro

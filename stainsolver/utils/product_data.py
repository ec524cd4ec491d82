"""Cleaning-supply vocabulary — synonym rules and human-readable descriptions.

Used by the product normalizer and the supply list builder.
"""

# Ordered (pattern → canonical name). A rule matches when the name equals or
# contains the pattern; the first matching rule wins.
PRODUCT_SYNONYMS: list[tuple[str, str]] = [
    # Soaps & detergents
    ("dish soap", "liquid dish soap"),
    ("dishwashing liquid", "liquid dish soap"),
    ("dish washing soap", "liquid dish soap"),
    ("dishwashing soap", "liquid dish soap"),
    ("washing powder", "powdered laundry detergent"),
    ("powdered detergent", "powdered laundry detergent"),
    ("laundry detergent", "liquid laundry detergent"),
    ("detergent", "liquid laundry detergent"),
    # Acids & oxidizers
    ("white vinegar", "distilled white vinegar"),
    ("vinegar", "distilled white vinegar"),
    ("hydrogen peroxide 3%", "hydrogen peroxide"),
    ("3% hydrogen peroxide", "hydrogen peroxide"),
    ("sodium bicarbonate", "baking soda"),
    ("rubbing alcohol", "isopropyl alcohol"),
    ("isopropyl", "isopropyl alcohol"),
    ("club soda", "carbonated water"),
    ("enzyme cleaner", "enzymatic stain remover"),
    ("enzyme stain remover", "enzymatic stain remover"),
    ("enzyme-based stain remover", "enzymatic stain remover"),
    ("ammonia solution", "household ammonia"),
    ("diluted ammonia", "household ammonia"),
    # Tools
    ("clean white cloths", "clean white cloth"),
    ("white cloth", "clean white cloth"),
    ("soft brush", "soft-bristled brush"),
    ("soft bristle brush", "soft-bristled brush"),
    ("rubber gloves", "gloves"),
]

# Canonical names are never rewritten again.
CANONICAL_PRODUCTS: frozenset[str] = frozenset(target for _, target in PRODUCT_SYNONYMS)

PRODUCT_DESCRIPTIONS: dict[str, str] = {
    "liquid dish soap": "Gentle degreaser that helps break down many types of stains",
    "liquid laundry detergent": "Formulated to remove a variety of stains from fabrics",
    "powdered laundry detergent": "Contains enzymes that help break down protein-based stains",
    "distilled white vinegar": "Mild acid that helps dissolve stains and odors",
    "hydrogen peroxide": "Mild bleaching agent safe for many fabrics",
    "baking soda": "Absorbent powder that helps neutralize odors and lift stains",
    "isopropyl alcohol": "Solvent that can dissolve many oil-based stains",
    "carbonated water": "The bubbles help lift fresh stains from fabric fibers",
    "enzymatic stain remover": "Contains enzymes that break down specific types of stains",
    "household ammonia": "Strong cleaner effective on grease and some stubborn stains",
    "clean white cloth": "For blotting stains without transferring dyes",
    "soft-bristled brush": "For gently working cleaner into stains",
    "cold water": "For rinsing and diluting stain-removing solutions",
    "warm water": "Helps activate cleaning agents for better stain removal",
    "cotton swabs": "For precise application of cleaning solutions",
    "spray bottle": "For applying cleaning solutions evenly",
    "paper towels": "For absorbing excess moisture and blotting stains",
    "sponge": "For applying and working in cleaning solutions",
    "gloves": "To protect hands from cleaning chemicals",
    "lemon juice": "Natural acid that helps brighten and remove some stains",
    "salt": "Abrasive agent that can help lift stains when combined with other cleaners",
    "ice cubes": "For hardening substances like gum or wax for easier removal",
    "stain remover stick": "Concentrated pre-treatment for stubborn stains",
    "oxygen bleach": "Color-safe bleach that is effective on many organic stains",
    "shaving cream": "Contains surfactants that help lift grease and oil stains",
    "cornstarch": "Fine powder that draws oil out of fibers",
    "glycerin": "Softens dried stains so they release more easily",
    "leather cleaner": "pH-balanced cleaner made for finished leather",
    "leather conditioner": "Restores moisture to leather after cleaning",
    "upholstery cleaner": "Low-moisture foam cleaner for furniture fabrics",
}

DEFAULT_PRODUCT_DESCRIPTION = "Helps remove the stain effectively"
DEFAULT_COMMON_SUPPLY_DESCRIPTION = "Necessary for the stain removal process"

# Supplies almost every guide needs even when the author didn't list them.
COMMON_SUPPLIES: tuple[str, ...] = ("clean white cloth", "soft-bristled brush", "gloves")


def describe_product(name: str) -> str | None:
    """Look up the description for a canonical product name."""
    return PRODUCT_DESCRIPTIONS.get(name)

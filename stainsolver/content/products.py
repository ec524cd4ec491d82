"""Product name normalizer and supply list builder."""

import logging

from stainsolver.catalog.schemas import Supply
from stainsolver.utils.product_data import (
    CANONICAL_PRODUCTS,
    COMMON_SUPPLIES,
    DEFAULT_COMMON_SUPPLY_DESCRIPTION,
    DEFAULT_PRODUCT_DESCRIPTION,
    PRODUCT_SYNONYMS,
    describe_product,
)

logger = logging.getLogger(__name__)


def normalize_product_name(name: str) -> str:
    """Canonicalize a free-text supply name ("Dish soap" → "liquid dish soap")."""
    normalized = name.lower().strip()
    if normalized in CANONICAL_PRODUCTS:
        return normalized

    for pattern, replacement in PRODUCT_SYNONYMS:
        if normalized == pattern or pattern in normalized:
            return replacement

    return normalized


def build_supplies(products: list[str]) -> list[Supply]:
    """Deduplicate and describe the supplies for a guide.

    Order of first occurrence is kept; commonly needed supplies are appended
    when the author didn't list them.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for product in products:
        name = normalize_product_name(product)
        if name and name not in seen:
            seen.add(name)
            unique.append(name)

    supplies = [
        Supply(name=_capitalize(name), description=describe_product(name) or DEFAULT_PRODUCT_DESCRIPTION)
        for name in unique
    ]

    for name in COMMON_SUPPLIES:
        if name not in seen:
            supplies.append(Supply(
                name=_capitalize(name),
                description=describe_product(name) or DEFAULT_COMMON_SUPPLY_DESCRIPTION,
            ))

    if len(unique) < len(products):
        logger.debug("Supplies deduplicated | in=%d | unique=%d", len(products), len(unique))
    return supplies


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]

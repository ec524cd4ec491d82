"""Guide Validator — minimum-content checks applied at authoring time."""

from stainsolver.catalog.schemas import EFFECTIVENESS_TIERS, GeneratedContent, GuideValidation, RawGuide

MIN_STEPS = 3
MAX_STEPS = 6
MIN_PRODUCTS = 3
MIN_WARNINGS = 1


def validate_guide(raw: RawGuide, content: GeneratedContent) -> GuideValidation:
    results = {
        "hasSteps": MIN_STEPS <= len(content.steps) <= MAX_STEPS,
        "hasProducts": len(raw.products) >= MIN_PRODUCTS,
        "hasWarnings": len(raw.warnings) >= MIN_WARNINGS,
        "hasEffectiveness": raw.effectiveness in EFFECTIVENESS_TIERS,
    }
    return GuideValidation(valid=all(results.values()), results=results)


def describe_failures(raw: RawGuide, content: GeneratedContent, validation: GuideValidation) -> list[str]:
    """Human-readable messages for each failed check."""
    messages = []
    if not validation.results["hasSteps"]:
        messages.append(f"Guide needs between {MIN_STEPS} and {MAX_STEPS} steps, found {len(content.steps)}")
    if not validation.results["hasWarnings"]:
        messages.append(f"Guide needs at least {MIN_WARNINGS} warning, found {len(raw.warnings)}")
    if not validation.results["hasProducts"]:
        messages.append(f"Guide needs at least {MIN_PRODUCTS} products, found {len(raw.products)}")
    if not validation.results["hasEffectiveness"]:
        messages.append(f"Unknown effectiveness tier '{raw.effectiveness}'")
    return messages

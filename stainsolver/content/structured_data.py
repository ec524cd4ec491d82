"""schema.org JSON-LD for guide pages (HowTo + FAQPage) and its validation."""

from typing import Any

from stainsolver.catalog.schemas import FAQ, Step, Supply

SCHEMA_CONTEXT = "https://schema.org"


def build_howto(stain_display_name: str, material_display_name: str,
                steps: list[Step], supplies: list[Supply]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "HowTo",
        "name": f"How to Remove {stain_display_name} from {material_display_name}",
        "description": (
            f"Step-by-step guide on removing {stain_display_name.lower()} stains "
            f"from {material_display_name.lower()}."
        ),
        "step": [
            {"@type": "HowToStep", "position": i, "name": step.title, "text": step.description}
            for i, step in enumerate(steps, start=1)
        ],
        "supply": [{"@type": "HowToSupply", "name": supply.name} for supply in supplies],
    }


def build_faq_page(faqs: list[FAQ]) -> dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in faqs
        ],
    }


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_howto_schema(data: dict[str, Any]) -> list[str]:
    errors = []
    if data.get("@context") != SCHEMA_CONTEXT:
        errors.append("HowTo schema missing @context or incorrect context value")
    if data.get("@type") != "HowTo":
        errors.append("HowTo schema missing @type or incorrect type value")
    if _blank(data.get("name")):
        errors.append("HowTo schema missing name or name is empty")
    if _blank(data.get("description")):
        errors.append("HowTo schema missing description or description is empty")

    steps = data.get("step")
    if not isinstance(steps, list) or not steps:
        errors.append("HowTo schema missing steps or steps array is empty")
        return errors

    for i, step in enumerate(steps, start=1):
        if step.get("@type") != "HowToStep":
            errors.append(f"Step {i} has missing or incorrect @type")
        position = step.get("position")
        if not isinstance(position, int) or isinstance(position, bool) or position < 1:
            errors.append(f"Step {i} has missing or incorrect position")
        if _blank(step.get("name")):
            errors.append(f"Step {i} has missing or empty name")
        if _blank(step.get("text")):
            errors.append(f"Step {i} has missing or empty text")
    return errors


def validate_faq_schema(data: dict[str, Any]) -> list[str]:
    errors = []
    if data.get("@context") != SCHEMA_CONTEXT:
        errors.append("FAQPage schema missing @context or incorrect context value")
    if data.get("@type") != "FAQPage":
        errors.append("FAQPage schema missing @type or incorrect type value")

    items = data.get("mainEntity")
    if not isinstance(items, list) or not items:
        errors.append("FAQPage schema missing mainEntity or mainEntity array is empty")
        return errors

    for i, item in enumerate(items, start=1):
        if item.get("@type") != "Question":
            errors.append(f"FAQ item {i} has missing or incorrect @type")
        if _blank(item.get("name")):
            errors.append(f"FAQ item {i} has missing or empty question")
        answer = item.get("acceptedAnswer") or {}
        if answer.get("@type") != "Answer":
            errors.append(f"FAQ item {i} has missing or incorrect acceptedAnswer")
        if _blank(answer.get("text")):
            errors.append(f"FAQ item {i} has missing or empty answer")
    return errors

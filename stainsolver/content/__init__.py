"""Guide content generation.

Flow: Intro → Steps → Supplies → Effectiveness → FAQ → derived fields
(time required, difficulty, success rate).
"""

import logging

from stainsolver.catalog.schemas import GeneratedContent, Material, RawGuide, Stain
from stainsolver.content.effectiveness import EffectivenessModeler
from stainsolver.content.faq import FAQGenerator
from stainsolver.content.intro import generate_intro
from stainsolver.content.products import build_supplies
from stainsolver.content.steps import StepSynthesizer
from stainsolver.content.variation import text_seed

logger = logging.getLogger(__name__)

SUCCESS_RATES = {"excellent": 95, "good": 80, "fair": 65, "poor": 45}
DEFAULT_SUCCESS_RATE = 65


class GuideContentAssembler:
    """Builds GeneratedContent for a stain/material pair from its raw guide."""

    def __init__(self):
        self.steps = StepSynthesizer()
        self.effectiveness = EffectivenessModeler()
        self.faq = FAQGenerator()

    def assemble(self, stain: Stain, material: Material, raw: RawGuide) -> GeneratedContent:
        seed = text_seed(stain.name, material.name, raw.pre_treatment, raw.wash_method)

        intro = generate_intro(stain, material)
        steps = self.steps.synthesize(raw.pre_treatment, raw.wash_method, seed=seed)
        supplies = build_supplies(raw.products)
        effectiveness = self.effectiveness.model(raw.effectiveness, stain, material)
        faqs = self.faq.generate(stain, material, raw.pre_treatment, raw.wash_method, raw.warnings)

        content = GeneratedContent(
            intro=intro,
            steps=steps,
            supplies=supplies,
            warnings=list(raw.warnings),
            effectiveness=effectiveness,
            faqs=faqs,
            difficulty=estimate_difficulty(raw.effectiveness, len(steps)),
            time_required=estimate_time(raw.wash_method, len(steps)),
            success_rate=SUCCESS_RATES.get(raw.effectiveness, DEFAULT_SUCCESS_RATE),
        )
        logger.debug(
            "Guide assembled | %s/%s | steps=%d | supplies=%d | faqs=%d",
            stain.name, material.name, len(steps), len(supplies), len(faqs),
        )
        return content


def estimate_time(wash_method: str, step_count: int) -> str:
    text = wash_method.lower()
    if "overnight" in text or "hours" in text:
        return "Several hours"
    if step_count > 4:
        return "15-20 minutes"
    return "5-10 minutes"


def estimate_difficulty(effectiveness: str, step_count: int) -> str:
    if effectiveness == "poor":
        return "Difficult"
    if effectiveness == "fair" or step_count > 5:
        return "Moderate"
    return "Easy"

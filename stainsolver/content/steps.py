"""Step Synthesizer — turns pre-treatment and wash-method text into numbered steps.

Flow: Immediate Response → 1-4 wash steps → Check Results.
The result always has between 3 and 6 steps.
"""

import logging
import math
import random
import re

from stainsolver.catalog.schemas import Step
from stainsolver.content.variation import text_seed

logger = logging.getLogger(__name__)

MAX_WASH_STEPS = 4
SENTENCES_PER_STEP = 2

_SENTENCE_SPLIT = re.compile(r"(?<=\.)\s+")

# Pre-treatment text starting with one of these already reads as an opener.
PRE_TREATMENT_OPENERS = ("immediately", "first", "right away", "as soon as", "quickly", "to start", "start", "begin")
PRE_TREATMENT_PREFIXES = ["", "First, ", "Right away, ", "As soon as you notice the stain, ", "To start, "]

TRANSITION_WORDS = (
    "next", "then", "now", "after", "afterwards", "finally", "once", "when",
    "if", "for", "while", "before", "again", "repeat",
)
TRANSITION_PREFIXES = ["", "Next, ", "Then, ", "Now, ", "After that, "]

CHECK_RESULTS = Step(
    title="Check Results",
    description=(
        "Allow the area to dry completely and check if the stain is fully removed. "
        "If traces remain, repeat the process. For stubborn stains that persist after "
        "multiple attempts, professional cleaning may be necessary."
    ),
)

PRO_TIPS = [
    "Work from the outside of the stain toward the center to keep it from spreading.",
    "Test any cleaning solution on a hidden spot first to make sure it won't discolor the material.",
    "Blot rather than rub; rubbing pushes the stain deeper into the fibers.",
    "Use a white cloth so no dye transfers back onto the stain.",
    "Keep the area out of direct heat until the stain is gone, since heat can set what's left.",
    "Patience pays off: give each solution its full dwell time before rinsing.",
]


class StepSynthesizer:
    """Builds a guide's step list with varied openers and one pro tip."""

    def synthesize(self, pre_treatment: str, wash_method: str, seed: int | None = None) -> list[Step]:
        if seed is None:
            seed = text_seed(pre_treatment, wash_method)
        rng = random.Random(seed)

        steps = [Step(
            title="Immediate Response",
            description=self._open_pre_treatment(pre_treatment.strip(), rng),
        )]
        steps.extend(self._wash_steps(wash_method, rng))

        # Pro tip never lands on Immediate Response or Check Results.
        tip_index = rng.randint(1, len(steps) - 1)
        tipped = steps[tip_index]
        steps[tip_index] = Step(
            title=tipped.title,
            description=f"{tipped.description} Pro tip: {rng.choice(PRO_TIPS)}",
        )

        steps.append(CHECK_RESULTS)
        logger.debug("Steps synthesized | count=%d | tip_at=%d", len(steps), tip_index)
        return steps

    def _wash_steps(self, wash_method: str, rng: random.Random) -> list[Step]:
        sentences = split_sentences(wash_method)
        if len(sentences) <= SENTENCES_PER_STEP:
            text = " ".join(sentences) if sentences else wash_method.strip()
            return [Step(title="Cleaning Process", description=text)]

        groups = group_sentences(sentences)
        steps = []
        for i, group in enumerate(groups):
            if i == 0:
                title = "Apply Cleaning Solution"
            elif i == len(groups) - 1:
                title = "Final Rinse and Dry"
            else:
                title = "Work the Solution"

            first = group[0]
            if not _starts_with(first, TRANSITION_WORDS):
                first = _with_prefix(first, TRANSITION_PREFIXES, rng)
            steps.append(Step(title=title, description=" ".join([first, *group[1:]])))
        return steps

    def _open_pre_treatment(self, text: str, rng: random.Random) -> str:
        if not text or _starts_with(text, PRE_TREATMENT_OPENERS):
            return text
        return _with_prefix(text, PRE_TREATMENT_PREFIXES, rng)


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT.split(text.strip()) if s.strip()]


def group_sentences(sentences: list[str]) -> list[list[str]]:
    """Chunk sentences in pairs, spreading them over at most MAX_WASH_STEPS groups."""
    size = max(SENTENCES_PER_STEP, math.ceil(len(sentences) / MAX_WASH_STEPS))
    return [sentences[i:i + size] for i in range(0, len(sentences), size)]


def _starts_with(text: str, words: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(lowered == w or lowered.startswith(w + " ") or lowered.startswith(w + ",") for w in words)


def _with_prefix(text: str, prefixes: list[str], rng: random.Random) -> str:
    prefix = rng.choice(prefixes)
    if not prefix or not text:
        return text
    # Keep acronyms intact ("DIY", "UV light").
    if len(text) > 1 and text[1].isupper():
        return prefix + text
    return prefix + text[0].lower() + text[1:]

"""FAQ Generator — question/answer pairs from stain and material context.

Categories, in order: prevention, set-in remediation, time to permanence,
material caveat (by material type), stain caveat (by stain category).
Phrasings rotate by stain/material id so every pair reads the same on every request.
"""

from stainsolver.catalog.schemas import FAQ, Material, Stain
from stainsolver.content.variation import pick

PROTEIN_STAINS = {"blood", "egg", "milk", "sweat", "vomit", "urine"}

# Offsets keep categories from all landing on the same variant number.
_PREVENTION, _SET_IN, _PERMANENCE, _MATERIAL, _CATEGORY = range(5)

PREVENTION_QUESTIONS = [
    "How can I prevent {stain} stains on {material}?",
    "What's the best way to avoid {stain} stains on {material}?",
    "Can I protect {material} from {stain} stains?",
]

PREVENTION_BY_TYPE = {
    "natural": "Consider applying a fabric protector designed for natural fibers.",
    "synthetic": (
        "Many synthetic fabrics come with stain resistance, but reapplying fabric protector "
        "after several washes helps maintain this property."
    ),
    "leather": "A leather protectant spray or conditioner creates a barrier that keeps liquids from soaking in.",
    "upholstery": "A fabric guard spray and washable throws on high-use seats go a long way.",
    "hard_surface": "Sealing porous surfaces and using coasters or mats keeps spills from soaking in.",
}
PREVENTION_DEFAULT = "Regular maintenance and prompt cleaning of spills is the best prevention strategy."

SET_IN_QUESTIONS = [
    "What if the {stain} stain on my {material} has already set?",
    "Can I still remove an old {stain} stain from {material}?",
]
SET_IN_ANSWERS = [
    "Set-in stains can often still be lifted. Rehydrate the area with cool water, then repeat "
    "the pre-treatment and let the cleaning solution sit longer than you would for a fresh stain.",
    "Yes, in many cases. Soften the dried stain with cool water first, then follow the steps in "
    "this guide, allowing extra soaking time and repeating the process two or three times if needed.",
]

PERMANENCE_QUESTIONS = [
    "How long before a {stain} stain becomes permanent on {material}?",
    "When does a {stain} stain set into {material}?",
]
PERMANENCE_ANSWERS = [
    "{Stain} stains can begin to set within 24-48 hours on {material}. The longer a stain remains "
    "untreated, the more difficult it becomes to remove. Heat (including hot water, dryers, or ironing) "
    "can permanently set the stain, making it nearly impossible to remove completely.",
    "Most {stain} stains start bonding with {material} within a day or two. Heat from hot water, "
    "a dryer, or an iron speeds this up dramatically, so keep the item away from heat until the "
    "stain is fully gone.",
]


class FAQGenerator:
    """Produces 3-5 FAQs for a stain/material pair."""

    def generate(
        self,
        stain: Stain,
        material: Material,
        pre_treatment: str,
        wash_method: str,
        warnings: list[str],
    ) -> list[FAQ]:
        s, m = stain.id, material.id
        names = {
            "stain": stain.display_name.lower(),
            "Stain": stain.display_name,
            "material": material.display_name.lower(),
        }

        faqs = [
            FAQ(
                question=pick(PREVENTION_QUESTIONS, s, m, _PREVENTION).format(**names),
                answer=(
                    f"The best prevention is quick action. For {names['material']}, immediately blot "
                    f"(don't rub) any spills with a clean cloth. "
                    + PREVENTION_BY_TYPE.get(material.type, PREVENTION_DEFAULT)
                ),
            ),
            FAQ(
                question=pick(SET_IN_QUESTIONS, s, m, _SET_IN).format(**names),
                answer=self._set_in_answer(s, m, warnings),
            ),
            FAQ(
                question=pick(PERMANENCE_QUESTIONS, s, m, _PERMANENCE).format(**names),
                answer=pick(PERMANENCE_ANSWERS, s, m, _PERMANENCE).format(**names),
            ),
        ]

        material_faq = self._material_faq(stain, material, names)
        if material_faq:
            faqs.append(material_faq)

        category_faq = self._category_faq(stain, material, names)
        if category_faq:
            faqs.append(category_faq)

        return faqs

    def _set_in_answer(self, stain_id: int, material_id: int, warnings: list[str]) -> str:
        answer = pick(SET_IN_ANSWERS, stain_id, material_id, _SET_IN)
        caution = warnings[0].strip().rstrip(".") if warnings else ""
        if caution:
            answer += f" Keep in mind: {caution[0].lower()}{caution[1:]}."
        return answer

    def _material_faq(self, stain: Stain, material: Material, names: dict[str, str]) -> FAQ | None:
        s, m = stain.id, material.id
        mat = names["material"]

        if material.type == "natural":
            if material.name == "cotton":
                answer = (
                    "Chlorine bleach can be used on white cotton items but may weaken fibers over time. "
                    "For colored cotton, use only oxygen bleach to avoid color damage."
                )
            else:
                answer = (
                    f"Bleach is not recommended for {mat} as it can damage the fibers and cause "
                    f"discoloration. Stick to the gentler methods described in this guide."
                )
            question = pick([
                "Can I use bleach to remove {stain} stains from {material}?",
                "Is bleach safe for {stain} stains on {material}?",
            ], s, m, _MATERIAL)
            return FAQ(question=question.format(**names), answer=answer)

        if material.type == "synthetic":
            question = pick([
                "Can I use hot water on {stain} stains on {material}?",
                "Does heat damage {material} when treating {stain} stains?",
            ], s, m, _MATERIAL)
            return FAQ(
                question=question.format(**names),
                answer=(
                    f"Synthetic fibers like {mat} can melt, pill, or lock in oily residue when exposed to "
                    f"high heat. Stick to cool or lukewarm water and air dry until the stain is gone."
                ),
            )

        if material.type == "leather":
            question = pick([
                "Will treating this {stain} stain damage my {material}?",
                "Is it safe to clean {stain} off {material} at home?",
            ], s, m, _MATERIAL)
            return FAQ(
                question=question.format(**names),
                answer=(
                    f"When done properly, the methods described should not damage your {mat}. However, "
                    f"always test any cleaning solution on an inconspicuous area first. {material.display_name} "
                    f"is sensitive to water and harsh chemicals, so use minimal moisture and dry thoroughly "
                    f"to prevent water stains or material damage."
                ),
            )

        if material.type == "upholstery":
            question = pick([
                "How wet can I get my {material} when cleaning {stain}?",
                "Should I soak {material} to remove {stain} stains?",
            ], s, m, _MATERIAL)
            return FAQ(
                question=question.format(**names),
                answer=(
                    f"As little as possible. Excess moisture soaks into the padding beneath {mat}, which can "
                    f"leave water rings or cause mildew. Apply solutions sparingly and blot dry as you go."
                ),
            )

        if material.type == "hard_surface":
            if material.name == "marble":
                answer = (
                    "Yes, marble is porous and can be permanently stained by acidic substances like wine, "
                    "coffee, or fruit juices. Sealing your marble periodically helps prevent staining."
                )
            elif material.name == "wood":
                answer = (
                    "Yes, wood can be permanently stained, especially if the finish is damaged or worn. "
                    "The faster you treat the stain, the better chance you have of preventing permanent damage."
                )
            else:
                answer = (
                    f"With proper care and prompt cleaning, most stains can be removed from {mat} "
                    f"without permanent damage."
                )
            question = pick([
                "Can {stain} permanently stain {material}?",
                "Will {stain} leave a permanent mark on {material}?",
            ], s, m, _MATERIAL)
            return FAQ(question=question.format(**names), answer=answer)

        return None

    def _category_faq(self, stain: Stain, material: Material, names: dict[str, str]) -> FAQ | None:
        entry = CATEGORY_FAQS.get(stain.category)
        if entry is None:
            return None

        questions, answer = entry
        if stain.category == "food" and stain.name in PROTEIN_STAINS:
            answer = (
                "Yes, temperature is crucial. Never use hot water on protein-based food stains as it "
                "cooks the protein into the fabric. Always use cold water initially."
            )
        question = pick(questions, stain.id, material.id, _CATEGORY)
        return FAQ(question=question.format(**names), answer=answer.format(**names))


# stain category → (question phrasings, answer)
CATEGORY_FAQS: dict[str, tuple[list[str], str]] = {
    "beverage": (
        [
            "Does the temperature of water matter when treating {stain} stains?",
            "Should I use hot or cold water on {stain} stains?",
        ],
        "Yes, temperature is crucial. For {stain} stains, start with cold water to flush out the "
        "stain before it sets. Hot water can set some components of the stain making it permanent.",
    ),
    "food": (
        [
            "Does the temperature of water matter when treating {stain} stains?",
            "Should I use hot or cold water on {stain} stains?",
        ],
        "Yes, temperature is crucial. For {stain} stains, start with cold water to flush out the "
        "stain before it sets. Hot water can set some components of the stain making it permanent.",
    ),
    "oil": (
        [
            "Why do I need dish soap for {stain} stains?",
            "What breaks down {stain} stains best?",
        ],
        "Dish soap is formulated to break down grease and oils, which is why it's effective on "
        "{stain} stains. The surfactants in dish soap help to dissolve the oil molecules so they "
        "can be rinsed away from the {material} fibers.",
    ),
    "ink": (
        [
            "Are some types of {stain} stains harder to remove than others?",
            "Does the kind of {stain} make a difference?",
        ],
        "Yes, permanent markers and certain ink formulations are designed to be waterproof and can "
        "be extremely difficult to remove completely. Ballpoint ink is typically easier to remove "
        "than permanent marker or India ink. The age of the stain also makes a significant "
        "difference, as fresh ink stains are much more responsive to treatment.",
    ),
    "bodily_fluid": (
        [
            "Why shouldn't I use hot water on {stain} stains?",
            "Is warm water okay for {stain} stains?",
        ],
        "{Stain} contains proteins that coagulate with heat, bonding them to the fibers. Cold water "
        "keeps the proteins loose so they can be rinsed away, and enzyme cleaners break down "
        "whatever remains.",
    ),
    "makeup": (
        [
            "Is makeup remover safe to use on {stain} stains?",
            "Can I use my makeup remover on {stain} stains?",
        ],
        "Oil-free micellar water often works on fresh makeup, but test it first. Removers "
        "containing oils can leave a second stain behind, so follow up with a little dish soap.",
    ),
    "grass": (
        [
            "Why are {stain} stains so stubborn?",
            "What makes {stain} stains hard to wash out?",
        ],
        "Grass contains chlorophyll and other plant pigments that act like a natural dye. "
        "Enzyme-based detergents and rubbing alcohol break these pigments down better than "
        "plain soap.",
    ),
    "dirt": (
        [
            "Should I let {stain} dry before cleaning it?",
            "Is it better to clean {stain} wet or dry?",
        ],
        "Yes. Let mud and dirt dry completely, then brush or vacuum off as much as possible "
        "before using any liquid. Wetting fresh mud spreads it deeper into the material.",
    ),
}

"""Effectiveness Modeler — maps a tier to success rates and an explanation."""

from stainsolver.catalog.schemas import EffectivenessData, Material, Stain
from stainsolver.content.variation import pick

# tier → (rating label, fresh %, old %, set-in %)
EFFECTIVENESS_TABLE: dict[str, tuple[str, int, int, int]] = {
    "excellent": ("excellent (highly effective)", 95, 85, 75),
    "good": ("good", 85, 70, 55),
    "fair": ("moderate", 70, 50, 35),
    "poor": ("challenging", 50, 30, 15),
}
DEFAULT_EFFECTIVENESS = ("variable", 65, 45, 25)

DESCRIPTION_TEMPLATES = [
    "This method is rated {rating} for {stain} on {material}.",
    "For {stain} on {material}, this approach earns a {rating} rating.",
    "Removing {stain} from {material} with this method is rated {rating}.",
]

TIER_COMMENTARY = {
    "strong": [
        " It works well when applied promptly, with a high success rate for fresh stains."
        " Even older stains respond well to this treatment in most cases.",
        " Acting quickly gives the best results, and most stains lift in a single pass."
        " Older stains usually come out too with a little more patience.",
    ],
    "fair": [
        " It works reasonably well on fresh stains, but older or set-in stains may require"
        " multiple treatments or professional cleaning.",
        " Expect good results on fresh spills; older stains often need the process repeated"
        " two or three times before they fade completely.",
    ],
    "weak": [
        " {Stain} stains can be particularly difficult to remove from {material}, especially"
        " after they've had time to set. For best results, treat the stain immediately and"
        " consider professional cleaning for valuable items.",
        " {Stain} is one of the tougher stains to lift from {material}. Treat it right away,"
        " and for anything valuable, a professional cleaner is the safer choice.",
    ],
}


class EffectivenessModeler:
    """Builds EffectivenessData; freshStains ≥ oldStains ≥ setInStains by construction."""

    def model(self, effectiveness: str, stain: Stain, material: Material) -> EffectivenessData:
        rating, fresh, old, set_in = EFFECTIVENESS_TABLE.get(effectiveness, DEFAULT_EFFECTIVENESS)

        stain_name = stain.display_name.lower()
        material_name = material.display_name.lower()

        template = pick(DESCRIPTION_TEMPLATES, stain.id, material.id)
        description = template.format(rating=rating, stain=stain_name, material=material_name)

        if effectiveness in ("excellent", "good"):
            bucket = "strong"
        elif effectiveness == "fair":
            bucket = "fair"
        else:
            bucket = "weak"
        commentary = pick(TIER_COMMENTARY[bucket], stain.id, material.id, offset=1)
        description += commentary.format(Stain=stain.display_name, material=material_name)

        return EffectivenessData(
            rating=rating,
            description=description,
            fresh_stains=fresh,
            old_stains=old,
            set_in_stains=set_in,
        )

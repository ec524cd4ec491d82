"""Built-in catalog — stains, materials, and authored removal guides.

Loaded by `scripts/seed_db.py` into PostgreSQL, and into the in-memory store
when the database is unavailable. Guides reference stains/materials by slug.
"""

SEED_STAINS = [
    # Beverage
    {"name": "coffee", "display_name": "Coffee", "color": "#6F4E37", "category": "beverage",
     "description": "Dark brown liquid with tannins that can quickly set into fabrics."},
    {"name": "tea", "display_name": "Tea", "color": "#B5651D", "category": "beverage",
     "description": "Contains tannins that can leave yellowish-brown stains."},
    {"name": "red_wine", "display_name": "Red Wine", "color": "#722F37", "category": "beverage",
     "description": "Red wine contains pigments that easily bond with fibers."},
    {"name": "soda", "display_name": "Soda", "color": "#8B4513", "category": "beverage",
     "description": "Contains sugar and food coloring that can leave sticky residue."},
    {"name": "juice", "display_name": "Fruit Juice", "color": "#FFA500", "category": "beverage",
     "description": "Natural fruit pigments that can vary in difficulty to remove."},

    # Food
    {"name": "chocolate", "display_name": "Chocolate", "color": "#7B3F00", "category": "food",
     "description": "Contains oils and dark pigments that set into fabrics."},
    {"name": "tomato-sauce", "display_name": "Tomato Sauce", "color": "#FF6347", "category": "food",
     "description": "Acidic with bright red pigments that stain easily."},
    {"name": "curry", "display_name": "Curry", "color": "#FFC107", "category": "food",
     "description": "Contains turmeric which has a stubborn yellow pigment."},
    {"name": "egg", "display_name": "Egg", "color": "#F0E68C", "category": "food",
     "description": "Protein-rich stain that hardens when exposed to heat."},

    # Oil
    {"name": "oil", "display_name": "Cooking Oil", "color": "#FFD700", "category": "oil",
     "description": "Greasy substance that forms dark patches on fabric."},
    {"name": "motor-oil", "display_name": "Motor Oil", "color": "#000000", "category": "oil",
     "description": "Dark, thick substance that deeply penetrates fabrics."},
    {"name": "grease", "display_name": "Grease", "color": "#A9A9A9", "category": "oil",
     "description": "Thick, oily substance that leaves dark marks."},

    # Ink
    {"name": "ink", "display_name": "Pen Ink", "color": "#000080", "category": "ink",
     "description": "Permanent dye designed to stick to surfaces."},
    {"name": "marker", "display_name": "Marker", "color": "#4B0082", "category": "ink",
     "description": "Contains alcohol-based dyes that penetrate deeply."},

    # Dirt
    {"name": "mud", "display_name": "Mud", "color": "#A52A2A", "category": "dirt",
     "description": "Mixture of soil and water that can contain various minerals."},

    # Bodily fluid
    {"name": "blood", "display_name": "Blood", "color": "#8B0000", "category": "bodily_fluid",
     "description": "Protein-based stain that sets with heat and time."},
    {"name": "sweat", "display_name": "Sweat", "color": "#F5F5DC", "category": "bodily_fluid",
     "description": "Combination of minerals and body oils that yellow over time."},

    # Makeup
    {"name": "makeup", "display_name": "Foundation", "color": "#DEB887", "category": "makeup",
     "description": "Oil or water-based makeup that can contain various dyes."},
    {"name": "lipstick", "display_name": "Lipstick", "color": "#FF1493", "category": "makeup",
     "description": "Oil-based cosmetic with pigments designed for longevity."},

    # Grass
    {"name": "grass", "display_name": "Grass", "color": "#228B22", "category": "grass",
     "description": "Contains chlorophyll, a natural green pigment that binds to fabrics."},

    # Other
    {"name": "rust", "display_name": "Rust", "color": "#B7410E", "category": "other",
     "description": "Iron oxide that creates reddish-brown marks."},
    {"name": "wax", "display_name": "Wax", "color": "#F5F5DC", "category": "other",
     "description": "Solidified oil-based substance that adheres to surfaces."},
]

SEED_MATERIALS = [
    # Natural
    {"name": "cotton", "display_name": "Cotton", "type": "natural",
     "care_notes": "Machine washable, can withstand hot water for most items",
     "common_uses": "T-shirts, jeans, sheets, towels",
     "description": "Natural fiber that is breathable and absorbent"},
    {"name": "wool", "display_name": "Wool", "type": "natural",
     "care_notes": "Hand wash in cold water, lay flat to dry",
     "common_uses": "Sweaters, coats, blankets, suits",
     "description": "Natural animal fiber that provides warmth and is naturally stain-resistant"},
    {"name": "silk", "display_name": "Silk", "type": "natural",
     "care_notes": "Dry clean recommended, or hand wash in cold water",
     "common_uses": "Blouses, dresses, ties, scarves",
     "description": "Delicate natural fiber with a smooth texture and lustrous appearance"},
    {"name": "linen", "display_name": "Linen", "type": "natural",
     "care_notes": "Machine washable in cool water, air dry or low heat",
     "common_uses": "Summer clothing, tablecloths, napkins, bedding",
     "description": "Natural fiber from the flax plant known for coolness and absorbency"},

    # Synthetic
    {"name": "polyester", "display_name": "Polyester", "type": "synthetic",
     "care_notes": "Machine washable, dries quickly, resistant to wrinkles",
     "common_uses": "Clothing, bedding, upholstery, outdoor gear",
     "description": "Durable synthetic fiber that resists stretching and shrinking"},
    {"name": "nylon", "display_name": "Nylon", "type": "synthetic",
     "care_notes": "Machine washable in cold water, low heat drying",
     "common_uses": "Sportswear, stockings, swimwear, outdoor equipment",
     "description": "Strong synthetic fiber with good elasticity"},

    # Leather
    {"name": "leather", "display_name": "Leather", "type": "leather",
     "care_notes": "Spot clean with leather cleaner, condition regularly",
     "common_uses": "Jackets, shoes, bags, furniture",
     "description": "Animal hide treated for durability and water resistance"},
    {"name": "suede", "display_name": "Suede", "type": "leather",
     "care_notes": "Use suede brush and protector, avoid water",
     "common_uses": "Shoes, jackets, handbags, accessories",
     "description": "Soft, napped leather with a velvety surface"},

    # Upholstery
    {"name": "microfiber", "display_name": "Microfiber", "type": "upholstery",
     "care_notes": "Vacuum regularly, spot clean with appropriate cleaners",
     "common_uses": "Sofas, chairs, car interiors",
     "description": "Ultra-fine synthetic fiber that repels liquids and traps dust"},
    {"name": "carpet", "display_name": "Carpet", "type": "upholstery",
     "care_notes": "Vacuum weekly, professional cleaning yearly",
     "common_uses": "Floor coverings, area rugs",
     "description": "Textile floor covering consisting of an upper layer of pile"},

    # Hard surfaces
    {"name": "marble", "display_name": "Marble", "type": "hard_surface",
     "care_notes": "Clean with pH-neutral cleaners, seal periodically",
     "common_uses": "Countertops, floors, tables",
     "description": "Natural stone that is porous and sensitive to acids"},
    {"name": "granite", "display_name": "Granite", "type": "hard_surface",
     "care_notes": "Daily cleaning with stone cleaner, seal yearly",
     "common_uses": "Countertops, floors, monuments",
     "description": "Hard igneous rock that is resistant to scratches"},
    {"name": "wood", "display_name": "Wood", "type": "hard_surface",
     "care_notes": "Dust regularly, clean with wood-specific products",
     "common_uses": "Furniture, floors, cabinets",
     "description": "Natural material that varies in hardness and porosity based on type"},
]

SEED_GUIDES = [
    # ═══════════════ COFFEE ═══════════════
    {
        "stain_name": "coffee",
        "material_name": "cotton",
        "pre_treatment": "Immediately blot the coffee stain with a clean, dry cloth to absorb as much liquid as possible. Do not rub, as this can push the stain deeper into the fibers.",
        "products": ["Liquid dish soap", "White vinegar", "Baking soda", "Cold water", "Clean white cloth"],
        "wash_method": "Mix one tablespoon of liquid dish soap with two cups of cold water. Using a clean cloth, dab the solution onto the stain and let sit for 5 minutes. If the stain persists, make a paste of baking soda and water, apply to the stain, and let dry. Rinse with cold water, then apply a mixture of equal parts white vinegar and water. Machine wash according to the garment's care label.",
        "warnings": [
            "Never use hot water on coffee stains as it can set the stain permanently",
            "Avoid using bleach on colored cotton as it may cause discoloration",
            "Don't put the item in the dryer until the stain is completely removed",
        ],
        "effectiveness": "excellent",
    },
    {
        "stain_name": "coffee",
        "material_name": "carpet",
        "pre_treatment": "Blot up as much of the spilled coffee as possible using paper towels or a clean cloth. Apply gentle pressure and work from the outside of the stain toward the center to prevent spreading.",
        "products": ["Dish soap", "White vinegar", "Baking soda", "Hydrogen peroxide", "Spray bottle", "Clean white cloths"],
        "wash_method": "Mix one tablespoon of dish soap, one tablespoon of white vinegar, and two cups of warm water in a spray bottle. Spray the solution on the stain and let it sit for 10 minutes. Blot with a clean cloth until the stain is removed. For stubborn stains, make a paste of baking soda and water, apply to the area, let dry completely, then vacuum. For light-colored carpets, you can use a mixture of hydrogen peroxide and water as a final treatment.",
        "warnings": [
            "Always test any cleaning solution in an inconspicuous area first",
            "Don't oversaturate the carpet as excess moisture can damage padding and subfloor",
            "Avoid using hot water which can set the stain",
        ],
        "effectiveness": "good",
    },
    {
        "stain_name": "coffee",
        "material_name": "silk",
        "pre_treatment": "Immediately blot the stain gently with a clean cloth to absorb as much coffee as possible. Do not rub the stain as this can damage the delicate silk fibers.",
        "products": ["Mild dish soap", "Cold water", "White vinegar", "Clean white cloths", "Soft-bristled brush"],
        "wash_method": "Mix a few drops of mild dish soap in cold water. Using a soft cloth or soft-bristled brush, gently dab the solution onto the stain working from the outside in. Rinse by blotting with a clean cloth dampened with cold water. If stain persists, mix equal parts white vinegar and cold water, and dab onto the stain. Rinse again with cold water by blotting. Allow to air dry away from direct heat and sunlight.",
        "warnings": [
            "Never use hot water on silk",
            "Avoid rubbing or scrubbing which can damage the delicate fibers",
            "Do not use bleach on silk under any circumstances",
            "Consider professional cleaning for valuable or delicate silk items",
        ],
        "effectiveness": "fair",
    },

    # ═══════════════ RED WINE ═══════════════
    {
        "stain_name": "red_wine",
        "material_name": "cotton",
        "pre_treatment": "Immediately blot the stain with a clean cloth or paper towel to absorb as much wine as possible. Sprinkle salt generously over the stain while still wet to help absorb the wine.",
        "products": ["Salt", "Club soda", "White vinegar", "Liquid dish soap", "Hydrogen peroxide", "Baking soda"],
        "wash_method": "After pretreating with salt, pour club soda onto the stain and continue blotting. Mix equal parts dish soap and hydrogen peroxide (for white cotton) or white vinegar (for colored cotton). Apply to the stain and let sit for 30 minutes. Rinse with cold water. If stain remains, make a paste of baking soda and water, apply to the stain, and let dry before brushing off. Machine wash in cold water with regular detergent.",
        "warnings": [
            "Never use hot water as it will set the wine stain",
            "Hydrogen peroxide should only be used on white cotton",
            "Avoid using bleach on colored cotton",
            "Don't put in the dryer until the stain is completely removed",
        ],
        "effectiveness": "excellent",
    },
    {
        "stain_name": "red_wine",
        "material_name": "carpet",
        "pre_treatment": "Immediately blot up as much wine as possible with clean white cloths or paper towels. Work from the outside towards the center of the stain to prevent spreading. Sprinkle the area generously with salt to absorb the remaining wine.",
        "products": ["Salt", "Club soda", "White vinegar", "Dish soap", "Hydrogen peroxide", "Baking soda", "Spray bottle"],
        "wash_method": "After absorbing with salt, pour club soda on the stain and continue blotting. Mix one tablespoon of dish soap, one tablespoon of white vinegar, and two cups of warm water in a spray bottle. Spray the solution onto the stain and let sit for 10-15 minutes. Blot with a clean cloth until the stain is removed. For stubborn stains or light-colored carpets, apply a mixture of hydrogen peroxide and dish soap (1:1 ratio), let sit for 30 minutes, then blot with water and a clean cloth.",
        "warnings": [
            "Always test cleaning solutions in an inconspicuous area first",
            "Don't oversaturate the carpet as excess moisture can damage padding and subfloor",
            "For antique or valuable rugs, consult a professional cleaner",
            "Hydrogen peroxide may lighten some carpet colors",
        ],
        "effectiveness": "good",
    },
    {
        "stain_name": "red_wine",
        "material_name": "marble",
        "pre_treatment": "Immediately blot the wine with paper towels or a clean cloth to absorb as much as possible. Do not wipe, as this may spread the stain. Flush the area with plain water to dilute the wine.",
        "products": ["Hydrogen peroxide", "Baking soda", "Dish soap", "Acetone", "Soft cloths", "Plastic wrap"],
        "wash_method": "For fresh stains, create a poultice by mixing baking soda with water to form a thick paste. Apply the paste to the stain, cover with plastic wrap, and tape down the edges. Allow it to sit for 24-48 hours, then rinse with water. For stubborn stains, make a paste with one part hydrogen peroxide and one part baking soda. Apply to the stain, cover with plastic wrap, and let sit for 24 hours before rinsing. For very stubborn stains, carefully apply acetone to the stain using a cotton ball, then rinse thoroughly.",
        "warnings": [
            "Never use vinegar, lemon, or other acidic cleaners on marble as they will etch the surface",
            "Test hydrogen peroxide in an inconspicuous area first as it may lighten some marble",
            "Don't use abrasive scrubbers which can scratch marble",
            "Avoid leaving poultices on for more than the recommended time",
        ],
        "effectiveness": "fair",
    },

    # ═══════════════ BLOOD ═══════════════
    {
        "stain_name": "blood",
        "material_name": "cotton",
        "pre_treatment": "Immediately rinse the stain with cold water. Never use hot water as it will cook the protein in blood and set the stain. Gently rub the fabric together under the cold running water to help loosen the blood.",
        "products": ["Hydrogen peroxide", "Liquid dish soap", "Ammonia", "Salt", "Enzyme-based stain remover", "Cold water"],
        "wash_method": "After rinsing, soak the garment in cold water with enzyme-based stain remover for 30 minutes. If the stain persists, apply hydrogen peroxide directly to the stain (safe for white cotton) or mix dish soap with cold water for colored fabrics. Gently rub and let sit for 5 minutes. For stubborn stains, make a paste of salt and cold water, apply to the stain, and let dry in sunlight which helps bleach the stain. Machine wash in cold water with regular detergent.",
        "warnings": [
            "Never use hot or warm water on blood stains",
            "Don't use hydrogen peroxide on colored cotton as it may cause fading",
            "Avoid using chlorine bleach which can react with the proteins in blood and make stains worse",
            "Don't put the item in the dryer until the stain is completely removed",
        ],
        "effectiveness": "excellent",
    },
    {
        "stain_name": "blood",
        "material_name": "leather",
        "pre_treatment": "Immediately blot up as much blood as possible with a clean cloth. Do not rub the stain as this can push it deeper into the leather.",
        "products": ["Mild soap", "Cold water", "Hydrogen peroxide", "Leather conditioner", "Clean cloths", "Cotton swabs"],
        "wash_method": "Mix a few drops of mild soap with cold water until slightly foamy. Dampen a clean cloth with the solution and gently dab at the stain, working from the outside in. Wipe away soap with a cloth dampened with clean water. Allow to air dry away from direct heat. For stubborn stains, dampen a cotton swab with hydrogen peroxide and dab directly on the stain. After the stain is removed, apply leather conditioner to prevent the leather from drying out.",
        "warnings": [
            "Never soak leather or use too much water",
            "Test any cleaning solution on an inconspicuous area first",
            "Avoid using harsh cleaners that can damage leather",
            "Don't use a hairdryer or heater to dry leather as it can cause cracking",
        ],
        "effectiveness": "fair",
    },

    # ═══════════════ OIL ═══════════════
    {
        "stain_name": "oil",
        "material_name": "cotton",
        "pre_treatment": "Blot up as much oil as possible with a paper towel. Sprinkle the stain generously with cornstarch, baby powder, or baking soda to absorb the oil. Let it sit for at least 30 minutes, then brush off.",
        "products": ["Cornstarch", "Dish soap", "Laundry detergent", "White vinegar", "Hot water"],
        "wash_method": "After absorbing excess oil, place the stained area face down on a paper towel or piece of cardboard. Apply dish soap directly to the back of the stain and let sit for 10-15 minutes. Rinse with hot water from the back of the fabric to push the oil out. Pre-treat with laundry detergent, rubbing it into the stain. Wash in the hottest water safe for the fabric with extra detergent. Add 1/2 cup white vinegar to the rinse cycle to help remove soap residue that can trap oil.",
        "warnings": [
            "Don't rinse the stain before applying an absorbent powder",
            "Avoid rubbing the stain, which can push the oil deeper into the fibers",
            "Check that the stain is completely gone before putting in the dryer",
        ],
        "effectiveness": "good",
    },
    {
        "stain_name": "oil",
        "material_name": "wood",
        "pre_treatment": "Blot up as much oil as possible with paper towels. Sprinkle the stain with an absorbent material like cornstarch, salt, baking soda, or sawdust. Let it sit for at least 1-2 hours to absorb the oil.",
        "products": ["Cornstarch", "Dish soap", "Vinegar", "Soft cloths", "Mineral spirits", "Wood cleaner"],
        "wash_method": "Vacuum or sweep away the absorbent material. Mix a solution of mild dish soap and warm water. Dampen a soft cloth with the solution and gently clean the area, going with the grain of the wood. Wipe dry immediately with a clean cloth. For stubborn stains, dampen a cloth with equal parts vinegar and water, then wipe the stain. If the stain persists and the wood is finished, apply a small amount of mineral spirits with a cloth, then clean with wood cleaner and apply polish or wax if needed.",
        "warnings": [
            "Never let water sit on wood as it can cause warping or damage",
            "Test any cleaning solution on an inconspicuous area first",
            "Don't use abrasive scrubbers on finished wood",
        ],
        "effectiveness": "fair",
    },

    # ═══════════════ INK ═══════════════
    {
        "stain_name": "ink",
        "material_name": "polyester",
        "pre_treatment": "Place a paper towel under the stained area to keep the ink from spreading to other layers. Blot the stain gently without rubbing.",
        "products": ["Rubbing alcohol", "Cotton balls", "Liquid dish soap", "Laundry detergent", "Paper towels"],
        "wash_method": "Dab the stain with a cotton ball soaked in rubbing alcohol, replacing the paper towel underneath as the ink transfers. Continue until no more ink lifts. Rinse the area with cool water. Work a drop of liquid dish soap into the spot and rinse again. Machine wash in cool water with laundry detergent.",
        "warnings": [
            "Test rubbing alcohol on a hidden seam first, as it can affect some dyes",
            "Don't machine dry until the ink is completely gone",
        ],
        "effectiveness": "good",
    },

    # ═══════════════ GRASS ═══════════════
    {
        "stain_name": "grass",
        "material_name": "cotton",
        "pre_treatment": "Brush off any loose dirt or plant matter. Flush the back of the stain with cold water.",
        "products": ["Enzyme-based stain remover", "Rubbing alcohol", "Laundry detergent", "White vinegar"],
        "wash_method": "Apply an enzyme-based stain remover and let it sit for 15 minutes. Dab the remaining green with rubbing alcohol on a clean cloth. Rinse with cold water. If a shadow remains, blot with equal parts white vinegar and water. Wash in the warmest water the fabric allows with laundry detergent.",
        "warnings": [
            "Avoid chlorine bleach on colored cotton",
            "Check the stain is gone before drying, since heat can set chlorophyll",
        ],
        "effectiveness": "good",
    },

    # ═══════════════ MUD ═══════════════
    {
        "stain_name": "mud",
        "material_name": "carpet",
        "pre_treatment": "Let the mud dry completely, then break it up and vacuum away as much as possible.",
        "products": ["Vacuum cleaner", "Dish soap", "White vinegar", "Spray bottle", "Clean cloths"],
        "wash_method": "Mix one tablespoon of dish soap with two cups of warm water. Blot the solution into the remaining stain with a clean cloth. Spray a mix of white vinegar and water over the area and blot again. Rinse by dabbing with a damp cloth. Let the carpet dry, then vacuum to lift the fibers.",
        "warnings": [
            "Don't try to clean mud while it is still wet, as it spreads deeper into the pile",
            "Don't oversaturate the carpet as excess moisture can damage padding and subfloor",
        ],
        "effectiveness": "excellent",
    },

    # ═══════════════ MAKEUP ═══════════════
    {
        "stain_name": "makeup",
        "material_name": "polyester",
        "pre_treatment": "Scrape off any excess foundation with a dull knife. Blot with a dry paper towel.",
        "products": ["Liquid dish soap", "Micellar water", "Laundry detergent", "Soft-bristled brush"],
        "wash_method": "Apply a few drops of liquid dish soap and work it in gently with a soft-bristled brush. Let sit for 10 minutes. Dab with micellar water on a cotton pad to lift the remaining pigment. Rinse with cool water. Wash on a gentle cycle with laundry detergent and air dry.",
        "warnings": [
            "Avoid hot water and high dryer heat on polyester",
            "Oil-based removers can leave a second stain, so follow up with dish soap",
        ],
        "effectiveness": "good",
    },

    # ═══════════════ CHOCOLATE ═══════════════
    {
        "stain_name": "chocolate",
        "material_name": "cotton",
        "pre_treatment": "Gently scrape off any solid chocolate with a dull knife or spoon. Rinse the back of the stain with cold water to push out the chocolate.",
        "products": ["Liquid dish soap", "Laundry detergent", "Hydrogen peroxide", "White vinegar", "Enzyme-based stain remover"],
        "wash_method": "Apply liquid dish soap directly to the stain and gently rub. Rinse with cold water. Pretreat with laundry detergent or an enzyme-based stain remover, let sit for 15-30 minutes. For stubborn stains on white cotton, apply a mixture of hydrogen peroxide and dish soap (1:1 ratio). For colored cotton, use a mixture of white vinegar and water. Wash in the warmest water safe for the fabric.",
        "warnings": [
            "Avoid hot water until the stain is removed as it can cook the proteins in chocolate",
            "Don't use hydrogen peroxide on colored fabrics",
            "Check that the stain is gone before putting in the dryer",
        ],
        "effectiveness": "good",
    },

    # ═══════════════ SWEAT ═══════════════
    {
        "stain_name": "sweat",
        "material_name": "cotton",
        "pre_treatment": "Rinse the stained area with cold water from the inside of the garment.",
        "products": ["Baking soda", "White vinegar", "Enzyme-based stain remover", "Laundry detergent"],
        "wash_method": "Make a paste of baking soda and water and rub it into the stain. Let it sit for at least an hour. Spray or dab white vinegar over the paste and let it fizz. Apply an enzyme-based stain remover and leave it overnight for old yellow marks. Wash with laundry detergent in the warmest water the fabric allows.",
        "warnings": [
            "Avoid chlorine bleach, which reacts with sweat proteins and deepens yellowing",
        ],
        "effectiveness": "fair",
    },
]

"""Fixed keyword tables used to read preferences out of free-text answers.

Every mapping is read-only and iterated in definition order. The analyzer
depends on that order: for sunlight and climate the last matching entry wins.
"""

from types import MappingProxyType

# ============================================================================
# SIGNAL EXTRACTION
# ============================================================================

STYLE_KEYWORDS = MappingProxyType({
    "Modern Minimal": ("modern", "minimal", "clean", "structured", "architectural", "contemporary"),
    "Cottage Romantic": ("cottage", "romantic", "whimsical", "english", "abundant", "flowers"),
    "Mediterranean Dry": ("mediterranean", "olive", "terracotta", "dry", "drought", "sun-baked"),
    "Japanese Zen": ("japanese", "zen", "calm", "raked", "maple", "stone", "moss"),
    "Desert Xeriscape": ("desert", "xeriscape", "succulent", "cactus", "agave"),
    "Tropical Lush": ("tropical", "lush", "palms", "banana", "exotic"),
    "Native Wildlife": ("native", "wildlife", "pollinator", "meadow", "prairie"),
})

MOOD_WORDS = (
    "calm", "cozy", "vibrant", "playful", "refined", "relaxed", "elegant",
    "wild", "formal", "romantic", "rustic", "serene", "lush", "minimal",
)

USAGE_WORDS = (
    "entertaining", "dining", "kids", "children", "pets", "dog", "cat",
    "reading", "quiet", "food", "vegetable", "veggie", "bbq", "grill",
    "firepit", "hot tub", "pool",
)

CONSTRAINT_WORDS = (
    "small", "tiny", "narrow", "slope", "steep", "hoa", "water restriction",
    "budget", "wind", "deer", "rabbit", "privacy",
)

# Checked low -> medium -> high, first match wins
MAINTENANCE_PATTERNS = (
    ("low", r"(low|minimal|no) maintenance|low upkeep"),
    ("medium", r"medium maintenance|some upkeep"),
    ("high", r"(high|intensive) maintenance|love gardening"),
)

SUN_MAP = MappingProxyType({
    "full sun": "full sun",
    "lots of sun": "full sun",
    "sunny": "full sun",
    "partial shade": "partial shade",
    "part shade": "partial shade",
    "dappled": "partial shade",
    "mostly shade": "shade",
    "shade": "shade",
})

CLIMATE_WORDS = MappingProxyType({
    "coastal": ("coastal", "salt", "ocean"),
    "desert": ("desert", "arid", "drought"),
    "tropical": ("tropical", "humid", "rainforest"),
    "temperate": ("temperate", "mild"),
    "cold": ("cold", "alpine", "snow"),
})

PLANT_SYNONYMS = MappingProxyType({
    "lavender": ("lavender",),
    "grasses": ("grass", "grasses", "panicum", "miscanthus"),
    "succulents": ("succulent", "succulents", "agave", "aloe", "sedum"),
    "ferns": ("fern", "ferns"),
    "roses": ("rose", "roses"),
    "palms": ("palm", "palms"),
    "maples": ("maple", "acer"),
    "conifers": ("pine", "cedar", "spruce", "juniper"),
    "wildflowers": ("wildflower", "echinacea", "rudbeckia", "salvia"),
})

LIKE_PREFIXES = ("love ", "like ")
DISLIKE_PREFIXES = ("dislike ", "hate ", "avoid ")

KIDS_OR_PETS_PATTERN = r"(kid|child|children|pet|dog|cat)"

END_PATTERN = r"that's all|that is all|enough|done|finish"

# ============================================================================
# SUMMARY SYNTHESIS
# ============================================================================

STYLE_PALETTES = MappingProxyType({
    "Modern Minimal": (
        "Evergreen structure: Buxus balls, Podocarpus, clipped yew",
        "Grasses: Miscanthus, Pennisetum for movement",
        "Monochrome perennials: White Agapanthus, Salvia, Gaura",
    ),
    "Cottage Romantic": (
        "Perennials: Lavender, Nepeta, Salvia, Echinacea, Foxglove",
        "Roses and climbers: David Austin roses, Clematis",
        "Soft grasses: Deschampsia, Stipa tenuissima",
    ),
    "Mediterranean Dry": (
        "Drought-tolerant: Olive, Rosemary, Lavender, Santolina",
        "Silvery foliage: Helichrysum, Artemisia",
        "Herbs and citrus in terracotta",
    ),
    "Japanese Zen": (
        "Structure: Japanese maple, Bamboo (clumping), Pine cloud-pruned",
        "Ground: Moss, Ophiopogon, Ferns",
        "Accents: Irises, Azaleas",
    ),
    "Desert Xeriscape": (
        "Succulents: Agave, Aloe, Echeveria, Opuntia",
        "Cacti & yucca; gravel mulch",
        "Heat-lovers: Red hot poker, Verbena bonariensis",
    ),
    "Tropical Lush": (
        "Foliage drama: Bananas, Colocasia, Alocasia, Philodendron (hardy types)",
        "Palms: Trachycarpus, Chamaerops",
        "Bold color: Canna, Hibiscus",
    ),
    "Native Wildlife": (
        "Natives: Echinacea, Rudbeckia, Solidago, Asclepias",
        "Grasses: Little bluestem, Switchgrass",
        "Shrubs: Serviceberry, Viburnum",
    ),
})

SUN_PALETTE = MappingProxyType({
    "shade": "Shade lovers: Hosta, Ferns, Heuchera, Astilbe, Hellebore",
    "partial shade": "Part-shade adaptable: Hydrangea, Heucherella, Brunnera, Tiarella",
    "full sun": "Sun lovers: Salvia, Nepeta, Gaura, Coreopsis, Achillea",
})

LOW_MAINTENANCE_PALETTE = "Low-maintenance backbone: evergreen shrubs, groundcovers, mulch"

CLIMATE_PALETTE = MappingProxyType({
    "coastal": "Coastal tolerant: Armeria, Sea kale, Escallonia",
    "cold": "Cold-hardy focus: conifers, grasses, perennials to zone",
    "desert": "Ultra drought: Agastache, Salvia greggii, Teucrium",
})

STYLE_FEATURES = MappingProxyType({
    "Modern Minimal": "Clean pavers with steel edging and lighting",
    "Cottage Romantic": "Meandering path, arch with climbers, rustic seating",
    "Mediterranean Dry": "Gravel terrace, terracotta pots, simple pergola",
    "Japanese Zen": "Stone basin, gravel raked area, timber deck",
    "Desert Xeriscape": "Rock garden mounds, boulders, decomposed granite",
    "Tropical Lush": "Shaded seating, water feature, layered canopy",
    "Native Wildlife": "Pollinator bed, bird bath, meadow edge",
})

LOW_MAINTENANCE_FEATURE = "Drip irrigation and weed-suppressing mulch"
FULL_SUN_FEATURE = "Shade sail or pergola for hot afternoons"
KIDS_OR_PETS_FEATURE = "Durable lawn alternative and pet-safe, kid-friendly plants"

# Usage features are only considered if some usage matches this guard; "veggie" is missing from it
USAGE_FEATURE_GUARD = r"entertain|dining|bbq|grill|firepit|hot tub|pool|reading|quiet|food|vegetable"

# A usage phrase may trigger several of these
USAGE_FEATURES = (
    (r"entertain|dining|bbq|grill", "Dining terrace near kitchen and grill zone"),
    (r"firepit", "Fire pit with circular seating"),
    (r"hot tub|pool", "Privacy planting around water features"),
    (r"reading|quiet", "Quiet nook with bench and screening"),
    (r"food|vegetable|veggie", "Compact raised beds for edibles"),
)

KIDS_OR_PETS_USAGE = "Safe play and pet circulation considered"
DEFAULT_USAGE = "Relaxation and light entertaining"
DEFAULT_MOOD_WORDS = ("Calm", "Welcoming")

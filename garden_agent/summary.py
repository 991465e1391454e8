"""Garden concept synthesis from a finished analysis."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .analysis import Analysis
from .config import config
from .vocabulary import (
    CLIMATE_PALETTE,
    DEFAULT_MOOD_WORDS,
    DEFAULT_USAGE,
    FULL_SUN_FEATURE,
    KIDS_OR_PETS_FEATURE,
    KIDS_OR_PETS_USAGE,
    LOW_MAINTENANCE_FEATURE,
    LOW_MAINTENANCE_PALETTE,
    PLANT_SYNONYMS,
    STYLE_FEATURES,
    STYLE_PALETTES,
    SUN_PALETTE,
    USAGE_FEATURE_GUARD,
    USAGE_FEATURES,
)


@dataclass(frozen=True)
class GardenSummary:
    """Final garden concept returned when the conversation is done."""
    styles: Tuple[str, ...]
    mood_words: Tuple[str, ...]
    plant_palette: Tuple[str, ...]
    features: Tuple[str, ...]
    usage_plan: Tuple[str, ...]
    sunlight: Optional[str]
    maintenance: Optional[str]
    climate: Optional[str]
    notes: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation with camelCase keys."""
        return {
            "styles": list(self.styles),
            "moodWords": list(self.mood_words),
            "plantPalette": list(self.plant_palette),
            "features": list(self.features),
            "usagePlan": list(self.usage_plan),
            "sunlight": self.sunlight,
            "maintenance": self.maintenance,
            "climate": self.climate,
            "notes": list(self.notes),
        }


class _OrderedSet:
    """Insertion-ordered set of strings."""

    def __init__(self):
        self._items: Dict[str, None] = {}

    def add(self, value: str):
        self._items.setdefault(value, None)

    def discard_if(self, predicate):
        self._items = {k: None for k in self._items if not predicate(k)}

    def __len__(self):
        return len(self._items)

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._items)


def rank_styles(analysis: Analysis, limit: Optional[int] = None) -> List[str]:
    """Top scoring styles; ties keep style definition order."""
    if limit is None:
        limit = config.max_styles
    ranked = sorted(analysis.styles.items(), key=lambda item: item[1], reverse=True)
    top = [name for name, score in ranked if score > 0][:limit]
    return top or [config.default_style]


def _mentions_plant(entry: str, plant: str) -> bool:
    words = (plant.lower(),) + PLANT_SYNONYMS.get(plant.lower(), ())
    return any(re.search(rf"\b{re.escape(w)}\b", entry, re.IGNORECASE) for w in words)


def build_palette(styles: List[str], analysis: Analysis) -> Tuple[str, ...]:
    items = _OrderedSet()
    for style in styles:
        for suggestion in STYLE_PALETTES.get(style, ()):
            items.add(suggestion)

    if analysis.sunlight in SUN_PALETTE:
        items.add(SUN_PALETTE[analysis.sunlight])
    if analysis.maintenance == "low":
        items.add(LOW_MAINTENANCE_PALETTE)
    if analysis.climate in CLIMATE_PALETTE:
        items.add(CLIMATE_PALETTE[analysis.climate])

    for like in analysis.liked_plants:
        items.add(like)
    # Dislikes win over every addition above, including style suggestions
    for dislike in analysis.disliked_plants:
        items.discard_if(lambda entry: _mentions_plant(entry, dislike))

    return items.as_tuple()


def build_features(styles: List[str], analysis: Analysis) -> Tuple[str, ...]:
    items = _OrderedSet()
    for style, feature in STYLE_FEATURES.items():
        if style in styles:
            items.add(feature)

    if analysis.maintenance == "low":
        items.add(LOW_MAINTENANCE_FEATURE)
    if analysis.sunlight == "full sun":
        items.add(FULL_SUN_FEATURE)
    if analysis.has_kids_or_pets:
        items.add(KIDS_OR_PETS_FEATURE)

    # A lone "Veggie" never passes the guard even though the last pattern matches it
    if any(re.search(USAGE_FEATURE_GUARD, u.lower()) for u in analysis.usage):
        for usage in analysis.usage:
            lowered = usage.lower()
            for pattern, feature in USAGE_FEATURES:
                if re.search(pattern, lowered):
                    items.add(feature)

    return items.as_tuple()


def build_usage(analysis: Analysis) -> Tuple[str, ...]:
    items = _OrderedSet()
    for usage in analysis.usage:
        items.add(usage)
    if analysis.has_kids_or_pets:
        items.add(KIDS_OR_PETS_USAGE)
    if not len(items):
        items.add(DEFAULT_USAGE)
    return items.as_tuple()


def build_notes(analysis: Analysis) -> Tuple[str, ...]:
    notes = []
    if analysis.disliked_plants:
        notes.append(f"Avoid: {', '.join(analysis.disliked_plants)}")
    if analysis.constraints:
        notes.append(f"Constraints: {', '.join(analysis.constraints)}")
    return tuple(notes)


def synthesize_summary(analysis: Analysis) -> GardenSummary:
    """Render the garden concept for a completed conversation."""
    styles = rank_styles(analysis)

    return GardenSummary(
        styles=tuple(styles),
        mood_words=analysis.mood or DEFAULT_MOOD_WORDS,
        plant_palette=build_palette(styles, analysis),
        features=build_features(styles, analysis),
        usage_plan=build_usage(analysis),
        sunlight=analysis.sunlight,
        maintenance=analysis.maintenance,
        climate=analysis.climate,
        notes=build_notes(analysis),
    )

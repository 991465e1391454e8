"""Keyword analysis of the user's answers.

The analysis is recomputed from the full message history on every turn and
never stored. It only looks at user-authored text.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple

from .messages import Message, user_text
from .vocabulary import (
    CLIMATE_WORDS,
    CONSTRAINT_WORDS,
    DISLIKE_PREFIXES,
    KIDS_OR_PETS_PATTERN,
    LIKE_PREFIXES,
    MAINTENANCE_PATTERNS,
    MOOD_WORDS,
    PLANT_SYNONYMS,
    STYLE_KEYWORDS,
    SUN_MAP,
    USAGE_WORDS,
)


@dataclass(frozen=True)
class Analysis:
    """Preferences detected so far.

    Attributes:
        styles: Style name -> keyword hit count, in style definition order
        mood: Matched mood words, capitalized
        liked_plants: Canonical plant names mentioned or liked
        disliked_plants: Canonical plant names the user wants to avoid
        usage: Matched usage phrases, capitalized
        constraints: Matched site or budget constraints, capitalized
        maintenance: "low", "medium", "high" or None
        sunlight: "full sun", "partial shade", "shade" or None
        climate: Climate category or None
        has_kids_or_pets: True if kids or pets were mentioned
    """
    styles: Mapping[str, int] = field(default_factory=lambda: {s: 0 for s in STYLE_KEYWORDS})
    mood: Tuple[str, ...] = ()
    liked_plants: Tuple[str, ...] = ()
    disliked_plants: Tuple[str, ...] = ()
    usage: Tuple[str, ...] = ()
    constraints: Tuple[str, ...] = ()
    maintenance: Optional[str] = None
    sunlight: Optional[str] = None
    climate: Optional[str] = None
    has_kids_or_pets: bool = False

    @property
    def is_empty(self) -> bool:
        """True when no signal at all was found."""
        return (
            not any(self.styles.values())
            and not (self.mood or self.liked_plants or self.disliked_plants)
            and not (self.usage or self.constraints)
            and self.maintenance is None
            and self.sunlight is None
            and self.climate is None
            and not self.has_kids_or_pets
        )


def occurrences(text: str, needle: str) -> int:
    """Count non-overlapping literal occurrences of needle in text."""
    return len(re.findall(re.escape(needle), text))


def cap(word: str) -> str:
    return word[:1].upper() + word[1:]


def _present(text: str, words) -> Tuple[str, ...]:
    return tuple(cap(w) for w in words if w in text)


def score_styles(text: str) -> Dict[str, int]:
    """Total keyword hits per style."""
    return {
        style: sum(occurrences(text, w) for w in words)
        for style, words in STYLE_KEYWORDS.items()
    }


def detect_maintenance(text: str) -> Optional[str]:
    for level, pattern in MAINTENANCE_PATTERNS:
        if re.search(pattern, text):
            return level
    return None


def detect_sunlight(text: str) -> Optional[str]:
    # Later entries overwrite earlier ones, so "partial shade" also ends up as "shade"
    sunlight = None
    for phrase, level in SUN_MAP.items():
        if phrase in text:
            sunlight = level
    return sunlight


def detect_climate(text: str) -> Optional[str]:
    # Same overwrite behavior as detect_sunlight
    climate = None
    for category, words in CLIMATE_WORDS.items():
        if any(w in text for w in words):
            climate = category
    return climate


def detect_plants(text: str) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Return (liked, disliked) canonical plant names.

    A bare mention counts as liked, so a plant can land in both lists.
    """
    liked: List[str] = []
    disliked: List[str] = []
    for plant, synonyms in PLANT_SYNONYMS.items():
        if any(w in text or any(f"{p}{w}" in text for p in LIKE_PREFIXES) for w in synonyms):
            liked.append(cap(plant))
        if any(f"{p}{w}" in text for w in synonyms for p in DISLIKE_PREFIXES):
            disliked.append(cap(plant))
    return tuple(liked), tuple(disliked)


def analyze(messages: List[Message]) -> Analysis:
    """Extract style, mood, plant, usage and site signal from user messages."""
    text = user_text(messages)
    liked, disliked = detect_plants(text)

    return Analysis(
        styles=score_styles(text),
        mood=_present(text, MOOD_WORDS),
        liked_plants=liked,
        disliked_plants=disliked,
        usage=_present(text, USAGE_WORDS),
        constraints=_present(text, CONSTRAINT_WORDS),
        maintenance=detect_maintenance(text),
        sunlight=detect_sunlight(text),
        climate=detect_climate(text),
        has_kids_or_pets=re.search(KIDS_OR_PETS_PATTERN, text) is not None,
    )

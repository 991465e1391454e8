"""Question catalog and next-question selection.

Which topics were already asked is recovered from the assistant messages:
every question text starts with a ``Q-<key>:`` tag.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Set

from .analysis import Analysis
from .config import config
from .messages import Message, user_text
from .vocabulary import END_PATTERN

_TAG_PATTERN = re.compile(r"^Q-(\w+):")


class QuestionKey(str, Enum):
    FEELS = "feels"
    STYLE = "style"
    PLANTS = "plants"
    USE = "use"
    MAINTENANCE = "maintenance"
    SUN = "sun"
    CLIMATE = "climate"
    CONSTRAINTS = "constraints"


QUESTION_ORDER = tuple(QuestionKey)


@dataclass(frozen=True)
class Question:
    key: QuestionKey
    text: str


QUESTIONS = {
    QuestionKey.FEELS: Question(
        QuestionKey.FEELS,
        "Q-feels: What feelings should your garden evoke? (e.g., calm, cozy, vibrant, playful, refined)",
    ),
    QuestionKey.STYLE: Question(
        QuestionKey.STYLE,
        "Q-style: What garden styles do you gravitate to? (modern, cottage, Mediterranean, "
        "Japanese/Zen, desert/xeriscape, tropical, native/wildlife)",
    ),
    QuestionKey.PLANTS: Question(
        QuestionKey.PLANTS,
        "Q-plants: Any plants you love or dislike? (e.g., lavender, grasses, succulents, ferns, roses, palms)",
    ),
    QuestionKey.USE: Question(
        QuestionKey.USE,
        "Q-use: How will you use the space? (entertaining, dining, kids, pets, quiet reading, growing food)",
    ),
    QuestionKey.MAINTENANCE: Question(
        QuestionKey.MAINTENANCE,
        "Q-maintenance: How much upkeep is realistic? (low, medium, high)",
    ),
    QuestionKey.SUN: Question(
        QuestionKey.SUN,
        "Q-sun: What sunlight do you get? (full sun, partial shade, mostly shade)",
    ),
    QuestionKey.CLIMATE: Question(
        QuestionKey.CLIMATE,
        "Q-climate: Where are you located or what climate/USDA zone? "
        "(coastal, desert, tropical, temperate, cold)",
    ),
    QuestionKey.CONSTRAINTS: Question(
        QuestionKey.CONSTRAINTS,
        "Q-constraints: Any constraints? (small space, slope, HOA, water restrictions, budget)",
    ),
}

QUICK_REPLIES = (
    "Modern & minimal",
    "Cottage & romantic",
    "Mediterranean & dry",
    "Zen & calm",
    "Tropical & lush",
    "I have kids and a dog",
    "Low maintenance",
    "Full sun",
    "Mostly shade",
    "I love lavender and grasses",
    "I dislike roses",
)


def parse_question_key(content: str) -> Optional[QuestionKey]:
    """Return the key tagged at the start of an assistant message, if known."""
    match = _TAG_PATTERN.match(content)
    if not match:
        return None
    try:
        return QuestionKey(match.group(1))
    except ValueError:
        return None


def get_asked_keys(messages: Iterable[Message]) -> Set[QuestionKey]:
    asked: Set[QuestionKey] = set()
    for m in messages:
        if m.role != "assistant":
            continue
        key = parse_question_key(m.content)
        if key is not None:
            asked.add(key)
    return asked


def wants_to_finish(messages: List[Message]) -> bool:
    """True if the user signalled they are done ("that's all", "enough", ...)."""
    return re.search(END_PATTERN, user_text(messages)) is not None


def is_done(messages: List[Message], asked: Set[QuestionKey], coverage_threshold: Optional[int] = None) -> bool:
    """Conversation ends on an end phrase or once enough distinct topics were asked."""
    if coverage_threshold is None:
        coverage_threshold = config.coverage_threshold
    return wants_to_finish(messages) or len(asked) >= coverage_threshold


def choose_next_key(asked: Set[QuestionKey], analysis: Analysis) -> QuestionKey:
    """Pick the next topic, preferring topics whose signal is still missing."""
    need_plants = not analysis.liked_plants and not analysis.disliked_plants

    if need_plants and QuestionKey.PLANTS not in asked:
        return QuestionKey.PLANTS
    if analysis.has_kids_or_pets and QuestionKey.USE not in asked:
        return QuestionKey.USE
    if analysis.sunlight is None and QuestionKey.SUN not in asked:
        return QuestionKey.SUN
    if analysis.maintenance is None and QuestionKey.MAINTENANCE not in asked:
        return QuestionKey.MAINTENANCE
    if analysis.climate is None and QuestionKey.CLIMATE not in asked:
        return QuestionKey.CLIMATE

    for key in QUESTION_ORDER:
        if key not in asked:
            return key
    return QuestionKey.CONSTRAINTS

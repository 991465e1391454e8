"""Conversation messages exchanged with the questionnaire."""
import logging
from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class Message(BaseModel):
    """One chat message. The caller resends the full list every turn."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


def parse_messages(raw: Any) -> List[Message]:
    """Coerce a decoded JSON value into a message list.

    Anything that is not a list yields an empty conversation; entries that do
    not look like messages are skipped.
    """
    if not isinstance(raw, list):
        if raw is not None:
            logger.warning(f"Ignoring non-list messages payload of type {type(raw).__name__}")
        return []

    messages: List[Message] = []
    for index, item in enumerate(raw):
        if isinstance(item, Message):
            messages.append(item)
            continue
        try:
            messages.append(Message.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Skipping malformed message at index {index}: {e.error_count()} error(s)")
    return messages


def user_text(messages: List[Message]) -> str:
    """Lowercased user-authored content joined by newlines."""
    return "\n".join(m.content.lower() for m in messages if m.role == "user")

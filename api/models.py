"""Pydantic models for API requests and responses."""
from typing import List, Optional
from pydantic import BaseModel


class AgentRequest(BaseModel):
    # Entries are validated one by one so a single bad message does not fail the turn
    messages: Optional[list] = None


class QuestionInfo(BaseModel):
    key: str
    text: str


class QuestionCatalog(BaseModel):
    questions: List[QuestionInfo]
    quick_replies: List[str]

"""Garden Style Agent Package.

Adaptive, rule-based questionnaire that reads garden preferences out of
free-text answers and synthesizes a garden concept.
"""

from .agent import AgentResult, run_agent
from .analysis import Analysis, analyze
from .config import config, narrative_config
from .messages import Message, parse_messages
from .questions import QUESTIONS, QUESTION_ORDER, QUICK_REPLIES, QuestionKey
from .summary import GardenSummary, synthesize_summary

__all__ = [
    "AgentResult",
    "run_agent",
    "Analysis",
    "analyze",
    "config",
    "narrative_config",
    "Message",
    "parse_messages",
    "QUESTIONS",
    "QUESTION_ORDER",
    "QUICK_REPLIES",
    "QuestionKey",
    "GardenSummary",
    "synthesize_summary",
]

__version__ = "0.1.0"

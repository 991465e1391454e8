"""Turn orchestration for the garden style questionnaire.

Each call receives the whole conversation and decides between asking one
more question and returning the finished garden concept. Nothing is kept
between calls.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .analysis import analyze
from .messages import Message
from .questions import QUESTIONS, QuestionKey, choose_next_key, get_asked_keys, is_done
from .summary import GardenSummary, synthesize_summary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AgentResult:
    done: bool
    next_question: Optional[str] = None
    question_key: Optional[QuestionKey] = None
    summary: Optional[GardenSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation; absent fields are omitted."""
        result: Dict[str, Any] = {"done": self.done}
        if self.next_question is not None:
            result["nextQuestion"] = self.next_question
        if self.summary is not None:
            result["summary"] = self.summary.to_dict()
        return result


def run_agent(messages: List[Message]) -> AgentResult:
    """Advance the questionnaire by one turn."""
    asked = get_asked_keys(messages)
    analysis = analyze(messages)

    if is_done(messages, asked):
        summary = synthesize_summary(analysis)
        logger.info(f"Questionnaire complete after {len(asked)} topics; styles: {', '.join(summary.styles)}")
        return AgentResult(done=True, summary=summary)

    next_key = choose_next_key(asked, analysis)
    logger.debug(f"Asked {sorted(k.value for k in asked)}; next topic: {next_key.value}")
    return AgentResult(done=False, next_question=QUESTIONS[next_key].text, question_key=next_key)

"""Questionnaire endpoints (stateless, the client resends the full history)."""
import json
import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from api.models import AgentRequest, QuestionCatalog, QuestionInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/agent", tags=["Agent"])


async def read_agent_request(request: Request) -> AgentRequest:
    """Decode the body leniently; anything unreadable is an empty conversation."""
    try:
        body = await request.json()
        return AgentRequest.model_validate(body if isinstance(body, dict) else {})
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Malformed agent request, treating as empty conversation: {e}")
        return AgentRequest()


@router.post("")
async def agent_turn(request: Request):
    """Return the next question, or the garden concept once the conversation is done."""
    req = await read_agent_request(request)
    try:
        from garden_agent import parse_messages, run_agent
        from garden_agent.narrative import describe_concept

        messages = parse_messages(req.messages)
        result = run_agent(messages)
        payload = result.to_dict()

        if result.summary is not None:
            narrative = describe_concept(result.summary)
            if narrative:
                payload["narrative"] = narrative

        return payload
    except Exception as e:
        logger.error(f"Error running questionnaire turn: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/questions", response_model=QuestionCatalog)
async def list_questions():
    """Question catalog in default asking order plus the suggested quick replies."""
    from garden_agent import QUESTIONS, QUESTION_ORDER, QUICK_REPLIES

    return QuestionCatalog(
        questions=[QuestionInfo(key=key.value, text=QUESTIONS[key].text) for key in QUESTION_ORDER],
        quick_replies=list(QUICK_REPLIES),
    )

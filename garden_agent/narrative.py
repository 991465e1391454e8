"""Optional prose description of a finished garden concept.

The rule-based summary is always the answer; the narrative only decorates
it when USE_LLM_NARRATIVE is enabled. Any model failure is logged and the
narrative is left out.
"""

import json
import logging
from typing import Optional

from .config import narrative_config
from .summary import GardenSummary

logger = logging.getLogger(__name__)


def describe_concept(summary: GardenSummary, config=None) -> Optional[str]:
    """Ask Gemini for a short paragraph describing the concept."""
    if config is None:
        config = narrative_config
    if not config.enabled:
        return None
    if not config.has_credentials:
        logger.warning("Narrative enabled but no Gemini credentials configured")
        return None

    try:
        from garden_agent.utils.genai_utils import get_genai_client, extract_text
        from prompts import GARDEN_CONCEPT_PROMPT

        client = get_genai_client(config.api_key or "")
        prompt = GARDEN_CONCEPT_PROMPT.format(summary_json=json.dumps(summary.to_dict(), indent=2))
        response = client.models.generate_content(
            model=config.worker_model,
            contents=prompt
        )
        text = extract_text(response).strip()
        return text or None
    except Exception as e:
        logger.warning(f"Could not generate garden narrative: {e}")
        return None

"""Configuration management for the garden style questionnaire.

This module defines configuration dataclasses for different aspects of the system:
- QuestionnaireConfiguration: Completion heuristics and summary fallbacks
- NarrativeConfiguration: Optional Gemini narrative for finished concepts
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


@dataclass
class QuestionnaireConfiguration:
    """Configuration for the rule-based questionnaire.

    Attributes:
        coverage_threshold: Number of distinct topics asked after which the conversation ends
        default_style: Style label used when no style keyword was detected
        max_styles: How many top-scoring styles make it into the summary
    """
    coverage_threshold: int = int(os.getenv("COVERAGE_THRESHOLD", "6"))
    default_style: str = os.getenv("DEFAULT_STYLE", "Contemporary Natural")
    max_styles: int = int(os.getenv("MAX_STYLES", "2"))


@dataclass
class NarrativeConfiguration:
    """Configuration for the optional LLM concept narrative.

    Attributes:
        enabled: Ask the model for a prose description of finished summaries
        worker_model: Fast model used for the narrative
        api_key: Gemini API key; when empty the client falls back to Vertex AI
        use_vertexai: Use Vertex AI credentials instead of an API key
    """
    enabled: bool = os.getenv("USE_LLM_NARRATIVE", "false").lower() == "true"
    worker_model: str = os.getenv("AI_MODEL", "gemini-2.5-flash")
    api_key: Optional[str] = os.getenv("GEMINI_API_KEY") or None
    use_vertexai: bool = os.getenv("GOOGLE_GENAI_USE_VERTEXAI", "true").lower() == "true"

    @property
    def has_credentials(self) -> bool:
        """Check if the Gemini client can be built."""
        return bool(self.api_key or self.use_vertexai)


# Global configuration instances
config = QuestionnaireConfiguration()
narrative_config = NarrativeConfiguration()

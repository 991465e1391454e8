"""
Prompts module for the garden style agent.

Contains system prompts as Python template strings for better maintainability
and IDE support.
"""

from .garden_concept import GARDEN_CONCEPT_PROMPT

__all__ = [
    "GARDEN_CONCEPT_PROMPT",
]

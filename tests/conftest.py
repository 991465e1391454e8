import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)


@pytest.fixture
def conversation():
    """Build a message list from (role, content) pairs."""
    from garden_agent import Message

    def _build(*pairs):
        return [Message(role=role, content=content) for role, content in pairs]
    return _build


@pytest.fixture(autouse=True)
def _no_narrative(monkeypatch):
    """Keep the optional LLM narrative off unless a test turns it on."""
    from garden_agent import narrative

    monkeypatch.setattr(narrative.narrative_config, "enabled", False)

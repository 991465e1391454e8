import threading
from typing import Any, Dict, Optional

from ..config import narrative_config

_client_lock = threading.Lock()
_client_instances: Dict[Optional[str], Any] = {}


def get_genai_client(api_key: Optional[str] = None):
    """Return a google.genai Client per API key; an empty key means Vertex AI.

    The key defaults to the one in the global narrative configuration.
    """
    if api_key is None:
        api_key = narrative_config.api_key or ""
    client = _client_instances.get(api_key)
    if client is not None:
        return client
    with _client_lock:
        if api_key not in _client_instances:
            # Lazy import to avoid hard dependency at import time
            from google import genai  # type: ignore
            if api_key:
                _client_instances[api_key] = genai.Client(api_key=api_key)
            else:
                _client_instances[api_key] = genai.Client(vertexai=True)
    return _client_instances[api_key]


def extract_text(response: Any) -> str:
    """Extract text from google.genai response across common shapes."""
    if response is None:
        return ""
    if hasattr(response, "text") and isinstance(response.text, str):
        return response.text
    text = ""
    candidates = getattr(response, "candidates", None) or []
    for cand in candidates:
        content = getattr(cand, "content", None)
        for part in getattr(content, "parts", None) or []:
            t = getattr(part, "text", None)
            if isinstance(t, str):
                text += t
    return text

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from clauselens.utils.config import AppConfig
from clauselens.llm.gemini import get_llm

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "analysis.txt"
with open(ANALYSIS_PROMPT_PATH, "r", encoding="utf-8") as f:
    ANALYSIS_TEMPLATE = f.read()

_CLAUSE_LIST_SCHEMA = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {
            "original": {"type": "STRING"},
            "explanation": {"type": "STRING"},
        },
        "required": ["original", "explanation"],
    },
}

ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {"type": "STRING"},
        "clauses": {
            "type": "OBJECT",
            "properties": {
                "safe": _CLAUSE_LIST_SCHEMA,
                "doubtful": _CLAUSE_LIST_SCHEMA,
                "needs_attention": _CLAUSE_LIST_SCHEMA,
            },
            "required": ["safe", "doubtful", "needs_attention"],
        },
        "risks": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["summary", "clauses", "risks"],
}


def build_analysis_request(config: AppConfig, text: str) -> Dict[str, Any]:
    contents: List[Dict[str, Any]] = [
        {"role": "user", "parts": [{"text": ANALYSIS_TEMPLATE}, {"text": text}]},
    ]
    generation_config = {
        "temperature": config.analysis_temperature,
        "max_output_tokens": config.analysis_max_tokens,
        "response_mime_type": "application/json",
        "response_schema": ANALYSIS_RESPONSE_SCHEMA,
    }
    return {"contents": contents, "generation_config": generation_config}


def analyze_legal_doc(config: AppConfig, text: str, llm=None) -> Optional[str]:
    """Ask the model to classify the document's clauses.

    Returns the raw response text (JSON, possibly fenced), or None when no
    credential is configured or the request fails. Callers treat None as
    "no analysis available".
    """
    if llm is None:
        llm = get_llm(config)
        if llm is None:
            return None
    request = build_analysis_request(config, text)
    try:
        response = llm.generate(request["contents"], request["generation_config"])
    except Exception:
        logger.exception("Gemini analysis request failed")
        return None
    logger.debug("Analysis response: %d chars", len(response or ""))
    return response

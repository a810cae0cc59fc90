from __future__ import annotations
import json
import logging
import re
from typing import Optional
from clauselens.utils.types import AnalysisResult
from clauselens.utils.exceptions import ResponseParseFailure

logger = logging.getLogger(__name__)

# Whole-string match: opening fence (optional json tag), body, closing fence.
FENCE_RE = re.compile(r"^```(json)?\n(.*)\n```\s*$", re.I | re.S)


def strip_code_fences(raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    m = FENCE_RE.match(raw)
    return m.group(2) if m else raw


def _loads(body: str) -> dict:
    try:
        payload = json.loads(body)
    except (ValueError, TypeError, RecursionError) as e:
        raise ResponseParseFailure(str(e)) from e
    if not isinstance(payload, dict):
        raise ResponseParseFailure(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def parse_analysis(raw: Optional[str]) -> Optional[AnalysisResult]:
    """Parse the model response into an AnalysisResult, or None if it is unusable."""
    if not raw:
        return None
    body = strip_code_fences(raw)
    try:
        return AnalysisResult.from_dict(_loads(body))
    except ResponseParseFailure as e:
        logger.warning("Failed to parse AI analysis JSON: %s | body=%.200r", e, body)
        return None

from __future__ import annotations
import google.generativeai as genai
import logging
from typing import Any, Dict, List, Union
from clauselens.utils.config import AppConfig
from clauselens.utils.exceptions import ConfigurationMissing, ModelRequestFailure

logger = logging.getLogger(__name__)

Contents = Union[str, List[Dict[str, Any]]]


class GeminiClient:
    """Thin wrapper over the hosted Gemini model.

    One call, one round-trip: there is no retry here, callers surface the
    failure to the user who may resubmit.
    """

    def __init__(self, config: AppConfig):
        if not config.has_api_key:
            raise ConfigurationMissing("GOOGLE_API_KEY not set")
        genai.configure(api_key=config.google_api_key)
        self.config = config
        self.model = genai.GenerativeModel(config.model_name)

    def generate(self, contents: Contents, generation_config: Dict[str, Any]) -> str:
        try:
            rsp = self.model.generate_content(contents, generation_config=generation_config)
            return rsp.text
        except Exception as e:  # pragma: no cover - external API
            raise ModelRequestFailure(f"Gemini generation failed: {e}") from e


def get_llm(config: AppConfig):
    """Return a GeminiClient, or None when no credential is configured."""
    try:
        return GeminiClient(config)
    except ConfigurationMissing:
        logger.warning("Gemini client unavailable: GOOGLE_API_KEY not set")
        return None

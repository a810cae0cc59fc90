from __future__ import annotations
import logging
import re
from pathlib import Path
from clauselens.utils.config import AppConfig
from clauselens.utils.types import ChatReply
from clauselens.llm.gemini import get_llm

logger = logging.getLogger(__name__)

CHAT_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "clause_chat.txt"
with open(CHAT_PROMPT_PATH, "r", encoding="utf-8") as f:
    CHAT_TEMPLATE = f.read()

CHAT_ERROR_MESSAGE = "Failed to get an answer. Please try again."

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")


def sanitize_ai_text(text: str) -> str:
    """Drop **bold** markers the model sometimes emits despite the plain-text instruction."""
    return BOLD_RE.sub(r"\1", text or "")


def build_chat_prompt(clause_text: str, question: str) -> str:
    return CHAT_TEMPLATE.format(clause=clause_text, question=question).strip()


class ClauseChatAssistant:
    def __init__(self, config: AppConfig, llm=None):
        """Answers follow-up questions about a single clause.

        `llm` lets tests inject a stub; by default a GeminiClient is built
        lazily on the first question (None when no key is configured).
        """
        self.config = config
        self.llm = llm

    def _client(self):
        if self.llm is None:
            self.llm = get_llm(self.config)
        return self.llm

    def ask(self, clause_text: str, question: str) -> ChatReply:
        llm = self._client()
        if llm is None:
            return ChatReply(error=CHAT_ERROR_MESSAGE)
        generation_config = {
            "temperature": self.config.chat_temperature,
            "max_output_tokens": self.config.chat_max_tokens,
            "response_mime_type": "text/plain",
        }
        contents = [{"role": "user", "parts": [{"text": build_chat_prompt(clause_text, question)}]}]
        try:
            raw = llm.generate(contents, generation_config)
        except Exception:
            logger.exception("Gemini chat error")
            return ChatReply(error=CHAT_ERROR_MESSAGE)
        return ChatReply(answer=sanitize_ai_text(raw))

from clauselens.utils.config import AppConfig
from clauselens.chat.assistant import ClauseChatAssistant, build_chat_prompt, sanitize_ai_text, CHAT_ERROR_MESSAGE


class StubLLM:
    def __init__(self, answer="You may **negotiate** a cap."):
        self.answer = answer
        self.calls = []

    def generate(self, contents, generation_config):
        self.calls.append((contents, generation_config))
        return self.answer


class FailingLLM:
    def generate(self, contents, generation_config):
        raise RuntimeError("quota exceeded")


def test_prompt_contains_clause_and_question():
    prompt = build_chat_prompt("The tenant pays {all} repairs.", "Is that normal?")
    assert prompt.startswith("You are a helpful legal assistant.")
    assert '"""The tenant pays {all} repairs."""' in prompt
    assert prompt.endswith("Question: Is that normal?")
    assert "plain text only" in prompt


def test_sanitize_strips_bold_markers_only():
    assert sanitize_ai_text("**Risk:** high and *fine*") == "Risk: high and *fine*"
    assert sanitize_ai_text("") == ""


def test_ask_uses_plain_text_request_and_sanitizes():
    llm = StubLLM()
    assistant = ClauseChatAssistant(AppConfig(), llm=llm)
    reply = assistant.ask("Liability is capped at $100.", "Should I worry?")
    assert reply.ok
    assert reply.answer == "You may negotiate a cap."
    contents, cfg = llm.calls[0]
    assert len(contents) == 1 and contents[0]["role"] == "user"
    assert len(contents[0]["parts"]) == 1
    assert "Liability is capped at $100." in contents[0]["parts"][0]["text"]
    assert cfg["response_mime_type"] == "text/plain"
    assert cfg["max_output_tokens"] == 512
    assert cfg["temperature"] == 0.3


def test_ask_failure_returns_error_reply():
    reply = ClauseChatAssistant(AppConfig(), llm=FailingLLM()).ask("c", "q")
    assert not reply.ok
    assert reply.error == CHAT_ERROR_MESSAGE
    assert reply.answer is None


def test_ask_without_key_returns_error_reply():
    reply = ClauseChatAssistant(AppConfig(google_api_key=None)).ask("c", "q")
    assert reply.error == CHAT_ERROR_MESSAGE

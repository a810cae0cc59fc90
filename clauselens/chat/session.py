"""Per-clause chat session as an immutable value plus transition functions.

A session exists only while a clause is selected (no session means idle).
Every transition returns a new ChatSession; the Streamlit view stores the
latest one in its session state.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple
from clauselens.utils.types import ChatMessage, ChatReply, FlatClause

GREETING = "Hi! I'm here to help you understand this clause. Ask a question or click a suggested one below."

SUGGESTED_QUESTIONS = [
    "What does this clause mean in simple terms?",
    "Is this clause risky for me?",
    "How could I negotiate this clause?",
]


@dataclass(frozen=True)
class ChatSession:
    clause_id: int
    clause_text: str
    messages: Tuple[ChatMessage, ...] = ()
    pending: bool = False
    error: Optional[str] = None

    @property
    def input_enabled(self) -> bool:
        return not self.pending


def open_session(clause: FlatClause) -> ChatSession:
    return ChatSession(
        clause_id=clause.id,
        clause_text=clause.original_text,
        messages=(ChatMessage("assistant", GREETING),),
    )


def submit(session: Optional[ChatSession], text: str) -> Tuple[Optional[ChatSession], Optional[str]]:
    """Queue a user question.

    Returns (new_session, question). The question is None, and the session
    unchanged, when the submission is rejected: no clause selected, blank
    input, or a request already in flight.
    """
    question = (text or "").strip()
    if session is None or not question or session.pending:
        return session, None
    updated = replace(
        session,
        messages=session.messages + (ChatMessage("user", question),),
        pending=True,
        error=None,
    )
    return updated, question


def resolve(session: Optional[ChatSession], clause_id: int, answer: str) -> Optional[ChatSession]:
    """Append the answer as given; ClauseChatAssistant.ask has already cleaned it."""
    if session is None or session.clause_id != clause_id:
        return session  # reply for a clause that is no longer selected
    return replace(
        session,
        messages=session.messages + (ChatMessage("assistant", answer),),
        pending=False,
    )


def fail(session: Optional[ChatSession], clause_id: int, message: str) -> Optional[ChatSession]:
    if session is None or session.clause_id != clause_id:
        return session
    # transcript is kept: the unanswered question stays visible for a retry
    return replace(session, pending=False, error=message)


def apply_reply(session: Optional[ChatSession], clause_id: int, reply: ChatReply) -> Optional[ChatSession]:
    if reply.ok:
        return resolve(session, clause_id, reply.answer or "")
    return fail(session, clause_id, reply.error or "")

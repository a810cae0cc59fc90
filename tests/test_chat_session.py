from clauselens.utils.types import FlatClause, ChatMessage, ChatReply
from clauselens.chat.session import GREETING, open_session, submit, resolve, fail, apply_reply

CLAUSE_A = FlatClause(id=1, category="safe", original_text="Rent is due on the 1st.", explanation="Pay monthly.")
CLAUSE_B = FlatClause(id=2, category="danger", original_text="Landlord may enter at any time.", explanation="No notice.")


def test_open_session_starts_with_greeting():
    session = open_session(CLAUSE_A)
    assert session.messages == (ChatMessage("assistant", GREETING),)
    assert session.input_enabled
    assert session.error is None


def test_selecting_other_clause_resets_transcript():
    session = open_session(CLAUSE_A)
    session, question = submit(session, "Is this fair?")
    session = resolve(session, CLAUSE_A.id, "Yes.")
    assert len(session.messages) == 3
    session = open_session(CLAUSE_B)
    assert session.clause_id == 2
    assert session.messages == (ChatMessage("assistant", GREETING),)


def test_submit_appends_trimmed_question_and_sets_pending():
    session, question = submit(open_session(CLAUSE_A), "  Can I pay late?  ")
    assert question == "Can I pay late?"
    assert session.pending and not session.input_enabled
    assert session.messages[-1] == ChatMessage("user", "Can I pay late?")


def test_submit_while_pending_is_noop():
    session, _ = submit(open_session(CLAUSE_A), "first")
    again, question = submit(session, "second")
    assert question is None
    assert again is session


def test_submit_rejects_blank_and_missing_session():
    session = open_session(CLAUSE_A)
    same, question = submit(session, "   ")
    assert question is None and same is session
    none_session, question = submit(None, "hello")
    assert none_session is None and question is None


def test_resolve_appends_answer_and_reenables_input():
    session, _ = submit(open_session(CLAUSE_A), "q")
    session = resolve(session, CLAUSE_A.id, "Keep 2 * 3 as written.")
    assert session.messages[-1] == ChatMessage("assistant", "Keep 2 * 3 as written.")
    assert not session.pending


def test_fail_keeps_question_and_allows_retry():
    session, _ = submit(open_session(CLAUSE_A), "q")
    session = fail(session, CLAUSE_A.id, "Failed to get an answer. Please try again.")
    assert session.error
    assert not session.pending
    assert session.messages[-1] == ChatMessage("user", "q")
    retried, question = submit(session, "q")
    assert question == "q"
    assert retried.error is None


def test_reply_for_stale_clause_is_discarded():
    session, _ = submit(open_session(CLAUSE_A), "q")
    session = open_session(CLAUSE_B)
    after = apply_reply(session, CLAUSE_A.id, ChatReply(answer="old answer"))
    assert after is session


def test_apply_reply_dispatches_on_error():
    session, _ = submit(open_session(CLAUSE_A), "q")
    after = apply_reply(session, CLAUSE_A.id, ChatReply(error="boom"))
    assert after.error == "boom"

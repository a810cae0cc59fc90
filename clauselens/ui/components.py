from __future__ import annotations
import html
import streamlit as st
from typing import List, Optional, Tuple
from clauselens.utils.config import AppConfig
from clauselens.utils.types import AnalysisResult, FlatClause
from clauselens.analysis.clauses import FILTER_OPTIONS, ClauseCounts, filter_clauses
from clauselens.chat.session import SUGGESTED_QUESTIONS, submit
from clauselens.ingest.pdf_loader import ACCEPTED_EXTENSIONS
from clauselens.ui.state import (
    UploadState, ResultsView, select_file, remove_file, size_in_mb,
    set_category, set_query, toggle_expanded, open_chat, close_chat, update_chat,
)

PRIMARY_COLOR = "#6A5ACD"  # slate purple
ACCENT_COLOR = "#FFB347"
CATEGORY_COLORS = {"safe": "#4CAF50", "warning": "#FFB347", "danger": "#FF4B4B"}
RISK_COLORS = {"Low": "#4CAF50", "Medium": "#FFB347", "High": "#FF4B4B"}
CATEGORY_ICONS = {"safe": "🛡️", "warning": "⚠️", "danger": "❗"}

_CSS_TEMPLATE = r"""
<style>
html, body, [class*="css"]  { font-family: 'Inter', 'Segoe UI', sans-serif; }
section.main > div { padding-top: 1rem; }
.hero { padding: 1.1rem 1.5rem 0.9rem 1.5rem; margin:-1rem -1rem 1rem -1rem; background:radial-gradient(circle at 25% 15%, #223045, #0f1117 70%); border-bottom:1px solid #263040; }
.hero h1 { font-size:1.9rem; background:linear-gradient(135deg,#6a5acd,#8f7bff); -webkit-background-clip:text; color:transparent; margin:0; font-weight:700; letter-spacing:.5px; }
.hero p { color:#b5c1d1; margin:.4rem 0 0 0; font-size:.85rem; }
h2.section-title { position:relative; padding-left:12px; font-size:1.15rem; margin-top:1rem; }
h2.section-title:before { content:""; position:absolute; left:0; top:4px; width:5px; height:70%; background:linear-gradient(180deg,__PRIMARY__,#8f7bff); border-radius:4px; }
.status-grid {display:grid;grid-template-columns:repeat(2,minmax(0,1fr));gap:6px;margin-top:.25rem;}
.status-pill {background:#1c232e;border:1px solid #2d3441;padding:6px 8px;border-radius:10px;font-size:.55rem;line-height:1.05;letter-spacing:.4px;text-transform:uppercase;display:flex;flex-direction:column;gap:2px;}
.status-pill span.value {font-size:.74rem;font-weight:600;color:#e2e6ee;letter-spacing:0;}
.file-card { display:flex; gap:.8rem; align-items:center; border:1px solid #2e4a35; background:#18261c; border-radius:12px; padding:.65rem .85rem; margin:.6rem 0; }
.file-card .size { font-size:.7rem; opacity:.7; }
.metric-grid { display:grid; grid-template-columns:repeat(3,minmax(0,1fr)); gap:0.5rem; margin:0.5rem 0 1rem 0; }
.metric { background:#1f2430; border:1px solid #2d3441; border-radius:10px; padding:0.6rem 0.8rem; }
.metric h4 { font-size:0.65rem; letter-spacing:1px; text-transform:uppercase; color:#8892a0; margin:0 0 4px 0; }
.metric p { font-weight:600; font-size:1.05rem; margin:0; color:#e2e6ee; }
.risk-tier { font-size:1.6rem; font-weight:700; }
.clause-head { display:flex; gap:.5rem; align-items:center; }
.cat-tag { font-size:.55rem; letter-spacing:.5px; text-transform:uppercase; padding:2px 6px; border-radius:6px; color:#111; }
.clause-text { margin-top:6px; font-size:.78rem; white-space:pre-wrap; border-left:3px solid #455263; padding-left:.6rem; opacity:.85; }
.chat-ctx { font-size:.65rem; opacity:.7; border:1px dashed __ACCENT__; border-radius:10px; padding:6px 8px; margin-bottom:6px; white-space:pre-wrap; }
.chat-q { background:#252d3a; padding:10px 14px; border-radius:12px 12px 0 12px; margin:0 0 6px 15%; white-space:pre-wrap; }
.chat-a { background:#1d2330; padding:10px 14px; border-left:3px solid __PRIMARY__; border-radius:0 12px 12px 12px; margin:0 15% 6px 0; white-space:pre-wrap; }
.legal-footer { text-align:center; padding:.75rem 0 2rem 0; font-size:.65rem; color:#b5c1d1; }
</style>
"""

GLOBAL_CSS = _CSS_TEMPLATE.replace("__ACCENT__", ACCENT_COLOR).replace("__PRIMARY__", PRIMARY_COLOR)


def hero():
    st.markdown(GLOBAL_CSS, unsafe_allow_html=True)
    st.markdown(
        "<div class='hero'><h1>⚖️ ClauseLens</h1>"
        "<p>Upload a contract • see which clauses are safe, doubtful or need attention • ask AI about any clause.</p></div>",
        unsafe_allow_html=True,
    )


def sidebar_status(config: AppConfig):
    mode = "Gemini" if config.has_api_key else "No key"
    st.sidebar.markdown(
        f"<div class='status-grid'>"
        f"<div class='status-pill'><span>Mode</span><span class='value'>{mode}</span></div>"
        f"<div class='status-pill'><span>Model</span><span class='value'>{html.escape(config.model_name)}</span></div>"
        f"</div>",
        unsafe_allow_html=True,
    )
    if not config.has_api_key:
        st.sidebar.warning("GOOGLE_API_KEY is not set. Documents can be uploaded but no analysis will be returned.")


def upload_section(config: AppConfig, state: UploadState) -> Tuple[UploadState, Optional[object], bool]:
    """Render the upload card; returns (state, uploaded_file, analyze_clicked)."""
    st.markdown("<h2 class='section-title'>Upload Your Legal Document</h2>", unsafe_allow_html=True)
    st.caption("Drag and drop your contract, agreement, or terms of service to get started with AI-powered analysis.")
    uploaded = st.file_uploader(
        "Drop your document here",
        type=ACCEPTED_EXTENSIONS,
        accept_multiple_files=False,
        help=f"Supports PDF, DOC, DOCX • Max size {config.max_upload_mb}MB",
    )
    if uploaded is None:
        return (remove_file(state) if state.file_name else state), None, False
    state = select_file(state, uploaded.name, uploaded.size)
    st.markdown(
        f"<div class='file-card'><div>📄</div><div><strong>{html.escape(uploaded.name)}</strong>"
        f"<div class='size'>{size_in_mb(uploaded.size)}</div></div></div>",
        unsafe_allow_html=True,
    )
    if state.error:
        st.error(state.error)
    clicked = st.button(
        "Analyzing Document..." if state.processing else "✅ Analyze Document",
        type="primary",
        use_container_width=True,
        disabled=state.processing,
    )
    st.caption("🔒 Documents are processed in your session only and never stored.")
    return state, uploaded, clicked


def analysis_summary(result: Optional[AnalysisResult], counts: ClauseCounts, tier: str, view: ResultsView) -> ResultsView:
    st.markdown("<h2 class='section-title'>Analysis Summary</h2>", unsafe_allow_html=True)
    st.markdown(
        f"<div>Overall risk: <span class='risk-tier' style='color:{RISK_COLORS[tier]};'>{tier}</span></div>"
        f"<div class='metric-grid'>"
        f"<div class='metric'><h4>Safe</h4><p>{counts.safe}</p></div>"
        f"<div class='metric'><h4>Warning</h4><p>{counts.warning}</p></div>"
        f"<div class='metric'><h4>Danger</h4><p>{counts.danger}</p></div>"
        f"</div>",
        unsafe_allow_html=True,
    )
    query = st.text_input("Search Document", placeholder="Ask about the document...", key="clause_search")
    st.caption("Try: \"cancellation\" or \"Payment terms\"")
    view = set_query(view, query)
    if result is not None and result.summary:
        st.markdown("<h2 class='section-title'>Summary</h2>", unsafe_allow_html=True)
        st.write(result.summary)
    if result is not None and result.risks:
        st.markdown("<h2 class='section-title'>Risks</h2>", unsafe_allow_html=True)
        st.markdown("\n".join(f"- {r}" for r in result.risks))
    return view


def clause_list(clauses: List[FlatClause], view: ResultsView) -> ResultsView:
    category = st.radio(
        "Filter",
        FILTER_OPTIONS,
        format_func=lambda c: c.capitalize(),
        horizontal=True,
        key="clause_filter",
        label_visibility="collapsed",
    )
    view = set_category(view, category)
    shown = filter_clauses(clauses, view.category, view.query)
    for c in shown:
        color = CATEGORY_COLORS[c.category]
        expanded = view.expanded_clause == c.id
        with st.container(border=True):
            st.markdown(
                f"<div class='clause-head' style='border-left:4px solid {color};padding-left:8px;'>"
                f"<span>{CATEGORY_ICONS[c.category]}</span>"
                f"<strong>Clause {c.id}</strong>"
                f"<span class='cat-tag' style='background:{color};'>{c.category.capitalize()}</span></div>"
                f"<div style='margin-top:4px;font-size:.8rem;'>{html.escape(c.explanation)}</div>",
                unsafe_allow_html=True,
            )
            if st.button("▲ Hide clause" if expanded else "▼ Show clause", key=f"toggle_{c.id}"):
                view = toggle_expanded(view, c.id)
            if expanded:
                st.markdown(f"<div class='clause-text'>{html.escape(c.original_text)}</div>", unsafe_allow_html=True)
                if st.button("💬 Ask AI about this clause", key=f"ask_{c.id}"):
                    view = open_chat(view, c)
    if not shown and view.query:
        st.info("No clauses found. Try searching for different terms or browse all clauses.")
    st.caption(f"{len(shown)} clause(s) shown")
    return view


def chat_panel(view: ResultsView) -> Tuple[ResultsView, Optional[str]]:
    """Render the clause chat in the sidebar.

    Returns the updated view and the accepted question, if any; the caller
    performs the model call so the pending session is stored first.
    """
    session = view.chat
    with st.sidebar:
        st.markdown("### 💬 Ask AI")
        if not view.chat_open or session is None:
            st.info("Expand a clause and choose 'Ask AI about this clause' to start a chat.")
            return view, None
        if st.button("Close chat", key="close_chat"):
            return close_chat(view), None
        st.markdown(f"<div class='chat-ctx'>Clause {session.clause_id}: {html.escape(session.clause_text)}</div>", unsafe_allow_html=True)
        for m in session.messages:
            css = "chat-a" if m.role == "assistant" else "chat-q"
            st.markdown(f"<div class='{css}'>{html.escape(m.text)}</div>", unsafe_allow_html=True)
        if session.error:
            st.error(session.error)
        question = None
        for idx, suggestion in enumerate(SUGGESTED_QUESTIONS):
            if st.button(suggestion, key=f"suggest_{idx}", disabled=not session.input_enabled):
                question = suggestion
        with st.form("clause_chat_form", clear_on_submit=True):
            text = st.text_input("Ask a question...", disabled=not session.input_enabled)
            sent = st.form_submit_button("Send", use_container_width=True, disabled=not session.input_enabled)
        if sent:
            question = text
    if question is None:
        return view, None
    session, accepted = submit(session, question)
    return update_chat(view, session), accepted

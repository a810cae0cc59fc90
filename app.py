import logging
from datetime import datetime, timezone
import streamlit as st
from dotenv import load_dotenv
from clauselens.utils.config import AppConfig
from clauselens.utils.exceptions import ExtractionFailure
from clauselens.ui.components import hero, sidebar_status, upload_section, analysis_summary, clause_list, chat_panel
from clauselens.ui.state import UploadState, ResultsView, start_processing, finish_processing, update_chat
from clauselens.pipeline import run_analysis
from clauselens.analysis.parser import parse_analysis
from clauselens.analysis.clauses import flatten_clauses, clause_counts, overall_risk
from clauselens.chat.assistant import ClauseChatAssistant
from clauselens.chat.session import apply_reply
from clauselens.report.json_export import build_analysis_json
from clauselens.report.pdf_report import build_analysis_pdf

APP_VERSION = "0.1.0"

load_dotenv()
config = AppConfig.from_env()

logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))
logger = logging.getLogger("clauselens")

st.set_page_config(page_title="ClauseLens", layout="wide", page_icon="⚖️")

if 'startup_checked' not in st.session_state:
    st.session_state.startup_checked = True
    if not config.has_api_key:
        logger.error("GOOGLE_API_KEY is not set. Define it in your .env file.")

if 'view' not in st.session_state:
    st.session_state.view = "upload"
if 'upload' not in st.session_state:
    st.session_state.upload = UploadState()
if 'handoff' not in st.session_state:
    st.session_state.handoff = None
if 'analysis' not in st.session_state:
    st.session_state.analysis = None
if 'results_view' not in st.session_state:
    st.session_state.results_view = ResultsView()
if 'assistant' not in st.session_state:
    st.session_state.assistant = ClauseChatAssistant(config)

hero()
sidebar_status(config)


def _show_results(handoff):
    st.session_state.handoff = handoff
    st.session_state.analysis = parse_analysis(handoff.analysis_result)
    st.session_state.results_view = ResultsView()
    for key in ("clause_search", "clause_filter"):
        st.session_state.pop(key, None)
    st.session_state.view = "result"


def _back_to_upload():
    st.session_state.view = "upload"
    st.session_state.handoff = None
    st.session_state.analysis = None
    st.session_state.upload = UploadState()
    st.session_state.results_view = ResultsView()


if st.session_state.view == "upload":
    upload_state, uploaded, analyze_clicked = upload_section(config, st.session_state.upload)
    st.session_state.upload = upload_state
    if analyze_clicked and uploaded is not None and not upload_state.processing:
        st.session_state.upload = start_processing(upload_state)
        handoff = None
        with st.spinner("Our AI is reading your document and identifying key clauses..."):
            try:
                handoff = run_analysis(config, uploaded)
            except ExtractionFailure as e:
                logger.error("Error extracting text: %s", e)
                st.session_state.upload = finish_processing(
                    st.session_state.upload, error=f"Could not extract text from {e.file_name}: {e.reason}"
                )
        if handoff is not None:
            st.session_state.upload = finish_processing(st.session_state.upload)
            _show_results(handoff)
        st.rerun()
else:
    handoff = st.session_state.handoff
    result = st.session_state.analysis
    clauses = flatten_clauses(result)
    counts = clause_counts(result)
    tier = overall_risk(result)
    view = st.session_state.results_view

    head_cols = st.columns([3, 1])
    with head_cols[0]:
        st.markdown("<h2 style='margin-top:0;'>Document Analysis Results</h2>", unsafe_allow_html=True)
        st.caption(f"Analysis of {handoff.file_name} ({handoff.pages} page(s))")
    with head_cols[1]:
        if st.button("↩ Analyze another document", use_container_width=True):
            _back_to_upload()
            st.rerun()

    if result is None:
        st.warning("No analysis data available for this document. Check the API key configuration and try again.")

    side_col, main_col = st.columns([1, 2])
    with side_col:
        view = analysis_summary(result, counts, tier, view)
        transcript = view.chat.messages if view.chat else ()
        meta = {
            "app": "ClauseLens",
            "version": APP_VERSION,
            "model": config.model_name,
            "exported_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        }
        dl_cols = st.columns(2)
        with dl_cols[0]:
            st.download_button(
                "📥 Export PDF",
                data=build_analysis_pdf(handoff.file_name, result),
                file_name="clause_report.pdf",
                mime="application/pdf",
                use_container_width=True,
            )
        with dl_cols[1]:
            st.download_button(
                "🗂️ Export JSON",
                data=build_analysis_json(handoff.file_name, result, clauses, transcript, meta, pages=handoff.pages),
                file_name="clause_analysis.json",
                mime="application/json",
                use_container_width=True,
            )
    with main_col:
        view = clause_list(clauses, view)

    view, question = chat_panel(view)
    if question is not None:
        # store the pending session before the round-trip
        st.session_state.results_view = view
        session = view.chat
        with st.spinner("Thinking..."):
            reply = st.session_state.assistant.ask(session.clause_text, question)
            st.session_state.results_view = update_chat(view, apply_reply(session, session.clause_id, reply))
        st.rerun()
    if view != st.session_state.results_view:
        st.session_state.results_view = view
        st.rerun()

st.markdown("<div class='legal-footer'>Not legal advice. For informational purposes only.</div>", unsafe_allow_html=True)

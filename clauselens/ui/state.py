from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional
from clauselens.analysis.clauses import FILTER_OPTIONS
from clauselens.chat.session import ChatSession, open_session
from clauselens.utils.types import FlatClause


def size_in_mb(num_bytes: int) -> str:
    return f"{num_bytes / 1024 / 1024:.2f} MB"


@dataclass(frozen=True)
class UploadState:
    file_name: Optional[str] = None
    file_size: int = 0
    processing: bool = False
    error: Optional[str] = None


def select_file(state: UploadState, name: str, size: int) -> UploadState:
    if state.file_name == name and state.file_size == size:
        return state
    return UploadState(file_name=name, file_size=size)


def remove_file(state: UploadState) -> UploadState:
    return replace(state, file_name=None, file_size=0, processing=False, error=None)


def start_processing(state: UploadState) -> UploadState:
    return replace(state, processing=True, error=None)


def finish_processing(state: UploadState, error: Optional[str] = None) -> UploadState:
    return replace(state, processing=False, error=error)


@dataclass(frozen=True)
class ResultsView:
    category: str = "all"
    query: str = ""
    expanded_clause: Optional[int] = None
    chat_open: bool = False
    chat: Optional[ChatSession] = None


def set_category(view: ResultsView, category: str) -> ResultsView:
    if category not in FILTER_OPTIONS:
        raise ValueError(f"unknown category filter: {category!r}")
    return replace(view, category=category)


def set_query(view: ResultsView, query: str) -> ResultsView:
    return replace(view, query=query or "")


def toggle_expanded(view: ResultsView, clause_id: int) -> ResultsView:
    # single expanded card; clicking the open one collapses it
    return replace(view, expanded_clause=None if view.expanded_clause == clause_id else clause_id)


def open_chat(view: ResultsView, clause: FlatClause) -> ResultsView:
    # always a fresh transcript, even when re-opening the same clause
    return replace(view, chat_open=True, chat=open_session(clause))


def close_chat(view: ResultsView) -> ResultsView:
    return replace(view, chat_open=False)


def update_chat(view: ResultsView, chat: Optional[ChatSession]) -> ResultsView:
    return replace(view, chat=chat)

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

CATEGORY_KEYS = ("safe", "doubtful", "needs_attention")
# analysis category -> display risk tier
CATEGORY_TIERS = {"safe": "safe", "doubtful": "warning", "needs_attention": "danger"}


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class ClauseItem:
    original: str
    explanation: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ClauseItem":
        return cls(original=_as_text(payload.get("original")), explanation=_as_text(payload.get("explanation")))

    def to_dict(self) -> Dict[str, str]:
        return {"original": self.original, "explanation": self.explanation}


@dataclass(frozen=True)
class ClauseGroups:
    safe: List[ClauseItem] = field(default_factory=list)
    doubtful: List[ClauseItem] = field(default_factory=list)
    needs_attention: List[ClauseItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Any) -> "ClauseGroups":
        if not isinstance(payload, dict):
            return cls()
        groups = {}
        for key in CATEGORY_KEYS:
            items = payload.get(key)
            if not isinstance(items, list):
                items = []
            groups[key] = [ClauseItem.from_dict(i) for i in items if isinstance(i, dict)]
        return cls(**groups)

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {key: [c.to_dict() for c in getattr(self, key)] for key in CATEGORY_KEYS}


@dataclass(frozen=True)
class AnalysisResult:
    """Clause classification for one document, as returned by the model.

    The response schema is only a hint to the model, so `from_dict` defaults
    every field instead of trusting the payload shape.
    """
    summary: str = ""
    clauses: ClauseGroups = field(default_factory=ClauseGroups)
    risks: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AnalysisResult":
        risks = payload.get("risks")
        return cls(
            summary=_as_text(payload.get("summary")),
            clauses=ClauseGroups.from_dict(payload.get("clauses")),
            risks=[r for r in risks if isinstance(r, str)] if isinstance(risks, list) else [],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"summary": self.summary, "clauses": self.clauses.to_dict(), "risks": list(self.risks)}


@dataclass(frozen=True)
class FlatClause:
    id: int
    category: str  # safe | warning | danger
    original_text: str
    explanation: str


@dataclass(frozen=True)
class ChatMessage:
    role: str  # user | assistant
    text: str


@dataclass(frozen=True)
class ChatReply:
    answer: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ExtractedDocument:
    name: str
    text: str
    pages: int


@dataclass(frozen=True)
class AnalysisHandoff:
    """State carried from the upload view to the results view; never persisted."""
    extracted_text: str
    file_name: str
    analysis_result: Optional[str]
    pages: int = 0

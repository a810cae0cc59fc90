from __future__ import annotations
import json
from typing import Any, Dict, List, Optional, Sequence
from clauselens.utils.types import AnalysisResult, FlatClause, ChatMessage
from clauselens.analysis.clauses import clause_counts, overall_risk

def build_analysis_json(
    file_name: str,
    result: Optional[AnalysisResult],
    clauses: List[FlatClause],
    transcript: Sequence[ChatMessage] = (),
    meta: Optional[Dict[str, Any]] = None,
    pages: int = 0,
) -> str:
    """Return a structured JSON snapshot of the analysis for download.

    meta can include app version, model name, export timestamp, etc.
    """
    counts = clause_counts(result)
    payload = {
        "meta": meta or {},
        "document": {"name": file_name, "pages": pages},
        "overall_risk": overall_risk(result),
        "counts": {
            "safe": counts.safe,
            "warning": counts.warning,
            "danger": counts.danger,
            "total": counts.total,
        },
        "summary": result.summary if result else "",
        "risks": list(result.risks) if result else [],
        "clauses": [
            {
                "id": c.id,
                "category": c.category,
                "original": c.original_text,
                "explanation": c.explanation,
            } for c in clauses
        ],
        "chat": [{"role": m.role, "text": m.text} for m in transcript],
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)

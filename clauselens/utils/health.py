"""Lightweight health check utilities for ClauseLens.

No network calls: the Gemini check only reports whether a key is configured.
The goal is a fast readiness signal for CI / demo scripts and the startup log.
"""
from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from clauselens.utils.config import AppConfig


@dataclass
class HealthStatus:
    component: str
    ok: bool
    detail: str

    def as_dict(self) -> Dict[str, Any]:
        return {"component": self.component, "ok": self.ok, "detail": self.detail}


def _check_import(module: str) -> HealthStatus:
    try:
        __import__(module)
        return HealthStatus(module, True, "import ok")
    except Exception as e:  # pragma: no cover - diagnostic path
        return HealthStatus(module, False, f"import failed: {e}")


CORE_IMPORTS = [
    "streamlit",
    "google.generativeai",
    "pypdf",
    "reportlab.pdfgen",
]


def _check_extraction() -> HealthStatus:
    """Render a one-page PDF with reportlab and read it back through the extractor."""
    try:
        from reportlab.pdfgen import canvas
        from clauselens.ingest.pdf_loader import extract_text

        buf = io.BytesIO()
        c = canvas.Canvas(buf)
        c.drawString(72, 720, "The tenant shall pay rent monthly.")
        c.showPage()
        c.save()
        probe = io.BytesIO(buf.getvalue())
        probe.name = "probe.pdf"
        doc = extract_text(probe)
        ok = "rent" in doc.text.lower()
        return HealthStatus("pdf-extraction", ok, "extraction ok" if ok else "extracted text missing")
    except Exception as e:  # pragma: no cover - rare path
        return HealthStatus("pdf-extraction", False, f"extraction test failed: {e}")


def run_health_check(config: Optional[AppConfig] = None) -> Dict[str, Any]:
    """Run a series of lightweight checks.

    `ok` covers the local stack only; a missing API key is reported as its
    own component so the UI can still start in no-analysis mode.
    """
    config = config or AppConfig.from_env()
    results: List[HealthStatus] = []
    for mod in CORE_IMPORTS:
        results.append(_check_import(mod))
    results.append(_check_extraction())

    aggregate = all(r.ok for r in results)
    key_status = HealthStatus(
        "gemini-credentials",
        config.has_api_key,
        "GOOGLE_API_KEY configured" if config.has_api_key else "GOOGLE_API_KEY not set; analysis disabled",
    )
    return {
        "ok": aggregate,
        "api_key": config.has_api_key,
        "components": [r.as_dict() for r in results + [key_status]],
    }


if __name__ == "__main__":  # Manual invocation helper
    import json, sys
    report = run_health_check()
    print(json.dumps(report, indent=2))
    sys.exit(0 if report["ok"] else 1)

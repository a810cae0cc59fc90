import io
import pytest
from reportlab.pdfgen import canvas
from clauselens.utils.config import AppConfig
from clauselens.utils.exceptions import ExtractionFailure
from clauselens.pipeline import run_analysis
from clauselens.analysis.parser import parse_analysis
from clauselens.analysis.clauses import flatten_clauses, overall_risk

RESPONSE = """```json
{"summary": "A short lease.", "clauses": {"safe": [{"original": "Rent is 500.", "explanation": "Monthly rent."}], "doubtful": [], "needs_attention": [{"original": "Landlord may evict without notice.", "explanation": "You can be removed anytime."}]}, "risks": ["Eviction without notice"]}
```"""


class StubLLM:
    def __init__(self):
        self.seen_text = None

    def generate(self, contents, generation_config):
        self.seen_text = contents[0]["parts"][1]["text"]
        return RESPONSE


def upload(name="lease.pdf"):
    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    c.drawString(72, 720, "Rent is 500. Landlord may evict without notice.")
    c.showPage()
    c.save()
    f = io.BytesIO(buf.getvalue())
    f.name = name
    return f


def test_upload_to_results():
    llm = StubLLM()
    handoff = run_analysis(AppConfig(), upload(), llm=llm)
    assert handoff.file_name == "lease.pdf"
    assert handoff.pages == 1
    assert "evict" in handoff.extracted_text
    assert llm.seen_text == handoff.extracted_text
    result = parse_analysis(handoff.analysis_result)
    flat = flatten_clauses(result)
    assert [c.category for c in flat] == ["safe", "danger"]
    assert overall_risk(result) == "High"
    assert result.risks == ["Eviction without notice"]


def test_no_key_gives_empty_analysis():
    handoff = run_analysis(AppConfig(google_api_key=None), upload())
    assert handoff.analysis_result is None
    assert parse_analysis(handoff.analysis_result) is None


def test_extraction_failure_propagates():
    f = io.BytesIO(b"not a pdf")
    f.name = "notes.doc"
    with pytest.raises(ExtractionFailure):
        run_analysis(AppConfig(), f, llm=StubLLM())

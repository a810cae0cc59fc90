from __future__ import annotations
from clauselens.utils.config import AppConfig
from clauselens.utils.types import AnalysisHandoff
from clauselens.ingest.pdf_loader import extract_text
from clauselens.analysis.requester import analyze_legal_doc


def run_analysis(config: AppConfig, uploaded_file, llm=None) -> AnalysisHandoff:
    """Extract the upload's text and request the clause analysis.

    ExtractionFailure propagates so the upload view can stay put; a failed
    or unconfigured model call yields a hand-off with analysis_result=None.
    """
    doc = extract_text(uploaded_file)
    analysis = analyze_legal_doc(config, doc.text, llm=llm)
    return AnalysisHandoff(extracted_text=doc.text, file_name=doc.name, analysis_result=analysis, pages=doc.pages)

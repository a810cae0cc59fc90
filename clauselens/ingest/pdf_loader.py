from __future__ import annotations
from typing import List
import io
import logging
import os
import re
from pypdf import PdfReader
from clauselens.utils.types import ExtractedDocument
from clauselens.utils.exceptions import ExtractionFailure

logger = logging.getLogger(__name__)

# Offered by the upload picker; only PDF has an extractor.
ACCEPTED_EXTENSIONS = ["pdf", "doc", "docx"]
EXTRACTABLE_EXTENSIONS = {"pdf"}

WHITESPACE_RE = re.compile(r"\s+")

def clean_text(text: str) -> str:
    text = text.replace("\x00", " ")
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()

def file_extension(name: str) -> str:
    return os.path.splitext(name or "")[1].lstrip(".").lower()

def extract_text(uploaded_file) -> ExtractedDocument:
    """Extract plain text from an uploaded PDF, page by page in ascending order.

    `uploaded_file` is anything with `.name` and `.read()` (Streamlit's
    UploadedFile, an open file, a BytesIO with a name attached).
    Raises ExtractionFailure when the file is not a readable PDF.
    """
    name = getattr(uploaded_file, "name", "document.pdf")
    ext = file_extension(name)
    if ext not in EXTRACTABLE_EXTENSIONS:
        raise ExtractionFailure(name, f"text extraction is not supported for .{ext or '?'} files")
    if hasattr(uploaded_file, "seek"):  # Streamlit reuses the same buffer across reruns
        uploaded_file.seek(0)
    data = uploaded_file.read()
    if not data:
        raise ExtractionFailure(name, "file is empty")
    try:
        reader = PdfReader(io.BytesIO(data))
        pages_text: List[str] = []
        for page in reader.pages:
            pages_text.append(clean_text(page.extract_text() or ""))
    except Exception as e:
        raise ExtractionFailure(name, f"could not read PDF ({e})") from e
    if not pages_text:
        raise ExtractionFailure(name, "PDF has no pages")
    combined = "".join(p + "\n" for p in pages_text)
    logger.info("Extracted %d chars from %d page(s) of %s", len(combined), len(pages_text), name)
    return ExtractedDocument(name=name, text=combined, pages=len(pages_text))

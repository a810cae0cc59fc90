import io
import pytest
from reportlab.pdfgen import canvas
from clauselens.ingest.pdf_loader import extract_text, clean_text, file_extension
from clauselens.utils.exceptions import ExtractionFailure


def make_pdf(pages, name="lease.pdf"):
    buf = io.BytesIO()
    c = canvas.Canvas(buf)
    for text in pages:
        c.drawString(72, 720, text)
        c.showPage()
    c.save()
    f = io.BytesIO(buf.getvalue())
    f.name = name
    return f


def test_pages_extracted_in_order():
    doc = extract_text(make_pdf(["Page one rent clause.", "Page two deposit clause."]))
    assert doc.pages == 2
    assert doc.text.index("rent") < doc.text.index("deposit")
    assert doc.text.endswith("\n")
    assert doc.text.splitlines()[1].startswith("Page two")


def test_rereading_same_upload():
    f = make_pdf(["Repeatable text."])
    first = extract_text(f)
    second = extract_text(f)
    assert first.text == second.text


def test_docx_is_not_extracted():
    f = io.BytesIO(b"PK\x03\x04 not really a docx")
    f.name = "contract.docx"
    with pytest.raises(ExtractionFailure) as err:
        extract_text(f)
    assert err.value.file_name == "contract.docx"
    assert "not supported" in err.value.reason


def test_corrupt_pdf_raises_extraction_failure():
    f = io.BytesIO(b"%PDF-1.4 garbage garbage")
    f.name = "broken.pdf"
    with pytest.raises(ExtractionFailure):
        extract_text(f)


def test_empty_file():
    f = io.BytesIO(b"")
    f.name = "empty.pdf"
    with pytest.raises(ExtractionFailure):
        extract_text(f)


def test_helpers():
    assert clean_text("  a\x00\n\n b  ") == "a b"
    assert file_extension("Lease.PDF") == "pdf"
    assert file_extension("noext") == ""

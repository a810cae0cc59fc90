# clauselens/report/pdf_report.py
from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import LETTER
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib import colors

from clauselens.utils.types import AnalysisResult
from clauselens.analysis.clauses import clause_counts, overall_risk, flatten_clauses

CATEGORY_COLORS = {
    "safe": colors.HexColor("#4CAF50"),
    "warning": colors.HexColor("#FFB347"),
    "danger": colors.HexColor("#FF4B4B"),
}

def build_analysis_pdf(file_name: str, result: Optional[AnalysisResult]) -> bytes:
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=LETTER,
        title=f"{file_name} – Clause Analysis",
        author="ClauseLens"
    )
    styles = getSampleStyleSheet()
    cell = styles["BodyText"]
    story: List = []

    story.append(Paragraph("Document Analysis Report", styles["Title"]))
    story.append(Paragraph(escape(file_name or "Document"), styles["Heading2"]))
    story.append(Spacer(1, 12))

    counts = clause_counts(result)
    summary_rows = [
        ["Overall risk", overall_risk(result)],
        ["Safe", str(counts.safe)],
        ["Warning", str(counts.warning)],
        ["Danger", str(counts.danger)],
        ["Total clauses", str(counts.total)],
    ]
    summary_table = Table(summary_rows, hAlign="LEFT")
    summary_table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 6),
        ("RIGHTPADDING", (0, 0), (-1, -1), 6),
    ]))
    story.append(summary_table)
    story.append(Spacer(1, 12))

    if result is None:
        story.append(Paragraph("No analysis data was returned for this document.", cell))
    else:
        if result.summary:
            story.append(Paragraph("Summary", styles["Heading2"]))
            story.append(Paragraph(escape(result.summary), cell))
            story.append(Spacer(1, 8))
        if result.risks:
            story.append(Paragraph("Risks", styles["Heading2"]))
            for risk in result.risks:
                story.append(Paragraph("• " + escape(risk), cell))
            story.append(Spacer(1, 8))

        clauses = flatten_clauses(result)
        if clauses:
            story.append(Paragraph("Clauses", styles["Heading2"]))
            rows = [["#", "Category", "Clause", "Explanation"]]
            for c in clauses:
                rows.append([
                    str(c.id),
                    c.category.capitalize(),
                    Paragraph(escape(c.original_text), cell),
                    Paragraph(escape(c.explanation), cell),
                ])
            t = Table(rows, colWidths=[24, 56, 210, 178], repeatRows=1)
            style = [
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ]
            for row_idx, c in enumerate(clauses, start=1):
                style.append(("TEXTCOLOR", (1, row_idx), (1, row_idx), CATEGORY_COLORS[c.category]))
            t.setStyle(TableStyle(style))
            story.append(t)

    doc.build(story)
    pdf = buf.getvalue()
    buf.close()
    return pdf

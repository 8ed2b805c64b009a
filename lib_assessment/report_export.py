"""Report export: flat payload and PDF document for a stored result."""

from __future__ import annotations

from datetime import datetime
import logging
import re
from typing import Any

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from lib_assessment.result_repository import AssessmentResult


logger = logging.getLogger(__name__)

_PURPLE = (88, 28, 135)
_GREEN = (34, 197, 94)
_BLACK = (0, 0, 0)

# Core PDF fonts are latin-1 only.
_PDF_REPLACEMENTS = {
    "’": "'",
    "‘": "'",
    "“": '"',
    "”": '"',
    "–": "-",
    "—": "-",
    "…": "...",
}


def format_date(value: datetime) -> str:
    """Long US-style date, e.g. ``March 5, 2025``."""
    return f"{value:%B} {value.day}, {value.year}"


def pdf_filename(user_name: str) -> str:
    slug = re.sub(r"\s+", "-", user_name.strip()) or "user"
    return f"personality-assessment-{slug}.pdf"


def build_export_payload(
    result: AssessmentResult,
    user_name: str,
    include_detailed: bool = True,
) -> dict[str, Any]:
    """Flat structure for export: report fields plus who and when."""
    payload: dict[str, Any] = {
        "id": result.id,
        "userName": user_name,
        "assessmentDate": format_date(result.created_at),
    }
    payload.update(result.report.to_export_dict(include_detailed=include_detailed))
    return payload


def sanitize_for_pdf(text: str) -> str:
    for src, dest in _PDF_REPLACEMENTS.items():
        text = text.replace(src, dest)
    return text.encode("latin-1", "replace").decode("latin-1")


def generate_pdf(result: AssessmentResult, user_name: str) -> bytes:
    """Render the report as a single PDF document."""
    report = result.report
    pdf = FPDF()
    pdf.set_auto_page_break(auto=True, margin=20)
    pdf.set_margins(20, 20, 20)
    pdf.add_page()
    pdf.set_title("Personality Assessment Report")

    def heading(text: str, size: int, color: tuple[int, int, int] = _PURPLE) -> None:
        pdf.set_font("Helvetica", "B", size)
        pdf.set_text_color(*color)
        pdf.cell(0, 10, sanitize_for_pdf(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def body(text: str, size: int = 11) -> None:
        pdf.set_font("Helvetica", "", size)
        pdf.set_text_color(*_BLACK)
        pdf.multi_cell(0, 6, sanitize_for_pdf(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    heading("Personality Assessment Report", 24)
    pdf.ln(4)
    body(f"Name: {user_name}", 12)
    body(f"Date: {format_date(result.created_at)}", 12)
    pdf.ln(6)

    heading("Personality Type", 18)
    heading(report.personality_type, 16, _GREEN)
    body(f"Overall Score: {report.overall_score}%", 12)
    pdf.ln(6)

    scores = report.detailed_scores()
    heading("Detailed Scores", 14)
    body(f"Extroversion: {scores.extroversion}%    Introversion: {scores.introversion}%")
    body(f"Thinking: {scores.thinking}%    Feeling: {scores.feeling}%")
    pdf.ln(6)

    heading("Description", 14)
    body(report.description)
    pdf.ln(6)

    heading("Recommendations", 14)
    for index, rec in enumerate(report.recommendations, start=1):
        body(f"{index}. {rec}")
        pdf.ln(1)

    logger.info("Rendered PDF for result %s", result.id)
    return bytes(pdf.output())

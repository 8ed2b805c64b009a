"""Email delivery of an assessment report through the Resend HTTP API.

Builds the HTML body from a stored result and posts it once; retry policy,
if any, belongs to the caller.
"""

from __future__ import annotations

from datetime import datetime, timezone
from html import escape
import logging

from pydantic import BaseModel, Field
import requests

from lib_assessment.app_config import Settings
from lib_assessment.engine.scorer import DetailedScores
from lib_assessment.errors import EmailDeliveryError
from lib_assessment.report_export import format_date
from lib_assessment.result_repository import AssessmentResult


logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Your Personality Assessment Results"
_TIMEOUT_SECONDS = 10


class PersonalityReportRequest(BaseModel):
    """Everything the email template needs."""

    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    user_name: str = Field(..., min_length=1)
    personality_type: str
    score: int = Field(..., ge=0, le=100)
    description: str
    recommendations: list[str] = Field(default_factory=list)
    assessment_date: str
    detailed_scores: DetailedScores | None = None


def build_request(
    result: AssessmentResult,
    email: str,
    user_name: str,
    include_detailed: bool = True,
) -> PersonalityReportRequest:
    report = result.report
    return PersonalityReportRequest(
        email=email,
        user_name=user_name,
        personality_type=report.personality_type,
        score=report.overall_score,
        description=report.description,
        recommendations=list(report.recommendations),
        assessment_date=format_date(result.created_at),
        detailed_scores=report.detailed_scores() if include_detailed else None,
    )


def render_email_html(request: PersonalityReportRequest, app_url: str = "") -> str:
    """HTML body of the report email."""
    recommendations = "\n".join(
        f"{i}. {escape(rec)}" for i, rec in enumerate(request.recommendations, start=1)
    )

    scores_section = ""
    if request.detailed_scores is not None:
        s = request.detailed_scores
        scores_section = f"""
      <h3 style="color: #8B5CF6;">Detailed Trait Scores</h3>
      <div style="background: #F1F5F9; padding: 15px; border-radius: 6px; margin: 15px 0;">
        <div><strong>Extroversion:</strong> {s.extroversion}%</div>
        <div><strong>Introversion:</strong> {s.introversion}%</div>
        <div><strong>Thinking:</strong> {s.thinking}%</div>
        <div><strong>Feeling:</strong> {s.feeling}%</div>
      </div>"""

    dashboard_link = ""
    if app_url:
        dashboard_link = (
            f'<p style="text-align: center;"><a href="{escape(app_url, quote=True)}" '
            'style="color: #8B5CF6; font-weight: bold;">Visit PersonalityTest Dashboard →</a></p>'
        )

    generated_on = format_date(datetime.now(timezone.utc))
    return f"""<div style="max-width: 600px; margin: 0 auto; font-family: Arial, sans-serif; color: #333;">
  <div style="background: linear-gradient(135deg, #8B5CF6, #22C55E); padding: 40px 20px; text-align: center;">
    <h1 style="color: white; margin: 0;">🧠 Personality Assessment Results</h1>
  </div>
  <div style="background: white; padding: 30px;">
    <h2 style="color: #8B5CF6;">Hello {escape(request.user_name)}!</h2>
    <p>Thank you for taking our personality assessment. Here are your detailed results:</p>
    <div style="background: #F8FAFC; padding: 20px; border-left: 4px solid #8B5CF6;">
      <h3 style="color: #22C55E; margin: 0 0 10px 0;">{escape(request.personality_type)}</h3>
      <p><strong>Overall Score:</strong> {request.score}%</p>
      <p><strong>Assessment Date:</strong> {escape(request.assessment_date)}</p>
    </div>
    <h3 style="color: #8B5CF6;">Your Personality Profile</h3>
    <p style="background: #F1F5F9; padding: 15px;">{escape(request.description)}</p>
    {scores_section}
    <h3 style="color: #8B5CF6;">Personalized Recommendations</h3>
    <pre style="white-space: pre-wrap; font-family: Arial, sans-serif;">{recommendations}</pre>
    {dashboard_link}
    <p style="color: #64748B; font-size: 14px; text-align: center;">This report was generated on {generated_on}</p>
  </div>
</div>"""


def send_personality_report(
    request: PersonalityReportRequest,
    settings: Settings,
    session: requests.Session | None = None,
) -> str:
    """Send the report email; returns the provider's message id.

    Raises:
        EmailDeliveryError: Missing API key, transport failure or non-2xx reply.
    """
    if not settings.resend_api_key:
        raise EmailDeliveryError("RESEND_API_KEY is not set")

    http = session or requests.Session()
    url = settings.resend_api_url.rstrip("/") + "/emails"
    payload = {
        "from": settings.email_sender,
        "to": [request.email],
        "subject": EMAIL_SUBJECT,
        "html": render_email_html(request, settings.app_url),
    }

    logger.info("Sending personality report to %s", request.email)
    try:
        response = http.post(
            url,
            json=payload,
            headers={"Authorization": f"Bearer {settings.resend_api_key}"},
            timeout=_TIMEOUT_SECONDS,
        )
    except requests.RequestException as exc:
        raise EmailDeliveryError(f"Failed to reach mail provider: {exc}") from exc

    if not 200 <= response.status_code < 300:
        raise EmailDeliveryError(
            f"Mail provider rejected the report ({response.status_code}): {response.text[:200]}"
        )

    # The provider already accepted the mail; an unreadable body only loses the id.
    try:
        message_id = str(response.json().get("id", ""))
    except ValueError:
        logger.warning("Report email accepted but response body was not JSON")
        message_id = ""
    logger.info("Report email accepted: id=%s", message_id)
    return message_id

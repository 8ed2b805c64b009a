"""Application settings read from environment variables.

The Streamlit entry point calls ``load_dotenv()`` first, so values may come
from a local ``.env`` file.
"""

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_PATH = "assessment_results.json"
DEFAULT_EMAIL_SENDER = "PersonalityTest <onboarding@resend.dev>"
DEFAULT_RESEND_API_URL = "https://api.resend.com"


class Settings(BaseModel):
    """Runtime configuration for collaborators around the engine."""

    results_path: str = DEFAULT_RESULTS_PATH
    resend_api_key: str = ""
    email_sender: str = DEFAULT_EMAIL_SENDER
    app_url: str = ""
    resend_api_url: str = DEFAULT_RESEND_API_URL

    @property
    def email_enabled(self) -> bool:
        return bool(self.resend_api_key)


def load_settings() -> Settings:
    """Build :class:`Settings` from the environment.

    Empty variables fall back to defaults. Email stays disabled until
    RESEND_API_KEY is set.
    """
    settings = Settings(
        results_path=os.getenv("ASSESSMENT_RESULTS_PATH", "") or DEFAULT_RESULTS_PATH,
        resend_api_key=os.getenv("RESEND_API_KEY", ""),
        email_sender=os.getenv("REPORT_EMAIL_SENDER", "") or DEFAULT_EMAIL_SENDER,
        app_url=os.getenv("APP_URL", ""),
        resend_api_url=os.getenv("RESEND_API_URL", "") or DEFAULT_RESEND_API_URL,
    )
    if not settings.email_enabled:
        logger.info("Report email not configured (missing RESEND_API_KEY)")
    logger.info("Results store: %s", settings.results_path)
    return settings

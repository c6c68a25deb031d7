from __future__ import annotations

import asyncio
import logging
from typing import Optional

from starlette.datastructures import FormData

from app.core.config import settings
from app.schemas.submission import REQUIRED_FIELDS, SubmissionInput, SubmissionResult

logger = logging.getLogger(__name__)


def _first_text(form: FormData, field: str) -> Optional[str]:
    # First value wins for repeated keys; file parts do not count as a value
    values = form.getlist(field)
    value = values[0] if values else None
    return value if isinstance(value, str) else None


class SubmissionService:
    """Service to accept form submissions.

    ``forward`` stands in for the backend call a real deployment would make
    (database write, CRM push, mail relay). Today it only waits.
    """

    def __init__(self, delay_seconds: Optional[float] = None):
        if delay_seconds is None:
            delay_seconds = settings.submission_delay_seconds
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be zero or positive")
        self.delay_seconds = delay_seconds

    def parse(self, form: FormData) -> SubmissionInput:
        return SubmissionInput(
            **{field: _first_text(form, field) for field in REQUIRED_FIELDS}
        )

    async def forward(self, submission: SubmissionInput) -> None:
        await asyncio.sleep(self.delay_seconds)

    async def submit(self, submission: SubmissionInput) -> SubmissionResult:
        """Run the backend call, then validate. The delay always completes
        before validation, for valid and invalid submissions alike."""
        await self.forward(submission)

        missing = submission.missing_fields()
        if missing:
            logger.info("Submission rejected missing=%s", ",".join(missing))
            return SubmissionResult.missing_fields()

        email = submission.email
        email_domain = email.split("@")[-1] if "@" in email else None
        logger.info(
            "Submission accepted email_domain=%s message_chars=%s",
            email_domain,
            len(submission.message),
        )
        return SubmissionResult.ok()

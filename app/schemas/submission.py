from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

REQUIRED_FIELDS = ("name", "email", "message")

SUCCESS_MESSAGE = "Success!"
MISSING_FIELDS_MESSAGE = "Missing required fields"


class SubmissionInput(BaseModel):
    """Form fields as parsed. Every field is optional here; presence is
    enforced by the submission service, not by the parser."""

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [field for field in REQUIRED_FIELDS if not getattr(self, field)]


class SubmissionResult(BaseModel):
    success: bool
    message: str = Field(..., examples=[SUCCESS_MESSAGE, MISSING_FIELDS_MESSAGE])

    @classmethod
    def ok(cls) -> "SubmissionResult":
        return cls(success=True, message=SUCCESS_MESSAGE)

    @classmethod
    def missing_fields(cls) -> "SubmissionResult":
        return cls(success=False, message=MISSING_FIELDS_MESSAGE)

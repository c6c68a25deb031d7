"""
Public form submission endpoint.

Accepts name, email and message as multipart or URL-encoded form data, runs
the (simulated) backend call and answers with a small JSON verdict.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.datastructures import FormData
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.submission import SubmissionResult
from app.services.submission_service import SubmissionService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_submission_service() -> SubmissionService:
    """Return submission service instance used by the /two endpoint."""
    return SubmissionService()


async def read_form(request: Request) -> FormData:
    """Parse the body as form data, treating an unparseable body as empty."""
    try:
        return await request.form()
    except StarletteHTTPException as exc:
        reason = exc.detail
    except ValueError as exc:
        # python-multipart parse errors derive from ValueError
        reason = str(exc)

    logger.warning(
        "Form body could not be parsed: %s",
        reason,
        extra={"event": "submission_form_unparseable"},
    )
    return FormData()


@router.post(
    "/two",
    response_model=SubmissionResult,
    status_code=status.HTTP_200_OK,
    summary="Submit the contact form",
    description="Validates that name, email and message are present.",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": SubmissionResult,
            "description": "Missing required fields",
        }
    },
)
async def submit_two(
    form: FormData = Depends(read_form),
    service: SubmissionService = Depends(get_submission_service),
) -> JSONResponse:
    """Accept a form submission and report whether it was complete."""
    submission = service.parse(form)
    result = await service.submit(submission)

    status_code = (
        status.HTTP_200_OK if result.success else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content=result.model_dump())

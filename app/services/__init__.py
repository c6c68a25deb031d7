"""
Services Module.

Services:
    - SubmissionService: form parsing, simulated backend call and validation
"""

from .submission_service import SubmissionService

__all__ = ["SubmissionService"]

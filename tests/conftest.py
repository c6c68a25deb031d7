import fastapi.testclient as fastapi_testclient
import pytest

from app.api.routes.two import get_submission_service
from app.main import app
from app.services.submission_service import SubmissionService

# -----------------------------------------------------------------------------
# Client Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(scope="function")
def client():
    """
    TestClient with the submission service swapped for one that does not wait,
    so endpoint tests do not pay the simulated backend delay.
    """
    app.dependency_overrides[get_submission_service] = lambda: SubmissionService(
        delay_seconds=0
    )

    # Using 'with' context manager to trigger lifespan events (startup/shutdown)
    with fastapi_testclient.TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def delayed_client():
    """TestClient whose submission service waits a short, measurable delay."""
    app.dependency_overrides[get_submission_service] = lambda: SubmissionService(
        delay_seconds=0.2
    )

    with fastapi_testclient.TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()

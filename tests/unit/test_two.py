import time

import pytest

from app.api.routes.two import get_submission_service
from app.core.config import settings

URL = "/api/two"

SUCCESS_BODY = {"success": True, "message": "Success!"}
FAILURE_BODY = {"success": False, "message": "Missing required fields"}


def test_complete_submission_succeeds(client):
    response = client.post(
        URL, data={"name": "Ann", "email": "a@x.com", "message": "hi"}
    )

    assert response.status_code == 200
    assert response.json() == SUCCESS_BODY


def test_empty_name_is_rejected(client):
    response = client.post(URL, data={"name": "", "email": "a@x.com", "message": "hi"})

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


def test_absent_email_is_rejected(client):
    response = client.post(URL, data={"name": "Ann", "message": "hi"})

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"name": "Ann", "email": "a@x.com"},
        {"name": "Ann", "email": "", "message": "hi"},
        {"name": "Ann", "email": "a@x.com", "message": ""},
        {"email": "a@x.com", "message": "hi"},
    ],
    ids=["empty", "no_message", "empty_email", "empty_message", "no_name"],
)
def test_incomplete_submissions_are_rejected(client, data):
    response = client.post(URL, data=data)

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


def test_whitespace_values_count_as_present(client):
    response = client.post(URL, data={"name": " ", "email": " ", "message": " "})

    assert response.status_code == 200
    assert response.json() == SUCCESS_BODY


def test_multipart_submission_succeeds(client):
    response = client.post(
        URL,
        data={"name": "Ann", "email": "a@x.com", "message": "hi"},
        files={"attachment": ("note.txt", b"ignored", "text/plain")},
    )

    assert response.headers.get("content-type", "").startswith("application/json")
    assert response.status_code == 200
    assert response.json() == SUCCESS_BODY


@pytest.mark.parametrize(
    "body,expected_status,expected_body",
    [
        (b"name=&name=Ann&email=a%40x.com&message=hi", 400, FAILURE_BODY),
        (b"name=Ann&name=&email=a%40x.com&message=hi", 200, SUCCESS_BODY),
    ],
    ids=["empty_first", "filled_first"],
)
def test_repeated_urlencoded_key_uses_first_value(
    client, body, expected_status, expected_body
):
    response = client.post(
        URL,
        content=body,
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )

    assert response.status_code == expected_status
    assert response.json() == expected_body


@pytest.mark.parametrize(
    "names,expected_status,expected_body",
    [
        (["", "Ann"], 400, FAILURE_BODY),
        (["Ann", ""], 200, SUCCESS_BODY),
    ],
    ids=["empty_first", "filled_first"],
)
def test_repeated_multipart_key_uses_first_value(
    client, names, expected_status, expected_body
):
    response = client.post(
        URL,
        data={"name": names, "email": "a@x.com", "message": "hi"},
        files={"attachment": ("note.txt", b"ignored", "text/plain")},
    )

    assert response.status_code == expected_status
    assert response.json() == expected_body


def test_file_part_does_not_count_as_text_field(client):
    response = client.post(
        URL,
        data={"email": "a@x.com", "message": "hi"},
        files={"name": ("name.txt", b"Ann", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


def test_json_body_is_not_form_data(client):
    response = client.post(
        URL, json={"name": "Ann", "email": "a@x.com", "message": "hi"}
    )

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


def test_malformed_multipart_body_is_rejected_as_missing_fields(client):
    response = client.post(
        URL,
        content=b"this is not multipart",
        headers={"Content-Type": "multipart/form-data; boundary=xyz"},
    )

    assert response.status_code == 400
    assert response.json() == FAILURE_BODY


def test_repeated_requests_get_same_classification(client):
    good = {"name": "Ann", "email": "a@x.com", "message": "hi"}
    bad = {"name": "", "email": "a@x.com", "message": "hi"}

    first = [client.post(URL, data=good), client.post(URL, data=bad)]
    second = [client.post(URL, data=good), client.post(URL, data=bad)]

    assert [r.status_code for r in first] == [200, 400]
    assert [r.status_code for r in second] == [200, 400]
    assert [r.json() for r in first] == [r.json() for r in second]


def test_get_is_not_allowed(client):
    response = client.get(URL)

    assert response.status_code == 405


def test_submission_waits_for_backend_delay(delayed_client):
    for data in (
        {"name": "Ann", "email": "a@x.com", "message": "hi"},
        {"name": "", "email": "a@x.com", "message": "hi"},
    ):
        start = time.perf_counter()
        delayed_client.post(URL, data=data)
        elapsed = time.perf_counter() - start

        assert elapsed >= 0.2


def test_default_service_uses_configured_delay():
    service = get_submission_service()

    assert service.delay_seconds == settings.SUBMISSION_DELAY_MS / 1000


def test_response_carries_request_id_and_process_time(client):
    response = client.post(
        URL,
        data={"name": "Ann", "email": "a@x.com", "message": "hi"},
        headers={"X-Request-ID": "req-123"},
    )

    assert response.headers["X-Request-ID"] == "req-123"
    assert float(response.headers["X-Process-Time"]) >= 0


def test_submitted_email_is_not_logged(client, caplog):
    caplog.set_level("INFO", logger="app.services.submission_service")

    response = client.post(
        URL, data={"name": "Ann", "email": "ann@example.com", "message": "hi"}
    )

    assert response.status_code == 200
    assert "ann@example.com" not in caplog.text
    assert "example.com" in caplog.text


def test_health_and_root(client):
    health = client.get("/health")
    root = client.get("/")

    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert root.json()["health"] == "/health"

"""Shared test fixtures.

  vision      MagicMock standing in for the image-understanding client.
  audit_file  temp JSON-lines path the request log writes to.
  client      FastAPI TestClient whose extraction service uses the two above.
"""
import os
import pytest
from unittest.mock import MagicMock


def pytest_configure(config):
    """Keep settings deterministic before any test module imports them.

    A real ``.env`` on the developer machine must not leak an API key or an
    allow-list into the tests.
    """
    os.environ["OPENAI_API_KEY"] = ""
    os.environ["ALLOWED_USER_IDS"] = "alice, bob"
    os.environ.pop("REQUEST_LOG_FILE", None)


ALLOWED_USER = "alice"


@pytest.fixture
def vision():
    from timecard.vision.client import VisionClient
    return MagicMock(spec=VisionClient)


@pytest.fixture
def audit_file(tmp_path):
    return tmp_path / "requests.jsonl"


@pytest.fixture
def client(vision, audit_file):
    """FastAPI TestClient with the vision client mocked out."""
    from fastapi.testclient import TestClient
    from timecard.api.app import create_app
    from timecard.api.deps import get_extraction_service
    from timecard.audit.request_log import RequestLog
    from timecard.auth.allow_list import AllowList
    from timecard.services.extraction_service import ExtractionService

    app = create_app()
    app.dependency_overrides[get_extraction_service] = lambda: ExtractionService(
        vision=vision,
        allow_list=AllowList([ALLOWED_USER]),
        audit=RequestLog(audit_file),
    )
    with TestClient(app) as c:
        yield c

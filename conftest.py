from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings")

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture()
def summary_handler():
    """Handler wired from settings, rebuilt for every test."""
    from backend.api.views import get_summary_handler

    get_summary_handler.cache_clear()
    yield get_summary_handler()
    get_summary_handler.cache_clear()


@pytest.fixture()
def recorded_sessions(monkeypatch):
    """Collect every ``requests.Session`` opened while the test runs."""
    import requests

    opened: list[requests.Session] = []

    class _RecordingSession(requests.Session):
        def __init__(self) -> None:
            super().__init__()
            opened.append(self)

    monkeypatch.setattr(requests, "Session", _RecordingSession)
    return opened

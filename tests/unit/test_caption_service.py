from unittest.mock import MagicMock

import pytest
import requests

from conftest import caption_response
from tubegenre.models.video import CaptionText, NoCaptions
from tubegenre.services.caption_service import TIMEDTEXT_URL, CaptionService


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


def test_fetch_captions_success(session):
    session.get.return_value = caption_response('<transcript><text start="0">hi</text></transcript>')
    service = CaptionService(language="en", session=session)

    result = service.fetch_captions("abc123")

    assert result == CaptionText("abc123", '<transcript><text start="0">hi</text></transcript>')
    assert result.available is True
    session.get.assert_called_once_with(
        TIMEDTEXT_URL, params={"lang": "en", "v": "abc123"}, timeout=None
    )


def test_fetch_captions_uses_configured_language_and_timeout(session):
    session.get.return_value = caption_response("text")
    service = CaptionService(language="fr", timeout=5.0, session=session)

    service.fetch_captions("abc123")

    session.get.assert_called_once_with(
        TIMEDTEXT_URL, params={"lang": "fr", "v": "abc123"}, timeout=5.0
    )


@pytest.mark.parametrize("error", [
    requests.ConnectionError("connection refused"),
    requests.Timeout("timed out"),
    requests.TooManyRedirects("loop"),
])
def test_fetch_captions_network_error_is_absorbed(session, error):
    session.get.side_effect = error
    service = CaptionService(session=session)

    result = service.fetch_captions("abc123")

    assert result == NoCaptions("abc123")
    assert result.available is False


@pytest.mark.parametrize("status_code", [404, 429, 500])
def test_fetch_captions_error_status_is_absorbed(session, status_code):
    session.get.return_value = caption_response("error page", status_code=status_code)
    service = CaptionService(session=session)

    assert service.fetch_captions("abc123") == NoCaptions("abc123")


def test_fetch_captions_empty_body_is_no_captions(session):
    session.get.return_value = caption_response("")
    service = CaptionService(session=session)

    assert service.fetch_captions("abc123") == NoCaptions("abc123")


def test_close_closes_session(session):
    CaptionService(session=session).close()

    session.close.assert_called_once()

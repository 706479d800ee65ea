"""
Tests for ArtworksPageSource with a mocked requests session.

Date: 2026-10-19
"""

from unittest.mock import MagicMock

import pytest
import requests

from artgrid.app.ports.page_source import PageSource
from artgrid.core.errors import FetchError, MalformedResponseError
from artgrid.infra.artworks_source import ArtworksPageSource
from artgrid.models.record import RECORD_FIELDS


def make_response(body=None, status_code=200, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


def artworks_body(ids, total):
    return {
        "pagination": {"total": total, "limit": len(ids), "current_page": 1},
        "data": [{"id": i, "title": f"Artwork {i}", "inscriptions": None} for i in ids],
    }


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def source(session):
    return ArtworksPageSource(base_url="https://api.example.org/v1/", timeout=3, session=session)


class TestArtworksPageSourceRequest:
    """Test the outgoing request."""

    def test_is_a_page_source(self, source):
        assert isinstance(source, PageSource)

    def test_request_parameters(self, source, session):
        session.get.return_value = make_response(artworks_body([1, 2], 2))

        source.fetch(3, 10)

        session.get.assert_called_once_with(
            "https://api.example.org/v1/artworks",
            params={"page": 3, "limit": 10, "fields": ",".join(RECORD_FIELDS)},
            timeout=3,
        )

    def test_without_fields_param(self, session):
        src = ArtworksPageSource(base_url="https://api.example.org/v1", session=session, request_fields=False)
        session.get.return_value = make_response(artworks_body([], 0))

        src.fetch(1, 10)

        assert session.get.call_args.kwargs["params"] == {"page": 1, "limit": 10}

    def test_default_headers(self, source, session):
        assert session.headers["Accept"] == "application/json"
        assert "artgrid" in session.headers["User-Agent"]

    def test_context_manager_closes_session(self, session):
        with ArtworksPageSource(session=session):
            pass
        session.close.assert_called_once()


class TestArtworksPageSourceParsing:
    """Test turning a response into a Page."""

    def test_parses_page(self, source, session):
        session.get.return_value = make_response(artworks_body([11, 12, 13], 97))

        page = source.fetch(2, 10)

        assert page.index == 2
        assert page.total == 97
        assert page.page_size == 10
        assert page.ids == [11, 12, 13]
        assert page.records[0].title == "Artwork 11"
        assert page.records[0].inscriptions == ""

    @pytest.mark.parametrize(
        "body",
        [
            [],
            {"pagination": {"total": 5}},
            {"data": {}, "pagination": {"total": 5}},
            {"data": []},
            {"data": [], "pagination": {"total": "5"}},
            {"data": [], "pagination": {"total": -1}},
            {"data": [], "pagination": {"total": True}},
            {"data": [{"title": "no id"}], "pagination": {"total": 1}},
        ],
    )
    def test_malformed_body(self, source, session, body):
        session.get.return_value = make_response(body)

        with pytest.raises(MalformedResponseError) as exc_info:
            source.fetch(1, 10)

        assert exc_info.value.page_index == 1

    def test_too_many_records(self, source, session):
        session.get.return_value = make_response(artworks_body(list(range(1, 12)), 50))

        with pytest.raises(MalformedResponseError):
            source.fetch(1, 10)

    def test_body_not_json(self, source, session):
        session.get.return_value = make_response(json_error=ValueError("Expecting value"))

        with pytest.raises(MalformedResponseError) as exc_info:
            source.fetch(4, 10)

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestArtworksPageSourceErrors:
    """Test mapping transport failures to FetchError."""

    def test_http_error_status(self, source, session):
        session.get.return_value = make_response(status_code=503)

        with pytest.raises(FetchError) as exc_info:
            source.fetch(5, 10)

        assert exc_info.value.status_code == 503
        assert exc_info.value.page_index == 5
        assert not isinstance(exc_info.value, MalformedResponseError)

    def test_timeout(self, source, session):
        session.get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(FetchError, match="Timed out"):
            source.fetch(1, 10)

    def test_connection_error(self, source, session):
        session.get.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(FetchError) as exc_info:
            source.fetch(1, 10)

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        assert exc_info.value.status_code is None

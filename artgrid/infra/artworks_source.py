"""Module: artworks_source.py

Date: 2026-10-19

HTTP page source for the Art Institute of Chicago artworks listing.

    GET {base_url}/artworks?page={p}&limit={n}

    { "data": [ {id, title, place_of_origin, artist_display,
                 inscriptions, date_start, date_end}, ... ],
      "pagination": { "total": <int> } }

Every failure (connection error, timeout, non-2xx status, body that is not
JSON or not shaped like the above) is raised as FetchError, chained from the
underlying exception.
"""

from __future__ import annotations

from typing import Any

import requests

from artgrid.config import (
    API_ARTWORKS_ENDPOINT,
    API_BASE_URL,
    API_REQUEST_TIMEOUT,
    API_USER_AGENT,
)
from artgrid.core.errors import FetchError, MalformedResponseError
from artgrid.models.page import Page
from artgrid.models.record import RECORD_FIELDS, Record
from artgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ArtworksPageSource:
    """PageSource backed by the artworks REST endpoint.

    A single requests.Session is reused for every call; close() releases it.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_REQUEST_TIMEOUT,
        session: requests.Session | None = None,
        request_fields: bool = True,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.request_fields = request_fields
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", API_USER_AGENT)
        self._session.headers.setdefault("Accept", "application/json")

    @property
    def url(self) -> str:
        return f"{self.base_url}/{API_ARTWORKS_ENDPOINT}"

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> ArtworksPageSource:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def fetch(self, page_index: int, page_size: int) -> Page:
        """Fetch one page of artworks.

        Raises:
            FetchError: on any network, status or body problem

        """
        params: dict[str, Any] = {"page": page_index, "limit": page_size}
        if self.request_fields:
            params["fields"] = ",".join(RECORD_FIELDS)

        logger.debug(
            "[ArtworksSource] GET %s page=%d limit=%d",
            self.url,
            page_index,
            page_size,
            extra={"dev_only": True},
        )

        try:
            response = self._session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(
                f"HTTP {status} for page {page_index}", page_index=page_index, status_code=status
            ) from e
        except requests.Timeout as e:
            raise FetchError(
                f"Timed out after {self.timeout}s fetching page {page_index}", page_index=page_index
            ) from e
        except requests.RequestException as e:
            raise FetchError(f"Request for page {page_index} failed: {e}", page_index=page_index) from e

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Page {page_index} body is not JSON",
                page_index=page_index,
                status_code=response.status_code,
            ) from e

        return self._parse_page(body, page_index, page_size, response.status_code)

    @staticmethod
    def _parse_page(body: Any, page_index: int, page_size: int, status_code: int | None = None) -> Page:
        def malformed(reason: str) -> MalformedResponseError:
            return MalformedResponseError(
                f"Page {page_index}: {reason}", page_index=page_index, status_code=status_code
            )

        if not isinstance(body, dict):
            raise malformed("body is not an object")

        data = body.get("data")
        if not isinstance(data, list):
            raise malformed("missing 'data' array")
        if len(data) > page_size:
            raise malformed(f"{len(data)} records returned for limit {page_size}")

        pagination = body.get("pagination")
        total = pagination.get("total") if isinstance(pagination, dict) else None
        if isinstance(total, bool) or not isinstance(total, int) or total < 0:
            raise malformed(f"invalid 'pagination.total': {total!r}")

        try:
            records = tuple(Record.from_json(item) for item in data)
        except MalformedResponseError as e:
            raise malformed(str(e)) from e

        return Page(records=records, index=page_index, total=total, page_size=page_size)

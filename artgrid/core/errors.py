"""Module: errors.py

Date: 2026-10-19

Exception taxonomy for page retrieval and selection-limit input.

FetchError covers every way a page can fail to arrive (network, timeout,
non-2xx status, malformed body). Callers never need to tell the subtypes
apart; MalformedResponseError exists so logs can say what was wrong with
the body.
"""


class ArtgridError(Exception):
    """Base class for artgrid errors."""


class FetchError(ArtgridError):
    """Raised when a page cannot be retrieved from the page source."""

    def __init__(
        self,
        message: str,
        page_index: int | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.page_index = page_index
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """Raised when a response arrives but its body is not a valid page."""


class InvalidLimitError(ArtgridError, ValueError):
    """Raised when a selection limit falls outside [minimum, maximum]."""

    def __init__(self, value: object, minimum: int, maximum: int) -> None:
        super().__init__(f"Selection limit {value!r} is outside [{minimum}, {maximum}]")
        self.value = value
        self.minimum = minimum
        self.maximum = maximum

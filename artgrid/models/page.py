"""
page.py

Date: 2026-10-19

Page: one fetched batch of records plus the page index it was fetched for
and the dataset total reported by the source at fetch time.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from artgrid.models.record import Record


def page_count_for(total: int, page_size: int) -> int:
    """Number of pages needed to show `total` records, `page_size` at a time."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    if total <= 0:
        return 0
    return -(-total // page_size)


@dataclass(frozen=True)
class Page:
    """
    One page of records.

    Attributes:
        records: Records in source order, at most page_size of them
        index: 1-based page index the page was requested for
        total: Dataset-wide record count reported with this page
        page_size: Page size the page was requested with
    """

    records: tuple[Record, ...]
    index: int
    total: int
    page_size: int

    def __post_init__(self) -> None:
        # Accept any iterable, store a tuple
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))
        if self.index < 1:
            raise ValueError(f"Page index must be >= 1, got {self.index}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.total < 0:
            raise ValueError(f"total must be >= 0, got {self.total}")
        if len(self.records) > self.page_size:
            raise ValueError(
                f"Page {self.index} holds {len(self.records)} records, more than page_size {self.page_size}"
            )

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @property
    def ids(self) -> list[int]:
        return [record.id for record in self.records]

    @property
    def page_count(self) -> int:
        return page_count_for(self.total, self.page_size)

    @property
    def is_last(self) -> bool:
        return self.index >= self.page_count

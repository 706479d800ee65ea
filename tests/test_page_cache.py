"""
Tests for PageCache.

Date: 2026-10-19
"""

from unittest.mock import MagicMock

import pytest

from artgrid.app.state.selection_reconciler import SelectionReconciler
from artgrid.core.errors import FetchError
from artgrid.core.page_cache import PageCache
from tests.mocks import FakePageSource, make_records


class TestPageCacheFetch:
    """Test successful page loads."""

    def test_initial_state(self, source_97):
        cache = PageCache(source_97, page_size=10)

        assert cache.current_page is None
        assert cache.current_index == 0
        assert cache.total_records == 0
        assert cache.page_count == 0
        assert cache.records == ()

    def test_fetch_first_page(self, source_97):
        cache = PageCache(source_97, page_size=10)
        page = cache.fetch_page(1)

        assert cache.current_page is page
        assert cache.current_index == 1
        assert cache.total_records == 97
        assert cache.page_count == 10
        assert [r.id for r in cache.records] == list(range(1, 11))
        assert source_97.calls == [(1, 10)]

    def test_page_size_override_sticks(self, source_97):
        cache = PageCache(source_97, page_size=10)
        cache.fetch_page(2, page_size=20)

        assert cache.page_size == 20
        assert [r.id for r in cache.records] == list(range(21, 41))

        cache.fetch_page(3)
        assert source_97.calls[-1] == (3, 20)

    def test_signals(self, source_97):
        cache = PageCache(source_97, page_size=10)
        pages = []
        totals = []
        cache.page_loaded.connect(pages.append)
        cache.total_changed.connect(totals.append)

        cache.fetch_page(1)
        cache.fetch_page(2)

        assert [p.index for p in pages] == [1, 2]
        assert totals == [97]  # emitted only when the total actually changes

    def test_total_change_between_pages(self, records_97):
        source = FakePageSource(records_97)
        cache = PageCache(source, page_size=10)
        totals = []
        cache.total_changed.connect(totals.append)

        cache.fetch_page(1)
        source.reported_total = 120
        cache.fetch_page(2)

        assert totals == [97, 120]
        assert cache.page_count == 12

    def test_refresh_before_first_fetch_loads_page_one(self, source_97):
        cache = PageCache(source_97, page_size=10)
        cache.refresh()
        assert cache.current_index == 1

    def test_refresh_refetches_current_page(self, source_97):
        cache = PageCache(source_97, page_size=10)
        cache.fetch_page(4)
        cache.refresh()
        assert source_97.fetched_pages() == [4, 4]


class TestPageCacheFailures:
    """Test that failed fetches leave the displayed page alone."""

    def test_failed_fetch_keeps_previous_page(self, records_97):
        source = FakePageSource(records_97, fail_on={3})
        cache = PageCache(source, page_size=10)
        previous = cache.fetch_page(2)

        with pytest.raises(FetchError):
            cache.fetch_page(3)

        assert cache.current_page is previous
        assert cache.current_index == 2
        assert cache.total_records == 97

    def test_failed_fetch_emits_fetch_failed_only(self, records_97):
        source = FakePageSource(records_97, fail_on={1})
        cache = PageCache(source, page_size=10)
        failures = []
        loaded = []
        cache.fetch_failed.connect(lambda index, message: failures.append((index, message)))
        cache.page_loaded.connect(loaded.append)

        with pytest.raises(FetchError):
            cache.fetch_page(1)

        assert failures == [(1, "simulated failure on page 1")]
        assert loaded == []
        assert cache.current_page is None

    @pytest.mark.parametrize("page_index", [0, -1, 1.5, True])
    def test_invalid_page_index(self, source_97, page_index):
        cache = PageCache(source_97, page_size=10)
        with pytest.raises(ValueError):
            cache.fetch_page(page_index)
        assert source_97.calls == []

    def test_invalid_page_size(self, source_97):
        with pytest.raises(ValueError):
            PageCache(source_97, page_size=0)


class TestPageCacheReconciler:
    """Test that the visible selection is derived on every page change."""

    def test_derive_visible_called_before_page_loaded(self, source_97):
        order = []
        reconciler = MagicMock()
        reconciler.derive_visible.side_effect = lambda page: order.append(("derive", page.index))
        cache = PageCache(source_97, page_size=10, reconciler=reconciler)
        cache.page_loaded.connect(lambda page: order.append(("loaded", page.index)))

        cache.fetch_page(1)

        assert order == [("derive", 1), ("loaded", 1)]

    def test_reconciler_not_called_on_failure(self, records_97):
        source = FakePageSource(records_97, fail_on={2})
        reconciler = MagicMock()
        cache = PageCache(source, page_size=10, reconciler=reconciler)

        with pytest.raises(FetchError):
            cache.fetch_page(2)

        reconciler.derive_visible.assert_not_called()

    def test_visible_selection_follows_page(self):
        source = FakePageSource(make_records(30))
        reconciler = SelectionReconciler(source, page_size=10)
        cache = PageCache(source, page_size=10)
        cache.attach_reconciler(reconciler)

        page_one = cache.fetch_page(1)
        reconciler.merge_from_page([page_one.records[0], page_one.records[2]])

        cache.fetch_page(2)
        assert reconciler.visible_selection == []

        cache.fetch_page(1)
        assert [r.id for r in reconciler.visible_selection] == [1, 3]

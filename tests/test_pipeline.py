"""Tests for the Search trigger pipeline."""

from unittest.mock import Mock

import pytest

from services.pipeline import GALLERY_KEY, MISSING_DATES_MESSAGE, GalleryPipeline
from services.records import GalleryState, ImageRecord, Placeholder


@pytest.fixture
def state():
    return {}


@pytest.fixture
def notify():
    return Mock()


def fetch_all_but(failing, payload_factory):
    calls = []

    def fetch_batch(days):
        calls.append(list(days))
        return [ImageRecord.from_payload(payload_factory(d)) for d in days if d not in failing]

    fetch_batch.calls = calls
    return fetch_batch


class TestGalleryPipeline:

    def test_one_failed_date_leaves_two_tiles_in_order(self, state, notify, payload_factory):
        fetch_batch = fetch_all_but({"2024-01-02"}, payload_factory)
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        gallery = pipeline.run("2024-01-01", "2024-01-03")

        assert fetch_batch.calls == [["2024-01-01", "2024-01-02", "2024-01-03"]]
        assert [r.date for r in gallery.records] == ["2024-01-01", "2024-01-03"]
        assert gallery.placeholder is None
        assert state[GALLERY_KEY] is gallery
        notify.assert_not_called()

    def test_reversed_range_shows_no_results_without_fetching(self, state, notify):
        fetch_batch = Mock()
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        gallery = pipeline.run("2024-03-05", "2024-02-28")

        fetch_batch.assert_not_called()
        assert gallery.placeholder is Placeholder.EMPTY
        notify.assert_not_called()

    @pytest.mark.parametrize("start,end", [("2024-01-01", None), ("2024-01-01", ""), (None, "2024-01-03"), (None, None)])
    def test_missing_date_notifies_and_keeps_gallery(self, state, notify, start, end):
        previous = GalleryState.of([])
        state[GALLERY_KEY] = previous
        fetch_batch = Mock()
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        assert pipeline.run(start, end) is None

        notify.assert_called_once_with(MISSING_DATES_MESSAGE)
        fetch_batch.assert_not_called()
        assert state[GALLERY_KEY] is previous

    def test_all_failed_is_empty_not_error(self, state, notify, payload_factory):
        fetch_batch = fetch_all_but({"2024-01-01", "2024-01-02"}, payload_factory)
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        assert pipeline.run("2024-01-01", "2024-01-02").placeholder is Placeholder.EMPTY

    def test_batch_exception_shows_error_placeholder(self, state, notify):
        fetch_batch = Mock(side_effect=RuntimeError("boom"))
        state[GALLERY_KEY] = GalleryState.of([])
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        gallery = pipeline.run("2024-01-01", "2024-01-02")

        assert gallery == GalleryState.error()
        assert gallery.records == ()
        assert state[GALLERY_KEY] == GalleryState.error()

    def test_bad_date_string_shows_error_placeholder(self, state, notify):
        pipeline = GalleryPipeline(state, Mock(), notify)

        assert pipeline.run("yesterday", "2024-01-02").placeholder is Placeholder.ERROR

    def test_loading_is_set_while_fetching(self, state, notify):
        seen = []
        pipeline = GalleryPipeline(state, lambda days: seen.append(state[GALLERY_KEY]) or [], notify)

        pipeline.run("2024-01-01", "2024-01-01")

        assert seen == [GalleryState.loading()]

    def test_new_run_replaces_previous_gallery(self, state, notify, payload_factory):
        pipeline = GalleryPipeline(state, fetch_all_but(set(), payload_factory), notify)

        pipeline.run("2024-01-01", "2024-01-05")
        second = pipeline.run("2024-02-01", "2024-02-02")

        assert [r.date for r in pipeline.gallery.records] == ["2024-02-01", "2024-02-02"]
        assert pipeline.gallery is second

    def test_range_is_capped_at_nine(self, state, notify, payload_factory):
        fetch_batch = fetch_all_but(set(), payload_factory)
        pipeline = GalleryPipeline(state, fetch_batch, notify)

        gallery = pipeline.run("2024-01-01", "2024-01-31")

        assert len(fetch_batch.calls[0]) == 9
        assert len(gallery.records) == 9

import logging
from datetime import date
from typing import Callable, List, MutableMapping, Optional, Sequence, Union

from services.date_range import MAX_ITEMS, build_date_range
from services.records import GalleryState, ImageRecord

logger = logging.getLogger(__name__)

MISSING_DATES_MESSAGE = "Please select both start and end dates."
GALLERY_KEY = "gallery"


class GalleryPipeline:
    """Handles the Search trigger: validate inputs, fetch the batch, replace the gallery.

    `fetch_batch` takes the list of ISO dates and returns the records to show;
    `notify` is the blocking user notification for bad input. Gallery state is
    written to `state[GALLERY_KEY]` and always replaced, never merged.
    """

    def __init__(
        self,
        state: MutableMapping,
        fetch_batch: Callable[[Sequence[str]], List[ImageRecord]],
        notify: Callable[[str], None],
        limit: int = MAX_ITEMS,
    ):
        self.state = state
        self.fetch_batch = fetch_batch
        self.notify = notify
        self.limit = limit

    @property
    def gallery(self) -> Optional[GalleryState]:
        return self.state.get(GALLERY_KEY)

    def run(self, start: Union[date, str, None], end: Union[date, str, None]) -> Optional[GalleryState]:
        if not start or not end:
            self.notify(MISSING_DATES_MESSAGE)
            return None

        self.state[GALLERY_KEY] = GalleryState.loading()
        try:
            days = build_date_range(start, end, limit=self.limit)
            records = self.fetch_batch(days) if days else []
            gallery = GalleryState.of(records)
        except Exception:
            logger.exception("Loading gallery for %s -> %s failed", start, end)
            gallery = GalleryState.error()

        self.state[GALLERY_KEY] = gallery
        return gallery

import html
import logging
from typing import MutableMapping, Optional

import streamlit as st

from services.date_range import long_date
from services.records import ImageRecord

logger = logging.getLogger(__name__)

CLOSE_KEYS = ("Escape",)


class DetailViewController:
    """Single full-detail overlay. States: Closed, or Open(record).

    The open record is kept by value in `state[key]`; open() and close()
    are the only mutators.
    """

    def __init__(self, state: MutableMapping, key: str = "detail_record"):
        self.state = state
        self.key = key

    @property
    def record(self) -> Optional[ImageRecord]:
        return self.state.get(self.key)

    @property
    def is_open(self) -> bool:
        return self.record is not None

    @property
    def overflow(self) -> str:
        """CSS overflow for the page behind the overlay."""
        return "hidden" if self.is_open else "auto"

    def open(self, record: ImageRecord) -> None:
        # Direct replace when something is already shown
        self.state[self.key] = record
        logger.debug("Detail view opened for %s", record.date)

    def close(self) -> None:
        if self.state.pop(self.key, None) is not None:
            logger.debug("Detail view closed")

    def handle_key(self, key: str) -> None:
        if key in CLOSE_KEYS:
            self.close()

    def markup(self, include_title: bool = True) -> Optional[str]:
        record = self.record
        if record is None:
            return None
        return detail_markup(record, include_title=include_title)


def detail_markup(record: ImageRecord, include_title: bool = True) -> str:
    title = html.escape(record.title)
    url = html.escape(record.url, quote=True)
    if record.is_image:
        media = f'<img src="{url}" alt="{title}">'
    else:
        media = f'<iframe src="{url}" frameborder="0" allowfullscreen></iframe>'
    header = f"<h2>{title}</h2>" if include_title else ""
    return (
        '<div class="modal-content">'
        '<div class="modal-header">'
        f"{header}"
        f'<p class="modal-date">{html.escape(long_date(record.date))}</p>'
        "</div>"
        f'<div class="modal-media">{media}</div>'
        f'<div class="modal-description"><p>{html.escape(record.explanation)}</p></div>'
        "</div>"
    )


def render_detail_dialog(controller: DetailViewController) -> None:
    """Show the open record in a Streamlit dialog. Escape / X / outside click close it."""
    record = controller.record
    if record is None:
        return

    @st.dialog(record.title, width="large", on_dismiss=controller.close)
    def _detail():
        # st.dialog already shows the title
        st.markdown(controller.markup(include_title=False), unsafe_allow_html=True)
        if record.raw.get("copyright"):
            st.caption(f"© {record.raw['copyright']}")
        if st.button("Close", key="detail_close"):
            controller.close()
            st.rerun()

    _detail()

import html
import json
from dataclasses import dataclass
from typing import Callable, List, Sequence

import streamlit as st

from components.detail_view import DetailViewController
from services.date_range import short_date
from services.records import GalleryState, ImageRecord, Placeholder

OnSelect = Callable[[ImageRecord], None]


@dataclass(frozen=True)
class Tile:
    record: ImageRecord
    on_select: OnSelect

    @property
    def markup(self) -> str:
        return tile_markup(self.record)

    def select(self) -> None:
        self.on_select(self.record)


def tile_markup(record: ImageRecord) -> str:
    title = html.escape(record.title)
    if record.is_image:
        thumb = f'<img src="{html.escape(record.url, quote=True)}" alt="{title}" loading="lazy">'
    else:
        thumb = (
            '<div class="video-thumbnail">'
            '<div class="play-button">▶️</div>'
            f"<p>Video: {title}</p>"
            "</div>"
        )
    payload = html.escape(json.dumps(record.to_dict()), quote=True)
    return (
        f'<div class="gallery-item" data-apod="{payload}">'
        f"{thumb}"
        '<div class="item-info">'
        f"<h3>{title}</h3>"
        f'<p class="date">{html.escape(short_date(record.date))}</p>'
        "</div>"
        "</div>"
    )


def placeholder_markup(placeholder: Placeholder) -> str:
    return (
        f'<div class="placeholder placeholder-{placeholder.name.lower()}">'
        f'<div class="placeholder-icon">{placeholder.icon}</div>'
        f"<p>{html.escape(placeholder.message)}</p>"
        "</div>"
    )


def gallery_markup(state: GalleryState) -> str:
    if state.placeholder is not None:
        return placeholder_markup(state.placeholder)
    return "".join(tile_markup(r) for r in state.records)


def build_tiles(records: Sequence[ImageRecord], on_select: OnSelect) -> List[Tile]:
    return [Tile(record=r, on_select=on_select) for r in records]


def render_gallery(state: GalleryState, controller: DetailViewController, columns: int = 3) -> None:
    """Tiles in a round-robin column grid, each with its own Open button."""
    if state.placeholder is not None:
        st.markdown(placeholder_markup(state.placeholder), unsafe_allow_html=True)
        return

    tiles = build_tiles(state.records, controller.open)
    cols = st.columns(columns, gap="small")
    for idx, tile in enumerate(tiles):
        with cols[idx % columns].container(border=True):
            st.markdown(tile.markup, unsafe_allow_html=True)
            st.button("Open", key=f"open_{tile.record.date}_{idx}", on_click=tile.select, width="stretch")

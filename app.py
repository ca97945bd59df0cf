import logging
from datetime import date, timedelta
from functools import partial

import streamlit as st

from services.apod import APOD_EARLIEST, fetch_apod_batch, get_api_key
from services.date_range import MAX_ITEMS
from services.facts import fact_markup, pick_fact
from services.pipeline import GALLERY_KEY, GalleryPipeline
from services.records import Placeholder
from components.detail_view import DetailViewController, render_detail_dialog
from components.gallery import placeholder_markup, render_gallery

# ---------------------------
# Logging
# ---------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
)
logger = logging.getLogger("apod_gallery")

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Space Gallery",
    page_icon="🔭",
    layout="wide",
    initial_sidebar_state="collapsed",
)

TODAY = date.today()
DEFAULT_START = TODAY - timedelta(days=MAX_ITEMS - 1)

# ---------------------------
# Session bootstrap
# ---------------------------
if "space_fact" not in st.session_state:
    st.session_state.space_fact = pick_fact()  # once per session

with st.sidebar.expander("🔐 Status"):
    st.write("NASA Key:", "Using DEMO_KEY ⚠️" if get_api_key() == "DEMO_KEY" else "Provided ✅")


def notify_missing(message: str) -> None:
    st.warning(message, icon="⚠️")
    st.toast(message, icon="⚠️")


controller = DetailViewController(st.session_state)
pipeline = GalleryPipeline(
    st.session_state,
    fetch_batch=partial(fetch_apod_batch, api_key=get_api_key()),
    notify=notify_missing,
)

# ---------------------------
# Header
# ---------------------------
st.markdown(
    """
    <div style="display:flex;align-items:center;gap:12px;">
    <h1 style="margin:0;">🔭 Space Gallery</h1>
    <span style="opacity:.8;">— NASA's Astronomy Picture of the Day, up to nine days at a time</span>
    </div>
    """,
    unsafe_allow_html=True
)
st.markdown(fact_markup(st.session_state.space_fact), unsafe_allow_html=True)

# ---------------------------
# Filters
# ---------------------------
with st.form("range_form", clear_on_submit=False):
    colA, colB, colC = st.columns([1.4, 1.4, 1])
    with colA:
        start_date = st.date_input("Start", value=DEFAULT_START, key="start_date", min_value=APOD_EARLIEST, max_value=TODAY, format="YYYY-MM-DD")
    with colB:
        end_date = st.date_input("End", value=TODAY, key="end_date", min_value=APOD_EARLIEST, max_value=TODAY, format="YYYY-MM-DD")
    with colC:
        submitted = st.form_submit_button("Get Space Images", key="search", type="primary", width="stretch")

# ---------------------------
# Gallery
# ---------------------------
slot = st.empty()
if submitted:
    slot.markdown(placeholder_markup(Placeholder.LOADING), unsafe_allow_html=True)
    pipeline.run(start_date, end_date)

gallery = st.session_state.get(GALLERY_KEY)
if gallery is None:
    slot.info("Pick a date range and hit **Get Space Images** to explore.")
else:
    try:
        with slot.container():
            render_gallery(gallery, controller)
    except Exception:
        logger.exception("Gallery render failed")
        slot.markdown(placeholder_markup(Placeholder.ERROR), unsafe_allow_html=True)

if controller.is_open:
    render_detail_dialog(controller)

st.caption("APOD © NASA")

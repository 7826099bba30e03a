"""Cosmic Calendar: Streamlit app for navigating time on a helical solar system."""

import datetime
import logging
import time

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from cosmiccalendar.calendar_math import MAX_YEAR, MIN_YEAR  # noqa: E402
from cosmiccalendar.catalog import BODIES, LANDING, ZOOM_LEVELS  # noqa: E402
from cosmiccalendar.clock import current_time  # noqa: E402
from cosmiccalendar.compute import build_scene  # noqa: E402
from cosmiccalendar.formatting import format_datetime, format_selection  # noqa: E402
from cosmiccalendar.i18n import t, zoom_name  # noqa: E402
from cosmiccalendar.navigation import (  # noqa: E402
    ReturnToPresent,
    navigate,
    navigate_to,
    present_state,
    translate,
)
from cosmiccalendar.orbits import build_orbital_frame  # noqa: E402
from cosmiccalendar.renderers.plotly_3d import render_plotly_chart  # noqa: E402
from cosmiccalendar.settings import load_settings  # noqa: E402
from cosmiccalendar.theme import palette  # noqa: E402

_settings = load_settings()
logging.basicConfig(level=_settings.log_level, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

_FRAME_INTERVAL = 1 / 20  # seconds between return-to-present frames

# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun it triggers fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="✦",
    layout="wide",
    initial_sidebar_state="collapsed",
)

_now = current_time(_settings.tz_name)
_pal = palette(_settings.theme)

# --- Session state initialization ---

if "frame" not in st.session_state:
    # Orbital phases are fixed once per session from the real clock
    st.session_state.frame = build_orbital_frame(_now, BODIES)
if "level" not in st.session_state:
    st.session_state.level = _settings.start_zoom
if "nav_state" not in st.session_state:
    st.session_state.nav_state = present_state(_now, st.session_state.level)
if "animator" not in st.session_state:
    st.session_state.animator = ReturnToPresent()
elif st.session_state.animator.active:
    # A rerun interrupted the last return to present; land on the present
    st.session_state.nav_state = st.session_state.animator.finish()

st.markdown(
    f"""
    <style>
    iframe[src*="streamlit_js_eval"] {{ display: none !important; }}
    .stApp {{ background-color: {_pal.background}; }}
    .cc-caption {{ color: {_pal.text}; text-align: center; font-size: 1.1rem; }}
    .cc-caption .now {{ color: {_pal.actual_now}; }}
    .cc-caption .selected {{ color: {_pal.user_selected}; }}
    </style>
    """,
    unsafe_allow_html=True,
)


def _render(placeholder, nav_state, key: str = "chart") -> None:
    scene = build_scene(nav_state, st.session_state.level, _now, st.session_state.frame)
    fig = render_plotly_chart(scene, _pal)
    with placeholder.container():
        st.plotly_chart(fig, use_container_width=True, config={"scrollZoom": True}, key=key)
        if scene.zoom.index == LANDING:
            st.markdown(
                f"<div class='cc-caption'>{t('landing_hint', _lang)}</div>",
                unsafe_allow_html=True,
            )
            return
        st.markdown(
            f"<div class='cc-caption'>"
            f"<span class='selected'>{t('label_selected', _lang)}: "
            f"{format_selection(scene.selected, scene.zoom.index)}</span> · "
            f"<span class='now'>{t('label_now', _lang)}: {format_datetime(scene.now)}</span> · "
            f"{t('label_moon', _lang)}: {scene.moon_phase}</div>",
            unsafe_allow_html=True,
        )


# --- Zoom selector ---
_level = st.selectbox(
    t("label_zoom", _lang),
    options=[z.index for z in ZOOM_LEVELS],
    index=st.session_state.level,
    format_func=lambda i: zoom_name(ZOOM_LEVELS[i].name, _lang),
)
if _level != st.session_state.level:
    st.session_state.nav_state = translate(
        st.session_state.nav_state, st.session_state.level, _level, _now
    )
    st.session_state.level = _level

chart_placeholder = st.empty()

# --- Navigation bar ---
col1, col2, col3, col4, col5 = st.columns([1.5, 2, 1.5, 2, 1])
with col1:
    if st.button(t("btn_prev", _lang), key="prev_btn", use_container_width=True):
        st.session_state.nav_state = navigate(
            st.session_state.nav_state, st.session_state.level, -1, _now
        )
with col2:
    present_clicked = st.button(t("btn_present", _lang), key="present_btn", use_container_width=True)
with col3:
    if st.button(t("btn_next", _lang), key="next_btn", use_container_width=True):
        st.session_state.nav_state = navigate(
            st.session_state.nav_state, st.session_state.level, 1, _now
        )
with col4:
    jump_date = st.date_input(
        t("label_jump", _lang),
        value=_now.date(),
        min_value=datetime.date(MIN_YEAR, 1, 1),
        max_value=datetime.date(MAX_YEAR, 12, 31),
        label_visibility="collapsed",
    )
with col5:
    if st.button(t("btn_jump", _lang), key="jump_btn", use_container_width=True):
        target = datetime.datetime.combine(jump_date, datetime.time(_now.hour, _now.minute))
        st.session_state.nav_state = navigate_to(target, st.session_state.level, _now)

# --- Return to present (animated) ---
animator: ReturnToPresent = st.session_state.animator
if present_clicked and animator.start(
    st.session_state.nav_state, st.session_state.level, _now, time.monotonic()
):
    frame_no = 0
    try:
        while animator.active:
            st.session_state.nav_state = animator.tick(time.monotonic())
            _render(chart_placeholder, st.session_state.nav_state, key=f"chart_{frame_no}")
            frame_no += 1
            time.sleep(_FRAME_INTERVAL)
    finally:
        if animator.active:
            st.session_state.nav_state = animator.finish()
    st.rerun()

_render(chart_placeholder, st.session_state.nav_state)

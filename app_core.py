# -*- coding: utf-8 -*-
import streamlit as st
from typing import Dict, Optional

from modules.page_controller import PageState, SECTIONS, reduce
from utils import settings
from utils.page_sync import EVENT_COMMAND_DONE, EVENT_SCROLLED, page_sync

STATE_KEY = "page_state"
_SYNC_SEEN_KEY = "_page_sync_seen"

# ---------- Query params ----------
def get_qs() -> Dict[str, str]:
    out = {}
    for k, v in dict(st.query_params).items():
        if isinstance(v, list):
            v = v[0] if v else ""
        out[k] = v
    return out

# ---------- State container ----------
def page_state() -> PageState:
    return st.session_state[STATE_KEY]

def dispatch(action: str, **payload) -> PageState:
    state = reduce(page_state(), action, **payload)
    st.session_state[STATE_KEY] = state
    return state

def _apply_deep_link():
    """?tab=ruby なら店舗タブへ、?section=recruitment ならそのセクションへ。"""
    qs = get_qs()
    tab = qs.get("tab")
    if tab:
        dispatch("select_tab", tab=tab, offset=settings.HEADER_OFFSET_PX)
        return
    section = qs.get("section")
    if section:
        dispatch("nav_click", section=section, behavior="auto")

def init_session_defaults():
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = PageState()
        _apply_deep_link()

# ---------- Browser bridge ----------
def sync_browser() -> Optional[dict]:
    """ブラウザからのイベントを取り込む。ウィジェット描画より前に呼ぶこと。"""
    state = page_state()
    event = page_sync(
        sections=SECTIONS,
        threshold=settings.SCROLL_THRESHOLD_PX,
        command=state.command_payload(),
        fallback_ms=settings.TAB_SELECT_DELAY_MS,
    )
    if not isinstance(event, dict) or not event.get("id"):
        return None
    if event["id"] == st.session_state.get(_SYNC_SEEN_KEY):
        return None
    st.session_state[_SYNC_SEEN_KEY] = event["id"]
    kind = event.get("event")
    if kind == EVENT_SCROLLED:
        dispatch("scrolled", offsets=event.get("offsets") or {}, threshold=settings.SCROLL_THRESHOLD_PX)
    elif kind == EVENT_COMMAND_DONE:
        dispatch("command_done", seq=event.get("seq"), found=bool(event.get("found", True)))
    return event

# ---------- Callbacks（on_click / on_change 用） ----------
def on_toggle_menu(): dispatch("toggle_menu")
def on_close_menu(): dispatch("close_menu")
def on_nav(section: str): dispatch("nav_click", section=section)
def on_select_tab(tab: str): dispatch("select_tab", tab=tab, offset=settings.HEADER_OFFSET_PX)

def on_tab_changed(widget_key: str):
    dispatch("tab_changed", tab=st.session_state.get(widget_key))

# ---------- UI helpers ----------
def section_title(title: str, anchor: str):
    st.header(title, anchor=anchor, divider="gray")

def paragraphs(lines):
    for line in lines:
        st.markdown(line)

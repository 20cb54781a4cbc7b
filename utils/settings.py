# -*- coding: utf-8 -*-
"""
設定値：Streamlit secrets → 環境変数 → 既定値 の順で読む
"""
import os

# secrets.toml が無い場合 st.secrets へのアクセス自体が例外になる
try:
    import streamlit as st
    _SECRETS = dict(st.secrets) if hasattr(st, "secrets") else {}
except Exception:
    _SECRETS = {}

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get(key: str, default: str = "") -> str:
    v = _SECRETS.get(key)
    if v is None or v == "":
        v = os.environ.get(key, default)
    return str(v)


def get_int(key: str, default: int) -> int:
    try:
        return int(str(get(key, str(default))).strip())
    except (TypeError, ValueError):
        return default


def get_path(key: str, default: str) -> str:
    p = get(key, default)
    return p if os.path.isabs(p) else os.path.join(ROOT, p)


RECRUIT_MAILTO = get("RECRUIT_MAILTO", "lgokinawa25@gmail.com")
SCROLL_THRESHOLD_PX = get_int("SCROLL_THRESHOLD_PX", 100)
HEADER_OFFSET_PX = get_int("HEADER_OFFSET_PX", 80)
# scrollend が来ない環境でのフォールバック待ち時間（経験値、契約ではない）
TAB_SELECT_DELAY_MS = get_int("TAB_SELECT_DELAY_MS", 100)
IMAGES_DIR = get_path("IMAGES_DIR", os.path.join("public", "images"))
BRAND_FILE = get_path("BRAND_FILE", "brand.json")

# -*- coding: utf-8 -*-
import os
import json
import base64
from io import BytesIO
from typing import Dict, Optional

from PIL import Image, ImageFilter
import streamlit as st

from utils import settings

DEFAULT_BRAND: Dict = {
    "PRIMARY": "#000000",
    "BG": "#FFFFFF",
    "LOGO": "new-logo.png",
    "HERO_IMAGE": "hero-bg-new.png",
    "COMPANY_LOGO": "company-logo.png",
    "STAFF_PHOTO": "staff-photo.png",
    "RETINA_FACTOR": 2,
}


def load_brand(path: Optional[str] = None) -> Dict:
    """brand.json があれば既定値に上書き。壊れていても既定値で描画を続ける。"""
    brand = dict(DEFAULT_BRAND)
    path = path or settings.BRAND_FILE
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return brand
    if isinstance(data, dict):
        brand.update({k: v for k, v in data.items() if k in DEFAULT_BRAND})
    return brand


def image_path(name: str) -> str:
    return name if os.path.isabs(name) else os.path.join(settings.IMAGES_DIR, name)


@st.cache_data(show_spinner=False)
def _png_bytes(path: str, target_px_width: int, mtime: float, size: int) -> bytes:
    """高解像度 PNG に変換（mtime/size をキャッシュキーに含める）"""
    img = Image.open(path).convert("RGBA")
    if img.width < target_px_width:
        ratio = target_px_width / img.width
        img = img.resize((int(img.width * ratio), int(img.height * ratio)), Image.Resampling.LANCZOS)
        img = img.filter(ImageFilter.UnsharpMask(radius=1.2, percent=130, threshold=2))
    elif img.width > target_px_width * 2:
        ratio = (target_px_width * 2) / img.width
        img = img.resize((int(img.width * ratio), int(img.height * ratio)), Image.Resampling.LANCZOS)
    buf = BytesIO()
    img.save(buf, format="PNG", optimize=True)
    return buf.getvalue()


def load_image(name: str, target_px_width: int = 400) -> Optional[bytes]:
    """画像が無い・読めない場合は None（呼び出し側でプレースホルダ表示）"""
    path = image_path(name)
    if not os.path.exists(path):
        return None
    try:
        return _png_bytes(path, target_px_width, os.path.getmtime(path), os.path.getsize(path))
    except OSError:
        return None


def image_b64(name: str, target_px_width: int) -> Optional[str]:
    data = load_image(name, target_px_width)
    return base64.b64encode(data).decode("utf-8") if data else None


def brand_css(brand: Dict) -> str:
    primary = brand.get("PRIMARY", DEFAULT_BRAND["PRIMARY"])
    bg = brand.get("BG", DEFAULT_BRAND["BG"])
    return f"""
<style>
  .lg-header{{display:flex;justify-content:space-between;align-items:center;
    padding:10px 4px;border-bottom:1px solid #e5e7eb;background:{bg};}}
  .lg-brand{{display:flex;align-items:center;gap:12px;}}
  .lg-brand img{{height:40px;width:auto;}}
  .lg-wordmark{{font-size:1.6rem;font-weight:900;letter-spacing:-.02em;color:{primary};}}
  .lg-nav{{display:flex;gap:24px;flex-wrap:wrap;}}
  .lg-nav a{{color:{primary};text-decoration:none;position:relative;padding-bottom:4px;}}
  .lg-nav a:hover{{color:#4b5563;}}
  .lg-nav a.active{{font-weight:600;border-bottom:2px solid {primary};}}
  .lg-band{{background:#000;color:#fff;text-align:center;padding:48px 12px;border-radius:12px;}}
  .lg-band h3{{font-size:3rem;font-weight:800;letter-spacing:-.04em;margin:0;color:#fff;}}
  .lg-band p{{margin:8px 0 0 0;color:#d1d5db;letter-spacing:.2em;}}
  .lg-placeholder{{border:1px dashed #9ca3af;border-radius:10px;padding:36px 8px;
    text-align:center;color:#6b7280;font-size:.85rem;}}
  .lg-footer{{border-top:1px solid #1f2937;background:#000;color:#fff;padding:24px 16px;border-radius:12px;}}
  .lg-footer a{{color:#9ca3af;text-decoration:none;margin-right:16px;}}
  @media (max-width:900px){{ .lg-nav{{display:none;}} }}
</style>
"""

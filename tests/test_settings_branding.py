# tests/test_settings_branding.py
import json
import os

from PIL import Image

from utils import branding, settings


def test_get_prefers_secrets_then_env(monkeypatch):
    monkeypatch.setattr(settings, "_SECRETS", {"RECRUIT_MAILTO": "secret@example.com"})
    monkeypatch.setenv("RECRUIT_MAILTO", "env@example.com")
    assert settings.get("RECRUIT_MAILTO") == "secret@example.com"

    monkeypatch.setattr(settings, "_SECRETS", {})
    assert settings.get("RECRUIT_MAILTO") == "env@example.com"

    monkeypatch.delenv("RECRUIT_MAILTO")
    assert settings.get("RECRUIT_MAILTO", "fallback@example.com") == "fallback@example.com"


def test_get_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setattr(settings, "_SECRETS", {})
    monkeypatch.setenv("SCROLL_THRESHOLD_PX", "120")
    assert settings.get_int("SCROLL_THRESHOLD_PX", 100) == 120
    monkeypatch.setenv("SCROLL_THRESHOLD_PX", "lots")
    assert settings.get_int("SCROLL_THRESHOLD_PX", 100) == 100


def test_get_path_resolves_relative_to_root(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "_SECRETS", {})
    monkeypatch.delenv("IMAGES_DIR", raising=False)
    assert settings.get_path("IMAGES_DIR", "public/images") == os.path.join(settings.ROOT, "public/images")
    monkeypatch.setenv("IMAGES_DIR", str(tmp_path))
    assert settings.get_path("IMAGES_DIR", "public/images") == str(tmp_path)


def test_defaults():
    assert settings.SCROLL_THRESHOLD_PX == 100
    assert settings.HEADER_OFFSET_PX == 80
    assert settings.TAB_SELECT_DELAY_MS == 100


def test_load_brand_defaults_and_override(tmp_path):
    assert branding.load_brand(str(tmp_path / "missing.json")) == branding.DEFAULT_BRAND

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert branding.load_brand(str(broken)) == branding.DEFAULT_BRAND

    custom = tmp_path / "brand.json"
    custom.write_text(json.dumps({"PRIMARY": "#111111", "UNKNOWN": 1}), encoding="utf-8")
    brand = branding.load_brand(str(custom))
    assert brand["PRIMARY"] == "#111111"
    assert "UNKNOWN" not in brand


def test_load_image_upscales_and_handles_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "IMAGES_DIR", str(tmp_path))
    Image.new("RGB", (50, 20), "white").save(tmp_path / "tiny.png")

    data = branding.load_image("tiny.png", 200)
    assert data.startswith(b"\x89PNG")
    assert branding.image_b64("tiny.png", 200)

    assert branding.load_image("nope.png", 200) is None
    assert branding.image_b64("nope.png", 200) is None


def test_brand_css_uses_primary():
    css = branding.brand_css({"PRIMARY": "#123456", "BG": "#fff"})
    assert "#123456" in css
    assert ".lg-nav a.active" in css

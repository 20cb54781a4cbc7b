# tests/test_page_controller.py
from urllib.parse import unquote

import pytest

from modules import recruitment
from modules.page_controller import (
    CMD_NUDGE, CMD_OPEN, CMD_SCROLL, DEFAULT_SECTION, HEADER_OFFSET_PX, SECTIONS,
    PageState, active_section_for, reduce,
)
from modules.venues import DEFAULT_TAB, TAB_IDS


def test_initial_state():
    s = PageState()
    assert s.active_section == "hero"
    assert s.is_menu_open is False
    assert s.selected_tab == DEFAULT_TAB == "neos"
    assert s.form_status == recruitment.FORM_IDLE
    assert s.form_error == ""
    assert s.command is None


def test_active_section_defaults_to_hero_at_top():
    offsets = {"hero": 0, "philosophy": 800, "message": 1600, "stores": 2400,
               "recruitment": 3200, "contact": 4000}
    # hero 自体は 0 <= 100 なので hero
    assert active_section_for(offsets) == "hero"
    assert active_section_for({}) == DEFAULT_SECTION


def test_active_section_is_last_past_threshold():
    offsets = {"hero": -2000, "philosophy": -1200, "message": -300, "stores": 100,
               "recruitment": 101, "contact": 900}
    assert active_section_for(offsets) == "stores"


def test_active_section_uses_document_order_not_mapping_order():
    offsets = {"contact": 500, "message": 50, "hero": -900, "philosophy": -400}
    assert active_section_for(offsets) == "message"


def test_active_section_ignores_unknown_and_missing():
    offsets = {"hero": -500, "footer": -10, "stores": None, "philosophy": 20}
    assert active_section_for(offsets) == "philosophy"


@pytest.mark.parametrize("scroll_y", [0, 150, 799, 800, 1750, 3999, 5000])
def test_active_section_matches_layout_for_any_scroll(scroll_y):
    tops = {sid: i * 800 for i, sid in enumerate(SECTIONS)}
    offsets = {sid: top - scroll_y for sid, top in tops.items()}
    expected = "hero"
    for sid in SECTIONS:
        if offsets[sid] <= 100:
            expected = sid
    assert active_section_for(offsets) == expected
    assert reduce(PageState(), "scrolled", offsets=offsets).active_section == expected


def test_scrolled_respects_custom_threshold():
    offsets = {"hero": -500, "philosophy": 150}
    assert reduce(PageState(), "scrolled", offsets=offsets).active_section == "hero"
    assert reduce(PageState(), "scrolled", offsets=offsets, threshold=200).active_section == "philosophy"


def test_toggle_and_close_menu():
    s = reduce(PageState(), "toggle_menu")
    assert s.is_menu_open is True
    assert reduce(s, "toggle_menu").is_menu_open is False
    for start in (True, False):
        assert reduce(PageState(is_menu_open=start), "close_menu").is_menu_open is False


@pytest.mark.parametrize("start", [True, False])
def test_nav_click_always_closes_menu(start):
    s = reduce(PageState(is_menu_open=start), "nav_click", section="recruitment")
    assert s.is_menu_open is False
    assert s.command.kind == CMD_SCROLL
    assert s.command.target == "recruitment"
    # active_section はスクロール報告でのみ変わる
    assert s.active_section == "hero"


def test_nav_click_unknown_section_only_closes_menu():
    s = reduce(PageState(is_menu_open=True), "nav_click", section="nowhere")
    assert s.is_menu_open is False
    assert s.command is None


def test_select_tab_scrolls_then_selects_then_nudges():
    s = reduce(PageState(), "select_tab", tab="ruby")
    cmd = s.command
    assert cmd.kind == CMD_SCROLL
    assert cmd.target == "stores"
    assert cmd.behavior == "auto"
    assert cmd.offset == 0
    # スクロール完了前はまだ選択されない
    assert s.selected_tab == "neos"
    assert s.pending_tab == "ruby"
    assert s.pending_offset == -HEADER_OFFSET_PX

    done = reduce(s, "command_done", seq=cmd.seq, found=True)
    assert done.selected_tab == "ruby"
    assert done.pending_tab is None
    assert done.pending_offset == 0
    # 選択のあとでヘッダー分ずらす
    nudge = done.command
    assert nudge.kind == CMD_NUDGE
    assert nudge.target == "stores"
    assert nudge.offset == -HEADER_OFFSET_PX
    assert nudge.seq == cmd.seq + 1

    settled = reduce(done, "command_done", seq=nudge.seq, found=True)
    assert settled.command is None
    assert settled.selected_tab == "ruby"


def test_select_tab_without_offset_skips_nudge():
    s = reduce(PageState(), "select_tab", tab="piace", offset=0)
    done = reduce(s, "command_done", seq=s.command.seq)
    assert done.selected_tab == "piace"
    assert done.command is None


def test_select_tab_unknown_is_noop():
    s = PageState()
    assert reduce(s, "select_tab", tab="no-such-bar") == s
    assert reduce(s, "select_tab", tab="") == s


def test_select_tab_missing_section_does_not_select():
    s = reduce(PageState(), "select_tab", tab="leone")
    done = reduce(s, "command_done", seq=s.command.seq, found=False)
    assert done.selected_tab == "neos"
    assert done.pending_tab is None
    assert done.command is None


def test_stale_command_done_is_ignored():
    s = reduce(PageState(), "select_tab", tab="piace")
    s = reduce(s, "select_tab", tab="fratto")
    stale = reduce(s, "command_done", seq=s.command.seq - 1)
    assert stale == s
    done = reduce(s, "command_done", seq=s.command.seq)
    assert done.selected_tab == "fratto"


def test_tab_changed_by_user():
    s = PageState()
    for tab in TAB_IDS:
        assert reduce(s, "tab_changed", tab=tab).selected_tab == tab
    assert reduce(s, "tab_changed", tab="bogus") == s


def test_command_sequence_increases():
    s = reduce(PageState(), "nav_click", section="message")
    first = s.command.seq
    s = reduce(s, "nav_click", section="contact")
    assert s.command.seq == first + 1
    assert s.command_payload()["target"] == "contact"


def _fields(**overrides):
    fields = dict(name="山田太郎", age=25, email="a@b.com", phone="0901234567",
                  position="bar-staff", message="")
    fields.update(overrides)
    return fields


@pytest.mark.parametrize("missing", ["name", "email", "phone", "position"])
def test_submit_with_missing_required_field_errors(missing):
    s = reduce(PageState(), "submit_form", fields=_fields(**{missing: ""}), to="ops@example.com")
    assert s.form_status == recruitment.FORM_ERROR
    assert s.form_error == recruitment.MSG_REQUIRED
    assert s.command is None
    assert s.mailto == ""
    assert not s.form_submitted


def test_submit_success_opens_mail_then_resets_form():
    s = reduce(PageState(), "submit_form", fields=_fields(age=None), to="ops@example.com")
    assert s.form_submitted
    assert s.form_error == ""
    assert s.command.kind == CMD_OPEN
    assert s.command.href == s.mailto
    assert s.mailto.startswith("mailto:ops@example.com?subject=")
    assert "求人応募: bar-staff" in unquote(s.mailto)
    # 入力はメールアプリが開くまで残す
    assert s.form_nonce == 0

    done = reduce(s, "command_done", seq=s.command.seq, found=True)
    assert done.form_submitted
    assert done.form_nonce == 1
    assert done.command is None


def test_mail_client_failure_shows_generic_error(caplog):
    s = reduce(PageState(), "submit_form", fields=_fields(), to="ops@example.com")
    with caplog.at_level("WARNING", logger="modules.page_controller"):
        failed = reduce(s, "command_done", seq=s.command.seq, found=False)
    assert "could not open the mail client" in caplog.text
    assert failed.form_status == recruitment.FORM_ERROR
    assert failed.form_error == recruitment.MSG_FAILED
    assert not failed.form_submitted
    assert failed.form_nonce == 0
    assert failed.command is None

    # 同じ入力でもう一度送れる
    again = reduce(failed, "submit_form", fields=_fields(), to="ops@example.com")
    assert again.form_submitted
    assert again.form_error == ""
    assert again.command.seq == s.command.seq + 1


def test_error_then_resubmit():
    s = reduce(PageState(), "submit_form", fields=_fields(phone=""), to="ops@example.com")
    assert s.form_status == recruitment.FORM_ERROR
    s = reduce(s, "submit_form", fields=_fields(), to="ops@example.com")
    assert s.form_submitted
    assert s.form_error == ""


def test_handoff_failure_sets_generic_error():
    s = reduce(PageState(), "submit_form", fields=_fields(), to="")
    assert s.form_status == recruitment.FORM_ERROR
    assert s.form_error == recruitment.MSG_FAILED
    assert s.command is None


def test_unknown_action_raises():
    with pytest.raises(ValueError):
        reduce(PageState(), "explode")

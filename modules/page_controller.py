# -*- coding: utf-8 -*-
"""
Page Controller：ページ全体の UI 状態を 1 つの PageState にまとめ、
イベント（スクロール、メニュー、タブ選択、フォーム送信）ごとに reduce() で作り直す。

ブラウザ側の操作（スクロール・mailto 遷移）は BrowserCommand として state に載せ、
utils/page_sync が実行して完了を返す。
"""
import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from modules import recruitment
from modules.venues import DEFAULT_TAB, VENUES_BY_TAB

logger = logging.getLogger(__name__)

SECTIONS: Tuple[str, ...] = ("hero", "philosophy", "message", "stores", "recruitment", "contact")
DEFAULT_SECTION = "hero"
STORES_SECTION = "stores"

SCROLL_THRESHOLD_PX = 100
HEADER_OFFSET_PX = 80

CMD_SCROLL = "scroll"
CMD_OPEN = "open"
CMD_NUDGE = "nudge"


@dataclass(frozen=True)
class BrowserCommand:
    seq: int
    kind: str
    target: str = ""        # section id（scroll / nudge）
    behavior: str = "auto"  # "auto" = 即時 / "smooth"
    offset: int = 0         # nudge で scrollBy する量（上方向は負）
    href: str = ""          # open 用

    def to_payload(self) -> Dict[str, Any]:
        return {
            "seq": self.seq,
            "kind": self.kind,
            "target": self.target,
            "behavior": self.behavior,
            "offset": self.offset,
            "href": self.href,
        }


@dataclass(frozen=True)
class PageState:
    active_section: str = DEFAULT_SECTION
    is_menu_open: bool = False
    selected_tab: str = DEFAULT_TAB
    pending_tab: Optional[str] = None
    pending_offset: int = 0
    form_status: str = recruitment.FORM_IDLE
    form_error: str = ""
    form_nonce: int = 0
    mailto: str = ""
    command: Optional[BrowserCommand] = None
    seq: int = 0

    @property
    def form_submitted(self) -> bool:
        return self.form_status == recruitment.FORM_SUBMITTED

    def command_payload(self) -> Optional[Dict[str, Any]]:
        return self.command.to_payload() if self.command else None


def active_section_for(offsets: Mapping[str, Optional[float]],
                       threshold: float = SCROLL_THRESHOLD_PX,
                       sections: Tuple[str, ...] = SECTIONS) -> str:
    """文書順で最後の「上端が threshold 以下」のセクション。該当なしは hero。"""
    current = DEFAULT_SECTION
    for sid in sections:
        top = offsets.get(sid)
        if top is None:
            continue
        if top <= threshold:
            current = sid
    return current


def _issue(state: PageState, kind: str, **fields) -> PageState:
    seq = state.seq + 1
    return replace(state, seq=seq, command=BrowserCommand(seq=seq, kind=kind, **fields))


# -------------------- Handlers --------------------
def _scrolled(state, offsets=None, threshold=SCROLL_THRESHOLD_PX, **_):
    return replace(state, active_section=active_section_for(offsets or {}, threshold))


def _toggle_menu(state, **_):
    return replace(state, is_menu_open=not state.is_menu_open)


def _close_menu(state, **_):
    return replace(state, is_menu_open=False)


def _nav_click(state, section="", behavior="smooth", **_):
    state = replace(state, is_menu_open=False)
    if section not in SECTIONS:
        return state
    return _issue(state, CMD_SCROLL, target=section, behavior=behavior)


def _select_tab(state, tab="", offset=HEADER_OFFSET_PX, **_):
    # 未知のタブは何もしない
    if tab not in VENUES_BY_TAB:
        return state
    state = replace(state, pending_tab=tab, pending_offset=-abs(int(offset)))
    return _issue(state, CMD_SCROLL, target=STORES_SECTION, behavior="auto")


def _tab_changed(state, tab="", **_):
    if tab not in VENUES_BY_TAB:
        return state
    return replace(state, selected_tab=tab, pending_tab=None, pending_offset=0)


def _command_done(state, seq=None, found=True, **_):
    cmd = state.command
    if cmd is None or cmd.seq != seq:
        return state
    state = replace(state, command=None)
    if cmd.kind == CMD_OPEN:
        # メールアプリへの遷移が成功してからフォームを空にする
        if not found:
            logger.warning("browser could not open the mail client (seq=%s)", cmd.seq)
            return replace(state, form_status=recruitment.FORM_ERROR,
                           form_error=recruitment.MSG_FAILED)
        return replace(state, form_nonce=state.form_nonce + 1)
    if cmd.kind == CMD_SCROLL and cmd.target == STORES_SECTION and state.pending_tab:
        tab, offset = state.pending_tab, state.pending_offset
        state = replace(state, pending_tab=None, pending_offset=0)
        # セクションが見つからなければ選択もしない
        if not found:
            return state
        # 選択後の再描画が済んでからヘッダー分ずらす
        state = replace(state, selected_tab=tab)
        if offset:
            state = _issue(state, CMD_NUDGE, target=STORES_SECTION, offset=offset)
    return state


def _submit_form(state, fields=None, to="", **_):
    result = recruitment.process(fields or {}, to)
    if result.status != recruitment.FORM_SUBMITTED:
        return replace(state, form_status=recruitment.FORM_ERROR, form_error=result.error)
    state = replace(
        state,
        form_status=recruitment.FORM_SUBMITTED,
        form_error="",
        mailto=result.mailto,
    )
    return _issue(state, CMD_OPEN, href=result.mailto)


_HANDLERS = {
    "scrolled": _scrolled,
    "toggle_menu": _toggle_menu,
    "close_menu": _close_menu,
    "nav_click": _nav_click,
    "select_tab": _select_tab,
    "tab_changed": _tab_changed,
    "command_done": _command_done,
    "submit_form": _submit_form,
}


def reduce(state: PageState, action: str, **payload) -> PageState:
    handler = _HANDLERS.get(action)
    if handler is None:
        raise ValueError(f"Unknown action: {action}")
    return handler(state, **payload)

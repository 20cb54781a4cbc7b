# -*- coding: utf-8 -*-
"""
ブラウザとの橋渡し（双方向コンポーネント）

親ドキュメントのスクロールを監視して各セクション上端のオフセットを返し、
PageState に載った BrowserCommand（スクロール / mailto 遷移）を実行して完了を返す。
戻り値は {"id", "event", ...} の dict。同じ id は一度だけ処理する。
"""
import os
from typing import Any, Dict, Iterable, Optional

import streamlit.components.v1 as components

_FRONTEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "page_sync_frontend")
_component = components.declare_component("page_sync", path=_FRONTEND_DIR)

EVENT_SCROLLED = "scrolled"
EVENT_COMMAND_DONE = "command_done"


def page_sync(sections: Iterable[str], threshold: int, command: Optional[Dict[str, Any]],
              fallback_ms: int, key: str = "page_sync") -> Optional[Dict[str, Any]]:
    return _component(
        sections=list(sections),
        threshold=int(threshold),
        command=command,
        fallback_ms=int(fallback_ms),
        key=key,
        default=None,
    )

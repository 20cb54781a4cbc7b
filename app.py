# -*- coding: utf-8 -*-
from datetime import datetime
import streamlit as st

from modules import content, recruitment
from modules.venues import VENUES, TAB_IDS, tab_label, venue_by_tab
from utils import settings
from utils.branding import load_brand, load_image, image_b64, brand_css
from app_core import (init_session_defaults, sync_browser, page_state, dispatch, section_title, paragraphs,
                      on_toggle_menu, on_close_menu, on_nav, on_select_tab, on_tab_changed)

# -------------------- App Config --------------------
st.set_page_config(
    page_title=content.SITE_TITLE,
    page_icon="🦁",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# -------------------- Branding --------------------
_BRAND = load_brand()
RETINA_FACTOR = int(_BRAND.get("RETINA_FACTOR", 2))
st.markdown(brand_css(_BRAND), unsafe_allow_html=True)

# -------------------- State --------------------
init_session_defaults()
sync_browser()
state = page_state()

TAB_WIDGET_KEY = "venue_tab"

def _field_key(field: str, nonce: int) -> str:
    return f"recruit_{field}_{nonce}"

def _photo(name: str, alt: str, width: int = 400):
    data = load_image(name, width * RETINA_FACTOR)
    if data:
        st.image(data, caption=alt, use_container_width=True)
    else:
        st.markdown(f'<div class="lg-placeholder">{alt}</div>', unsafe_allow_html=True)

# -------------------- Header / Nav --------------------
def render_header():
    links = "".join(
        f'<a href="#{sid}" target="_self" class="{"active" if state.active_section == sid else ""}">{label}</a>'
        for sid, label in content.NAV_LINKS
    )
    logo = image_b64(_BRAND["LOGO"], 100 * RETINA_FACTOR)
    logo_html = f'<img src="data:image/png;base64,{logo}" alt="LION GROUP">' if logo else ""

    c1, c2 = st.columns([12, 1])
    with c1:
        st.markdown(
            f"""
            <div class="lg-header">
              <div class="lg-brand">{logo_html}<span class="lg-wordmark">{content.WORDMARK}</span></div>
              <nav class="lg-nav">{links}</nav>
            </div>
            """,
            unsafe_allow_html=True,
        )
    with c2:
        st.button("☰", key="menu_toggle", help="Toggle menu", on_click=on_toggle_menu)

    if state.is_menu_open:
        with st.container(border=True):
            st.button("✕ 閉じる", key="menu_close", on_click=on_close_menu)
            for sid, label in content.NAV_LINKS:
                marker = "▸ " if state.active_section == sid else ""
                st.button(f"{marker}{label}", key=f"menu_{sid}", on_click=on_nav, args=(sid,),
                          use_container_width=True)

# -------------------- Sections --------------------
def render_hero():
    hero = load_image(_BRAND["HERO_IMAGE"], 1200)
    if hero:
        st.image(hero, use_container_width=True)
    st.title(content.TAGLINE, anchor="hero")
    paragraphs(content.HERO_LINES)
    c1, c2, _ = st.columns([2, 2, 6])
    with c1:
        st.button(content.HERO_CTA, key="hero_cta", type="primary", on_click=on_nav, args=("stores",))
    with c2:
        st.markdown('<a href="#philosophy" target="_self">Scroll ↓</a>', unsafe_allow_html=True)

def render_philosophy():
    section_title(content.PHILOSOPHY_TITLE, "philosophy")
    st.markdown(f"#### {content.PHILOSOPHY_LEAD}")
    paragraphs(content.PHILOSOPHY_BODY)
    # ブランド帯（アンカーなし）
    logo = image_b64(_BRAND["COMPANY_LOGO"], 300 * RETINA_FACTOR)
    logo_html = f'<img src="data:image/png;base64,{logo}" alt="リオングループロゴ" style="width:160px;margin-top:16px;">' if logo else ""
    st.markdown(
        f'<div class="lg-band"><h3>{content.WORDMARK}</h3><p>{content.ESTABLISHED}</p>{logo_html}</div>',
        unsafe_allow_html=True,
    )

def render_message():
    section_title(content.MESSAGE_TITLE, "message")
    st.markdown(f"### {content.MESSAGE_LEAD}")
    paragraphs(content.MESSAGE_BODY)
    st.markdown(f"**{content.MESSAGE_SIGNATURE}**")

def render_venue(tab_id: str):
    v = venue_by_tab(tab_id)
    if v is None:
        return
    st.subheader(v.name)
    c1, c2 = st.columns([3, 2])
    with c1:
        st.markdown(f"📍 {v.postal_code}  \n{v.address}")
        if v.capacity:
            st.markdown(f"**収容人数**  \n{v.capacity}")
        if v.features:
            st.markdown(f"**特徴**  \n{v.feature_text}")
    with c2:
        for label, url in v.links:
            st.link_button(label, url, use_container_width=True)
    cols = st.columns(4)
    for i, (name, alt) in enumerate(v.photos):
        with cols[i % 4]:
            _photo(name, alt)

def render_stores():
    section_title(content.STORES_TITLE, "stores")
    # タブは state から復元（deep link / フッターから選択できるよう radio で持つ）
    st.session_state[TAB_WIDGET_KEY] = state.selected_tab
    st.radio(
        "店舗",
        TAB_IDS,
        key=TAB_WIDGET_KEY,
        format_func=tab_label,
        horizontal=True,
        label_visibility="collapsed",
        on_change=on_tab_changed,
        args=(TAB_WIDGET_KEY,),
    )
    render_venue(state.selected_tab)

def _on_recruit_submit():
    nonce = page_state().form_nonce
    fields = {f: st.session_state.get(_field_key(f, nonce)) for f in recruitment.FIELDS}
    dispatch("submit_form", fields=fields, to=settings.RECRUIT_MAILTO)

def render_recruit_form():
    st.markdown(f"#### {content.RECRUIT_FORM_TITLE}")
    nonce = state.form_nonce
    with st.form("recruit_form", clear_on_submit=False):
        c1, c2 = st.columns(2)
        with c1:
            st.text_input("お名前 *", key=_field_key("name", nonce))
            st.text_input("メールアドレス *", key=_field_key("email", nonce))
            st.selectbox("希望職種 *", [""] + list(recruitment.POSITIONS), key=_field_key("position", nonce),
                         format_func=recruitment.position_label)
        with c2:
            st.number_input("年齢", min_value=0, max_value=120, step=1, value=None, key=_field_key("age", nonce))
            st.text_input("電話番号 *", key=_field_key("phone", nonce))
        st.text_area("メッセージ", height=120, key=_field_key("message", nonce))

        if state.form_error:
            st.error(state.form_error)

        if state.form_submitted:
            # 完了メッセージを送信ボタンの位置に出す
            st.form_submit_button(recruitment.MSG_DONE, disabled=True, use_container_width=True)
        else:
            st.form_submit_button("送信する", on_click=_on_recruit_submit, use_container_width=True)

    if state.form_submitted and state.mailto:
        st.caption("メールアプリが開かない場合は下のボタンから送信してください。")
        st.link_button("メールアプリを開く", state.mailto)

def render_recruitment():
    section_title(content.RECRUIT_TITLE, "recruitment")
    st.subheader(content.RECRUIT_HEADLINE)
    st.markdown(content.RECRUIT_LEAD)

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("#### 福利厚生")
        st.markdown("\n".join(f"- ✔️ {b}" for b in content.RECRUIT_BENEFITS))
        st.markdown("\n".join(f"**{n}**  " for n in content.RECRUIT_NOTES))
    with c2:
        _photo(_BRAND["STAFF_PHOTO"], "スタッフ集合写真", 600)

    with st.expander("メッセージ", expanded=True):
        paragraphs(content.RECRUIT_MESSAGE)

    render_recruit_form()

    st.markdown(content.RECRUIT_LINE_NOTE)
    st.link_button("公式LINE ↗", content.LINE_URL)

def render_contact():
    section_title(content.CONTACT_TITLE, "contact")
    c1, c2 = st.columns(2)
    with c1:
        st.markdown("### リオングループ")
        st.caption("運営会社")
        for k, v in content.COMPANY.items():
            st.markdown(f"<span style='color:#6b7280'>{k}</span>  \n{v}", unsafe_allow_html=True)
    with c2:
        st.markdown(f"**{content.CONTACT_CONSULT}**")
        st.link_button("📞 電話する", f"tel:{content.OPERATOR_TEL}", use_container_width=True)
        st.link_button("✉️ メールする", f"mailto:{content.OPERATOR_EMAIL}", use_container_width=True)
        st.markdown(content.CONTACT_INVITE)
        st.link_button("公式LINEで問い合わせる", content.LINE_URL, use_container_width=True)

def render_footer():
    social = "".join(
        f'<a href="{url}" target="_blank" rel="noopener noreferrer">{label}</a>'
        for label, url in content.FOOTER_SOCIAL
    )
    st.markdown(
        f"""
        <div class="lg-footer">
          <h2 style="color:#fff;margin:0;">{content.WORDMARK}</h2>
          <p style="color:#9ca3af;margin:4px 0 12px 0;">{content.TAGLINE}</p>
          <div>{social}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    cols = st.columns(4)
    for i, v in enumerate(VENUES):
        with cols[i % 4]:
            st.markdown(f"**{v.name}**")
            st.button("詳細を見る", key=f"footer_{v.tab_id}", on_click=on_select_tab, args=(v.tab_id,))
    with cols[len(VENUES) % 4]:
        st.markdown("**お問い合わせ**")
        st.button("詳細を見る", key="footer_contact", on_click=on_nav, args=("contact",))
    st.caption(f"© {datetime.now().year} {content.COPYRIGHT_HOLDER}. All rights reserved.")

# -------------------- Page --------------------
render_header()
render_hero()
render_philosophy()
render_message()
render_stores()
render_recruitment()
render_contact()
render_footer()

# -*- coding: utf-8 -*-
"""
店舗データ（7店舗・ビルド時固定）
タブ ID は店舗情報セクションのタブと、フッターの「詳細を見る」リンクで共有する。
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

INSTAGRAM = "Instagram"
TIKTOK = "TikTok"


@dataclass(frozen=True)
class Venue:
    tab_id: str
    tab_label: str
    name: str
    postal_code: str
    address: str
    capacity: str = ""
    features: Tuple[str, ...] = ()
    links: Tuple[Tuple[str, str], ...] = ()   # (label, url)
    photos: Tuple[Tuple[str, str], ...] = ()  # (file name, alt)

    @property
    def feature_text(self) -> str:
        return "、".join(self.features)


VENUES: Tuple[Venue, ...] = (
    Venue(
        tab_id="neos",
        tab_label="Neos",
        name="CONCEPT BAR Neos",
        postal_code="〒900-0032",
        address="那覇市松山2丁目1-15 松山RJビル403",
        capacity="BOX席 4 カウンター席 6 最大収容人数 40名",
        links=(
            (INSTAGRAM, "https://www.instagram.com/neos_okinawa?igsh=dWd6cWk3eXR2eHN4"),
            (TIKTOK, "https://www.tiktok.com/@neos_okinawa?_t=ZS-8v56OYFjMtL&_r=1"),
        ),
        photos=(
            ("neos-1.png", "NEOS ロゴ"),
            ("neos-2.png", "NEOS スタッフ"),
            ("neos-3.png", "NEOS 店内"),
            ("neos-4.png", "NEOS カウンター"),
        ),
    ),
    Venue(
        tab_id="ruby",
        tab_label="Ruby",
        name="Girl's Bar -Ruby-",
        postal_code="〒900-0006",
        address="沖縄県那覇市おもろまち4丁目17-14 クイーンヒルズ3-A",
        capacity="BOX席 3 カウンター席 5 最大収容人数 25名",
        features=("カラオケあり",),
        links=(
            (INSTAGRAM, "https://www.instagram.com/ruby.girlsbar?igsh=MXJqczZsZDdjeXNwcA=="),
            (TIKTOK, "https://www.tiktok.com/@ruby_okinawa?_t=ZS-8v56KhNkTzk&_r=1"),
        ),
        photos=(
            ("ruby-1.png", "Ruby ロゴ"),
            ("ruby-2.png", "Ruby スタッフ"),
            ("ruby-3.png", "Ruby 店内"),
            ("ruby-4.png", "Ruby カウンター"),
        ),
    ),
    Venue(
        tab_id="piace",
        tab_label="PIACE",
        name="BAR PIACE",
        postal_code="〒900-0032",
        address="沖縄県那覇市松山1丁目28-11 1階",
        capacity="BOX席 4つ カウンター席 7つ 最大収容人数 50名",
        features=("カラオケ", "ダーツあり"),
        links=(
            (INSTAGRAM, "https://www.instagram.com/piace_okinawa?igsh=NHNxZ3M3cHh6amF1"),
        ),
        photos=(
            ("piace-1.png", "PIACE ロゴ"),
            ("piace-2.png", "PIACE スタッフ"),
            ("piace-3.jpg", "PIACE 外観"),
            ("piace-4.jpg", "PIACE 店内"),
        ),
    ),
    Venue(
        tab_id="best",
        tab_label="BH",
        name="BEST HOUSE",
        postal_code="〒900-0032",
        address="沖縄県那覇市松山2丁目16-1 キングスアレイ松山2階A号室",
        capacity="BOX席 3つ カウンター 4つ",
        features=("カラオケ", "ダーツあり"),
        photos=(
            ("best-1.png", "BEST HOUSE ロゴ"),
            ("best-2.png", "BEST HOUSE 内装"),
            ("best-3.png", "BEST HOUSE カウンター"),
            ("best-4.png", "BEST HOUSE 店内"),
        ),
    ),
    Venue(
        tab_id="leone",
        tab_label="Leone",
        name="SERENITY BAR Leone (レオーネ)",
        postal_code="〒900-0032",
        address="沖縄県那覇市松山1丁目28-11 2階",
        capacity="BOX 2つ カウンター 4つ 最大収容人数 20名",
        features=("カラオケ", "ダーツあり"),
        photos=(
            ("leone-1.png", "Leone ロゴ"),
            ("leone-2.jpg", "Leone カウンター"),
            ("leone-3.jpg", "Leone 店内"),
            ("leone-4.jpg", "Leone バックバー"),
        ),
    ),
    Venue(
        tab_id="shisha",
        tab_label="白煙",
        name="ShiSha&Bar白煙",
        postal_code="〒901-1303",
        address="沖縄県与那原町字与那原3178-4 ハーモニービル503",
        capacity="BOX席 4つ カウンター席 4つ 最大収容人数 30名",
        features=("与那原初のシーシャBAR",),
        links=(
            (INSTAGRAM, "https://www.instagram.com/shisha_hakuen.okinawa?igsh=MWtpemxrdWp0cTZscg=="),
        ),
        photos=(
            ("shisha-1.png", "白煙 ロゴ"),
            ("shisha-2.png", "白煙 案内"),
            ("shisha-3.png", "白煙 壁画"),
            ("shisha-4.png", "白煙 内装"),
        ),
    ),
    Venue(
        tab_id="fratto",
        tab_label="ふらっと",
        name="夜カフェ ふらっと",
        postal_code="〒526-0033",
        address="滋賀県長浜市平方町588-2",
        links=(
            (INSTAGRAM, "https://www.instagram.com/fratto_acai_nagahama?igsh=MWd1MnVnMDg5cTV1aA=="),
        ),
        photos=(
            ("fratto-1.png", "ふらっと ロゴ"),
            ("fratto-2.png", "ふらっと 外観"),
        ),
    ),
)

VENUES_BY_TAB: Dict[str, Venue] = {v.tab_id: v for v in VENUES}
TAB_IDS: Tuple[str, ...] = tuple(v.tab_id for v in VENUES)
DEFAULT_TAB = "neos"


def venue_by_tab(tab_id: Optional[str]) -> Optional[Venue]:
    if not tab_id:
        return None
    return VENUES_BY_TAB.get(tab_id)


def tab_label(tab_id: str) -> str:
    v = VENUES_BY_TAB.get(tab_id)
    return v.tab_label if v else tab_id

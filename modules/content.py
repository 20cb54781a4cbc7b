# -*- coding: utf-8 -*-
# 静的コンテンツ（文言・会社情報・ナビゲーション）
from typing import Dict, List, Tuple

SITE_TITLE = "LION GROUP | 那覇市松山を中心に7店舗を運営"
WORDMARK = "Lion Group"
TAGLINE = "最大限の楽しさを非日常空間で"

# (section id, label)：ヘッダーのナビ順
NAV_LINKS: List[Tuple[str, str]] = [
    ("philosophy", "会社理念"),
    ("message", "代表挨拶"),
    ("stores", "店舗情報"),
    ("recruitment", "求人情報"),
    ("contact", "お問い合わせ"),
]

# -------------------- Hero --------------------
HERO_LINES = [
    "那覇市松山を中心に、シーシャBAR、CONCEPT BAR、サパー、  \n"
    "会員制BAR、ガールズバー、夜カフェなど7店舗を運営。",
    "平均年齢22歳の若手グループが、  \n最大限の楽しさを感じる非日常空間を作り上げています。",
    "日頃の疲れを吹き飛ばす居心地の良い空間で、  \n全てのお客様に快適なひとときを。",
]
HERO_CTA = "店舗を見る"

# -------------------- Philosophy --------------------
PHILOSOPHY_TITLE = "会社理念"
PHILOSOPHY_LEAD = (
    "「デジタル化が進む現代だからこそ、  \n"
    "人と人とのつながりを大切にした社交場を提供する」"
)
PHILOSOPHY_BODY = [
    "テクノロジーの進化で身の回りがデジタル化されており、人との関係が希薄になっている時代。"
    "だからこそ、僕らは人と人のつながりを大切にしております。",
    "人と人がつながる社交場を作っていく。お客様の笑顔、スタッフの笑顔、だけじゃなく、全ての人を笑顔に。そして快適に。"
    "そして非日常現実を。そんな社交場空間を作り上げていく。",
]
ESTABLISHED = "ESTABLISHED 2025"

# -------------------- Message --------------------
MESSAGE_TITLE = "代表挨拶"
MESSAGE_LEAD = "「人材は人財である」"
MESSAGE_BODY = [
    "人材不足の時代の中、リオングループには約60名のスタッフがいます。"
    "リオングループはZ世代と言われる若手メンバーです。",
    "学生時代にコロナでの学校封鎖やオンライン授業、体育祭や学園祭、卒業式の中止などを経験したメンバーが多く、"
    "学生時代は、人とのつながりがあまり多くなかった。",
    "また、僕らは、インターネットが普及し、SNSがあたりまえに生き、画面越しで人と関わる時代を生きてきております。",
    "だからこそ、アナログの人と人がつながる社交場に価値があると思います。",
    "スタッフ1人1人が、今の若者とは思えない程、やる気に満ち溢れており、人との繋がりを楽しく思ってます。",
    "僕はこれからも、スタッフだけではなく周りの若者達に、普通じゃ見れない景色を見せていきたいとおもってます。",
    "若者の知らない「楽しい」を僕が伝えていきます。",
]
MESSAGE_SIGNATURE = "CEO Rikiya Nakandakari"

# -------------------- Stores --------------------
STORES_TITLE = "店舗情報"

# -------------------- Recruitment --------------------
RECRUIT_TITLE = "求人情報"
RECRUIT_HEADLINE = "BARスタッフ/ガールズバーキャスト募集中"
RECRUIT_LEAD = "あなたも私たちのチームに加わりませんか？"
RECRUIT_BENEFITS = ["ホワイトニング", "脱毛"]
RECRUIT_NOTES = ["若手中心の活気ある職場", "未経験者歓迎"]
RECRUIT_MESSAGE = [
    "大人になっても、夢をわすれ、努力をわすれ、言い訳を探し、頑張ることをわすれる。",
    "大人になって、そんなに頑張らなくたってそこそこ満足して生きていく事はできる。",
    "でも、頑張らないと得られないもの。頑張ったからこそ得られる、沢山の感情がある。",
    "頑張ったからこそ　悔しくて頑張ったからこそ　嬉しくて頑張ったからこそ　涙が溢れる。",
    "そんな瞬間が何度もあった。夜職は世間的にも評価が低い。でも、とてもやりがいのある志事。",
    "年齢は関係ない。学生だろうが、大人だろうが、関係ない。いつだって、何歳だって、本気になった時が青春だ。",
    "大人が本気で青春をし、夢を追いかける。",
    "そんな僕らと働いてくれる仲間を募集いたします。",
]
RECRUIT_FORM_TITLE = "応募フォーム"
RECRUIT_LINE_NOTE = "または公式LINEからお問い合わせください"

# -------------------- Contact --------------------
CONTACT_TITLE = "会社情報"
LINE_URL = "https://lin.ee/DZ1gYMFL"
OPERATOR_EMAIL = "lgokinawa25@gmail.com"
OPERATOR_TEL = "08064831633"

COMPANY: Dict[str, str] = {
    "会社名": "株式会社LG沖縄",
    "所在地": "〒900-0024 那覇市古波蔵3丁目17番4号 栄アパート303号",
    "電話番号": "080-6483-1633",
    "メール": OPERATOR_EMAIL,
    "設立": "2025年2月",
    "業務内容": "飲食店経営運営、飲食店経営運営コンサル",
}
CONTACT_CONSULT = "店舗経営運営でお悩みの方相談もぜひ。"
CONTACT_INVITE = "お気軽にお問い合わせください"

# -------------------- Footer --------------------
FOOTER_SOCIAL = [
    ("Instagram", "https://www.instagram.com/"),
    ("TikTok", "https://www.tiktok.com/"),
    ("LINE", LINE_URL),
]
COPYRIGHT_HOLDER = "株式会社LG沖縄"

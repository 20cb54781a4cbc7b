# -*- coding: utf-8 -*-
"""
求人応募フォーム：必須チェックと mailto: ハンドオフ

サーバーには送信しない。件名と本文を組み立てて mailto: URI にし、
閲覧者のメールクライアントに下書きとして渡すだけ（配信は保証されない）。
"""
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple
from urllib.parse import quote

logger = logging.getLogger(__name__)

FORM_IDLE = "idle"
FORM_ERROR = "error"
FORM_SUBMITTED = "submitted"

FIELDS: Tuple[str, ...] = ("name", "age", "email", "phone", "position", "message")
REQUIRED_FIELDS: Tuple[str, ...] = ("name", "email", "phone", "position")

# 希望職種（value -> 表示名）。空文字は「未選択」
POSITIONS = {
    "bar-staff": "BARスタッフ",
    "girls-bar-cast": "ガールズバーキャスト",
    "other": "その他",
}
POSITION_PLACEHOLDER = "選択してください"

MSG_REQUIRED = "必須項目を入力してください"
MSG_FAILED = "送信中にエラーが発生しました。後でもう一度お試しください。"
MSG_DONE = "送信が完了しました。お問い合わせありがとうございます。"

SUBJECT_PREFIX = "求人応募: "

# encodeURIComponent と同じく、英数字と -_.!~*'() 以外はすべてエスケープ
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class RecruitmentSubmission:
    name: str
    age: str
    email: str
    phone: str
    position: str
    message: str

    @classmethod
    def from_form(cls, fields: Mapping[str, Any]) -> "RecruitmentSubmission":
        """フォーム値（None / 数値を含みうる）から組み立てる。message は改行を保つため strip しない。"""
        message = fields.get("message")
        return cls(
            name=_clean(fields.get("name")),
            age=_clean(fields.get("age")),
            email=_clean(fields.get("email")),
            phone=_clean(fields.get("phone")),
            position=_clean(fields.get("position")),
            message="" if message is None else str(message),
        )

    def missing(self) -> Tuple[str, ...]:
        return tuple(f for f in REQUIRED_FIELDS if not getattr(self, f))

    def subject(self) -> str:
        return f"{SUBJECT_PREFIX}{self.position}"

    def body(self) -> str:
        return (
            f"名前: {self.name}\n"
            f"年齢: {self.age}\n"
            f"メール: {self.email}\n"
            f"電話番号: {self.phone}\n"
            f"希望職種: {self.position}\n"
            f"メッセージ:\n{self.message}"
        )


def build_mailto(submission: RecruitmentSubmission, to: str) -> str:
    to = (to or "").strip()
    if not to:
        raise ValueError("mail handoff recipient is not configured")
    subject = encode_component(submission.subject())
    body = encode_component(submission.body())
    return f"mailto:{to}?subject={subject}&body={body}"


@dataclass(frozen=True)
class FormResult:
    status: str
    error: str = ""
    mailto: str = ""
    missing: Tuple[str, ...] = ()


def process(fields: Mapping[str, Any], to: str) -> FormResult:
    """validating -> error | submitted"""
    submission = RecruitmentSubmission.from_form(fields)
    missing = submission.missing()
    if missing:
        return FormResult(FORM_ERROR, error=MSG_REQUIRED, missing=missing)
    try:
        href = build_mailto(submission, to)
    except Exception:
        logger.warning("recruitment mail handoff failed (position=%s)", submission.position, exc_info=True)
        return FormResult(FORM_ERROR, error=MSG_FAILED)
    return FormResult(FORM_SUBMITTED, mailto=href)


def position_label(value: Optional[str]) -> str:
    if not value:
        return POSITION_PLACEHOLDER
    return POSITIONS.get(value, value)

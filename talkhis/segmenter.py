# talkhis/segmenter.py — تقسيم النص المنظّف إلى جُمل مرقّمة
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

EN = "en"
AR = "ar"

# لاتيني: نقسم بعد . ! ? متبوعة بمسافة ونبقي علامة الترقيم مع الجملة
_LATIN_SPLIT_RE = re.compile(r"(?<=[.!?])\s+")

# عربي: . ! ? ؟ ؛ : والنقطة العربية ۔ ، و 。 تعامل كنقطة عادية.
# قد تتبع العلامة أقواس/علامات تنصيص إغلاق قبل المسافة.
_ARABIC_END = r"[.!?\u061F\u061B:\u06D4\u3002]+[\u00BB\u201D\u2019\"')\]]*"
_ARABIC_SPLIT_RE = re.compile(r"(" + _ARABIC_END + r")\s+")


@dataclass(frozen=True)
class Sentence:
    text: str
    index: int


def resolve_language(tag: Optional[str]) -> str:
    """أي وسم غير العربية يعامل كإنجليزية (لا توجد سياسة "غير معروف")"""
    tag = (tag or "").strip().lower()
    return AR if tag in (AR, "ara", "arabic") else EN


def _split_arabic(text: str) -> List[str]:
    parts = _ARABIC_SPLIT_RE.split(text)
    # split مع مجموعة التقاط: [جزء، علامة، جزء، علامة، ...]
    frags = []
    for i in range(0, len(parts), 2):
        end = parts[i + 1] if i + 1 < len(parts) else ""
        frags.append(parts[i] + end)
    return frags


def segment(text: str, language: str = EN) -> List[Sentence]:
    """
    يقسم النص إلى جمل حسب قواعد اللغة.
    - يحذف الأجزاء الفارغة ويقص المسافات.
    - الفهرس = الترتيب في الناتج (0..N-1 متصلة).
    - بدون أي علامة نهاية: النص كله جملة واحدة.
    """
    if not text or not text.strip():
        return []
    if resolve_language(language) == AR:
        frags = _split_arabic(text)
    else:
        frags = _LATIN_SPLIT_RE.split(text)
    kept = [f.strip() for f in frags if f and f.strip()]
    return [Sentence(text=s, index=i) for i, s in enumerate(kept)]

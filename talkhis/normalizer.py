# talkhis/normalizer.py — توحيد الكلمات وتقطيع الجملة إلى كلمات للتقييم
from __future__ import annotations

import re
from typing import Iterable, List

from sumy.utils import get_stop_words

from .segmenter import AR, resolve_language
from .utils import strip_diacritics, strip_punctuation

_WORD_RE = re.compile(r"\w+")

ENGLISH_STOP_WORDS = frozenset(get_stop_words("english"))

_ARABIC_STOP_WORDS_RAW = [
    "من", "إلى", "عن", "على", "في", "هو", "هي", "هم", "انت", "انتم", "انتن", "انا", "نحن",
    "هذا", "هذه", "ذلك", "تلك", "هؤلاء", "هناك", "الذي", "التي", "الذين", "اللواتي", "ما",
    "ماذا", "كيف", "متى", "لماذا", "أين", "و", "أو", "ثم", "لكن", "بل", "إذا",
    "حتى", "كان", "كانت", "كانوا", "يكون", "تكون", "يكونوا", "كن", "كنت", "كنتم", "قد", "لا",
    "لم", "لن", "مع", "عند", "عندما", "فوق", "تحت", "بين", "بعد", "قبل", "كل", "بعض",
    "غير", "أن", "إن", "كما", "أي", "ولا", "وهو", "وهي", "به", "بها", "له", "لها", "فيه", "فيها",
]


def normalize_token(token: str, language: str) -> str:
    """
    توحيد كلمة واحدة:
    - إنجليزي: أحرف صغيرة
    - عربي: حذف الترقيم من الأطراف + NFD وحذف التشكيل
    تطبيقها مرتين = تطبيقها مرة واحدة.
    """
    if not token:
        return ""
    if resolve_language(language) == AR:
        return strip_diacritics(strip_punctuation(token))
    return token.lower()


ARABIC_STOP_WORDS = frozenset(normalize_token(w, AR) for w in _ARABIC_STOP_WORDS_RAW)


def is_stop_word(token: str, language: str) -> bool:
    if resolve_language(language) == AR:
        return token in ARABIC_STOP_WORDS
    return token in ENGLISH_STOP_WORDS


def filter_tokens(tokens: Iterable[str], language: str) -> List[str]:
    """توحيد قائمة كلمات جاهزة (مثلاً من مكتبة خارجية) ثم تصفيتها"""
    out = []
    for tok in tokens:
        norm = normalize_token(tok, language)
        # الكلمات ذات الحرف الواحد لا تحمل معنى وتضخم العدّ
        if len(norm) <= 1 or is_stop_word(norm, language):
            continue
        out.append(norm)
    return out


def tokenize(sentence: str, language: str) -> List[str]:
    if resolve_language(language) == AR:
        return sentence.split()
    return _WORD_RE.findall(sentence)


def normalize(sentence: str, language: str) -> List[str]:
    """يقطع الجملة ويعيد الكلمات الموحّدة المفيدة للتقييم (بدون تجذيع)"""
    if not sentence:
        return []
    return filter_tokens(tokenize(sentence, language), language)

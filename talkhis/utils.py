# talkhis/utils.py — أدوات مساعدة مشتركة لمحرك التلخيص

import re
import unicodedata

# ==== الحروف العربية ====
_ARABIC_CHARS_RE = re.compile(r"[\u0600-\u06FF]")

# ==== التشكيل: الفتحة .. السكون + الألف الخنجرية ====
_ARABIC_DIACRITICS_RE = re.compile(r"[\u064B-\u065F\u0670]")
_TATWEEL_RE = re.compile(r"\u0640")  # ـ

# ==== ضبط القيم بين حدين ====
def clamp(x, lo, hi): return max(lo, min(hi, x))

def parse_bool(v) -> bool:
    if isinstance(v, bool): return v
    if v is None: return False
    return str(v).strip().lower() in {"1","true","yes","y","on","t"}

# ==== التحقق من أن النص عربي ====
def is_arabic(text: str) -> bool:
    """يتحقق إن كان النص يحتوي على أحرف عربية"""
    if not text:
        return False
    return bool(_ARABIC_CHARS_RE.search(text))

def normalize_spaces(s: str) -> str:
    """ضغط المسافات"""
    if not s:
        return ""
    return re.sub(r"\s+", " ", s).strip()

def strip_diacritics(s: str) -> str:
    """
    تفكيك NFD ثم حذف علامات التشكيل العربية.
    يوحّد الكلمة المشكولة وغير المشكولة (كَتَبَ == كتب).
    لا نعيد التركيب NFC حتى تبقى الدالة متساوية القوى.
    """
    if not s:
        return ""
    return _ARABIC_DIACRITICS_RE.sub("", unicodedata.normalize("NFD", s))

def strip_harakat(s: str) -> str:
    """حذف الحركات فقط دون تفكيك الهمزات (للمطابقة على النص الظاهر)"""
    if not s:
        return ""
    return _ARABIC_DIACRITICS_RE.sub("", s)

def strip_tatweel(s: str) -> str:
    if not s:
        return ""
    return _TATWEEL_RE.sub("", s)

def strip_punctuation(token: str) -> str:
    """يحذف علامات الترقيم من طرفي الكلمة فقط"""
    start, end = 0, len(token)
    while start < end and unicodedata.category(token[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(token[end - 1]).startswith("P"):
        end -= 1
    return token[start:end]

def keep_text_chars(s: str) -> str:
    """يبقي الحروف والعلامات والأرقام والترقيم والمسافات فقط (يحذف الرموز والإيموجي)"""
    if not s:
        return ""
    return "".join(
        ch for ch in s
        if ch.isspace() or unicodedata.category(ch)[0] in ("L", "M", "N", "P")
    )

# -*- coding: utf-8 -*-
# أدوات تنظيف النص: حذف HTML، استخراج العنوان والصورة، وتقسيم الجمل

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup

from .segmenter import AR, EN, segment
from .utils import is_arabic, keep_text_chars, normalize_spaces, strip_tatweel

log = logging.getLogger(__name__)

_HTML_RE = re.compile(r"</?[a-z][\s\S]*>", re.I)
_BLOCK_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6", "p", "li"]
_TERMINALS = ".!?؟"


def looks_like_html(text: str) -> bool:
    return bool(text) and bool(_HTML_RE.search(text))


def _html_to_text(html_text: str) -> str:
    """
    يحذف وسوم HTML مع الحفاظ على حدود العناوين والفقرات كنهاية جملة
    (نضيف نقطة إن لم تنته الكتلة بعلامة ترقيم).
    """
    soup = BeautifulSoup(html_text, "html.parser")
    for tag in soup(["head", "title", "script", "style", "noscript"]):
        tag.decompose()
    for tag in soup.find_all(["br", "hr"]):
        tag.replace_with(" ")
    for block in soup.find_all(_BLOCK_TAGS):
        strings = [s for s in block.find_all(string=True) if s.strip()]
        if not strings:
            continue
        last = strings[-1]
        if last.rstrip()[-1] not in _TERMINALS:
            last.replace_with(last.rstrip() + ".")
    return soup.get_text(" ")


def clean_text(content: str) -> str:
    """
    تنظيف النص (HTML أو نص عادي):
    - حذف الوسوم و script/style وفك الكيانات (&amp; ...)
    - إبقاء الحروف والأرقام والترقيم فقط
    - ضغط المسافات وحذف التطويل من النص العربي
    """
    if not content:
        return ""
    text = _html_to_text(content) if looks_like_html(content) else content
    text = normalize_spaces(keep_text_chars(text))
    if is_arabic(text):
        text = strip_tatweel(text)
    return text


def _soup(html_text: str) -> Optional[BeautifulSoup]:
    if not looks_like_html(html_text):
        return None
    return BeautifulSoup(html_text, "html.parser")


def extract_title_from_html(html_text: str) -> Optional[str]:
    """أول <h1> وإلا <title>"""
    try:
        soup = _soup(html_text)
        if soup is None:
            return None
        node = soup.find("h1") or soup.find("title")
        if node is None:
            return None
        title = normalize_spaces(node.get_text(" "))
        return title or None
    except Exception as e:
        log.warning(f"extract_title_from_html error: {e}")
        return None


def extract_image_from_html(html_text: str) -> Optional[str]:
    """رابط أول صورة <img src=...>"""
    try:
        soup = _soup(html_text)
        if soup is None:
            return None
        img = soup.find("img", src=True)
        return img["src"] if img else None
    except Exception as e:
        log.warning(f"extract_image_from_html error: {e}")
        return None


def extract_sentences(text: str) -> List[str]:
    language = AR if is_arabic(text) else EN
    return [s.text for s in segment(text, language)]

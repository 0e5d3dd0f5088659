# talkhis/config.py — إعدادات الخدمة من متغيرات البيئة
from __future__ import annotations

import os
from dataclasses import dataclass

from .utils import parse_bool


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    max_sentences: int = 10          # سقف قابل للضبط بدل الرقم 5 الثابت
    sentence_count: int = 5
    min_length: int = 100
    max_length: int = 2000
    enhancements: bool = True        # محاولة تحميل مكتبات العربية الاختيارية
    ai_timeout: int = 30
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
        max_sentences=max(1, _int_env("TALKHIS_MAX_SENTENCES", 10)),
        sentence_count=max(1, _int_env("TALKHIS_SENTENCE_COUNT", 5)),
        min_length=_int_env("TALKHIS_MIN_LENGTH", 100),
        max_length=_int_env("TALKHIS_MAX_LENGTH", 2000),
        enhancements=parse_bool(os.getenv("TALKHIS_ENHANCEMENTS", "1")),
        ai_timeout=_int_env("TALKHIS_AI_TIMEOUT", 30),
        log_level=os.getenv("TALKHIS_LOG_LEVEL", "INFO").upper(),
    )


settings = load_settings()

"""
وحدة التلخيص بالذكاء الاصطناعي
تلخيص بديل عبر Gemini API؛ المستدعي يرجع إلى المحرك الاستخراجي عند أي فشل
"""

import logging
from dataclasses import dataclass
from typing import Optional

try:
    import google.generativeai as genai
    GENAI_AVAILABLE = True
except ImportError:
    GENAI_AVAILABLE = False
    genai = None

from .errors import AISummaryError
from .utils import is_arabic

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"

SAFETY_SETTINGS = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = DEFAULT_MODEL
    temperature: float = 0.2
    max_output_tokens: int = 800
    timeout: Optional[float] = 30


def is_gemini_config_valid(config: Optional[GeminiConfig]) -> bool:
    if not config:
        return False
    return bool(config.api_key and config.api_key.strip())


def build_prompt(text: str, sentence_count: int) -> str:
    lang = "Arabic" if is_arabic(text) else "English"
    return f"""
Context:
You are a professional linguist in the {lang} language. Your task is to create a brief summary of articles and posts in a paragraph containing no more than {sentence_count} complete sentences.

Instructions:
Analyze the text carefully. Do not use bullet points or numbered lists. Provide a unique, complete summary as your answer, and ensure it is written in the {lang} language.

Input:
The text to summarize is:
{text}"""


def summarize_with_gemini(text: str, sentence_count: int, config: GeminiConfig) -> str:
    """يعيد الملخص أو يرمي AISummaryError"""
    if not is_gemini_config_valid(config):
        raise AISummaryError("Gemini API key is required. Get one from Google AI Studio (https://ai.google.dev/)")
    if not GENAI_AVAILABLE:
        raise AISummaryError("google-generativeai is not installed")

    try:
        genai.configure(api_key=config.api_key)
        model = genai.GenerativeModel(
            config.model or DEFAULT_MODEL,
            safety_settings=SAFETY_SETTINGS,
            generation_config={
                "temperature": config.temperature,
                "max_output_tokens": config.max_output_tokens,
            },
        )
        request_options = {"timeout": config.timeout} if config.timeout else None
        response = model.generate_content(build_prompt(text, sentence_count), request_options=request_options)
        summary = (response.text or "").strip()
    except Exception as e:
        log.warning(f"Gemini summarization error: {e}")
        raise AISummaryError(f"Failed to summarize using Gemini AI: {e}") from e

    if not summary:
        raise AISummaryError("Gemini returned an empty summary")
    return summary

# talkhis/app.py — واجهة HTTP لخدمة التلخيص (FastAPI)
import json
import logging
import time
import traceback
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse

from .analyzer import get_default_engine, summarize, summarize_arabic
from .config import settings
from .errors import ResponseStructureError
from .utils import parse_bool

# ---------- الإعدادات ----------
logging.basicConfig(level=settings.log_level, format="%(asctime)s | %(levelname)s | %(message)s")
log = logging.getLogger("talkhis")

# ---------- إنشاء التطبيق ----------
app = FastAPI(title="Talkhis — Arabic/English Summarizer", version="1.2")

# أخطاء إعداد من جهة المستدعي => 400، وأي فشل آخر => 500
_CLIENT_ERRORS = {"missing_gemini_api_key"}


# ------------------------- أدوات مساعدة -------------------------
async def _read_body(request: Request) -> dict:
    try:
        body = await request.json()
    except Exception:
        body = {}
    return body if isinstance(body, dict) else {}


async def _collect_fields(request: Request, **form_fields) -> dict:
    """حقول النموذج (form) تتقدم على جسم JSON"""
    sent = {k: v for k, v in form_fields.items() if v is not None}
    body = {} if sent else await _read_body(request)
    body.update(sent)
    return body


def _int_or_none(v) -> Optional[int]:
    if v is None or v == "": return None
    try:
        return int(v)
    except (TypeError, ValueError):
        return None


def _structure(v):
    # من النموذج تصل نصًا: JSON أو أسماء حقول مفصولة بفواصل
    if not isinstance(v, str):
        return v
    v = v.strip()
    if not v:
        return None
    try:
        return json.loads(v)
    except ValueError:
        return [f.strip() for f in v.split(",") if f.strip()]


def _status_for(result: dict) -> int:
    if result.get("ok", True):
        return 200
    return 400 if result.get("error") in _CLIENT_ERRORS else 500


# ------------------------- صفحات أساسية -------------------------
@app.get("/healthz")
def healthz():
    return {"status": "ok", "enhanced": get_default_engine().enhanced}


# ------------------------- التلخيص والتحليل -------------------------
@app.post("/summarize")
async def summarize_api(request: Request,
                        content: Optional[str] = Form(None),
                        title: Optional[str] = Form(None),
                        sentence_count: Optional[str] = Form(None),
                        include_image: Optional[str] = Form(None),
                        response_structure: Optional[str] = Form(None),
                        use_ai: Optional[str] = Form(None)):
    t0 = time.time()
    try:
        body = await _collect_fields(
            request, content=content, title=title, sentence_count=sentence_count,
            include_image=include_image, response_structure=response_structure, use_ai=use_ai,
        )
        content = (body.get("content") or "").strip()
        if not content:
            return JSONResponse({"ok": False, "error": "content_is_empty"}, 400)

        result = summarize(
            content,
            title=body.get("title"),
            sentence_count=_int_or_none(body.get("sentence_count")),
            include_image=parse_bool(body.get("include_image", True)),
            response_structure=_structure(body.get("response_structure")),
            use_ai=parse_bool(body.get("use_ai")),
        )
        result["latency_ms"] = int((time.time() - t0) * 1000)
        return JSONResponse(result, status_code=_status_for(result))
    except ResponseStructureError as e:
        return JSONResponse({"ok": False, "error": "invalid_response_structure", "message": str(e)}, 400)
    except Exception as e:
        traceback.print_exc()
        return JSONResponse({"ok": False, "error": f"summarize_failed:{type(e).__name__}"}, 500)


@app.post("/summarize/arabic")
async def summarize_arabic_api(request: Request,
                               text: Optional[str] = Form(None),
                               sentence_count: Optional[str] = Form(None)):
    try:
        body = await _collect_fields(request, text=text, sentence_count=sentence_count)
        text = (body.get("text") or "").strip()
        if not text:
            return JSONResponse({"ok": False, "error": "text_is_empty"}, 400)
        count = _int_or_none(body.get("sentence_count")) or settings.sentence_count
        return {"ok": True, "summary": summarize_arabic(text, count)}
    except Exception as e:
        traceback.print_exc()
        return JSONResponse({"ok": False, "error": f"summarize_failed:{type(e).__name__}"}, 500)

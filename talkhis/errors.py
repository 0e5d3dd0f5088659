# -*- coding: utf-8 -*-
# أنواع الأخطاء التي قد تصل إلى المستدعي


class TalkhisError(Exception):
    """الأصل المشترك لأخطاء الحزمة"""


class ConfigurationError(TalkhisError):
    """إعداد متعارض أو ناقص (مثلاً: مفتاح Gemini غير موجود)"""


class ResponseStructureError(ConfigurationError, ValueError):
    """تم تحديد include و exclude معًا في response_structure"""


class AISummaryError(TalkhisError):
    """فشل التلخيص عبر خدمة Gemini"""

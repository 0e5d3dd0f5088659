# talkhis/projection.py — تصفية حقول النتيجة (include / exclude)
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Union

from .errors import ResponseStructureError

Structure = Union[None, Iterable[str], Dict[str, Iterable[str]]]


def validate_structure(structure: Structure) -> None:
    """include و exclude معًا = خطأ إعداد"""
    if isinstance(structure, dict) and "include" in structure and "exclude" in structure:
        raise ResponseStructureError("response_structure accepts either 'include' or 'exclude', not both")


def _include(result: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    wanted = set(fields) | {"ok"}
    return {k: v for k, v in result.items() if k in wanted}


def _exclude(result: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    dropped = set(fields)
    return {k: v for k, v in result.items() if k not in dropped}


def filter_response(result: Dict[str, Any], structure: Optional[Structure] = None) -> Dict[str, Any]:
    """
    - None أو dict بدون include/exclude: نسخة كما هي
    - قائمة: include (مع إبقاء ok دائمًا)
    - {"include": [...]} أو {"exclude": [...]}
    """
    validate_structure(structure)
    if not structure:
        return dict(result)
    if isinstance(structure, dict):
        if "include" in structure:
            return _include(result, structure["include"] or ())
        if "exclude" in structure:
            return _exclude(result, structure["exclude"] or ())
        return dict(result)
    if isinstance(structure, str):
        return _include(result, [structure])
    return _include(result, structure)

# ============================================================================
# src/music_enrichment/enrichers/parsing.py
# ============================================================================
"""
Structured extraction from model output

Models are asked for pure JSON but regularly wrap it in a ```json fence or
add prose before/after it. Extraction is therefore:

    1. strip an exact ```json fence wrapper
    2. slice from the first '{' to the last '}'
    3. parse the slice as a JSON object
    4. normalize the list-valued fields

extract_metadata() is a pure function of its input.
"""

import json
from typing import Any, Dict, List, Optional

from json_repair import repair_json

from .base import EnrichmentResult
from ..utils.exceptions import ExtractionError


FENCE_OPEN = "```json\n"
FENCE_CLOSE = "\n```"

LIST_FIELDS = {
    "mood": ("mood",),
    "keywords": ("keywords",),
    "semantic_tags": ("semantic_tags", "semanticTags"),
}

TEXT_FIELDS = {
    "description": ("description",),
    "similar_works_description": ("similar_works_description", "similarWorksDescription"),
}


def strip_code_fence(text: str) -> str:
    """Remove a leading ```json and/or trailing ``` marker, then trim."""
    if text.startswith(FENCE_OPEN):
        text = text[len(FENCE_OPEN):]
    if text.endswith(FENCE_CLOSE):
        text = text[:-len(FENCE_CLOSE)]
    return text.strip()


def find_json_span(text: str) -> str:
    """
    Return text from the first '{' to the last '}' inclusive.

    Raises:
        ExtractionError: no braces, or first '{' not before last '}'
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or start >= end:
        raise ExtractionError("no JSON boundaries")
    return text[start:end + 1]


def parse_json_object(span: str, repair: bool = False) -> Dict[str, Any]:
    """
    Parse a JSON object, optionally retrying with json_repair.

    Raises:
        ExtractionError: not valid JSON, or not an object
    """
    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        if not repair:
            raise ExtractionError("invalid JSON") from e
        parsed = repair_json(span, return_objects=True)

    if not isinstance(parsed, dict):
        raise ExtractionError("invalid JSON")
    return parsed


def normalize_list(value: Any) -> List[str]:
    """
    List -> as-is; comma separated string -> split and trimmed;
    anything else -> [].
    """
    if isinstance(value, list):
        items = [str(item).strip() for item in value if item is not None]
        return [item for item in items if item]
    if isinstance(value, str) and value.strip():
        parts = [part.strip() for part in value.split(",")]
        return [part for part in parts if part]
    return []


def _first_present(data: Dict[str, Any], keys) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _text_or_none(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def extract_metadata(text: str, repair: bool = False) -> EnrichmentResult:
    """
    Convert a raw model response into an EnrichmentResult.

    Args:
        text: Raw response text
        repair: Use json_repair when the sliced JSON does not parse

    Returns:
        EnrichmentResult with normalized fields

    Raises:
        ExtractionError: "no JSON boundaries" or "invalid JSON"
    """
    cleaned = strip_code_fence(text or "")
    data = parse_json_object(find_json_span(cleaned), repair=repair)

    return EnrichmentResult(
        description=_text_or_none(_first_present(data, TEXT_FIELDS["description"])),
        mood=normalize_list(_first_present(data, LIST_FIELDS["mood"])),
        keywords=normalize_list(_first_present(data, LIST_FIELDS["keywords"])),
        semantic_tags=normalize_list(_first_present(data, LIST_FIELDS["semantic_tags"])),
        similar_works_description=_text_or_none(
            _first_present(data, TEXT_FIELDS["similar_works_description"])
        ),
    )

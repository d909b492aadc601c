# ============================================================================
# src/music_enrichment/gemini/prompts.py
# ============================================================================
"""
Enrichment prompt template.
"""

from typing import Any, Optional, Sequence


NOT_AVAILABLE = "N/A"

ENRICHMENT_TEMPLATE = """
You are an expert in classical and choral music. Your task is to provide concise, structured metadata for a musical work.

Given the following information about a classical music piece:
Title: "{title}"
Composer: "{composer}"
Type: "{type}"
Attributes: "{attributes}"
Language: "{language}"

Please provide the following in JSON format:
1.  **description**: A 1-2 sentence contextual description, including style period (e.g., Baroque, Romantic), typical performance context (e.g., sacred, secular, opera, chamber), and a unique characteristic.
2.  **mood**: A single general mood or a short list of primary moods (e.g., "Joyful", "Solemn", "Dramatic", "Meditative").
3.  **keywords**: 5-7 relevant keywords (e.g., "Cantata", "Oratorio", "Symphony", "Aria", "Choral", "Soloist", "Orchestral").
4.  **semantic_tags**: 3-5 high-level semantic tags related to its meaning or common themes (e.g., "Resurrection", "Love", "Nature", "Devotion", "Celebration", "Tragedy"). Infer them from title/composer/type.
5.  **similar_works_description**: A brief description of what kind of works it is similar to, conceptually, without naming specific pieces (e.g., "Similar to other contrapuntal works of the Baroque era").

Ensure the output is ONLY the JSON object. Do not include any other text or markdown outside the JSON.
"""


def _or_na(value: Optional[str]) -> str:
    return value if value else NOT_AVAILABLE


def _join_attributes(attributes: Optional[Sequence[Any]]) -> str:
    if not attributes:
        return NOT_AVAILABLE
    return ", ".join(str(a) for a in attributes)


def build_enrichment_prompt(record: Any) -> str:
    """
    Format the enrichment prompt for one record.

    Args:
        record: Object with title, composer, type, attributes, language

    Returns:
        Prompt text
    """
    return ENRICHMENT_TEMPLATE.format(
        title=record.title,
        composer=record.composer,
        type=_or_na(record.type),
        attributes=_join_attributes(record.attributes),
        language=_or_na(record.language),
    )

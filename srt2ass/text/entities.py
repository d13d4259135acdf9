"""HTML entities found in subtitle text and their literal characters."""

import re
from collections.abc import Mapping
from types import MappingProxyType

from srt2ass.text.encoding_fixer import VIETNAMESE_LETTERS

NAMED_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&apos;": "'",
    "&#39;": "'",
    "&nbsp;": " ",
    "&mdash;": "—",
    "&ndash;": "–",
    "&hellip;": "…",
}

VIETNAMESE_NUMERIC_ENTITIES = {f"&#{ord(letter)};": letter for letter in VIETNAMESE_LETTERS}

HTML_ENTITIES: Mapping[str, str] = MappingProxyType({**NAMED_ENTITIES, **VIETNAMESE_NUMERIC_ENTITIES})

_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in sorted(HTML_ENTITIES, key=len, reverse=True)))


def decode_entities(text: str) -> str:
    """Decode the known entities in a single pass.

    Output of one replacement is never re-scanned, so ``&amp;lt;`` decodes to
    ``&lt;``. Entities outside the table are left as they are.
    """
    return _ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], text)

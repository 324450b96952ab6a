"""UUID identifiers as they appear on the wire."""

import re
from typing import Optional

# Hyphenated 8-4-4-4-12 form only; braces, urn: prefixes and bare hex are rejected
UUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def canonical_uuid(raw: Optional[str]) -> Optional[str]:
    """Return raw lowercased if it is a hyphenated UUID, else None."""
    if not raw or not UUID_PATTERN.fullmatch(raw):
        return None
    return raw.lower()

# app/core/normalizers.py

"""
Normalization utilities for roster fields.

Ensures consistent names regardless of which file they come from.
"""

from typing import Iterable
import re

from app.core.errors import RosterParseError

_PARENTHESISED = re.compile(r'\s*\([^)]*\)\s*')


def extract_quoted_field(field: str) -> str:
    """
    Strip the surrounding double quotes from a roster field.

    Raises RosterParseError if the field is not quoted.
    """
    field = field.strip()
    if len(field) < 2:
        raise RosterParseError("field too short to contain quotes")

    if not (field.startswith('"') and field.endswith('"')):
        raise RosterParseError("field is not properly quoted")

    return field[1:-1]


def clean_signup_name(name: str, junk_words: Iterable[str] = ()) -> str:
    """
    Normalize a sign-up sheet entry.

    - Removes parenthesised notes like "(realm)" or "(Longbow)"
    - Trims whitespace
    - Returns "" for entries containing a junk word (spam, deletions)
    """
    if not name:
        return ""

    cleaned = _PARENTHESISED.sub('', name).strip()

    cleaned_lower = cleaned.lower()
    for word in junk_words:
        if word and word.lower() in cleaned_lower:
            return ""

    return cleaned


def split_aliases(value: str) -> list[str]:
    """Split a comma-separated alias list, dropping blanks."""
    return [alias.strip() for alias in value.split(",") if alias.strip()]

# app/core/__init__.py

from app.core.aliases import AliasTable
from app.core.matching import match_name, find_member_match, find_signup_match
from app.core.classification import has_excluded_role, classify_unmatched
from app.core.reconciliation import reconcile, ReconciliationResult
from app.core.report import render_report
from app.core.errors import RosterFileError, RosterParseError
from app.core.parsers import (
    parse_guild_text,
    parse_sheet_text,
    parse_aliases_text,
    load_guild_file,
    load_sheet_file,
    load_alias_file,
)

__all__ = [
    "AliasTable",
    "match_name",
    "find_member_match",
    "find_signup_match",
    "has_excluded_role",
    "classify_unmatched",
    "reconcile",
    "ReconciliationResult",
    "render_report",
    "RosterFileError",
    "RosterParseError",
    "parse_guild_text",
    "parse_sheet_text",
    "parse_aliases_text",
    "load_guild_file",
    "load_sheet_file",
    "load_alias_file",
]

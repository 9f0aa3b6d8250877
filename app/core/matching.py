# app/core/matching.py

"""
Name matching between the guild roster and the sign-up sheet.

A name is looked up against the other roster by trying rules in a fixed order:
1. Direct: case-insensitive equality
2. Alias: declared alias in the alias table
3. Pattern: legacy fallback, both names share an ignored fragment

The first rule that finds something wins. The pattern rule is approximate on
purpose: a single shared fragment is enough, whatever the rest of the names
look like.
"""

from typing import Callable, Optional, Sequence

from app.core.aliases import AliasTable
from app.models import MatchDirection, MatchResult


MatchRule = Callable[
    [str, Sequence[str], AliasTable, Sequence[str], MatchDirection],
    Optional[MatchResult],
]


def match_name(
    query: str,
    candidates: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str] = (),
    direction: MatchDirection = "member",
) -> MatchResult:
    """
    Find how `query` matches one of `candidates`.

    direction="member" means the query is a guild name checked against
    sign-up names; direction="signup" means the query is a sign-up name
    checked against guild names. The result always reports the guild-side
    name as canonical_name.
    """
    for rule in MATCH_RULES:
        result = rule(query, candidates, aliases, ignored_fragments, direction)
        if result is not None:
            return result

    return MatchResult.not_found()


def find_member_match(
    member_name: str,
    signup_names: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str] = (),
) -> MatchResult:
    """Look up a guild member on the sign-up sheet."""
    return match_name(member_name, signup_names, aliases, ignored_fragments, "member")


def find_signup_match(
    signup_name: str,
    member_names: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str] = (),
) -> MatchResult:
    """Look up a sign-up sheet name in the guild roster."""
    return match_name(signup_name, member_names, aliases, ignored_fragments, "signup")


# ============================================
# Rules
# ============================================

def _match_direct(
    query: str,
    candidates: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str],
    direction: MatchDirection,
) -> Optional[MatchResult]:
    query_lower = query.lower()

    for candidate in candidates:
        if candidate.lower() == query_lower:
            return _build_result(query, candidate, direction, "direct")

    return None


def _match_alias(
    query: str,
    candidates: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str],
    direction: MatchDirection,
) -> Optional[MatchResult]:
    if direction == "member":
        # Query is canonical: any of its aliases on the sheet counts
        for alias in aliases.aliases_of(query):
            candidate = _find_ignoring_case(alias, candidates)
            if candidate is not None:
                return _build_result(query, candidate, direction, "alias")
        return None

    canonical = aliases.canonical_of(query)
    if canonical is None:
        return None

    # Stale declarations point at people who already left the guild
    member = _find_ignoring_case(canonical, candidates)
    if member is None:
        return None

    return _build_result(query, member, direction, "alias")


def _match_pattern(
    query: str,
    candidates: Sequence[str],
    aliases: AliasTable,
    ignored_fragments: Sequence[str],
    direction: MatchDirection,
) -> Optional[MatchResult]:
    query_lower = query.lower()
    fragments = [f.lower() for f in ignored_fragments if f]

    for candidate in candidates:
        candidate_lower = candidate.lower()
        for fragment in fragments:
            if fragment in query_lower and fragment in candidate_lower:
                return _build_result(query, candidate, direction, "pattern")

    return None


MATCH_RULES: tuple[MatchRule, ...] = (
    _match_direct,
    _match_alias,
    _match_pattern,
)


# ============================================
# Helpers
# ============================================

def _find_ignoring_case(name: str, candidates: Sequence[str]) -> Optional[str]:
    name_lower = name.lower()
    for candidate in candidates:
        if candidate.lower() == name_lower:
            return candidate
    return None


def _build_result(
    query: str,
    candidate: str,
    direction: MatchDirection,
    match_type: str,
) -> MatchResult:
    if direction == "member":
        canonical_name, matched_name = query, candidate
    else:
        canonical_name, matched_name = candidate, query

    return MatchResult(
        found=True,
        canonical_name=canonical_name,
        matched_name=matched_name,
        match_type=match_type,
    )

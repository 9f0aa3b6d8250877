# app/core/reconciliation.py

"""
Reconciliation engine.

Runs the name matcher over both rosters:
- online guild members against the sign-up sheet (missing / excluded)
- sign-up names against every guild member, online or not (extra in sheet)
"""

import logging
from typing import Optional, Sequence

from app.core.aliases import AliasTable
from app.core.classification import classify_unmatched
from app.core.matching import find_member_match, find_signup_match
from app.models import (
    ExclusionPolicy,
    MatchResult,
    MemberRecord,
    ReconciliationSummary,
)

logger = logging.getLogger(__name__)


class ReconciliationResult:
    """Result of a reconciliation run."""

    def __init__(self):
        self.missing: list[str] = []
        self.excluded: list[str] = []
        self.extra_in_signup: list[str] = []
        self.member_matches: list[MatchResult] = []
        self.signup_matches: list[MatchResult] = []
        self.summary: Optional[ReconciliationSummary] = None

    def matches_by_type(self) -> dict[str, list[MatchResult]]:
        """Group guild-side matches by the rule that produced them."""
        grouped: dict[str, list[MatchResult]] = {
            "direct": [],
            "alias": [],
            "pattern": [],
        }
        for match in self.member_matches:
            grouped[match.match_type].append(match)
        return grouped

    def as_tuple(self) -> tuple:
        return (
            self.missing,
            self.excluded,
            self.extra_in_signup,
            self.member_matches,
            self.signup_matches,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "summary": self.summary.model_dump() if self.summary else None,
            "missing": list(self.missing),
            "excluded": list(self.excluded),
            "extra_in_signup": list(self.extra_in_signup),
            "member_matches": [m.model_dump() for m in self.member_matches],
            "signup_matches": [m.model_dump() for m in self.signup_matches],
        }


def reconcile(
    members: Sequence[MemberRecord],
    signups: Sequence[str],
    aliases: AliasTable,
    policy: Optional[ExclusionPolicy] = None,
) -> ReconciliationResult:
    """
    Main reconciliation function.

    Output lists follow input order: members in roster order, sign-ups in
    sheet order. Offline members are never reported as missing but can
    still be matched from the sheet side.
    """
    if policy is None:
        policy = ExclusionPolicy()

    result = ReconciliationResult()
    signup_names = list(signups)
    member_names = [member.name for member in members]

    # ============================================
    # Guild -> sheet (online members only)
    # ============================================
    online_count = 0
    for member in members:
        if not member.is_online:
            continue
        online_count += 1

        match = find_member_match(member.name, signup_names, aliases, policy.ignored_fragments)
        if match.found:
            result.member_matches.append(match)
            continue

        if classify_unmatched(member, policy) == "excluded":
            result.excluded.append(member.name)
        else:
            result.missing.append(member.name)

    # ============================================
    # Sheet -> guild (all members)
    # ============================================
    for signup_name in signup_names:
        match = find_signup_match(signup_name, member_names, aliases, policy.ignored_fragments)
        if match.found:
            result.signup_matches.append(match)
        else:
            result.extra_in_signup.append(signup_name)

    # ============================================
    # Calculate summary
    # ============================================
    by_type = result.matches_by_type()
    result.summary = ReconciliationSummary(
        total_members=len(members),
        online_members=online_count,
        total_signups=len(signup_names),
        direct_matches=len(by_type["direct"]),
        alias_matches=len(by_type["alias"]),
        pattern_matches=len(by_type["pattern"]),
        total_matches=len(result.member_matches) + len(result.signup_matches),
        missing=len(result.missing),
        excluded=len(result.excluded),
        extra_in_signup=len(result.extra_in_signup),
    )

    logger.info(
        f"Reconciled {len(members)} members ({online_count} online) against {len(signup_names)} sign-ups: "
        f"{len(result.missing)} missing, {len(result.excluded)} excluded, "
        f"{len(result.extra_in_signup)} extra in sheet"
    )

    return result

# app/core/classification.py

"""
Classification of guild members that could not be found on the sign-up sheet.

Members holding a special role (bombers, the guild master) are not expected to
sign up and go to a separate bucket instead of being reported as missing.
"""

from typing import Iterable, Literal

from app.models import ExclusionPolicy, MemberRecord

UnmatchedBucket = Literal["missing", "excluded"]


def has_excluded_role(roles: Iterable[str], excluded_roles: Iterable[str]) -> bool:
    """True if any role label is in the excluded list, ignoring case."""
    member_roles = {role.strip().lower() for role in roles if role and role.strip()}
    if not member_roles:
        return False

    return any(excluded.lower() in member_roles for excluded in excluded_roles)


def classify_unmatched(member: MemberRecord, policy: ExclusionPolicy) -> UnmatchedBucket:
    """Decide which bucket an unmatched online member belongs to."""
    if has_excluded_role(member.roles, policy.excluded_roles):
        return "excluded"
    return "missing"

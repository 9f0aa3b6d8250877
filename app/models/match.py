# app/models/match.py

from typing import Optional, Literal
from pydantic import BaseModel, Field


# ============================================
# Match Result
# ============================================

MatchType = Literal["direct", "alias", "pattern"]

MatchDirection = Literal["member", "signup"]


class MatchResult(BaseModel):
    """
    Outcome of looking up one name against the other roster.

    canonical_name is always the guild-side name and matched_name the
    sign-up side string, whichever direction the lookup ran in.
    """

    found: bool = False
    canonical_name: Optional[str] = None
    matched_name: Optional[str] = None
    match_type: Optional[MatchType] = None

    @classmethod
    def not_found(cls) -> "MatchResult":
        return cls(found=False)

    class Config:
        frozen = True


# ============================================
# Exclusion Policy
# ============================================

class ExclusionPolicy(BaseModel):
    """Static configuration applied to every reconciliation run."""

    excluded_roles: list[str] = Field(
        default_factory=lambda: ["Bomber", "Guild Master"],
        description="Members holding any of these roles are never reported as missing",
    )
    ignored_fragments: list[str] = Field(
        default_factory=lambda: ["sarge"],
        description="Substrings that count as a match when both names contain one",
    )

    @classmethod
    def from_settings(cls, settings) -> "ExclusionPolicy":
        return cls(
            excluded_roles=list(settings.excluded_roles),
            ignored_fragments=list(settings.ignored_fragments),
        )

    class Config:
        frozen = True

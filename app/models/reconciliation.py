# app/models/reconciliation.py

from typing import Optional
from pydantic import BaseModel, Field

from app.models.member import MemberRecord


# ============================================
# Reconciliation Summary
# ============================================

class ReconciliationSummary(BaseModel):
    """Summary of a reconciliation run."""

    total_members: int
    online_members: int
    total_signups: int

    direct_matches: int
    alias_matches: int
    pattern_matches: int
    total_matches: int

    missing: int
    excluded: int
    extra_in_signup: int


# ============================================
# API Request / Response Models
# ============================================

class ReconcileRequest(BaseModel):
    """Structured reconciliation input."""

    members: list[MemberRecord] = Field(default_factory=list)
    signups: list[str] = Field(default_factory=list)
    aliases: dict[str, list[str]] = Field(default_factory=dict)


class RawReconcileRequest(BaseModel):
    """Reconciliation input as raw file contents."""

    guild_text: str
    sheet_text: str
    aliases_text: Optional[str] = None
    include_report: bool = False


class ReconcileResponse(BaseModel):
    success: bool
    summary: dict
    missing: list[str]
    excluded: list[str]
    extra_in_signup: list[str]
    member_matches: list[dict]
    signup_matches: list[dict]
    alias_collisions: list[dict] = Field(default_factory=list)
    report: Optional[str] = None

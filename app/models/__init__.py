# app/models/__init__.py

from app.models.member import (
    MemberRecord,
    MemberStatus,
)
from app.models.match import (
    MatchResult,
    MatchType,
    MatchDirection,
    ExclusionPolicy,
)
from app.models.reconciliation import (
    ReconciliationSummary,
    ReconcileRequest,
    RawReconcileRequest,
    ReconcileResponse,
)

__all__ = [
    # Member
    "MemberRecord",
    "MemberStatus",
    # Match
    "MatchResult",
    "MatchType",
    "MatchDirection",
    "ExclusionPolicy",
    # Reconciliation
    "ReconciliationSummary",
    "ReconcileRequest",
    "RawReconcileRequest",
    "ReconcileResponse",
]

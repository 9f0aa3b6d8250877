# app/routers/reconcile.py

"""
Reconciliation routes.

The endpoints that run the matching engine over two rosters.
"""

import logging
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from app.core.aliases import AliasTable
from app.core.errors import RosterFileError
from app.core.parsers import (
    load_alias_file,
    load_guild_file,
    load_sheet_file,
    parse_aliases_text,
    parse_guild_text,
    parse_sheet_text,
)
from app.core.reconciliation import ReconciliationResult, reconcile
from app.core.report import render_report
from app.models import (
    ExclusionPolicy,
    RawReconcileRequest,
    ReconcileRequest,
    ReconcileResponse,
)
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


def _build_response(
    result: ReconciliationResult,
    aliases: AliasTable,
    report: str | None = None,
) -> ReconcileResponse:
    data = result.to_dict()
    return ReconcileResponse(
        success=True,
        summary=data["summary"],
        missing=data["missing"],
        excluded=data["excluded"],
        extra_in_signup=data["extra_in_signup"],
        member_matches=data["member_matches"],
        signup_matches=data["signup_matches"],
        alias_collisions=list(aliases.collisions),
        report=report,
    )


# ============================================
# Structured Reconciliation
# ============================================

@router.post("/reconcile", response_model=ReconcileResponse)
async def run_reconciliation(request: ReconcileRequest):
    """
    Reconcile a guild roster against a sign-up list.

    Excluded roles and ignored fragments come from settings, not the request.
    """
    if not request.members and not request.signups:
        raise HTTPException(
            status_code=400,
            detail="Nothing to reconcile. Provide guild members and/or sign-up names."
        )

    policy = ExclusionPolicy.from_settings(get_settings())
    aliases = AliasTable.from_mapping(request.aliases)

    result = reconcile(request.members, request.signups, aliases, policy)
    return _build_response(result, aliases)


# ============================================
# Raw File Reconciliation
# ============================================

@router.post("/reconcile/raw", response_model=ReconcileResponse)
async def run_raw_reconciliation(request: RawReconcileRequest):
    """
    Reconcile from the raw contents of guild.txt, sheet.txt and sheet-names.txt.

    Malformed lines are skipped, not rejected.
    """
    settings = get_settings()

    members = parse_guild_text(request.guild_text)
    signups = parse_sheet_text(request.sheet_text, settings.signup_junk_words)
    if not members and not signups:
        raise HTTPException(
            status_code=400,
            detail="No usable guild or sheet lines found."
        )

    if request.aliases_text:
        aliases = AliasTable.from_declarations(parse_aliases_text(request.aliases_text))
    else:
        aliases = AliasTable.empty()

    result = reconcile(members, signups, aliases, ExclusionPolicy.from_settings(settings))
    report = render_report(result) if request.include_report else None
    return _build_response(result, aliases, report)


# ============================================
# Configured Files Report
# ============================================

@router.get("/reconcile/report", response_class=PlainTextResponse)
async def get_reconciliation_report():
    """
    Reconcile the roster files configured in settings and return the text report.
    """
    settings = get_settings()

    try:
        aliases = load_alias_file(settings.aliases_file)
        members = load_guild_file(settings.guild_file)
        signups = load_sheet_file(settings.sheet_file, settings.signup_junk_words)
    except RosterFileError as e:
        logger.error(f"Cannot build report: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    result = reconcile(members, signups, aliases, ExclusionPolicy.from_settings(settings))
    return PlainTextResponse(render_report(result))

# app/core/report.py

"""
Plain-text rendering of a reconciliation run.
"""

from app.core.reconciliation import ReconciliationResult


def render_report(result: ReconciliationResult) -> str:
    """Render the run the way it is pasted into the guild chat."""
    lines: list[str] = []
    summary = result.summary

    # ============================================
    # Successful matches
    # ============================================
    if result.member_matches:
        lines.append("=== SUCCESSFUL MATCHES ===")
        by_type = result.matches_by_type()

        for match in result.member_matches:
            if match.match_type == "alias":
                lines.append(f"Matched: {match.canonical_name} (found as '{match.matched_name}' in sheet)")
            elif match.match_type == "pattern":
                lines.append(f"Matched: {match.canonical_name} (pattern match with '{match.matched_name}' in sheet)")

        lines.append(f"- Direct matches: {len(by_type['direct'])}")
        lines.append(f"- Alternative name matches: {len(by_type['alias'])}")
        if by_type["pattern"]:
            lines.append(f"- Pattern matches: {len(by_type['pattern'])}")
        lines.append("")

    # ============================================
    # Results
    # ============================================
    lines.append("=== RESULTS ===")
    lines.append(f"Players online but not in sheet ({len(result.missing)}):")
    if result.missing:
        lines.extend(_name_list(result.missing))
    else:
        lines.append("  (none)")

    if result.excluded:
        lines.append("")
        lines.append(f"Excluded players (have special roles) ({len(result.excluded)}):")
        lines.extend(_name_list(result.excluded))

    if result.extra_in_signup:
        lines.append("")
        lines.append(f"Players in sheet but not in guild ({len(result.extra_in_signup)}):")
        lines.extend(_name_list(result.extra_in_signup))

    if summary is not None:
        lines.append("")
        lines.append("Summary:")
        lines.append(f"- Total guild members: {summary.total_members}")
        lines.append(f"- Online guild members: {summary.online_members}")
        lines.append(f"- Players in sheet: {summary.total_signups}")
        lines.append(f"- Successful matches: {summary.total_matches}")
        lines.append(f"- Online players missing from sheet: {summary.missing}")
        lines.append(f"- Excluded players (special roles): {summary.excluded}")
        lines.append(f"- Sheet players not in guild: {summary.extra_in_signup}")

    return "\n".join(lines) + "\n"


def _name_list(names: list[str]) -> list[str]:
    # Comma after every name but the last, so the block can be copied as-is
    return [f"  {name}," for name in names[:-1]] + [f"  {names[-1]}"]

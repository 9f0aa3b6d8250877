# app/cli.py

"""
Command-line entry point: reconcile the roster files and print the report.
"""

import argparse
import json
import logging

from app.config import get_settings
from app.core.errors import RosterFileError
from app.core.parsers import load_alias_file, load_guild_file, load_sheet_file
from app.core.reconciliation import reconcile
from app.core.report import render_report
from app.models import ExclusionPolicy


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="roster-sync",
        description="Find online guild members missing from the sign-up sheet, and sheet names not in the guild",
    )
    parser.add_argument("--guild", default=settings.guild_file, help=f"Guild roster file (default: {settings.guild_file})")
    parser.add_argument("--sheet", default=settings.sheet_file, help=f"Sign-up sheet file (default: {settings.sheet_file})")
    parser.add_argument("--aliases", default=settings.aliases_file, help=f"Alias file (default: {settings.aliases_file})")
    parser.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON instead of the text report")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        aliases = load_alias_file(args.aliases)
        members = load_guild_file(args.guild)
        signups = load_sheet_file(args.sheet, settings.signup_junk_words)
    except RosterFileError as e:
        raise SystemExit(f"Error: {e}")

    result = reconcile(members, signups, aliases, ExclusionPolicy.from_settings(settings))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(render_report(result), end="")


if __name__ == "__main__":
    main()

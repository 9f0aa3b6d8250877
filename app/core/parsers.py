# app/core/parsers.py

"""
Readers for the three roster files.

- guild.txt:        header line, then "name"<TAB>"status"<TAB>"roles"
- sheet.txt:        one sign-up name per line
- sheet-names.txt:  GuildName:Alias1,Alias2 (# comments allowed)

Malformed lines are logged and skipped so one bad line never aborts a run.
A guild line with an unrecognised status is kept as an Offline member, so
the player is never reported missing but the sheet can still match them.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from pydantic import ValidationError

from app.core.aliases import AliasDeclaration, AliasTable
from app.core.errors import RosterFileError, RosterParseError
from app.core.normalizers import clean_signup_name, extract_quoted_field, split_aliases
from app.models import MemberRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

KNOWN_STATUSES = ("Online", "Offline")


# ============================================
# Guild roster
# ============================================

def parse_guild_line(line: str) -> MemberRecord:
    """Parse one tab-separated roster line into a MemberRecord."""
    parts = line.split("\t")
    if len(parts) < 3:
        raise RosterParseError(f"expected 3 tab-separated fields, got {len(parts)}")

    fields = []
    for label, part in zip(("username", "status", "roles"), parts[:3]):
        try:
            fields.append(extract_quoted_field(part))
        except RosterParseError as e:
            raise RosterParseError(f"invalid {label} field: {e}") from e

    username, status, roles = fields

    # Only "Online" counts; other states (Away, Busy) still belong to the guild
    if status.strip().capitalize() not in KNOWN_STATUSES:
        logger.warning(f"Unknown status '{status}' for '{username}', treating as Offline")
        status = "Offline"

    return MemberRecord(name=username, status=status, roles=roles)


def parse_guild_text(text: str) -> list[MemberRecord]:
    """Parse the whole roster; the first line is a header."""
    members: list[MemberRecord] = []

    for line_num, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line_num == 1 or not line:
            continue

        try:
            members.append(parse_guild_line(line))
        except (RosterParseError, ValidationError) as e:
            logger.warning(f"Skipping malformed guild line {line_num}: {_describe(e)}")

    return members


# ============================================
# Sign-up sheet
# ============================================

def parse_sheet_text(text: str, junk_words: Iterable[str] = ()) -> list[str]:
    """Parse sign-up names, dropping notes in parentheses and junk entries."""
    junk_words = list(junk_words)
    names: list[str] = []

    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue

        name = clean_signup_name(line, junk_words)
        if name:
            names.append(name)
        else:
            logger.debug(f"Dropped sign-up entry '{line}'")

    return names


# ============================================
# Alias declarations
# ============================================

def parse_aliases_text(text: str) -> list[AliasDeclaration]:
    """Parse GuildName:Alias1,Alias2 lines into alias declarations."""
    declarations: list[AliasDeclaration] = []

    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if ":" not in line:
            logger.warning(f"Skipping malformed alias line: {line}")
            continue

        canonical, _, alias_part = line.partition(":")
        canonical = canonical.strip()
        alias_part = alias_part.strip()
        if not canonical or not alias_part:
            continue

        aliases = split_aliases(alias_part)
        if aliases:
            declarations.append((canonical, aliases))

    return declarations


# ============================================
# File loaders
# ============================================

def load_guild_file(path: PathLike) -> list[MemberRecord]:
    members = parse_guild_text(_read_text(path, "guild"))
    logger.info(f"Processed {len(members)} players from {path}")
    return members


def load_sheet_file(path: PathLike, junk_words: Iterable[str] = ()) -> list[str]:
    names = parse_sheet_text(_read_text(path, "sheet"), junk_words)
    logger.info(f"Processed {len(names)} player names from {path}")
    return names


def load_alias_file(path: PathLike) -> AliasTable:
    """Load alias declarations; a missing file means no aliases."""
    path = Path(path)
    if not path.exists():
        logger.info(f"No alias file at {path}, continuing without aliases")
        return AliasTable.empty()

    table = AliasTable.from_declarations(parse_aliases_text(_read_text(path, "alias")))
    logger.info(f"Loaded {len(table)} alternative name mappings")
    return table


def _read_text(path: PathLike, kind: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise RosterFileError(path, f"{kind} file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RosterFileError(path, f"failed to read {kind} file ({e})") from e


def _describe(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in error.errors()
        )
    return str(error)

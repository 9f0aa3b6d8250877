# tests/test_parsers.py

"""
Tests for reading the roster files.
"""

import logging

import pytest

from app.core.aliases import AliasTable
from app.core.errors import RosterFileError, RosterParseError
from app.core.normalizers import clean_signup_name, extract_quoted_field
from app.core.parsers import (
    load_alias_file,
    load_guild_file,
    load_sheet_file,
    parse_aliases_text,
    parse_guild_line,
    parse_guild_text,
    parse_sheet_text,
)
from app.core.reconciliation import reconcile
from app.models import ExclusionPolicy

GUILD_TEXT = (
    '"Username"\t"Status"\t"Roles"\n'
    '"Alice"\t"Online"\t""\n'
    '\n'
    '"Bob"\t"online"\t"Officer;Bomber"\n'
    'Broken line without tabs\n'
    '"Carol"\t"Offline"\t""\n'
    '"Dan"\t"Away"\t""\n'
    '"Eve"\tOnline\t""\n'
)

JUNK = ["delete", "spam", "mess", "pedo"]


# ============================================
# Normalizer Tests
# ============================================

class TestNormalizers:

    def test_extract_quoted_field(self):
        assert extract_quoted_field(' "Alice" ') == "Alice"
        assert extract_quoted_field('""') == ""

    @pytest.mark.parametrize("field", ['Alice', '"Alice', '"'])
    def test_extract_quoted_field_rejects_unquoted(self, field):
        with pytest.raises(RosterParseError):
            extract_quoted_field(field)

    def test_clean_signup_name_drops_parenthesised_notes(self):
        assert clean_signup_name("Alice (realm)") == "Alice"
        assert clean_signup_name("  Bob(Longbow)  ") == "Bob"

    def test_clean_signup_name_drops_junk(self):
        assert clean_signup_name("please DELETE this", JUNK) == ""
        assert clean_signup_name("Spammer", JUNK) == ""
        assert clean_signup_name("Alice", JUNK) == "Alice"


# ============================================
# Guild Roster Tests
# ============================================

class TestGuildParsing:

    def test_parse_line(self):
        member = parse_guild_line('"Bob"\t"Online"\t"Officer;Bomber"')

        assert member.name == "Bob"
        assert member.status == "Online"
        assert member.roles == ["Officer", "Bomber"]

    def test_parse_line_too_few_fields(self):
        with pytest.raises(RosterParseError, match="expected 3"):
            parse_guild_line('"Bob"\t"Online"')

    def test_parse_line_unquoted_field(self):
        with pytest.raises(RosterParseError, match="invalid status field"):
            parse_guild_line('"Bob"\tOnline\t""')

    def test_parse_text_skips_header_and_malformed(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app.core.parsers"):
            members = parse_guild_text(GUILD_TEXT)

        assert [m.name for m in members] == ["Alice", "Bob", "Carol", "Dan"]
        assert members[1].status == "Online"
        assert members[2].status == "Offline"
        # Broken line, unknown status (kept), unquoted status
        assert len(caplog.records) == 3
        assert "line 5" in caplog.records[0].getMessage()

    def test_empty_name_is_skipped(self):
        members = parse_guild_text('header\n""\t"Online"\t""\n')

        assert members == []

    def test_unknown_status_kept_as_offline(self):
        members = parse_guild_text('header\n"Dan"\t"Away"\t""\n')
        result = reconcile(members, ["dan"], AliasTable.empty(), ExclusionPolicy(ignored_fragments=[]))

        assert members[0].status == "Offline"
        assert result.missing == []
        assert result.extra_in_signup == []
        assert result.signup_matches[0].canonical_name == "Dan"


# ============================================
# Sheet Tests
# ============================================

class TestSheetParsing:

    def test_parse_sheet(self):
        text = "Alice (realm)\n\n  Bob  \nspam bot\n(only a note)\nxSarge\n"

        assert parse_sheet_text(text, JUNK) == ["Alice", "Bob", "xSarge"]

    def test_junk_words_are_optional(self):
        assert parse_sheet_text("spam bot\n") == ["spam bot"]


# ============================================
# Alias File Tests
# ============================================

class TestAliasParsing:

    def test_parse_aliases(self, caplog):
        text = (
            "# GuildName:Alias1,Alias2\n"
            "xSarge: Sarge, Sargey ,\n"
            "\n"
            "no separator here\n"
            "Empty:\n"
            ":NoCanonical\n"
            "Alice:Ally\n"
        )

        with caplog.at_level(logging.WARNING, logger="app.core.parsers"):
            declarations = parse_aliases_text(text)

        assert declarations == [
            ("xSarge", ["Sarge", "Sargey"]),
            ("Alice", ["Ally"]),
        ]
        assert len(caplog.records) == 1

    def test_only_first_colon_splits(self):
        assert parse_aliases_text("Alice:Al:ly\n") == [("Alice", ["Al:ly"])]


# ============================================
# File Loader Tests
# ============================================

class TestFileLoaders:

    def test_load_files(self, tmp_path):
        guild = tmp_path / "guild.txt"
        sheet = tmp_path / "sheet.txt"
        aliases = tmp_path / "sheet-names.txt"
        guild.write_text(GUILD_TEXT, encoding="utf-8")
        sheet.write_text("Alice\nSarge (realm)\n", encoding="utf-8")
        aliases.write_text("xSarge:Sarge\n", encoding="utf-8")

        assert len(load_guild_file(guild)) == 4
        assert load_sheet_file(sheet, JUNK) == ["Alice", "Sarge"]
        assert load_alias_file(aliases).canonical_of("sarge") == "xSarge"

    def test_missing_alias_file_is_empty_table(self, tmp_path):
        table = load_alias_file(tmp_path / "missing.txt")

        assert len(table) == 0
        assert table.canonical_of("anything") is None

    @pytest.mark.parametrize("loader", [load_guild_file, load_sheet_file])
    def test_missing_roster_file_raises(self, tmp_path, loader):
        with pytest.raises(RosterFileError, match="not found"):
            loader(tmp_path / "missing.txt")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

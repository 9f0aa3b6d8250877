# app/core/aliases.py

"""
Alias table linking guild names to the names people use on the sign-up sheet.

Both lookup directions are built together from one list of declarations
and never change afterwards.
"""

import logging
from types import MappingProxyType
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

AliasDeclaration = tuple[str, list[str]]


class AliasTable:
    """Write-once, read-many mapping between canonical names and aliases."""

    def __init__(
        self,
        canonical_to_aliases: dict[str, tuple[str, ...]],
        alias_to_canonical: dict[str, str],
        collisions: Optional[list[dict]] = None,
    ):
        self._canonical_to_aliases = MappingProxyType(dict(canonical_to_aliases))
        self._alias_to_canonical = MappingProxyType(dict(alias_to_canonical))
        self.collisions: tuple[dict, ...] = tuple(collisions or [])

    @classmethod
    def empty(cls) -> "AliasTable":
        return cls({}, {})

    @classmethod
    def from_declarations(cls, declarations: Iterable[AliasDeclaration]) -> "AliasTable":
        """
        Build a table from (canonical, [aliases]) pairs.

        Empty canonical names, empty alias lists and blank aliases are
        skipped. If the same alias (case-insensitively) is declared for two
        different canonical names, the later declaration wins and the
        collision is logged.
        """
        canonical_to_aliases: dict[str, list[str]] = {}
        alias_to_canonical: dict[str, str] = {}
        collisions: list[dict] = []

        for canonical, aliases in declarations:
            canonical = (canonical or "").strip()
            if not canonical or not aliases:
                continue

            for alias in aliases:
                alias = (alias or "").strip()
                if not alias:
                    continue

                key = alias.lower()
                previous = alias_to_canonical.get(key)
                if previous is not None and previous.lower() != canonical.lower():
                    logger.warning(
                        f"Alias '{alias}' was declared for '{previous}' and is now remapped to '{canonical}'"
                    )
                    collisions.append({
                        "alias": alias,
                        "previous": previous,
                        "canonical": canonical,
                    })

                # Keyed by lowercase; alias_to_canonical keeps the declared spelling
                canonical_to_aliases.setdefault(canonical.lower(), []).append(alias)
                alias_to_canonical[key] = canonical

        return cls(
            {name: tuple(values) for name, values in canonical_to_aliases.items()},
            alias_to_canonical,
            collisions,
        )

    @classmethod
    def from_mapping(cls, mapping: dict[str, list[str]]) -> "AliasTable":
        return cls.from_declarations(mapping.items())

    def aliases_of(self, canonical: str) -> list[str]:
        """Aliases declared for a canonical name (case-insensitive), in declaration order."""
        if not canonical:
            return []
        return list(self._canonical_to_aliases.get(canonical.lower(), ()))

    def canonical_of(self, alias: str) -> Optional[str]:
        """Canonical name an alias points to (case-insensitive)."""
        if not alias:
            return None
        return self._alias_to_canonical.get(alias.lower())

    def __len__(self) -> int:
        return len(self._canonical_to_aliases)

    def __contains__(self, canonical: str) -> bool:
        return bool(canonical) and canonical.lower() in self._canonical_to_aliases

    def __repr__(self) -> str:
        return f"AliasTable(canonical={len(self)}, aliases={len(self._alias_to_canonical)})"

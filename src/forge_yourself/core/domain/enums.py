"""Enumerations shared by option models and domain records.

Values are the literal strings the Forge API expects on the wire, so they
serialize directly into query strings and decode directly from responses.
"""

from __future__ import annotations

from enum import Enum


class SortOption(str, Enum):
    """Desired order for module listings."""

    RANK = "rank"
    DOWNLOADS = "downloads"
    LATEST_RELEASE = "latest_release"


class ReleaseSortOption(str, Enum):
    """Desired order for release listings."""

    DOWNLOADS = "downloads"
    RELEASE_DATE = "release_date"
    MODULE = "module"


class Endorsement(str, Enum):
    """Program through which a module is endorsed."""

    SUPPORTED = "supported"
    APPROVED = "approved"
    PARTNER = "partner"


class ModuleGroup(str, Enum):
    """Licensing tier of a module."""

    BASE = "base"
    PE_ONLY = "pe_only"


__all__ = [
    "Endorsement",
    "ModuleGroup",
    "ReleaseSortOption",
    "SortOption",
]

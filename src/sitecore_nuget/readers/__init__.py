"""Readers for Sitecore package archives."""

from .exceptions import (
    InvalidArchiveError,
    ItemParseError,
    MissingEntryError,
    PackageError,
    PackageExistsError,
    PackageNotFoundError,
)
from .package_reader import ArchiveEntry, PackageReader

__all__ = [
    "ArchiveEntry",
    "PackageReader",
    "PackageError",
    "PackageNotFoundError",
    "InvalidArchiveError",
    "MissingEntryError",
    "PackageExistsError",
    "ItemParseError",
]

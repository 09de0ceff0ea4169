"""Resolve item entry keys to serialization paths.

Item entries carry the full content-tree path of the item followed by the
item id, language and version:

    items/master/sitecore/content/Home/{110D559F-DEA5-42EA-9C1C-8A5DF7E70EF9}/en/1/xml

Only the part above the id is kept, so the entry above serializes to
master/sitecore/content/Home.item.
"""

import os
import re
from pathlib import Path

ITEM_EXTENSION = ".item"

IDENTIFIER_PATTERN = re.compile(
    r"^\{[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\}$",
    re.IGNORECASE,
)


def is_identifier(segment: str) -> bool:
    """Check whether a path segment is a braced GUID.

    Examples:
        >>> is_identifier("{11111111-1111-1111-1111-111111111111}")
        True
        >>> is_identifier("Home")
        False
    """
    return IDENTIFIER_PATTERN.match(segment) is not None


def resolve_item_path(key: str) -> Path:
    """Map an item entry key to a path relative to the serialization root.

    The first segment (the archive area, e.g. "items") is dropped and the
    key is cut before its first identifier segment. Keys without an
    identifier segment keep all remaining segments.

    Args:
        key: "/"-delimited archive entry key

    Returns:
        Relative path ending in ".item"

    Examples:
        >>> str(resolve_item_path("a/b/{11111111-1111-1111-1111-111111111111}/xml"))
        'b.item'
    """
    segments = [segment for segment in key.split("/") if segment][1:]
    for index, segment in enumerate(segments):
        if is_identifier(segment):
            segments = segments[:index]
            break
    return Path(os.path.join(*segments) + ITEM_EXTENSION if segments else ITEM_EXTENSION)


def is_within(path: Path, root: Path) -> bool:
    """Check whether a path stays inside a root directory once resolved.

    Archive keys with ".." segments or absolute names must not place
    output outside the package directory.

    Examples:
        >>> is_within(Path("out/wwwroot/bin/a.dll"), Path("out/wwwroot"))
        True
        >>> is_within(Path("out/wwwroot/../../a.dll"), Path("out/wwwroot"))
        False
    """
    return path.resolve().is_relative_to(root.resolve())

"""Schema definitions for sitecore-nuget."""

from .context import PackageContext, package_name_for
from .item import Item, ItemField, ItemVersion
from .metadata import PackageMetadata
from .nuspec import NuspecFile, NuspecManifest, NuspecMetadata

__all__ = [
    "Item",
    "ItemField",
    "ItemVersion",
    "NuspecFile",
    "NuspecManifest",
    "NuspecMetadata",
    "PackageContext",
    "PackageMetadata",
    "package_name_for",
]

"""Transformers for converting package entries into NuGet package files."""

from .file_transformer import FileTransformer
from .item_serializer import ItemSerializer
from .item_transformer import ItemTransformer
from .transformer import PackageTransformer

__all__ = [
    "PackageTransformer",
    "ItemTransformer",
    "FileTransformer",
    "ItemSerializer",
]

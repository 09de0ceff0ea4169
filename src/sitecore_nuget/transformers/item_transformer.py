"""Item Transformer for serializing Sitecore items.

Reads every item entry of a package, parses it and writes it to the
serialization/ directory of the NuGet package at its resolved path.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from schemas.context import PackageContext
from schemas.item import Item

from ..readers.exceptions import ItemParseError
from ..readers.package_reader import PackageReader
from .item_parser import is_item_entry, load_item
from .item_serializer import ItemSerializer
from .paths import is_within, resolve_item_path
from .transformer import PackageTransformer

logger = logging.getLogger(__name__)


class ItemTransformer(PackageTransformer):
    """Serialize the items of a Sitecore package.

    The ItemTransformer:
    1. Selects entries whose key ends in /xml outside properties/
    2. Parses each entry into an Item, skipping entries that fail to parse
    3. Resolves the entry key to a path under serialization/
    4. Writes the item in the Sitecore serialization format
    """

    def __init__(self, serializer: ItemSerializer | None = None):
        self._serializer = serializer or ItemSerializer()

    def transform(self, reader: PackageReader, context: PackageContext) -> list[Path]:
        """Serialize all items of a package.

        Args:
            reader: Reader over the source Sitecore package
            context: Conversion context

        Returns:
            Paths of the written .item files, in write order
        """
        logger.info(f"Serializing items from {reader.package_path.name}")

        written: list[Path] = []
        seen: set[Path] = set()
        for key, item in self.load_items(reader):
            target_path = context.serialization_dir / resolve_item_path(key)
            if not is_within(target_path, context.serialization_dir):
                logger.warning(f"Skipping {key}: path escapes {context.serialization_dir}")
                continue
            if target_path in seen:
                logger.debug(f"Item {item.id} from {key} replaces {target_path}")
            self._serializer.write(item, target_path)
            written.append(target_path)
            seen.add(target_path)

        logger.info(f"Serialized {len(written)} items to {context.serialization_dir}")
        return written

    def load_items(self, reader: PackageReader) -> Iterator[tuple[str, Item]]:
        """Parse the item entries of a package.

        Entries that are empty or not well-formed are logged and skipped.

        Args:
            reader: Reader over the source Sitecore package

        Yields:
            (entry key, Item) tuples in archive order
        """
        for entry in reader.entries():
            if not is_item_entry(entry.key):
                continue
            try:
                item = load_item(entry.read_bytes(), entry.key)
            except ItemParseError as e:
                logger.warning(f"Unable to load xml from file {entry.key}: {e}")
                continue
            if item is not None:
                yield entry.key, item

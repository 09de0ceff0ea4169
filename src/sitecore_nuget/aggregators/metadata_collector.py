"""Metadata Collector for reading Sitecore package metadata."""

import logging

from schemas.metadata import PackageMetadata

from ..readers.package_reader import PackageReader

logger = logging.getLogger(__name__)

METADATA_KEY_TEMPLATE = "metadata/sc_{key}.txt"


class MetadataCollector:
    """Collects package metadata from the metadata/ entries of a package.

    Each known key is read from metadata/sc_<key>.txt. When a key occurs
    more than once the last entry in archive order wins.

    Example:
        reader = PackageReader(Path("MyModule-1.0.zip"))
        metadata = MetadataCollector().collect(reader, "MyModule")
    """

    def __init__(self):
        self._entry_keys = {
            METADATA_KEY_TEMPLATE.format(key=key): key for key in PackageMetadata.keys()
        }

    def collect(self, reader: PackageReader, package_name: str) -> PackageMetadata:
        """Read the metadata of a package.

        Args:
            reader: Reader over the source Sitecore package
            package_name: Name of the NuGet package, used as the comment
                when the package has none

        Returns:
            PackageMetadata with every key found in the package set
        """
        metadata = PackageMetadata()
        for entry in reader.entries():
            key = self._entry_keys.get(entry.key)
            if key is None:
                continue
            setattr(metadata, key, entry.read_text())
            logger.debug(f"Read metadata '{key}' from {entry.key}")

        if not metadata.comment.strip():
            metadata.comment = package_name

        return metadata

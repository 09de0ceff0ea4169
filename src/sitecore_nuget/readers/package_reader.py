"""Reader for Sitecore installation packages.

A Sitecore package is a zip file that wraps a second zip stored under the
"package.zip" entry. The inner archive holds everything of interest:

    package.zip
    ├── items/{database}/{path...}/{item-id}/{language}/{version}/xml
    ├── files/{path...}
    ├── metadata/sc_{key}.txt
    └── properties/...
"""

import io
import logging
import zipfile
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from .exceptions import InvalidArchiveError, MissingEntryError, PackageNotFoundError

logger = logging.getLogger(__name__)

INNER_PACKAGE_ENTRY = "package.zip"


@dataclass(frozen=True)
class ArchiveEntry:
    """A single member of the inner package archive.

    Entries are only valid while the traversal that produced them is
    active; the underlying archive is closed once the traversal ends.

    Attributes:
        key: "/"-delimited name of the entry
    """

    key: str
    _archive: zipfile.ZipFile = field(repr=False, compare=False)
    _info: zipfile.ZipInfo = field(repr=False, compare=False)

    @property
    def is_directory(self) -> bool:
        return self.key.endswith("/")

    def open(self) -> IO[bytes]:
        """Open a fresh stream over the entry's bytes."""
        return self._archive.open(self._info)

    def read_bytes(self) -> bytes:
        with self.open() as stream:
            return stream.read()

    def read_text(self, encoding: str = "utf-8-sig") -> str:
        """Decode the entry, replacing bytes that are not valid in the encoding."""
        return self.read_bytes().decode(encoding, errors="replace")


class PackageReader:
    """Read entries from a Sitecore package.

    The inner archive is buffered into memory when the reader is created,
    so any problem with the package surfaces before output is written.
    Each call to entries() starts an independent forward-only pass over
    the buffered archive.

    Example:
        reader = PackageReader(Path("MyModule-1.0.zip"))
        for entry in reader.entries():
            print(entry.key)
    """

    def __init__(self, package_path: Path, inner_entry_name: str = INNER_PACKAGE_ENTRY):
        """Initialize the reader and buffer the inner archive.

        Args:
            package_path: Path to the outer package file
            inner_entry_name: Name of the entry holding the inner archive

        Raises:
            PackageNotFoundError: If the package file does not exist
            InvalidArchiveError: If either archive is not a valid zip
            MissingEntryError: If the inner archive entry is missing
        """
        self.package_path = package_path
        self.inner_entry_name = inner_entry_name
        self._blob = self._load_inner_archive()
        logger.debug(
            f"Buffered {len(self._blob)} bytes of '{inner_entry_name}' from {package_path}"
        )

    @property
    def size(self) -> int:
        return len(self._blob)

    def entries(self) -> Iterator[ArchiveEntry]:
        """Iterate over the entries of the inner archive.

        Yields:
            ArchiveEntry objects in archive order
        """
        with zipfile.ZipFile(io.BytesIO(self._blob)) as archive:
            for info in archive.infolist():
                yield ArchiveEntry(info.filename, archive, info)

    def _load_inner_archive(self) -> bytes:
        """Read the inner archive into memory and check that it is a zip."""
        if not self.package_path.is_file():
            raise PackageNotFoundError(self.package_path)

        try:
            with zipfile.ZipFile(self.package_path) as outer:
                try:
                    blob = outer.read(self.inner_entry_name)
                except KeyError:
                    raise MissingEntryError(
                        self.inner_entry_name,
                        f"'{self.package_path.name}' has no '{self.inner_entry_name}' entry; "
                        "is it a Sitecore package?",
                    ) from None
        except zipfile.BadZipFile as e:
            raise InvalidArchiveError(
                f"'{self.package_path.name}' is not a valid zip archive: {e}"
            ) from e

        if not zipfile.is_zipfile(io.BytesIO(blob)):
            raise InvalidArchiveError(
                f"'{self.inner_entry_name}' in '{self.package_path.name}' is not a valid zip archive"
            )
        return blob

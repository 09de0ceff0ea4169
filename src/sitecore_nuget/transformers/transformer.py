"""Base class for package transformers.

Transformers make one pass over the entries of a Sitecore package and
write their output into the NuGet package directory:

- ItemTransformer: serializes item entries into serialization/
- FileTransformer: copies payload files into wwwroot/
"""

from abc import ABC, abstractmethod
from pathlib import Path

from schemas.context import PackageContext

from ..readers.package_reader import PackageReader


class PackageTransformer(ABC):
    """Abstract base class for package transformers."""

    @abstractmethod
    def transform(self, reader: PackageReader, context: PackageContext) -> list[Path]:
        """Transform the package's entries into files of the NuGet package.

        Args:
            reader: Reader over the source Sitecore package
            context: Conversion context with the target directories

        Returns:
            Paths of the files written
        """
        pass

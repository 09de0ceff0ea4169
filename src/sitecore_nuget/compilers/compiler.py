"""Base class for package compilers."""

from abc import ABC, abstractmethod

from schemas.context import PackageContext
from schemas.metadata import PackageMetadata
from schemas.nuspec import NuspecManifest


class Compiler(ABC):
    """Abstract base class for package compilers.

    Compilers run once every other stage has written its files and
    describe the finished package directory.
    """

    @abstractmethod
    def compile(self, context: PackageContext, metadata: PackageMetadata) -> NuspecManifest:
        """Compile the manifest of a package.

        Args:
            context: Conversion context of the package
            metadata: Metadata collected from the source package

        Returns:
            NuspecManifest describing the package
        """
        pass

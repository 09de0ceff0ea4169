"""Package conversion context."""

from dataclasses import dataclass
from pathlib import Path


def package_name_for(source_path: Path) -> str:
    """Derive the package name from a package file name.

    The version suffix after the first "-" is dropped, unless the name
    starts with "-".

    Examples:
        >>> package_name_for(Path("MyModule-1.0.zip"))
        'MyModule'
    """
    name = source_path.stem
    if name.strip() and name.find("-") > 0:
        name = name[: name.find("-")]
    return name


@dataclass(frozen=True)
class PackageContext:
    """Describes a single package conversion.

    Attributes:
        source_path: Path to the Sitecore package (zip) being converted
        package_name: Name of the generated NuGet package
        package_dir: Root directory of the generated package
    """

    source_path: Path
    package_name: str
    package_dir: Path

    @classmethod
    def for_source(cls, source_path: Path, output_root: Path | None = None) -> "PackageContext":
        """Build a context placing the package next to the source file.

        Args:
            source_path: Path to the Sitecore package
            output_root: Directory to create the package in (default: the
                directory holding the source file)
        """
        source_path = source_path.resolve()
        package_name = package_name_for(source_path)
        root = output_root.resolve() if output_root else source_path.parent
        return cls(
            source_path=source_path,
            package_name=package_name,
            package_dir=root / package_name,
        )

    @property
    def content_dir(self) -> Path:
        return self.package_dir / "content"

    @property
    def serialization_dir(self) -> Path:
        return self.package_dir / "serialization"

    @property
    def tools_dir(self) -> Path:
        return self.package_dir / "tools"

    @property
    def wwwroot_dir(self) -> Path:
        return self.package_dir / "wwwroot"

    @property
    def nuspec_path(self) -> Path:
        return self.package_dir / f"{self.package_name}.nuspec"

"""Package orchestrator for end-to-end Sitecore → NuGet conversion.

Runs a single Sitecore package through every stage and produces:

    {package_name}/
    ├── {package_name}.nuspec
    ├── content/{package file}
    ├── serialization/{item path}.item
    ├── tools/init.ps1, install.ps1, uninstall.ps1
    └── wwwroot/{payload files}
"""

import logging
import shutil
from pathlib import Path

from schemas.context import PackageContext
from schemas.nuspec import NuspecManifest

from ..aggregators.metadata_collector import MetadataCollector
from ..compilers.nuspec_compiler import NuspecCompiler
from ..readers.exceptions import PackageExistsError
from ..readers.package_reader import PackageReader
from ..transformers.file_transformer import FileTransformer
from ..transformers.item_transformer import ItemTransformer
from ..transformers.transformer import PackageTransformer

logger = logging.getLogger(__name__)

TOOLS_DIR = Path(__file__).parent.parent / "resources" / "tools"
TOOL_FILES = ["init.ps1", "install.ps1", "uninstall.ps1"]


class Orchestrator:
    """End-to-end package conversion.

    Attributes:
        context: Conversion context of the package
        transformers: Ordered list of transformers to run
        collector: Collector for the package metadata
        compiler: Compiler writing the nuspec
    """

    def __init__(
        self,
        context: PackageContext,
        transformers: list[PackageTransformer] | None = None,
        collector: MetadataCollector | None = None,
        compiler: NuspecCompiler | None = None,
        tools_dir: Path | None = None,
    ):
        self.context = context
        if transformers is None:
            transformers = [ItemTransformer(), FileTransformer()]
        self.transformers = transformers
        self.collector = collector or MetadataCollector()
        self.compiler = compiler or NuspecCompiler()
        self.tools_dir = tools_dir or TOOLS_DIR

    def run(self) -> NuspecManifest:
        """Convert the package.

        The source package is read before anything is written, so an
        invalid package leaves no output behind.

        Returns:
            NuspecManifest of the generated package

        Raises:
            PackageError: If the package cannot be read or the target
                directory already exists
        """
        reader = PackageReader(self.context.source_path)

        if self.context.package_dir.exists():
            raise PackageExistsError(self.context.package_dir)

        logger.info(f"Creating NuGet package '{self.context.package_name}'")
        self._create_directories()
        self._copy_source()

        for transformer in self.transformers:
            transformer.transform(reader, self.context)

        self._copy_tools()

        metadata = self.collector.collect(reader, self.context.package_name)
        return self.compiler.compile(self.context, metadata)

    def _create_directories(self) -> None:
        """Create the package directory and its top-level folders."""
        self.context.package_dir.mkdir(parents=True)
        for directory in (
            self.context.content_dir,
            self.context.serialization_dir,
            self.context.tools_dir,
            self.context.wwwroot_dir,
        ):
            directory.mkdir(exist_ok=True)

    def _copy_source(self) -> None:
        """Copy the Sitecore package itself into content/."""
        dst = self.context.content_dir / self.context.source_path.name
        shutil.copy2(self.context.source_path, dst)
        logger.debug(f"Copied package to {dst}")

    def _copy_tools(self) -> None:
        """Copy the install scripts into tools/."""
        for name in TOOL_FILES:
            src = self.tools_dir / name
            dst = self.context.tools_dir / name
            shutil.copy2(src, dst)
            logger.debug(f"Copied tool {name}")

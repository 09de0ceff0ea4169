"""Nuspec Compiler for describing a generated NuGet package.

Builds the .nuspec document that NuGet uses to pack the directory:
package metadata taken from the Sitecore package plus one <file> entry
per file in the package directory.
"""

import logging

from lxml import etree

from schemas.context import PackageContext
from schemas.metadata import PackageMetadata
from schemas.nuspec import NuspecFile, NuspecManifest, NuspecMetadata

from .compiler import Compiler

logger = logging.getLogger(__name__)

NUSPEC_NS = "http://schemas.microsoft.com/packaging/2011/08/nuspec.xsd"
MARKETPLACE_URL = "http://marketplace.sitecore.net/"


class NuspecCompiler(Compiler):
    """Compile the .nuspec file of a NuGet package.

    The NuspecCompiler:
    1. Maps the collected package metadata onto nuspec metadata
    2. Lists every file currently in the package directory
    3. Writes {package_name}.nuspec to the package root

    The file list is taken before the nuspec is written, so the nuspec
    never lists itself. It must run after every other stage.
    """

    def __init__(self, project_url: str = MARKETPLACE_URL):
        self.project_url = project_url

    def compile(self, context: PackageContext, metadata: PackageMetadata) -> NuspecManifest:
        """Compile and write the nuspec for a package.

        Args:
            context: Conversion context of the package
            metadata: Metadata collected from the source package

        Returns:
            NuspecManifest that was written
        """
        logger.info(f"Compiling nuspec for {context.package_name}")

        manifest = NuspecManifest(
            metadata=self._build_metadata(context, metadata),
            files=self._collect_files(context),
        )

        nuspec_root = self._build_nuspec(manifest)
        context.nuspec_path.write_bytes(
            etree.tostring(
                nuspec_root,
                xml_declaration=True,
                encoding="utf-8",
                pretty_print=True,
            )
        )
        logger.info(f"Wrote nuspec with {len(manifest.files)} files to {context.nuspec_path}")
        return manifest

    def _build_metadata(
        self, context: PackageContext, metadata: PackageMetadata
    ) -> NuspecMetadata:
        """Map package metadata onto the nuspec metadata section."""
        return NuspecMetadata(
            id=context.package_name.replace(" ", ""),
            version=f"{metadata.version} {metadata.revision}".strip(),
            title=metadata.name,
            authors=metadata.author,
            owners=metadata.publisher,
            license_url=self.project_url,
            project_url=self.project_url,
            description=metadata.comment,
        )

    def _collect_files(self, context: PackageContext) -> list[NuspecFile]:
        """List the files of the package directory, relative to its root."""
        files = []
        for path in sorted(context.package_dir.rglob("*")):
            if not path.is_file() or path == context.nuspec_path:
                continue
            relative = str(path.relative_to(context.package_dir))
            files.append(NuspecFile(src=relative, target=relative))
        return files

    def _build_nuspec(self, manifest: NuspecManifest) -> etree._Element:
        """Build the <package> root element."""
        root = etree.Element(f"{{{NUSPEC_NS}}}package", nsmap={None: NUSPEC_NS})

        metadata_el = etree.SubElement(root, f"{{{NUSPEC_NS}}}metadata")
        for tag, value in (
            ("id", manifest.metadata.id),
            ("version", manifest.metadata.version),
            ("title", manifest.metadata.title),
            ("authors", manifest.metadata.authors),
            ("owners", manifest.metadata.owners),
            ("licenseUrl", manifest.metadata.license_url),
            ("projectUrl", manifest.metadata.project_url),
            ("description", manifest.metadata.description),
        ):
            element = etree.SubElement(metadata_el, f"{{{NUSPEC_NS}}}{tag}")
            element.text = value

        files_el = etree.SubElement(root, f"{{{NUSPEC_NS}}}files")
        for nuspec_file in manifest.files:
            file_el = etree.SubElement(files_el, f"{{{NUSPEC_NS}}}file")
            file_el.set("src", nuspec_file.src)
            file_el.set("target", nuspec_file.target)

        return root

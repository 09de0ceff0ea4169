"""NuGet specification (.nuspec) schemas.

The nuspec sits at the root of the generated package directory:

    {package_name}/
    ├── {package_name}.nuspec     # NuspecManifest
    ├── content/
    ├── serialization/
    ├── tools/
    └── wwwroot/
"""

from pydantic import BaseModel


class NuspecMetadata(BaseModel):
    """The <metadata> section of a nuspec.

    Attributes:
        id: Package id (package name without spaces)
        version: Package version and revision
        title: Human-readable package name
        authors: Package author
        owners: Package publisher
        license_url: Written as <licenseUrl>
        project_url: Written as <projectUrl>
        description: Package comment, or the package name when empty
    """

    id: str
    version: str = ""
    title: str = ""
    authors: str = ""
    owners: str = ""
    license_url: str = ""
    project_url: str = ""
    description: str = ""


class NuspecFile(BaseModel):
    """A <file> entry; paths are relative to the package directory."""

    src: str
    target: str


class NuspecManifest(BaseModel):
    """A complete nuspec document."""

    metadata: NuspecMetadata
    files: list[NuspecFile] = []

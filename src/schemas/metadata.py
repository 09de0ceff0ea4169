"""Package metadata schema."""

from pydantic import BaseModel


class PackageMetadata(BaseModel):
    """Metadata read from the metadata/sc_<key>.txt entries of a package.

    Every key starts out empty and is overwritten by the matching entry,
    if the package carries one.
    """

    author: str = ""
    comment: str = ""
    license: str = ""
    name: str = ""
    publisher: str = ""
    readme: str = ""
    revision: str = ""
    version: str = ""

    @classmethod
    def keys(cls) -> list[str]:
        return list(cls.model_fields)

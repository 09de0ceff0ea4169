"""Sitecore item schemas.

An item is one node of the Sitecore content tree as it appears in a
package: identity attributes plus the field values of one language version.

Serialized layout (see resources/templates/item.txt.j2):
    ----item----
    ----version----
    ----field----
    ----field----
    ...
"""

from pydantic import BaseModel, model_validator


class ItemField(BaseModel):
    """A field value attached to an item version.

    Attributes:
        field_id: Template field identifier (opaque)
        name: Display key of the field
        key: Lookup key of the field (equal to name for packaged items)
        value: Raw field text, None when the source had no content element
        has_value: Whether a content element was present
    """

    field_id: str = ""
    name: str = ""
    key: str = ""
    value: str | None = None
    has_value: bool = False

    @model_validator(mode="after")
    def check_presence(self) -> "ItemField":
        if not self.has_value and self.value is not None:
            raise ValueError("value must be None when has_value is false")
        return self


class ItemVersion(BaseModel):
    """One language/version variant of an item.

    Attributes:
        language: Language code (e.g. "en")
        version: Version number as found in the package
        revision: Revision token, empty for packaged items
        fields: Field values in parse order
    """

    language: str = ""
    version: str = ""
    revision: str = ""
    fields: list[ItemField] = []

    def add_field(
        self,
        field_id: str,
        name: str,
        key: str,
        value: str | None,
        has_value: bool,
    ) -> ItemField:
        field = ItemField(
            field_id=field_id,
            name=name,
            key=key,
            value=value,
            has_value=has_value,
        )
        self.fields.append(field)
        return field


class Item(BaseModel):
    """A content item read from a package.

    Attributes:
        id: Item identifier (usually a braced GUID)
        name: Item display name
        parent_id: Identifier of the parent item
        template_id: Identifier of the item's template
        master_id: Identifier of the master (branch) the item was created from
        branch_id: Identifier of the branch template
        template_name: Display name of the template
        versions: Versions in parse order
    """

    id: str
    name: str = ""
    parent_id: str = ""
    template_id: str = ""
    master_id: str = ""
    branch_id: str = ""
    template_name: str = ""
    versions: list[ItemVersion] = []

    def add_version(self, language: str, version: str, revision: str = "") -> ItemVersion:
        item_version = ItemVersion(language=language, version=version, revision=revision)
        self.versions.append(item_version)
        return item_version

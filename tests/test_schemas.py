"""Tests for schema definitions."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from schemas import (
    Item,
    ItemField,
    ItemVersion,
    NuspecFile,
    NuspecManifest,
    NuspecMetadata,
    PackageContext,
    PackageMetadata,
    package_name_for,
)


class TestItem:
    """Tests for the Item model."""

    def test_item_creation(self):
        """Item can be created with only an id."""
        item = Item(id="{1}")

        assert item.id == "{1}"
        assert item.name == ""
        assert item.parent_id == ""
        assert item.template_id == ""
        assert item.master_id == ""
        assert item.branch_id == ""
        assert item.template_name == ""
        assert item.versions == []

    def test_item_requires_id(self):
        """Item requires an id."""
        with pytest.raises(ValidationError):
            Item()

    def test_add_version(self):
        """add_version appends and returns a version with an empty revision."""
        item = Item(id="{1}")

        version = item.add_version("en", "1")

        assert item.versions == [version]
        assert version.language == "en"
        assert version.version == "1"
        assert version.revision == ""

    def test_versions_keep_insertion_order(self):
        """Versions stay in the order they were added."""
        item = Item(id="{1}")
        item.add_version("en", "1")
        item.add_version("da", "1")

        assert [v.language for v in item.versions] == ["en", "da"]

    def test_items_do_not_share_versions(self):
        """Default version lists are not shared between items."""
        first = Item(id="{1}")
        first.add_version("en", "1")

        assert Item(id="{2}").versions == []


class TestItemVersion:
    """Tests for the ItemVersion model."""

    def test_add_field(self):
        """add_field appends and returns a field."""
        version = ItemVersion(language="en", version="1")

        field = version.add_field("{10}", "title", "title", "Hello", True)

        assert version.fields == [field]
        assert field.field_id == "{10}"
        assert field.value == "Hello"
        assert field.has_value is True


class TestItemField:
    """Tests for the ItemField model."""

    def test_defaults(self):
        """A field without a value has no value."""
        field = ItemField(field_id="{10}", name="k", key="k")

        assert field.value is None
        assert field.has_value is False

    def test_empty_value(self):
        """An empty string is a valid present value."""
        field = ItemField(value="", has_value=True)

        assert field.value == ""

    def test_value_without_presence_rejected(self):
        """A value is not allowed when has_value is false."""
        with pytest.raises(ValidationError):
            ItemField(value="x", has_value=False)


class TestPackageMetadata:
    """Tests for the PackageMetadata model."""

    def test_all_keys_empty(self):
        """Every key starts out empty."""
        metadata = PackageMetadata()

        assert all(value == "" for value in metadata.model_dump().values())

    def test_keys(self):
        """keys() lists the known metadata keys."""
        assert PackageMetadata.keys() == [
            "author",
            "comment",
            "license",
            "name",
            "publisher",
            "readme",
            "revision",
            "version",
        ]


class TestNuspecManifest:
    """Tests for the nuspec models."""

    def test_manifest_creation(self):
        """NuspecManifest holds metadata and files."""
        manifest = NuspecManifest(
            metadata=NuspecMetadata(id="MyModule", version="1.0"),
            files=[NuspecFile(src="tools/install.ps1", target="tools/install.ps1")],
        )

        assert manifest.metadata.id == "MyModule"
        assert manifest.metadata.title == ""
        assert manifest.files[0].target == "tools/install.ps1"

    def test_metadata_requires_id(self):
        """NuspecMetadata requires an id."""
        with pytest.raises(ValidationError):
            NuspecMetadata()


class TestPackageName:
    """Tests for package_name_for."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("MyModule-1.0.zip", "MyModule"),
            ("MyModule-1.0-rev2.zip", "MyModule"),
            ("MyModule.zip", "MyModule"),
            ("My Module-2.zip", "My Module"),
            ("-leading.zip", "-leading"),
        ],
    )
    def test_package_name(self, filename, expected):
        """The version suffix after the first dash is dropped."""
        assert package_name_for(Path(filename)) == expected


class TestPackageContext:
    """Tests for PackageContext."""

    def test_for_source(self, tmp_path):
        """The package directory sits next to the source by default."""
        context = PackageContext.for_source(tmp_path / "MyModule-1.0.zip")

        assert context.package_name == "MyModule"
        assert context.package_dir == tmp_path.resolve() / "MyModule"

    def test_for_source_with_output_root(self, tmp_path):
        """An output root replaces the source directory."""
        context = PackageContext.for_source(tmp_path / "MyModule-1.0.zip", tmp_path / "out")

        assert context.package_dir == (tmp_path / "out").resolve() / "MyModule"

    def test_directories(self, tmp_path):
        """Stage directories and the nuspec live under the package directory."""
        context = PackageContext(
            source_path=tmp_path / "My Module-1.0.zip",
            package_name="My Module",
            package_dir=tmp_path / "My Module",
        )

        assert context.content_dir == tmp_path / "My Module" / "content"
        assert context.serialization_dir == tmp_path / "My Module" / "serialization"
        assert context.tools_dir == tmp_path / "My Module" / "tools"
        assert context.wwwroot_dir == tmp_path / "My Module" / "wwwroot"
        assert context.nuspec_path == tmp_path / "My Module" / "My Module.nuspec"

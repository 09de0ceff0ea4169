"""Pytest fixtures for sitecore-nuget tests."""

import io
import zipfile
from pathlib import Path

import pytest

HOME_ID = "{110D559F-DEA5-42EA-9C1C-8A5DF7E70EF9}"
HOME_KEY = f"items/master/sitecore/content/Home/{HOME_ID}/en/1/xml"

SAMPLE_ITEM_XML = f"""<?xml version="1.0" encoding="utf-8"?>
<item id="{HOME_ID}" name="Home" parentid="{{0DE95AE4-41AB-4D01-9EB0-67441B7C2450}}"
      tid="{{76036F5E-CBCE-46D1-AF0A-4143F9B557AA}}" mid="{{00000000-0000-0000-0000-000000000000}}"
      bid="{{00000000-0000-0000-0000-000000000000}}" template="Sample Item" language="en" version="1">
  <fields>
    <field tfid="{{75577384-3C97-45DA-A847-81B00500E250}}" key="title" type="Single-Line Text">
      <content>Welcome &amp; hello</content>
    </field>
    <field tfid="{{A60ACD61-A6DB-4182-8329-C957982CEC74}}" key="text" type="Rich Text">
      <content></content>
    </field>
    <field tfid="{{25BED78C-4957-4165-998A-CA1B52F67497}}" key="__created" type="datetime" />
  </fields>
</item>
"""


def build_package(
    path: Path,
    entries: dict[str, bytes | str],
    inner_entry_name: str = "package.zip",
) -> Path:
    """Write a Sitecore package: an outer zip wrapping an inner zip.

    Args:
        path: Where to write the outer package
        entries: Inner archive entries, key → contents
        inner_entry_name: Name of the inner archive entry
    """
    inner = io.BytesIO()
    with zipfile.ZipFile(inner, "w") as inner_zip:
        for key, data in entries.items():
            inner_zip.writestr(key, data)

    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as outer_zip:
        outer_zip.writestr(inner_entry_name, inner.getvalue())
    return path


@pytest.fixture
def sample_item_xml():
    """Item document with a valued field, an empty field and a field without content."""
    return SAMPLE_ITEM_XML


@pytest.fixture
def sample_entries(sample_item_xml):
    """Inner archive entries of a small but complete Sitecore package."""
    return {
        "properties/items/master/sitecore/content/Home/xml": "<properties />",
        HOME_KEY: sample_item_xml,
        "items/master/sitecore/content/Broken/{22222222-2222-2222-2222-222222222222}/en/1/xml": "<item id=",
        "files/": b"",
        "files/bin/": b"",
        "files/bin/MyModule.dll": b"\x00\x01binary\xff",
        "files/layouts/MyModule/Sublayout.ascx": "<%@ Control Language=\"C#\" %>",
        "metadata/sc_name.txt": "My Module",
        "metadata/sc_author.txt": "Jane Doe",
        "metadata/sc_publisher.txt": "Example Corp",
        "metadata/sc_version.txt": "1.0",
        "metadata/sc_revision.txt": "42",
        "installer/version": "1",
    }


@pytest.fixture
def sample_package(tmp_path, sample_entries):
    """A complete Sitecore package file named MyModule-1.0.zip."""
    return build_package(tmp_path / "MyModule-1.0.zip", sample_entries)


@pytest.fixture
def make_package(tmp_path):
    """Factory writing a package with the given inner entries."""

    def _make(entries: dict[str, bytes | str], name: str = "Test-1.0.zip") -> Path:
        return build_package(tmp_path / name, entries)

    return _make

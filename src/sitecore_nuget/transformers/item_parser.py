"""Parse item XML entries from a Sitecore package.

Each item entry holds a single <item> document:

    <item id="{...}" name="Home" parentid="{...}" tid="{...}" mid="{...}"
          bid="{...}" template="Sample Item" language="en" version="1">
      <fields>
        <field tfid="{...}" key="title" type="Single-Line Text">
          <content>Welcome</content>
        </field>
      </fields>
    </item>
"""

import re

from lxml import etree

from schemas.item import Item

from ..readers.exceptions import ItemParseError

ITEM_ENTRY_SUFFIX = "/xml"
PROPERTIES_PREFIX = "properties/"


PROLOG_PATTERN = re.compile(rb"<\?.*?\?>|<!--.*?-->|<!DOCTYPE[^>]*>", re.DOTALL)
START_TAG_PATTERN = re.compile(rb"<[A-Za-z_:]")


def is_item_entry(key: str) -> bool:
    """Check whether an archive entry holds an item document."""
    return key.endswith(ITEM_ENTRY_SUFFIX) and not key.startswith(PROPERTIES_PREFIX)


def has_root_element(data: bytes) -> bool:
    """Check whether a document has anything besides its prolog and comments.

    Examples:
        >>> has_root_element(b'<?xml version="1.0"?><item id="{1}" />')
        True
        >>> has_root_element(b'<?xml version="1.0"?>\\n<!-- <item> -->')
        False
    """
    return START_TAG_PATTERN.search(PROLOG_PATTERN.sub(b"", data)) is not None


def parse_item(root: etree._Element | None) -> Item | None:
    """Build an Item from the root element of an item document.

    Missing attributes read as empty strings. Exactly one version is
    created, with an empty revision.

    Args:
        root: The <item> element, or None for a document without one

    Returns:
        The parsed Item, or None when there is no root element
    """
    if root is None:
        return None

    item = Item(
        id=root.get("id", ""),
        name=root.get("name", ""),
        parent_id=root.get("parentid", ""),
        template_id=root.get("tid", ""),
        master_id=root.get("mid", ""),
        branch_id=root.get("bid", ""),
        template_name=root.get("template", ""),
    )
    version = item.add_version(root.get("language", ""), root.get("version", ""), "")

    for field_el in root.iterfind("fields/field"):
        content = field_el.find("content")
        key = field_el.get("key", "")
        version.add_field(
            field_id=field_el.get("tfid", ""),
            name=key,
            key=key,
            value="".join(content.itertext()) if content is not None else None,
            has_value=content is not None,
        )

    return item


def load_item(data: bytes, key: str = "") -> Item | None:
    """Parse the raw bytes of an item entry.

    Args:
        data: Entry contents
        key: Entry key, used in error messages

    Returns:
        The parsed Item, or None when the document has no root element

    Raises:
        ItemParseError: If the entry is empty or not well-formed XML
    """
    if not data.strip():
        raise ItemParseError(key, "entry is empty")
    if not has_root_element(data):
        return None

    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise ItemParseError(key, str(e)) from e

    return parse_item(root)

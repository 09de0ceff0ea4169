"""Serializer for the Sitecore item text format.

Items are rendered through a Jinja2 template into the line-oriented
format read by the package's install scripts. Output uses CRLF line
endings and is byte-for-byte stable for a given item.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from schemas.item import Item

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "resources" / "templates"


class ItemSerializer:
    """Render items to the Sitecore serialization format.

    Attributes:
        template_name: Name of the Jinja2 template file
    """

    def __init__(
        self,
        template_name: str = "item.txt.j2",
        templates_dir: Path | None = None,
    ):
        """Initialize the serializer.

        Args:
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: resources/templates)
        """
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\r\n",
            undefined=StrictUndefined,
        )
        self._template = self._env.get_template(self.template_name)

    def render(self, item: Item) -> str:
        """Render an item as text.

        Fields without a content element are written without a
        content-length line or value block, so they stay distinct from
        fields holding an empty string.
        """
        return self._template.render(item=item)

    def write(self, item: Item, target_path: Path) -> None:
        """Write an item to a file, replacing any existing file.

        Args:
            item: Item to serialize
            target_path: File to write; parent directories are created
        """
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_bytes(self.render(item).encode("utf-8"))
        logger.debug(f"Wrote item {item.id} to {target_path}")

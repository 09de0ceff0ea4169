"""File Transformer for copying package payload files.

Files deployed by a Sitecore package (layouts, assemblies, ...) live
under files/ in the inner archive and are copied as-is into wwwroot/.
"""

import logging
import shutil
from pathlib import Path

from schemas.context import PackageContext

from ..readers.package_reader import PackageReader
from .paths import is_within
from .transformer import PackageTransformer

logger = logging.getLogger(__name__)

FILES_PREFIX = "files/"


class FileTransformer(PackageTransformer):
    """Copy payload files from a Sitecore package into wwwroot/.

    Attributes:
        prefix: Key prefix selecting payload entries
    """

    def __init__(self, prefix: str = FILES_PREFIX):
        self.prefix = prefix

    def transform(self, reader: PackageReader, context: PackageContext) -> list[Path]:
        """Copy every payload file of a package.

        Args:
            reader: Reader over the source Sitecore package
            context: Conversion context

        Returns:
            Paths of the copied files
        """
        written: list[Path] = []
        for entry in reader.entries():
            if not entry.key.startswith(self.prefix) or entry.is_directory:
                continue
            relative = entry.key[len(self.prefix):].lstrip("/")
            if not relative:
                continue

            target_path = context.wwwroot_dir / relative
            if not is_within(target_path, context.wwwroot_dir):
                logger.warning(f"Skipping {entry.key}: path escapes {context.wwwroot_dir}")
                continue
            target_path.parent.mkdir(parents=True, exist_ok=True)
            with entry.open() as src, target_path.open("wb") as dst:
                shutil.copyfileobj(src, dst)
            written.append(target_path)
            logger.debug(f"Copied {entry.key} to {target_path}")

        logger.info(f"Copied {len(written)} files to {context.wwwroot_dir}")
        return written

"""Custom exceptions for reading Sitecore packages."""

from pathlib import Path


class PackageError(Exception):
    """Base exception for all package errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class PackageNotFoundError(PackageError):
    """Raised when the package file does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The file '{path}' could not be found")


class InvalidArchiveError(PackageError):
    """Raised when the package or its inner blob is not a valid zip archive."""

    pass


class MissingEntryError(PackageError):
    """Raised when the package has no inner package entry."""

    def __init__(self, entry_name: str, message: str | None = None):
        self.entry_name = entry_name
        super().__init__(message or f"Package entry '{entry_name}' not found")


class PackageExistsError(PackageError):
    """Raised when the target package directory already exists."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(
            f"'{path}' package directory already exists - "
            "please remove the directory before running this tool"
        )


class ItemParseError(PackageError):
    """Raised when an item entry cannot be parsed."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)

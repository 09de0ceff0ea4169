"""Aggregators for gathering package-level information."""

from .metadata_collector import MetadataCollector

__all__ = ["MetadataCollector"]

"""Pipeline for converting a Sitecore package into a NuGet package."""

from .orchestrator import Orchestrator

__all__ = ["Orchestrator"]

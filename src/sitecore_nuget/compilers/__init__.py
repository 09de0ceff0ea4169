"""Compilers for assembling the final NuGet package."""

from .compiler import Compiler
from .nuspec_compiler import NuspecCompiler

__all__ = ["Compiler", "NuspecCompiler"]

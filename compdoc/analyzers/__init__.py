"""Syntax-tree analysis of component source files."""

from .project import SourceFile, SourceProject
from .props import PropExtractor

__all__ = ["PropExtractor", "SourceFile", "SourceProject"]

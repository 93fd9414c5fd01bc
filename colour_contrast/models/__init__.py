"""
Data models module.

Immutable values produced by the parsing and evaluation pipeline.
"""
from .colour import RGBTriple
from .report import ContrastReport

__all__ = ["RGBTriple", "ContrastReport"]

"""Core tabalign library: the alignment engine and its operations."""

from tabalign.lib.formats import Alignment, FormatItem
from tabalign.lib.table import Table, align_lines

__all__ = ["Alignment", "FormatItem", "Table", "align_lines"]

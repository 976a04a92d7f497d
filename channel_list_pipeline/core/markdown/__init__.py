"""
Markdown rendering module
"""

from .document_patcher import MarkerNotFoundError, ReadmePatcher, patch_document
from .table_renderer import render_table

__all__ = ["MarkerNotFoundError", "ReadmePatcher", "patch_document", "render_table"]

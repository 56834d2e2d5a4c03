"""UI module."""

from .base import Emphasis, Renderer, Row, build_rows
from .rich_renderer import RichRenderer

__all__ = [
    "Emphasis",
    "Renderer",
    "RichRenderer",
    "Row",
    "build_rows",
]

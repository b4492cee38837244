"""Renderers for note network scenes."""

from .svg import open_svg, render_svg, write_svg

__all__ = ["open_svg", "render_svg", "write_svg"]

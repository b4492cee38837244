"""Spatial layout of composed note sets."""

from .circular import LayoutFunction, compute_layout, group_by_project

__all__ = ["LayoutFunction", "compute_layout", "group_by_project"]

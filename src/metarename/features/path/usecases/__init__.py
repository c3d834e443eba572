"""Path use cases."""

from .renderer import render, render_components, render_path

__all__ = ["render", "render_components", "render_path"]
